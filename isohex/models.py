from pydantic import BaseModel, ConfigDict, PrivateAttr
from typing import Optional

from .geometry import Axial, KeyIndex
from .tuning import MidiNote


class KeyAssignment(BaseModel):
    model_config = ConfigDict(frozen=True)

    group: int
    key: int
    q: int
    r: int
    step: int
    region: int = 0
    # True when a neighbouring key belongs to another fill region
    boundary: bool = False
    channel: Optional[int] = None
    note: Optional[int] = None
    label: Optional[str] = None
    color: Optional[str] = None

    @property
    def index(self) -> KeyIndex:
        return KeyIndex(self.group, self.key)

    @property
    def axial(self) -> Axial:
        return Axial(self.q, self.r)

    @property
    def assigned(self) -> bool:
        """False when the key's pitch is outside the tuning's MIDI range."""
        return self.note is not None

    @property
    def midi(self) -> Optional[MidiNote]:
        if self.note is None or self.channel is None:
            return None
        return MidiNote(channel=self.channel, note=self.note)


class MappingInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    tuning: str
    layout: str
    fill: str
    mode: str
    right: int
    up_left: int
    up_right: int


class KeyMapping(BaseModel):
    """Key assignments for every key inside a fill region, in board order."""

    model_config = ConfigDict(frozen=True)

    info: MappingInfo
    assignments: tuple[KeyAssignment, ...]

    _by_index: dict[KeyIndex, KeyAssignment] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context) -> None:
        self._by_index = {a.index: a for a in self.assignments}

    def __len__(self) -> int:
        return len(self.assignments)

    def __contains__(self, index: KeyIndex) -> bool:
        return index in self._by_index

    def get(self, index: KeyIndex) -> Optional[KeyAssignment]:
        """Return the assignment for a key, or None if it is outside the fill."""
        return self._by_index.get(index)

    def assigned(self) -> list[KeyAssignment]:
        """Keys that produce a note."""
        return [a for a in self.assignments if a.assigned]

    def unassigned(self) -> list[KeyAssignment]:
        """Keys inside the fill whose pitch has no MIDI note."""
        return [a for a in self.assignments if not a.assigned]
