"""
Tuning module for isohex.

Tuning systems decide how a scale step turns into a MIDI note number and a
note name. Step 0 is always Middle C (C4); steps count up and down from
there without bound, and only get reduced modulo the octave for naming.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


MIDI_NOTE_MIN = 0
MIDI_NOTE_MAX = 127


@dataclass(frozen=True, order=True)
class MidiNote:
    """
    A MIDI note on a given channel.

    Attributes:
        channel: MIDI channel, 1-16 as shown by the Lumatone editor.
        note: Note number, 0-127.
    """

    channel: int
    note: int


class Interval(Enum):
    """The intervals used to build keyboard layouts."""

    MINOR_SECOND = "minor_second"
    MAJOR_SECOND = "major_second"
    MINOR_THIRD = "minor_third"
    MAJOR_THIRD = "major_third"
    PERFECT_FOURTH = "perfect_fourth"
    PERFECT_FIFTH = "perfect_fifth"
    OCTAVE = "octave"


class Spelling(Enum):
    """Which enharmonic spelling to prefer when naming notes."""

    SHARP = "sharp"
    FLAT = "flat"
    # Sharps at or above the reference pitch, flats below it
    DIRECTIONAL = "directional"


@dataclass(frozen=True)
class _EdoTable:
    octave: int
    middle_c: MidiNote
    intervals: dict[Interval, int]
    sharp_names: tuple[str, ...]
    flat_names: tuple[str, ...]


_EDO12 = _EdoTable(
    octave=12,
    middle_c=MidiNote(channel=1, note=60),
    intervals={
        Interval.MINOR_SECOND: 1,
        Interval.MAJOR_SECOND: 2,
        Interval.MINOR_THIRD: 3,
        Interval.MAJOR_THIRD: 4,
        Interval.PERFECT_FOURTH: 5,
        Interval.PERFECT_FIFTH: 7,
        Interval.OCTAVE: 12,
    },
    sharp_names=("C", "C♯", "D", "D♯", "E", "F", "F♯", "G", "G♯", "A", "A♯", "B"),
    flat_names=("C", "D♭", "D", "E♭", "E", "F", "G♭", "G", "A♭", "A", "B♭", "B"),
)

# In 19-EDO sharps and flats are distinct pitches; only E♯/F♭ and B♯/C♭
# share a step.
_EDO19 = _EdoTable(
    octave=19,
    middle_c=MidiNote(channel=1, note=60),
    intervals={
        Interval.MINOR_SECOND: 2,
        Interval.MAJOR_SECOND: 3,
        Interval.MINOR_THIRD: 5,
        Interval.MAJOR_THIRD: 6,
        Interval.PERFECT_FOURTH: 8,
        Interval.PERFECT_FIFTH: 11,
        Interval.OCTAVE: 19,
    },
    sharp_names=(
        "C", "C♯", "D♭", "D", "D♯", "E♭", "E", "E♯", "F", "F♯",
        "G♭", "G", "G♯", "A♭", "A", "A♯", "B♭", "B", "B♯",
    ),
    flat_names=(
        "C", "C♯", "D♭", "D", "D♯", "E♭", "E", "F♭", "F", "F♯",
        "G♭", "G", "G♯", "A♭", "A", "A♯", "B♭", "B", "C♭",
    ),
)

# 31-EDO uses ups and downs: ^ raises by one step, v lowers by one step.
_EDO31 = _EdoTable(
    octave=31,
    middle_c=MidiNote(channel=1, note=60),
    intervals={
        Interval.MINOR_SECOND: 3,
        Interval.MAJOR_SECOND: 5,
        Interval.MINOR_THIRD: 8,
        Interval.MAJOR_THIRD: 10,
        Interval.PERFECT_FOURTH: 13,
        Interval.PERFECT_FIFTH: 18,
        Interval.OCTAVE: 31,
    },
    sharp_names=(
        "C", "^C", "C♯", "D♭", "vD", "D", "^D", "D♯", "E♭", "vE",
        "E", "^E", "E♯", "F", "^F", "F♯", "G♭", "vG", "G", "^G",
        "G♯", "A♭", "vA", "A", "^A", "A♯", "B♭", "vB", "B", "^B",
        "B♯",
    ),
    flat_names=(
        "C", "^C", "C♯", "D♭", "vD", "D", "^D", "D♯", "E♭", "vE",
        "E", "F♭", "vF", "F", "^F", "F♯", "G♭", "vG", "G", "^G",
        "G♯", "A♭", "vA", "A", "^A", "A♯", "B♭", "vB", "B", "C♭",
        "vC",
    ),
)


class Tuning(Enum):
    """
    The built-in equal divisions of the octave.

    Each member dispatches to a fixed data table; there is no other state.

    Usage:
        >>> Tuning.EDO12.note_for(0)
        MidiNote(channel=1, note=60)
        >>> Tuning.EDO12.name_for(-1)
        'B3'
    """

    EDO12 = "edo12"
    EDO19 = "edo19"
    EDO31 = "edo31"

    @property
    def _table(self) -> _EdoTable:
        return _TABLES[self]

    @property
    def octave(self) -> int:
        """Number of steps in an octave."""
        return self._table.octave

    @property
    def middle_c(self) -> MidiNote:
        """The MIDI note that step 0 resolves to."""
        return self._table.middle_c

    def steps(self, interval: Interval) -> int:
        """Return the number of steps spanned by an interval."""
        return self._table.intervals[interval]

    def note_for(self, step: int) -> Optional[MidiNote]:
        """
        Resolve a scale step to a MIDI note.

        Args:
            step: Scale step relative to Middle C.

        Returns:
            The MIDI note, or None when it falls outside 0-127.
        """
        base = self.middle_c
        note = base.note + step
        if note < MIDI_NOTE_MIN or note > MIDI_NOTE_MAX:
            return None
        return MidiNote(channel=base.channel, note=note)

    def name_for(self, step: int, spelling: Spelling = Spelling.SHARP) -> str:
        """
        Name a scale step, with its octave number.

        Defined for every integer. Middle C (step 0) is "C4".

        Args:
            step: Scale step relative to Middle C.
            spelling: Enharmonic preference.

        Returns:
            The note name, e.g. "C♯4" or "vE3".
        """
        table = self._table
        octave, index = divmod(step, table.octave)
        if spelling is Spelling.SHARP or (spelling is Spelling.DIRECTIONAL and step >= 0):
            name = table.sharp_names[index]
        else:
            name = table.flat_names[index]
        octave += 4
        # A C spelled below the octave boundary (C♭, vC) takes the number of
        # the octave it sits under.
        if name.strip("^v")[0] == "C" and index > table.octave // 2:
            octave += 1
        return f"{name}{octave}"

    @classmethod
    def from_name(cls, name: str) -> "Tuning":
        """
        Look up a tuning by name.

        Accepts "edo12", "12edo", "12-edo", "EDO-12" or just "12".

        Raises:
            ValueError: If no tuning matches.
        """
        cleaned = name.strip().lower().replace("-", "").replace("_", "").replace(" ", "")
        digits = cleaned.replace("edo", "")
        for tuning in cls:
            if digits == str(tuning.octave) and cleaned in (digits, f"edo{digits}", f"{digits}edo"):
                return tuning
        raise ValueError(f"Invalid tuning: {name}. Choose one of: {', '.join(t.value for t in cls)}")


_TABLES: dict[Tuning, _EdoTable] = {
    Tuning.EDO12: _EDO12,
    Tuning.EDO19: _EDO19,
    Tuning.EDO31: _EDO31,
}
