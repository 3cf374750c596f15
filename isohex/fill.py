"""
Fill regions for isohex.

A fill places a layout's infinite lattice onto the finite keyboard: it names
the key that carries Middle C and how many columns to the left and right of
it are populated. Every row of an included column is filled.

A wide fill is one region spanning the keyboard. A split fill has two
independent halves, each with its own Middle C, so two players (or two hands)
get the same range.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import FillError
from .geometry import Axial, KeyIndex, column, is_key, key_to_axial


class FillMode(Enum):
    """How the playable region is divided."""

    WIDE = "wide"
    SPLIT = "split"


_REGION_COUNT = {
    FillMode.WIDE: 1,
    FillMode.SPLIT: 2,
}


@dataclass(frozen=True)
class FillRegion:
    """
    One contiguous span of columns.

    Attributes:
        anchor: The key that plays Middle C (scale step 0).
        left: Columns included to the left of the anchor.
        right: Columns included to the right of the anchor.
    """

    anchor: KeyIndex
    left: int
    right: int

    @property
    def origin(self) -> Axial:
        return key_to_axial(self.anchor)

    @property
    def bounds(self) -> tuple[int, int]:
        """Lowest and highest included column, relative to the anchor."""
        return (-self.left, self.right)

    def contains(self, coord: Axial) -> bool:
        low, high = self.bounds
        return low <= column(coord, self.origin) <= high


@dataclass(frozen=True)
class FillInfo:
    """
    The region and reference pitch position for a mapping.

    Attributes:
        name: Short name, used in output file names.
        mode: Wide (one region) or split (two regions, left half first).
        regions: The regions, in priority order.
    """

    name: str
    mode: FillMode
    regions: tuple[FillRegion, ...]

    @property
    def anchor(self) -> KeyIndex:
        """The reference key of the first region."""
        return self.regions[0].anchor

    def bounds(self) -> list[tuple[int, int]]:
        """Return the column range of each region, relative to its anchor."""
        return [region.bounds for region in self.regions]

    def region_for(self, coord: Axial) -> Optional[int]:
        """Return the index of the first region containing `coord`, or None."""
        for index, region in enumerate(self.regions):
            if region.contains(coord):
                return index
        return None

    def is_in_region(self, coord: Axial) -> bool:
        return self.region_for(coord) is not None

    def validate(self):
        """
        Check that this fill can anchor a mapping.

        Raises:
            FillError: If the region count does not match the mode, an anchor
                is not a key on the keyboard, or a region excludes its anchor.
        """
        expected = _REGION_COUNT[self.mode]
        if len(self.regions) != expected:
            raise FillError(
                f"Fill '{self.name}': {self.mode.value} mode needs {expected} region(s), got {len(self.regions)}"
            )
        for index, region in enumerate(self.regions):
            if not is_key(region.anchor):
                raise FillError(f"Fill '{self.name}': anchor {region.anchor} of region {index} is not a Lumatone key")
            low, high = region.bounds
            if not low <= 0 <= high:
                raise FillError(
                    f"Fill '{self.name}': region {index} spans columns {low}..{high} "
                    f"and does not contain its anchor {region.anchor}"
                )


def wide_fill() -> FillInfo:
    """Middle C near the centre of the keyboard, every key filled."""
    return FillInfo(
        name="wide",
        mode=FillMode.WIDE,
        regions=(FillRegion(anchor=KeyIndex(2, 27), left=15, right=15),),
    )


def split_fill() -> FillInfo:
    """Two halves meeting in the middle of board 2, each with its own Middle C."""
    return FillInfo(
        name="split",
        mode=FillMode.SPLIT,
        regions=(
            FillRegion(anchor=KeyIndex(1, 26), left=8, right=6),
            FillRegion(anchor=KeyIndex(3, 26), left=5, right=10),
        ),
    )


FILLS = {
    "wide": wide_fill,
    "split": split_fill,
}


def fill_key(name: str) -> str:
    """
    Normalise a fill name to its key in FILLS.

    Raises:
        ValueError: If the name is unknown.
    """
    key = name.strip().lower()
    if key not in FILLS:
        raise ValueError(f"Invalid fill: {name}. Choose one of: {', '.join(FILLS)}")
    return key


def fill_for(name: str) -> FillInfo:
    """
    Return a built-in fill by name.

    Raises:
        ValueError: If the name is unknown.
    """
    return FILLS[fill_key(name)]()
