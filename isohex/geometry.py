"""
Lumatone key geometry.

The Lumatone is a hex-grid keyboard of 280 keys, grouped into 5 boards of 56
keys each. The keyboard addresses a key by its board (group) and its index on
that board. A single board is laid out like this (without the tilt of the
physical keyboard); the pipes mark where the next board starts:

    00  01
      02  03  04  05  06
    07  08  09  10  11  12| 00  01  ...
      13  14  15  16  17  18| 02  03 ...
    19  20  21  22  23  24| 07  08
      25  26  27  28  29  30| 13  14 ...
    31  32  33  34  35  36| 19  20 ...
      37  38  39  40  41  42| 25  26 ...
    43  44  45  46  47  48| 31  32 ...
          49  50  51  52  53| 37  38 ...
                    54  55| 43  44

Positions are converted to axial coordinates (q, r) on a pointy-top hex
lattice with r growing downward. In offset coordinates odd rows sit half a
key to the right; the next board starts 6 keys right and 2 rows down, which
is (+5, +2) in axial terms.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


GROUPS = 5
KEYS_PER_GROUP = 56

# (first x, number of keys) for each row of a single board
GROUP_ROWS: tuple[tuple[int, int], ...] = (
    (0, 2),
    (0, 5),
    (0, 6),
    (0, 6),
    (0, 6),
    (0, 6),
    (0, 6),
    (0, 6),
    (0, 6),
    (1, 5),
    (4, 2),
)

GROUP_SHIFT_X = 6
GROUP_SHIFT_ROWS = 2

# The physical keyboard is rotated counterclockwise.
TILT_DEGREES = 16.0


@dataclass(frozen=True, order=True)
class KeyIndex:
    """A physical key: board number 0-4 and key number 0-55 on that board."""

    group: int
    key: int

    def __str__(self) -> str:
        return f"{self.group},{self.key}"


@dataclass(frozen=True, order=True)
class Axial:
    """A position on the infinite hex lattice."""

    q: int
    r: int

    def __add__(self, other: "Axial") -> "Axial":
        return Axial(self.q + other.q, self.r + other.r)

    def __sub__(self, other: "Axial") -> "Axial":
        return Axial(self.q - other.q, self.r - other.r)


class Dir(Enum):
    """The six directions to a neighbouring key."""

    RIGHT = (1, 0)
    UP_RIGHT = (1, -1)
    UP_LEFT = (0, -1)
    LEFT = (-1, 0)
    DOWN_LEFT = (-1, 1)
    DOWN_RIGHT = (0, 1)

    @property
    def delta(self) -> Axial:
        return Axial(*self.value)

    @property
    def opposite(self) -> "Dir":
        q, r = self.value
        return Dir((-q, -r))


def _offset_to_axial(x: int, row: int) -> Axial:
    return Axial(x - (row - (row & 1)) // 2, row)


def _build_tables() -> tuple[dict[KeyIndex, tuple[int, int]], dict[Axial, KeyIndex]]:
    offsets: dict[KeyIndex, tuple[int, int]] = {}
    for group in range(GROUPS):
        key = 0
        for row, (x0, length) in enumerate(GROUP_ROWS):
            for x in range(x0, x0 + length):
                offsets[KeyIndex(group, key)] = (
                    x + GROUP_SHIFT_X * group,
                    row + GROUP_SHIFT_ROWS * group,
                )
                key += 1
    axials = {_offset_to_axial(x, row): index for index, (x, row) in offsets.items()}
    return offsets, axials


_OFFSETS, _BY_AXIAL = _build_tables()


def all_keys() -> Iterator[KeyIndex]:
    """Iterate every physical key, board by board."""
    for group in range(GROUPS):
        for key in range(KEYS_PER_GROUP):
            yield KeyIndex(group, key)


def is_key(index: KeyIndex) -> bool:
    return index in _OFFSETS


def offset_position(index: KeyIndex) -> tuple[int, int]:
    """
    Return the (x, row) of a key across the whole keyboard.

    Odd rows are drawn half a key to the right of even rows.

    Raises:
        KeyError: If the key does not exist on the Lumatone.
    """
    return _OFFSETS[index]


def key_to_axial(index: KeyIndex) -> Axial:
    """Return the axial coordinate of a physical key."""
    x, row = offset_position(index)
    return _offset_to_axial(x, row)


def axial_to_key(coord: Axial) -> Optional[KeyIndex]:
    """Return the key at an axial coordinate, or None if it is off the keyboard."""
    return _BY_AXIAL.get(coord)


def neighbor(index: KeyIndex, direction: Dir) -> Optional[KeyIndex]:
    """Return the key one step away in the given direction, if there is one."""
    return axial_to_key(key_to_axial(index) + direction.delta)


def column(coord: Axial, origin: Axial) -> int:
    """
    Horizontal column of a coordinate relative to an origin.

    Keys half a column to the left of the origin count as the origin's
    column, so walking straight up alternates between up-left and up-right
    without leaving the column.
    """
    d = coord - origin
    # ceil(dr / 2) with floor division
    return d.q - ((-d.r) // 2)


def board_rows() -> list[tuple[int, int]]:
    """Return (first x, number of keys) for each physical row of the keyboard."""
    rows: dict[int, list[int]] = {}
    for x, row in _OFFSETS.values():
        rows.setdefault(row, []).append(x)
    return [(min(xs), len(xs)) for _, xs in sorted(rows.items())]


def screen_position(index: KeyIndex, spacing: float = 1.0, tilt_degrees: float = TILT_DEGREES) -> tuple[float, float]:
    """
    Return the centre of a key in drawing units, y pointing down.

    Args:
        index: The key.
        spacing: Distance between the centres of neighbouring keys.
        tilt_degrees: Counterclockwise rotation of the whole keyboard.
    """
    x, row = offset_position(index)
    px = x * spacing + (row % 2) * (spacing / 2.0)
    py = row * spacing * math.sqrt(3.0) / 2.0
    # y points down, so a counterclockwise tilt uses the negated angle
    tilt = -math.radians(tilt_degrees)
    return (
        px * math.cos(tilt) - py * math.sin(tilt),
        px * math.sin(tilt) + py * math.cos(tilt),
    )
