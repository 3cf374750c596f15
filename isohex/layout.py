"""
Isomorphic layouts for isohex.

A layout is defined by two generators: the number of scale steps gained by
moving one key to the right, and by moving one key up and to the left. The
third axis, up and to the right, is one step right followed by one step up-left,
so its generator is always their sum:

    up_right = right + up_left

Every interval is therefore the same physical shape wherever it is played.
"""

from dataclasses import dataclass
from enum import Enum
from math import gcd
from typing import Callable

from .geometry import Axial, Dir
from .tuning import Interval, Tuning


class Axis(Enum):
    """The three lattice axes. C is derived from A and B."""

    A = "right"
    B = "up_left"
    C = "up_right"


@dataclass(frozen=True)
class Layout:
    """
    A pair of lattice generators.

    Attributes:
        name: Display name, used in file metadata.
        right: Steps per key moving right (axis A).
        up_left: Steps per key moving up and to the left (axis B).
    """

    name: str
    right: int
    up_left: int

    @property
    def up_right(self) -> int:
        """Steps per key moving up and to the right (axis C)."""
        return self.right + self.up_left

    def step_delta(self, axis: Axis) -> int:
        """Return the step change for one key along an axis."""
        if axis is Axis.A:
            return self.right
        if axis is Axis.B:
            return self.up_left
        return self.up_right

    def step_for_direction(self, direction: Dir) -> int:
        """Return the step change for a move to a neighbouring key."""
        d = direction.delta
        return self.axial_to_step_offset(d, Axial(0, 0))

    def axial_to_step_offset(self, coord: Axial, origin: Axial) -> int:
        """
        Convert a lattice displacement to a number of scale steps.

        This is a plain linear map and performs no checks; generators that
        alias pitches still produce a result.

        Args:
            coord: The key's axial coordinate.
            origin: The coordinate that carries step 0.

        Returns:
            The scale step of `coord`.
        """
        d = coord - origin
        # r grows downward while up_left points up
        return d.q * self.right - d.r * self.up_left

    def reachability_issues(self, tuning: Tuning) -> list[str]:
        """
        Describe ways this layout fails to cover the tuning.

        Nothing here stops a mapping from being built; callers may log the
        result as a warning.
        """
        issues = []
        for axis in Axis:
            if self.step_delta(axis) == 0:
                issues.append(f"{self.name}: generator along {axis.value} is 0, keys along it repeat one pitch")
        common = gcd(gcd(self.right, self.up_left), tuning.octave)
        if common > 1:
            issues.append(
                f"{self.name}: generators {self.right}/{self.up_left} share a factor of {common} "
                f"with the {tuning.octave}-step octave, only 1 step in {common} is reachable"
            )
        return issues


def wicki_hayden(tuning: Tuning) -> Layout:
    """
    Wicki-Hayden layout.

    Rows run in whole tones, so the diatonic scale lies along a row; up-left
    is a fourth and up-right a fifth.
    """
    return Layout(
        name="Wicki-Hayden",
        right=tuning.steps(Interval.MAJOR_SECOND),
        up_left=tuning.steps(Interval.PERFECT_FOURTH),
    )


def harmonic_table(tuning: Tuning) -> Layout:
    """
    Harmonic Table layout, turned so its rows lie along the Lumatone's rows.

    Up-left is a major third, up-right a fifth and right a minor third, so
    every major and minor triad is a tight cluster of three keys.
    """
    return Layout(
        name="Harmonic Table",
        right=tuning.steps(Interval.MINOR_THIRD),
        up_left=tuning.steps(Interval.MAJOR_THIRD),
    )


LAYOUTS: dict[str, Callable[[Tuning], Layout]] = {
    "wicki-hayden": wicki_hayden,
    "harmonic-table": harmonic_table,
}


def layout_key(name: str) -> str:
    """
    Normalise a layout name to its key in LAYOUTS.

    "Harmonic Table", "harmonic_table" and "harmonic-table" are the same.

    Raises:
        ValueError: If the layout name is unknown.
    """
    key = name.strip().lower().replace("_", "-").replace(" ", "-")
    if key not in LAYOUTS:
        raise ValueError(f"Invalid layout: {name}. Choose one of: {', '.join(LAYOUTS)}")
    return key


def layout_for(name: str, tuning: Tuning) -> Layout:
    """
    Build a named layout for a tuning.

    Raises:
        ValueError: If the layout name is unknown.
    """
    return LAYOUTS[layout_key(name)](tuning)
