"""
Tests for isohex/layout.py
Validates generators, the step map and layout lookup
"""

import pytest

from isohex.geometry import Axial, Dir
from isohex.layout import Axis, Layout, harmonic_table, layout_for, wicki_hayden
from isohex.tuning import Interval, Tuning


class TestGenerators:
    """Tests for the built-in layouts."""

    def test_wicki_hayden_edo12(self):
        layout = wicki_hayden(Tuning.EDO12)
        assert (layout.right, layout.up_left, layout.up_right) == (2, 5, 7)

    def test_harmonic_table_edo19(self):
        layout = harmonic_table(Tuning.EDO19)
        assert (layout.right, layout.up_left, layout.up_right) == (5, 6, 11)

    @pytest.mark.parametrize("tuning", list(Tuning))
    def test_up_right_is_a_fifth(self, tuning):
        """Both layouts put the fifth up and to the right."""
        fifth = tuning.steps(Interval.PERFECT_FIFTH)
        assert wicki_hayden(tuning).up_right == fifth
        assert harmonic_table(tuning).up_right == fifth

    def test_step_delta(self):
        layout = Layout("test", right=3, up_left=4)
        assert layout.step_delta(Axis.A) == 3
        assert layout.step_delta(Axis.B) == 4
        assert layout.step_delta(Axis.C) == 7


class TestStepMap:
    """Tests for lattice displacement -> scale steps."""

    def test_origin_is_zero(self):
        layout = wicki_hayden(Tuning.EDO31)
        origin = Axial(7, 3)
        assert layout.axial_to_step_offset(origin, origin) == 0

    def test_directions(self):
        layout = wicki_hayden(Tuning.EDO12)
        assert layout.step_for_direction(Dir.RIGHT) == 2
        assert layout.step_for_direction(Dir.UP_LEFT) == 5
        assert layout.step_for_direction(Dir.UP_RIGHT) == 7
        assert layout.step_for_direction(Dir.LEFT) == -2
        assert layout.step_for_direction(Dir.DOWN_RIGHT) == -5
        assert layout.step_for_direction(Dir.DOWN_LEFT) == -7

    def test_opposites_negate(self):
        layout = harmonic_table(Tuning.EDO31)
        for direction in Dir:
            assert layout.step_for_direction(direction.opposite) == -layout.step_for_direction(direction)

    def test_additive(self):
        """A displacement's step is the sum of the steps of its parts."""
        layout = harmonic_table(Tuning.EDO19)
        zero = Axial(0, 0)
        a, b = Axial(3, -2), Axial(-5, 4)
        assert layout.axial_to_step_offset(a + b, zero) == (
            layout.axial_to_step_offset(a, zero) + layout.axial_to_step_offset(b, zero)
        )

    def test_translation_invariant(self):
        """The same shape gives the same interval anywhere."""
        layout = wicki_hayden(Tuning.EDO19)
        shape = Axial(2, -1)
        for origin in (Axial(0, 0), Axial(10, 9), Axial(-4, 12)):
            assert layout.axial_to_step_offset(origin + shape, origin) == layout.axial_to_step_offset(shape, Axial(0, 0))


class TestReachability:
    """Tests for the layout consistency check."""

    @pytest.mark.parametrize("tuning", list(Tuning))
    def test_presets_are_clean(self, tuning):
        assert wicki_hayden(tuning).reachability_issues(tuning) == []
        assert harmonic_table(tuning).reachability_issues(tuning) == []

    def test_shared_factor(self):
        issues = Layout("even", right=2, up_left=4).reachability_issues(Tuning.EDO12)
        assert len(issues) == 1
        assert "share a factor of 2" in issues[0]

    def test_zero_generator(self):
        issues = Layout("flat", right=5, up_left=-5).reachability_issues(Tuning.EDO19)
        assert any("up_right is 0" in issue for issue in issues)


class TestLayoutFor:
    """Tests for layout lookup by name."""

    @pytest.mark.parametrize("name", ["wicki-hayden", "Wicki_Hayden", "wicki hayden"])
    def test_wicki_hayden_names(self, name):
        assert layout_for(name, Tuning.EDO12) == wicki_hayden(Tuning.EDO12)

    def test_harmonic_table(self):
        assert layout_for("Harmonic Table", Tuning.EDO31).name == "Harmonic Table"

    def test_unknown(self):
        with pytest.raises(ValueError, match="Invalid layout"):
            layout_for("janko", Tuning.EDO12)
