"""
Tests for isohex/config.py
Validates run specs and JSON run plans
"""

import json

import pytest
from pydantic import ValidationError

from isohex.config import RunPlan, RunSpec, default_plan, load_plan
from isohex.fill import FillMode, fill_for, fill_key
from isohex.layout import layout_for, layout_key
from isohex.tuning import Spelling, Tuning


class TestRunSpec:
    """Tests for a single run."""

    def test_normalises_names(self):
        run = RunSpec(tuning="EDO-19", layout="Harmonic Table", fill="Split", spelling="FLAT")
        assert run.tuning == "edo19"
        assert run.layout == "harmonic-table"
        assert run.fill == "split"
        assert run.spelling == "flat"

    def test_output_name(self):
        assert RunSpec(tuning="12", layout="wicki-hayden", fill="wide").output_name == "edo12-wicki-hayden-wide"
        assert RunSpec(tuning="12", layout="wicki-hayden", fill="wide", name="mine").output_name == "mine"

    @pytest.mark.parametrize("field,value", [
        ("tuning", "edo7"),
        ("layout", "janko"),
        ("fill", "triple"),
        ("spelling", "double-sharp"),
    ])
    def test_unknown_names(self, field, value):
        data = {"tuning": "edo12", "layout": "wicki-hayden", "fill": "wide"}
        data[field] = value
        with pytest.raises(ValidationError):
            RunSpec(**data)

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError):
            RunSpec(tuning="edo12", layout="wicki-hayden", fill="wide", colour="red")

    def test_resolve(self):
        tuning, layout, fill, spelling = RunSpec(
            tuning="edo31", layout="harmonic-table", fill="split", spelling="directional"
        ).resolve()
        assert tuning is Tuning.EDO31
        assert (layout.right, layout.up_left) == (8, 10)
        assert fill.mode is FillMode.SPLIT
        assert spelling is Spelling.DIRECTIONAL


class TestPlans:
    """Tests for run plans."""

    def test_default_plan(self):
        plan = default_plan()
        assert len(plan.runs) == 12
        assert len({run.output_name for run in plan.runs}) == 12
        assert plan.output_dir == "mappings"

    def test_load_plan(self, tmp_path):
        path = tmp_path / "plan.json"
        path.write_text(json.dumps({
            "output_dir": "out",
            "runs": [
                {"tuning": "edo12", "layout": "wicki-hayden", "fill": "wide"},
                {"tuning": "31", "layout": "harmonic_table", "fill": "split", "name": "ht31"},
            ],
        }), encoding="utf-8")
        plan = load_plan(path)
        assert plan.output_dir == "out"
        assert [run.output_name for run in plan.runs] == ["edo12-wicki-hayden-wide", "ht31"]

    def test_load_plan_rejects_bad_runs(self, tmp_path):
        path = tmp_path / "plan.json"
        path.write_text(json.dumps({"runs": [{"tuning": "edo5", "layout": "wicki-hayden", "fill": "wide"}]}))
        with pytest.raises(ValidationError):
            load_plan(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_plan(tmp_path / "nope.json")

    def test_empty_plan(self):
        assert RunPlan().runs == []

    def test_duplicate_names_rejected(self):
        """Two runs writing the same files are refused."""
        run = {"tuning": "edo12", "layout": "wicki-hayden", "fill": "wide"}
        with pytest.raises(ValidationError, match="duplicate output name"):
            RunPlan.model_validate({"runs": [run, dict(run, tuning="12")]})
        with pytest.raises(ValidationError, match="duplicate output name 'mine'"):
            RunPlan.model_validate({"runs": [
                dict(run, name="mine"),
                {"tuning": "edo19", "layout": "harmonic-table", "fill": "split", "name": "mine"},
            ]})

    def test_same_preset_with_different_names(self):
        run = {"tuning": "edo12", "layout": "wicki-hayden", "fill": "wide"}
        plan = RunPlan.model_validate({"runs": [dict(run, name="a"), dict(run, name="b")]})
        assert [r.output_name for r in plan.runs] == ["a", "b"]


class TestPresetNames:
    """Run specs accept exactly the names the preset lookups accept."""

    @pytest.mark.parametrize("name", ["Harmonic Table", "harmonic_table", " HARMONIC-table ", "wicki hayden"])
    def test_layout_names_resolve(self, name):
        run = RunSpec(tuning="edo19", layout=name, fill="wide")
        assert run.layout == layout_key(name)
        assert run.resolve()[1] == layout_for(name, Tuning.EDO19)

    @pytest.mark.parametrize("name", [" Split", "WIDE"])
    def test_fill_names_resolve(self, name):
        run = RunSpec(tuning="edo12", layout="wicki-hayden", fill=name)
        assert run.fill == fill_key(name)
        assert run.resolve()[2] == fill_for(name)

    @pytest.mark.parametrize("name", ["janko", "harmonic--table", ""])
    def test_rejected_by_both(self, name):
        with pytest.raises(ValueError):
            layout_key(name)
        with pytest.raises(ValidationError):
            RunSpec(tuning="edo12", layout=name, fill="wide")
