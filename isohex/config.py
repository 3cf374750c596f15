"""
Run selection for isohex.

Which (tuning, layout, fill) combinations to generate is configuration, not
part of the mapping itself. A run plan is either the built-in default (every
combination of the presets) or a JSON file:

    {
        "output_dir": "mappings",
        "runs": [
            {"tuning": "edo12", "layout": "wicki-hayden", "fill": "wide"},
            {"tuning": "edo31", "layout": "harmonic-table", "fill": "split",
             "spelling": "flat", "name": "ht31-flat"}
        ]
    }
"""

import json
from itertools import product
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .fill import FILLS, FillInfo, fill_for, fill_key
from .layout import LAYOUTS, Layout, layout_for, layout_key
from .tuning import Spelling, Tuning


TUNING_NAMES = [t.value for t in Tuning]
LAYOUT_NAMES = list(LAYOUTS)
FILL_NAMES = list(FILLS)
SPELLING_NAMES = [s.value for s in Spelling]

DEFAULT_OUTPUT_DIR = "mappings"


class RunSpec(BaseModel):
    """One mapping to generate."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    tuning: str
    layout: str
    fill: str
    spelling: str = Spelling.SHARP.value
    name: Optional[str] = None

    @field_validator("tuning")
    @classmethod
    def _known_tuning(cls, v: str) -> str:
        return Tuning.from_name(v).value

    @field_validator("layout")
    @classmethod
    def _known_layout(cls, v: str) -> str:
        return layout_key(v)

    @field_validator("fill")
    @classmethod
    def _known_fill(cls, v: str) -> str:
        return fill_key(v)

    @field_validator("spelling")
    @classmethod
    def _known_spelling(cls, v: str) -> str:
        key = v.strip().lower()
        if key not in SPELLING_NAMES:
            raise ValueError(f"unknown spelling '{v}', choose one of: {', '.join(SPELLING_NAMES)}")
        return key

    @property
    def output_name(self) -> str:
        """Base name for the run's output files."""
        return self.name or f"{self.tuning}-{self.layout}-{self.fill}"

    def resolve(self) -> tuple[Tuning, Layout, FillInfo, Spelling]:
        tuning = Tuning(self.tuning)
        return tuning, layout_for(self.layout, tuning), fill_for(self.fill), Spelling(self.spelling)


class RunPlan(BaseModel):
    """A batch of runs sharing an output directory."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    output_dir: str = DEFAULT_OUTPUT_DIR
    runs: list[RunSpec] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_output_names(self) -> "RunPlan":
        # Runs write <output_name>.ltn/.png into one directory
        seen = set()
        for run in self.runs:
            if run.output_name in seen:
                raise ValueError(f"duplicate output name '{run.output_name}', give one of the runs a different name")
            seen.add(run.output_name)
        return self


def default_plan(output_dir: str = DEFAULT_OUTPUT_DIR) -> RunPlan:
    """Every tuning with every layout and fill."""
    runs = [
        RunSpec(tuning=t, layout=l, fill=f)
        for t, l, f in product(TUNING_NAMES, LAYOUT_NAMES, FILL_NAMES)
    ]
    return RunPlan(output_dir=output_dir, runs=runs)


def load_plan(path: str | Path) -> RunPlan:
    """
    Load a run plan from JSON.

    Raises:
        OSError: If the file cannot be read.
        pydantic.ValidationError: If the plan names unknown presets or has
            unexpected fields.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return RunPlan.model_validate(data)
