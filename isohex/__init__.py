"""
isohex - Lumatone isomorphic mapping generator

isohex lays a tuning onto the Lumatone's hex grid. Two lattice generators
fix the interval gained by each step right and up-left; every key is then a
fixed distance in scale steps from the Middle C key, so every interval keeps
the same shape anywhere on the keyboard.
"""

__version__ = "0.1.0"
__author__ = "isohex Project"

from .builder import build_mapping
from .errors import FillError, LtnFormatError, MappingError
from .fill import FillInfo, FillMode, FillRegion, fill_for
from .geometry import Axial, Dir, KeyIndex
from .layout import Axis, Layout, harmonic_table, layout_for, wicki_hayden
from .models import KeyAssignment, KeyMapping
from .tuning import Interval, MidiNote, Spelling, Tuning

__all__ = [
    "build_mapping",
    "FillError",
    "LtnFormatError",
    "MappingError",
    "FillInfo",
    "FillMode",
    "FillRegion",
    "fill_for",
    "Axial",
    "Dir",
    "KeyIndex",
    "Axis",
    "Layout",
    "harmonic_table",
    "layout_for",
    "wicki_hayden",
    "KeyAssignment",
    "KeyMapping",
    "Interval",
    "MidiNote",
    "Spelling",
    "Tuning",
]
