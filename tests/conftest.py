"""Pytest configuration - shared mappings and fills."""
from __future__ import annotations

import pytest

from isohex.builder import build_mapping
from isohex.fill import FillInfo, FillMode, FillRegion, split_fill, wide_fill
from isohex.geometry import KeyIndex
from isohex.layout import harmonic_table, wicki_hayden
from isohex.tuning import Tuning


@pytest.fixture
def wide():
    return wide_fill()


@pytest.fixture
def split():
    return split_fill()


@pytest.fixture
def narrow_split():
    """Two thin halves with a gap between them."""
    return FillInfo(
        name="narrow",
        mode=FillMode.SPLIT,
        regions=(
            FillRegion(anchor=KeyIndex(1, 26), left=2, right=2),
            FillRegion(anchor=KeyIndex(3, 26), left=2, right=2),
        ),
    )


@pytest.fixture
def wh12_wide(wide):
    """Wicki-Hayden, 12-EDO, one region."""
    return build_mapping(Tuning.EDO12, wicki_hayden(Tuning.EDO12), wide)


@pytest.fixture
def ht19_split(split):
    """Harmonic Table, 19-EDO, two halves."""
    return build_mapping(Tuning.EDO19, harmonic_table(Tuning.EDO19), split)
