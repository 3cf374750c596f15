"""
Mapping builder.

Composes a tuning, a layout and a fill into the full key assignment table.
Each key is resolved on its own from its coordinate, its region's anchor and
the two generators, so the order keys are visited in never matters.
"""

import logging
from typing import Optional

from .colors import key_color
from .fill import FillInfo
from .geometry import Dir, KeyIndex, all_keys, key_to_axial, neighbor
from .layout import Layout
from .models import KeyAssignment, KeyMapping, MappingInfo
from .tuning import Spelling, Tuning

logger = logging.getLogger(__name__)


def build_mapping(
    tuning: Tuning,
    layout: Layout,
    fill: FillInfo,
    spelling: Spelling = Spelling.SHARP,
    check: bool = False,
) -> KeyMapping:
    """
    Compute the note and name of every key inside the fill.

    Keys outside every fill region are left out of the table. Keys inside
    whose pitch has no MIDI note are kept, with no note and no label. Keys
    next to a key of another region are flagged as `boundary`, so writers can
    show where a split mapping's halves meet.

    Args:
        tuning: Pitch arithmetic and naming.
        layout: Generators for the lattice.
        fill: Anchor(s) and column bounds.
        spelling: Enharmonic preference for labels.
        check: Log a warning for generators that cannot reach every step.

    Returns:
        The immutable key mapping.

    Raises:
        FillError: If the fill does not contain its anchor.
    """
    fill.validate()
    if check:
        for issue in layout.reachability_issues(tuning):
            logger.warning(issue)

    origins = [region.origin for region in fill.regions]
    regions = {index: fill.region_for(key_to_axial(index)) for index in all_keys()}
    assignments = []
    for index, region in regions.items():
        if region is None:
            continue
        coord = key_to_axial(index)
        step = layout.axial_to_step_offset(coord, origins[region])
        boundary = _on_boundary(index, region, regions)
        assignments.append(
            _assign(tuning, spelling, index.group, index.key, coord.q, coord.r, step, region, boundary)
        )

    mapping = KeyMapping(
        info=MappingInfo(
            tuning=tuning.value,
            layout=layout.name,
            fill=fill.name,
            mode=fill.mode.value,
            right=layout.right,
            up_left=layout.up_left,
            up_right=layout.up_right,
        ),
        assignments=tuple(assignments),
    )
    logger.debug(
        "Built %s / %s / %s: %d keys, %d unassigned",
        tuning.value, layout.name, fill.name, len(mapping), len(mapping.unassigned()),
    )
    return mapping


def _on_boundary(index: KeyIndex, region: int, regions: dict[KeyIndex, Optional[int]]) -> bool:
    """True when a neighbouring key belongs to a different fill region."""
    for direction in Dir:
        other = neighbor(index, direction)
        if other is None:
            continue
        other_region = regions[other]
        if other_region is not None and other_region != region:
            return True
    return False


def _assign(
    tuning: Tuning,
    spelling: Spelling,
    group: int,
    key: int,
    q: int,
    r: int,
    step: int,
    region: int,
    boundary: bool = False,
) -> KeyAssignment:
    note = tuning.note_for(step)
    if note is None:
        return KeyAssignment(group=group, key=key, q=q, r=r, step=step, region=region, boundary=boundary)
    label = tuning.name_for(step, spelling)
    return KeyAssignment(
        group=group,
        key=key,
        q=q,
        r=r,
        step=step,
        region=region,
        boundary=boundary,
        channel=note.channel,
        note=note.note,
        label=label,
        color=key_color(label),
    )
