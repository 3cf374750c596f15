"""
Diagram rendering for isohex.

Draws the whole keyboard as tilted pointy-top hexagons, one per key, filled
with the key's colour and labelled with its note name, and saves a PNG.
"""

import logging
import math
from pathlib import Path
from typing import Optional

from PIL import Image, ImageDraw, ImageFont

from .colors import BOUNDARY_LIGHTEN, lighten, to_rgb
from .geometry import TILT_DEGREES, KeyIndex, all_keys, screen_position
from .models import KeyMapping

logger = logging.getLogger(__name__)

# Distance between neighbouring key centres, in pixels
DEFAULT_SPACING = 44

BACKGROUND = "#ffffff"
OUTLINE = "#202020"
OUTSIDE_FILL = "#f2f2f2"     # keys no fill region covers
UNASSIGNED_FILL = "#8c8c8c"  # keys whose pitch has no MIDI note
TITLE_HEIGHT = 24


def ascii_label(label: str) -> str:
    """Swap the accidental glyphs for characters every font has."""
    return label.replace("♯", "#").replace("♭", "b")


def key_centers(spacing: float = DEFAULT_SPACING) -> tuple[tuple[int, int], dict[KeyIndex, tuple[float, float]]]:
    """
    Place every key on the canvas.

    Returns:
        ((width, height), centres) where centres maps each key to its pixel
        centre, with room left for the title above the keys.
    """
    raw = {index: screen_position(index, spacing) for index in all_keys()}
    xs = [x for x, _ in raw.values()]
    ys = [y for _, y in raw.values()]
    margin = spacing
    left, top = min(xs) - margin, min(ys) - margin - TITLE_HEIGHT
    width = int(math.ceil(max(xs) - left + margin))
    height = int(math.ceil(max(ys) - top + margin))
    centers = {index: (x - left, y - top) for index, (x, y) in raw.items()}
    return (width, height), centers


def _hexagon(cx: float, cy: float, radius: float) -> list[tuple[float, float]]:
    points = []
    for i in range(6):
        angle = math.radians(30 + 60 * i + TILT_DEGREES)
        points.append((cx + radius * math.cos(angle), cy - radius * math.sin(angle)))
    return points


def _text_color(fill: str) -> str:
    r, g, b = to_rgb(fill)
    luminance = 0.299 * r + 0.587 * g + 0.114 * b
    return "#000000" if luminance > 140 else "#ffffff"


def fill_for_key(mapping: KeyMapping, index: KeyIndex) -> str:
    """Return the colour a key is drawn with."""
    assignment = mapping.get(index)
    if assignment is None:
        return OUTSIDE_FILL
    if not assignment.assigned:
        return UNASSIGNED_FILL
    color = assignment.color or OUTSIDE_FILL
    if assignment.boundary:
        # seam between two fill regions
        return lighten(color, 0.25 + BOUNDARY_LIGHTEN)
    return lighten(color, 0.25)


def render_diagram(
    mapping: KeyMapping,
    path: str | Path,
    spacing: float = DEFAULT_SPACING,
    show_index: bool = False,
    font: Optional[ImageFont.ImageFont] = None,
) -> Path:
    """
    Render a mapping as a PNG.

    Args:
        mapping: The computed key mapping.
        path: Destination file.
        spacing: Distance between neighbouring key centres, in pixels.
        show_index: Also print "group,key" under each label.
        font: Font for labels; Pillow's default font if not given.

    Returns:
        The path written.
    """
    path = Path(path)
    (width, height), centers = key_centers(spacing)
    image = Image.new("RGB", (width, height), BACKGROUND)
    draw = ImageDraw.Draw(image)
    font = font or ImageFont.load_default()
    # Corner radius of a hexagon whose edges touch its neighbours
    radius = spacing / math.sqrt(3.0)

    info = mapping.info
    title = f"{info.tuning.upper()} / {info.layout} / {info.fill}"
    draw.text((spacing / 2.0, 4), title, fill="#000000", font=font)

    for index, (cx, cy) in centers.items():
        fill = fill_for_key(mapping, index)
        draw.polygon(_hexagon(cx, cy, radius), fill=fill, outline=OUTLINE)

        assignment = mapping.get(index)
        lines = []
        if assignment is not None and assignment.label:
            lines.append(ascii_label(assignment.label))
        if show_index:
            lines.append(str(index))
        if not lines:
            continue
        text = "\n".join(lines)
        left, top, right, bottom = draw.multiline_textbbox((0, 0), text, font=font, align="center")
        draw.multiline_text(
            (cx - (right - left) / 2.0 - left, cy - (bottom - top) / 2.0 - top),
            text,
            fill=_text_color(fill),
            font=font,
            align="center",
        )

    image.save(path, format="PNG")
    logger.debug("Wrote %s (%dx%d)", path, width, height)
    return path
