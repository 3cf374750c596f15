"""
Key colours.

Colours are chosen from the note name alone, so every C lights up the same
way wherever it lands. The same palette feeds the Lumatone's LEDs and the
diagram.
"""

from PIL import ImageColor


# Format: role -> colour
KEY_COLORS = {
    "reference": "#ff8c1a",   # C, the reference pitch class
    "natural": "#e6e6e6",     # other letter names
    "accidental": "#3a6fd8",  # sharps and flats
    "microtonal": "#2f9e6b",  # ups and downs
}

UNASSIGNED_COLOR = "#000000"

# How far keys on the seam between two fill regions are blended towards white
BOUNDARY_LIGHTEN = 0.5


def color_role(name: str) -> str:
    """
    Classify a note name (with or without octave number) into a colour role.

    Args:
        name: A note name such as "C4", "F♯3" or "^D5".

    Returns:
        One of the keys of KEY_COLORS.
    """
    pitch = name.rstrip("-0123456789")
    if pitch.startswith("^") or pitch.startswith("v"):
        return "microtonal"
    if pitch.endswith("♯") or pitch.endswith("♭"):
        return "accidental"
    if pitch == "C":
        return "reference"
    return "natural"


def key_color(name: str) -> str:
    return KEY_COLORS[color_role(name)]


def to_rgb(color: str) -> tuple[int, int, int]:
    """Parse "#rrggbb", "rrggbb" or any colour name Pillow knows."""
    if len(color) == 6 and all(c in "0123456789abcdefABCDEF" for c in color):
        color = "#" + color
    r, g, b = ImageColor.getrgb(color)[:3]
    return r, g, b


def to_hex(color: str) -> str:
    """Return a colour as six lowercase hex digits, the .ltn form."""
    r, g, b = to_rgb(color)
    return f"{r:02x}{g:02x}{b:02x}"


def lighten(color: str, amount: float = 0.5) -> str:
    """Blend a colour towards white by `amount` (0 keeps it, 1 is white)."""
    r, g, b = to_rgb(color)
    amount = max(0.0, min(1.0, amount))
    mixed = [int(round(c + (255 - c) * amount)) for c in (r, g, b)]
    return "#{:02x}{:02x}{:02x}".format(*mixed)
