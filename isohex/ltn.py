"""
Lumatone .ltn mapping files.

An .ltn file has one section per board, `[Board0]` to `[Board4]`, listing the
note, channel and LED colour of each of the 56 keys:

    [Board0]
    Key_0=60
    Chan_0=1
    Col_0=ff8c1a
    ...

Only these per-key settings are written. The reader also accepts the global
settings the Lumatone editor adds, and ignores them.
"""

import logging
import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from .colors import BOUNDARY_LIGHTEN, UNASSIGNED_COLOR, lighten, to_hex
from .errors import LtnFormatError
from .geometry import GROUPS, KEYS_PER_GROUP, KeyIndex
from .models import KeyMapping

logger = logging.getLogger(__name__)

BOARD_RE = re.compile(r"^\[Board(\d+)\]$")
KEY_RE = re.compile(r"^Key_(\d+)=(\d+)$")
CHAN_RE = re.compile(r"^Chan_(\d+)=(\d+)$")
COL_RE = re.compile(r"^Col_(\d+)=([0-9a-fA-F]{6})$")
INVERT_RE = re.compile(r"^CCInvert_(\d+)$")
# Global settings written by the Lumatone editor; not used here
IGNORE_RE = re.compile(
    r"^(AfterTouchActive|LightOnKeyStrokes|InvertFootController|InvertSustain|ExprCtrlSensivity"
    r"|VelocityIntrvlTbl|NoteOnOffVelocityCrvTbl|FaderConfig|afterTouchConfig|LumaTouchConfig)=(.*)$"
)


class LtnKey(BaseModel):
    """The settings of one key as stored in an .ltn file."""

    model_config = ConfigDict(frozen=True)

    note: int = 0
    channel: int = 0
    color: str = "000000"
    invert: bool = False


def write_ltn(path: str | Path, mapping: KeyMapping) -> Path:
    """
    Write a mapping as a Lumatone .ltn file.

    Keys outside the fill and keys with no MIDI note are written as note 0 on
    channel 0 with the LED off. Keys on the seam between two fill regions are
    lit in a lighter shade of their colour.

    Args:
        path: Destination file.
        mapping: The computed key mapping.

    Returns:
        The path written.
    """
    path = Path(path)
    off = to_hex(UNASSIGNED_COLOR)
    lines = []
    for group in range(GROUPS):
        lines.append(f"[Board{group}]")
        for key in range(KEYS_PER_GROUP):
            assignment = mapping.get(KeyIndex(group, key))
            if assignment is None or not assignment.assigned:
                note, channel, color = 0, 0, off
            else:
                note, channel = assignment.note, assignment.channel
                color = assignment.color or UNASSIGNED_COLOR
                if assignment.boundary:
                    color = lighten(color, BOUNDARY_LIGHTEN)
                color = to_hex(color)
            lines.append(f"Key_{key}={note}")
            lines.append(f"Chan_{key}={channel}")
            lines.append(f"Col_{key}={color}")
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    logger.debug("Wrote %s", path)
    return path


def read_ltn(path: str | Path) -> dict[KeyIndex, LtnKey]:
    """
    Read the per-key settings of an .ltn file.

    Keys a board section does not mention keep the defaults of LtnKey.

    Raises:
        LtnFormatError: On a line that is not recognised, a key setting
            outside a board section, or an out-of-range board or key number.
    """
    boards: dict[int, list[dict]] = {}
    current: list[dict] | None = None

    with open(path, "r", encoding="utf-8") as f:
        for line_no, raw in enumerate(f, start=1):
            line = raw.strip()
            if not line:
                continue
            m = BOARD_RE.match(line)
            if m:
                group = int(m.group(1))
                if group >= GROUPS:
                    raise LtnFormatError(f"board {group} does not exist", line_no)
                current = boards.setdefault(group, [{} for _ in range(KEYS_PER_GROUP)])
                continue
            if IGNORE_RE.match(line):
                continue

            for regex, field, convert in (
                (KEY_RE, "note", int),
                (CHAN_RE, "channel", int),
                (COL_RE, "color", str.lower),
                (INVERT_RE, "invert", None),
            ):
                m = regex.match(line)
                if m:
                    break
            else:
                raise LtnFormatError(f"unrecognised line {line!r}", line_no)

            if current is None:
                raise LtnFormatError("key setting before any [Board] section", line_no)
            key = int(m.group(1))
            if key >= KEYS_PER_GROUP:
                raise LtnFormatError(f"key {key} does not exist", line_no)
            current[key][field] = True if convert is None else convert(m.group(2))

    return {
        KeyIndex(group, key): LtnKey(**settings)
        for group, keys in sorted(boards.items())
        for key, settings in enumerate(keys)
    }
