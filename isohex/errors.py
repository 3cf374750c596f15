"""
Exceptions raised by isohex.

Only construction-time problems are errors. A key whose pitch falls outside
the MIDI range is recorded as unassigned and never raises.
"""


class MappingError(ValueError):
    """Base class for problems that stop a single mapping run."""


class FillError(MappingError):
    """The fill region is misconfigured (e.g. it does not contain its anchor)."""


class LtnFormatError(MappingError):
    """A Lumatone .ltn file could not be parsed."""

    def __init__(self, message: str, line_no: int | None = None):
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no
