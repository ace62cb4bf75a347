"""
Errors -- Failure taxonomy for tick

ParseError and StoreError are fatal: the CLI reports them and exits non-zero.
Malformed interactive answers never become exceptions (the prompt repeats).
"""

from pathlib import Path
from typing import Optional


class TickError(Exception):
    """Base class for all tick failures."""


class ParseError(TickError):
    """A line in the definitions or log source could not be parsed."""

    def __init__(
        self,
        reason: str,
        line: str = "",
        line_number: Optional[int] = None,
        path: Optional[Path] = None
    ):
        self.reason = reason
        self.line = line
        self.line_number = line_number
        self.path = path
        super().__init__(self._format())

    def _format(self) -> str:
        location = str(self.path) if self.path else "<input>"
        if self.line_number is not None:
            location = f"{location}:{self.line_number}"
        return f"{location}: {self.reason}: {self.line!r}"


class StoreError(TickError):
    """A source file could not be read or appended to."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        super().__init__(f"{message}: {path}" if path else message)
