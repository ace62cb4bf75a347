"""
Habit Registry -- Habit definitions loaded from a plain text source

One habit per line: "<cadence> <name>". The name runs to the end of the line
and may contain spaces. Lines starting with '#' are comments.

    1 run
    3 floss
    # 7 call home

File order is display order.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from .errors import ParseError, StoreError

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"


@dataclass(frozen=True)
class Habit:
    """
    A named recurring obligation.

    cadence_days < 1 means the habit is tracked but never scored and can
    never be satisfied through its cadence window.
    """
    name: str
    cadence_days: int

    @property
    def is_scored(self) -> bool:
        return self.cadence_days >= 1


def parse_habit(line: str, line_number: Optional[int] = None, path: Optional[Path] = None) -> Habit:
    """Parse a single live definition line."""
    parts = line.strip().split(None, 1)
    if len(parts) < 2:
        raise ParseError("expected '<cadence> <name>'", line, line_number, path)

    cadence, name = parts
    try:
        cadence_days = int(cadence)
    except ValueError:
        raise ParseError(f"cadence is not an integer ({cadence})", line, line_number, path) from None

    return Habit(name=name.strip(), cadence_days=cadence_days)


def parse_habits(lines: Iterable[str], path: Optional[Path] = None) -> List[Habit]:
    """
    Parse definition lines into habits, preserving order.

    Blank lines and comment lines are skipped. Duplicate names are kept as
    separate habits.

    Raises:
        ParseError: On the first malformed line. No partial result is returned.
    """
    habits = []
    for number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue
        habits.append(parse_habit(line, number, path))
    return habits


class HabitRegistry:
    """
    Ordered habit definitions read from one source file.

    Loaded once per run; the habit list is not modified afterwards.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._habits: Optional[List[Habit]] = None

    def load(self) -> List[Habit]:
        """
        Read and parse the definitions source.

        Raises:
            StoreError: Source missing or unreadable
            ParseError: Malformed definition line
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                habits = parse_habits(f, self.path)
        except OSError as e:
            raise StoreError(f"Cannot read habits ({e.strerror or e})", self.path) from e

        logger.debug("Loaded %d habits from %s", len(habits), self.path)
        self._habits = habits
        return habits

    @classmethod
    def from_habits(cls, habits: Iterable[Habit], path: Optional[Path] = None) -> "HabitRegistry":
        """Build a registry from already-parsed habits."""
        registry = cls(path or Path("<memory>"))
        registry._habits = list(habits)
        return registry

    @property
    def habits(self) -> List[Habit]:
        if self._habits is None:
            self.load()
        return list(self._habits)

    def scored(self) -> List[Habit]:
        """Habits that count toward the daily score."""
        return [h for h in self.habits if h.is_scored]

    def __iter__(self):
        return iter(self.habits)

    def __len__(self) -> int:
        return len(self.habits)
