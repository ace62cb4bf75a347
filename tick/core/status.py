"""
Status Engine -- Day statuses and daily scores derived from the log

Pure projection of (HabitRegistry, EntryLog). Nothing is cached here:
every call reads the current in-memory log, so repeated calls return the
same answer until an entry is appended.

Classification for one habit on one day:

    no entry for the day              -> UNKNOWN
    entry value "y"                   -> DONE
    other value, "y" in cadence window -> SATISFIED
    other value, no "y" in window      -> NOT_DONE

The cadence window for day D is [D - (cadence - 1), D], inclusive.
"""

from datetime import date, timedelta
from enum import Enum
from typing import List, Optional

from .entries import EntryLog
from .habits import Habit, HabitRegistry
from ..presentation.symbols import SymbolSet, UNICODE, spark_for_score, symbol_for_status


class DayStatus(Enum):
    UNKNOWN = "unknown"
    NOT_DONE = "not_done"
    DONE = "done"
    SATISFIED = "satisfied"

    @property
    def counts_as_done(self) -> bool:
        return self in (DayStatus.DONE, DayStatus.SATISFIED)


def date_range(start: date, end: date) -> List[date]:
    """Every day from start through end, inclusive."""
    days = (end - start).days
    return [start + timedelta(days=i) for i in range(days + 1)]


class StatusEngine:
    """
    Computes statuses and scores from a habit registry and an entry log.
    """

    def __init__(self, registry: HabitRegistry, log: EntryLog, symbols: Optional[SymbolSet] = None):
        self.registry = registry
        self.log = log
        self.symbols = symbols or UNICODE

    def day_status(self, habit: Habit, day: date) -> DayStatus:
        """Classify one habit on one day."""
        entry = self.log.lookup(habit.name, day)
        if entry is None:
            return DayStatus.UNKNOWN
        if entry.is_done:
            return DayStatus.DONE
        if self.habit_satisfied(habit, day):
            return DayStatus.SATISFIED
        return DayStatus.NOT_DONE

    def habit_satisfied(self, habit: Habit, day: date) -> bool:
        """
        True if any day in the habit's cadence window ending at `day` has a
        "y" entry. Always False for unscored habits (cadence < 1).
        """
        if not habit.is_scored:
            return False

        start = day - timedelta(days=habit.cadence_days - 1)
        for current in date_range(start, day):
            entry = self.log.lookup(habit.name, current)
            if entry is not None and entry.is_done:
                return True
        return False

    def score(self, day: date) -> Optional[float]:
        """
        Percentage of scored habits that are DONE or SATISFIED on `day`.

        Returns None when no habit is scored.
        """
        scored = self.registry.scored()
        if not scored:
            return None

        done = [h for h in scored if self.day_status(h, day).counts_as_done]
        return 100.0 * len(done) / len(scored)

    def outstanding(self, day: date) -> List[Habit]:
        """
        Habits with no entry at all for `day`, in registry order.

        A habit satisfied by an earlier day in its window is still
        outstanding if the day itself has not been answered.
        """
        return [h for h in self.registry.habits if self.log.lookup(h.name, day) is None]

    def symbol(self, status: DayStatus) -> str:
        return symbol_for_status(self.symbols, status)

    def sparkline(self, score: Optional[float]) -> str:
        return spark_for_score(self.symbols, score)
