"""
History View -- Sparkline and status grid for a trailing window of days

    Layout (oldest day left, today right):

                          ▁▂█▇ ...     <- daily score sparkline
                      run ━━ ━ ...     <- one status row per habit
                    floss ─•━─ ...
    Yesterday's score: 50%
"""

from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from ..core.status import StatusEngine, date_range


def format_score(score: Optional[float]) -> str:
    """Render a score as '50%', '66.7%' or 'n/a'."""
    if score is None:
        return "n/a"
    text = f"{score:.1f}".rstrip("0").rstrip(".")
    return f"{text}%"


class HistoryView:
    """
    Renders the history grid for a StatusEngine.

    Args:
        engine: Source of statuses, scores and glyphs
        days: Number of days shown, today included
        name_width: Width of the right-aligned habit name column
    """

    def __init__(self, engine: StatusEngine, days: int = 61, name_width: int = 25):
        self.engine = engine
        self.days = days
        self.name_width = name_width

    def window(self, today: date) -> List[date]:
        return date_range(today - timedelta(days=self.days - 1), today)

    def render(self, today: date) -> List[str]:
        """Text lines for the window ending at `today`."""
        engine = self.engine
        days = self.window(today)
        padding = " " * self.name_width

        lines = [f"{padding} " + "".join(engine.sparkline(engine.score(d)) for d in days)]
        for habit in engine.registry.habits:
            row = "".join(engine.symbol(engine.day_status(habit, d)) for d in days)
            lines.append(f"{habit.name:>{self.name_width}} {row}")

        yesterday = today - timedelta(days=1)
        lines.append(f"Yesterday's score: {format_score(engine.score(yesterday))}")
        return lines

    def as_data(self, today: date) -> Dict[str, Any]:
        """Same window as plain data for machine-readable output."""
        engine = self.engine
        days = self.window(today)
        return {
            "dates": [d.isoformat() for d in days],
            "scores": [engine.score(d) for d in days],
            "habits": [
                {
                    "name": habit.name,
                    "cadence_days": habit.cadence_days,
                    "statuses": [engine.day_status(habit, d).value for d in days],
                }
                for habit in engine.registry.habits
            ],
            "yesterday_score": engine.score(today - timedelta(days=1)),
        }
