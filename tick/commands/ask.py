"""
AskCommand -- Interactive collection of answers for recent days

For every day from N days ago through today, asks about each habit that
has no entry for that day yet. Answers are appended as they are given, so
an interrupted session keeps everything answered so far.
"""

import argparse
from datetime import date, timedelta
from typing import Callable, Optional

from ..commands.base import BaseCommand
from ..core.entries import DONE, NOT_DONE, Entry
from ..core.status import date_range
from ..presentation.symbols import safe_print

SKIP_ANSWERS = ("", "-")
MAX_DAYS_AGO = 3660
VALID_ANSWERS = (DONE, NOT_DONE) + SKIP_ANSWERS


class AskCommand(BaseCommand):
    """Prompts y/n/skip for outstanding habits."""

    def ask_one(self, habit_name: str, prompt: Callable[[str], str]) -> Optional[str]:
        """
        Prompt until the answer is y, n or a skip.

        Returns:
            "y", "n", or None for a skip
        """
        question = f"{habit_name}? [{DONE}/{NOT_DONE}/-] "
        while True:
            answer = prompt(question).rstrip()
            if answer in VALID_ANSWERS:
                break

        return None if answer in SKIP_ANSWERS else answer

    def ask(
        self,
        days_ago: int = 1,
        today: Optional[date] = None,
        prompt: Optional[Callable[[str], str]] = None
    ) -> int:
        """
        Collect answers from `days_ago` days back through today.

        Args:
            days_ago: How many days before today to start
            today: Last day to ask about (default: current date)
            prompt: Reads one line of input for a question (default: input)

        Returns:
            Number of entries appended
        """
        today = today or self.today()
        prompt = prompt or input
        recorded = 0

        for day in date_range(today - timedelta(days=days_ago), today):
            safe_print(f"{day.isoformat()}:")

            for habit in self.engine.outstanding(day):
                value = self.ask_one(habit.name, prompt)
                if value is not None:
                    self.log.append(Entry(date=day, habit_name=habit.name, value=value))
                    recorded += 1

        return recorded


def _days_ago(value: str) -> int:
    try:
        days = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number of days: {value!r}")
    if days < 0:
        raise argparse.ArgumentTypeError("days ago must be zero or more")
    if days > MAX_DAYS_AGO:
        raise argparse.ArgumentTypeError(f"days ago must be at most {MAX_DAYS_AGO}")
    return days


def register_parser(subparsers):
    """Register ask command parser."""
    p = subparsers.add_parser('ask', help='Ask for status of all habits for a day')
    p.add_argument('days_ago', nargs='?', type=_days_ago, default=1,
                   help='Start this many days before today (default: 1)')
    return p


def handle(cli, args):
    """Handle ask command dispatch. Shows the log afterwards."""
    cli._ask_cmd.ask(days_ago=args.days_ago)
    cli._log_cmd.show()
