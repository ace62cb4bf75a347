"""
TodoCommand -- Habits still unanswered today
"""

from datetime import date
from typing import Optional

from ..commands.base import BaseCommand
from ..output import JsonRenderer
from ..presentation.symbols import safe_print


class TodoCommand(BaseCommand):
    """Lists outstanding habits: no entry of any value for the day."""

    def todo(self, day: Optional[date] = None, output_format: Optional[str] = None):
        day = day or self.today()
        habits = self.engine.outstanding(day)

        if output_format == "json":
            data = [{"name": h.name, "cadence_days": h.cadence_days} for h in habits]
            print(JsonRenderer().render(data, title=f"Outstanding {day.isoformat()}"))
            return

        for habit in habits:
            safe_print(habit.name)


def register_parser(subparsers):
    """Register todo command parser."""
    p = subparsers.add_parser('todo', help='Print unresolved habits for today')
    p.add_argument('--format', '-f', choices=['text', 'json'], default='text',
                   help='Output format')
    return p


def handle(cli, args):
    """Handle todo command dispatch."""
    cli._todo_cmd.todo(output_format=args.format)
