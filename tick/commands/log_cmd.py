"""
LogCommand -- Habit history grid and yesterday's score
"""

from datetime import date
from typing import Optional

from ..commands.base import BaseCommand
from ..output import JsonRenderer
from ..presentation.history import HistoryView
from ..presentation.symbols import safe_print


class LogCommand(BaseCommand):
    """Shows the trailing history window ending today."""

    def view(self) -> HistoryView:
        return HistoryView(
            self.engine,
            days=self.config.history.days,
            name_width=self.config.display.name_width
        )

    def show(self, day: Optional[date] = None, output_format: Optional[str] = None):
        """
        Print the history grid ending at `day` (default today).

        Args:
            day: Last (rightmost) day of the window
            output_format: "json" for machine-readable output, else text
        """
        day = day or self.today()
        view = self.view()

        if output_format == "json":
            print(JsonRenderer().render(view.as_data(day), title=f"History to {day.isoformat()}"))
            return

        for line in view.render(day):
            safe_print(line)


def register_parser(subparsers):
    """Register log command parser."""
    p = subparsers.add_parser('log', help='Print habit log')
    p.add_argument('--format', '-f', choices=['text', 'json'], default='text',
                   help='Output format')
    return p


def handle(cli, args):
    """Handle log command dispatch."""
    cli._log_cmd.show(output_format=args.format)
