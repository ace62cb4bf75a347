"""
CLI -- Command interface

    tick              ask about yesterday and today, then show the log
    tick ask [N]      ask about the last N days and today, then show the log
    tick log          show the history grid
    tick todo         list habits not yet answered today
    tick config       show or change settings

Sources live in the tick home directory (~/.tick by default):
    habits   one "<cadence> <name>" per line
    log      append-only "<date>\\t<habit>\\t<value>" records
"""

import argparse
import logging
import os
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

from .config import ConfigManager
from .core.entries import EntryLog
from .core.errors import StoreError, TickError
from .core.habits import HabitRegistry
from .core.status import StatusEngine
from .presentation.symbols import get_symbols
from .commands.ask import AskCommand
from .commands.log_cmd import LogCommand
from .commands.todo import TodoCommand
from .commands.config_cmd import ConfigCommand
from . import __version__

logger = logging.getLogger(__name__)


def _is_debug_mode() -> bool:
    """Check if debug logging is enabled via TICK_DEBUG environment variable."""
    return os.environ.get('TICK_DEBUG', '').lower() in ('1', 'true', 'yes')


def setup_logging():
    """Configure logging on stderr; DEBUG when TICK_DEBUG is set."""
    logging.basicConfig(
        level=logging.DEBUG if _is_debug_mode() else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def ensure_file(path: Path):
    """Create an empty source file (and its directory) if missing."""
    if not path.parent.is_dir():
        print(f"Creating {path.parent}")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreError(f"Cannot create directory ({e.strerror or e})", path.parent) from e
    if not path.exists():
        try:
            path.touch()
        except OSError as e:
            raise StoreError(f"Cannot create file ({e.strerror or e})", path) from e


class TickCLI:
    """Command-line interface for the tick habit journal."""

    def __init__(self, home: Optional[Path] = None, today: Optional[date] = None):
        self.config_manager = ConfigManager(home)
        self.config = self.config_manager.load()
        self.home = self.config_manager.home
        self._today = today

        self.symbols = get_symbols(self.config.display.symbols)

        self.habits_path = self.config_manager.habits_path
        self.log_path = self.config_manager.log_path
        ensure_file(self.habits_path)
        ensure_file(self.log_path)

        # Sources are read once, on first use
        self.registry = HabitRegistry(self.habits_path)
        self.log = EntryLog(self.log_path)
        self.engine = StatusEngine(self.registry, self.log, self.symbols)

        self._ask_cmd = AskCommand(self)
        self._log_cmd = LogCommand(self)
        self._todo_cmd = TodoCommand(self)
        self._config_cmd = ConfigCommand(self)

    def today(self) -> date:
        return self._today or date.today()

    def load(self):
        """Read both sources now. Raises ParseError/StoreError."""
        self.registry.load()
        self.log.load()

    def ask(self, days_ago: int = 1):
        return self._ask_cmd.ask(days_ago=days_ago)

    def show_log(self, output_format: Optional[str] = None):
        return self._log_cmd.show(output_format=output_format)

    def todo(self, output_format: Optional[str] = None):
        return self._todo_cmd.todo(output_format=output_format)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tick",
        description="tick -- Daily habit journal",
        epilog="With no command: ask about yesterday and today, then show the log."
    )

    parser.add_argument(
        '--home',
        default=None,
        help='Tick home directory (default: TICK_HOME or ~/.tick)'
    )

    parser.add_argument(
        '--version', '-V',
        action='version',
        version=f'tick {__version__}'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    from .commands import register_all
    register_all(subparsers)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the tick CLI.

    Returns:
        Process exit status
    """
    setup_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    from .commands import dispatch

    try:
        cli = TickCLI(Path(args.home) if args.home else None)
        if args.command is None:
            cli.load()
            cli.ask(days_ago=1)
            cli.show_log()
            return 0

        if args.command != 'config':
            cli.load()
        result = dispatch(args.command, cli, args)
        return result if isinstance(result, int) else 0
    except TickError as e:
        logger.debug("Aborting", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (KeyboardInterrupt, EOFError):
        print()
        return 130


if __name__ == '__main__':
    sys.exit(main())
