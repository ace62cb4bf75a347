"""
BaseCommand -- Shared foundation for all CLI commands

Commands receive the CLI instance and reach its resources through properties.
"""

from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..cli import TickCLI


class BaseCommand:
    """Base class for CLI commands with access to shared resources."""

    def __init__(self, cli: 'TickCLI'):
        self._cli = cli

    @property
    def registry(self):
        """Habit definitions."""
        return self._cli.registry

    @property
    def log(self):
        """Append-only entry log."""
        return self._cli.log

    @property
    def engine(self):
        """Status and score engine."""
        return self._cli.engine

    @property
    def config(self):
        """Application configuration."""
        return self._cli.config

    @property
    def symbols(self):
        """Symbol set for display (Unicode/ASCII)."""
        return self._cli.symbols

    def today(self) -> date:
        """Current local date."""
        return self._cli.today()
