"""
ConfigCommand -- Show and change configuration
"""

from ..commands.base import BaseCommand
from ..presentation.symbols import safe_print


class ConfigCommand(BaseCommand):
    """Configuration display and modification."""

    def show_config(self):
        """Show current configuration."""
        safe_print(self._cli.config_manager.display())

    def set_config(self, key: str, value: str) -> bool:
        """Set a configuration value. Returns True on success."""
        error = self._cli.config_manager.set(key, value)
        if error:
            safe_print(f"{self.symbols.check_fail} {error}")
            return False

        safe_print(f"{self.symbols.check_pass} Set {key} = {value}")
        safe_print(f"  Saved to {self._cli.config_manager.config_path}")
        return True


def register_parser(subparsers):
    """Register config command parser."""
    p = subparsers.add_parser('config', help='Show or change configuration')
    p.add_argument('--set', nargs=2, metavar=('KEY', 'VALUE'),
                   help='Set a value (e.g., display.symbols ascii)')
    return p


def handle(cli, args):
    """Handle config command dispatch."""
    if args.set:
        key, value = args.set
        if not cli._config_cmd.set_config(key, value):
            return 1
    else:
        cli._config_cmd.show_config()
    return 0
