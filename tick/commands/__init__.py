"""
Commands -- CLI command implementations with self-registration

Each command module:
1. Defines XxxCommand class (handler implementation)
2. Exports register_parser(subparsers) to configure its argparse
3. Exports handle(cli, args) to dispatch to handler methods
"""

import importlib
import sys
from typing import Dict, Callable, Any

from .base import BaseCommand

# Command modules that participate in auto-registration
# Order determines help display order
COMMAND_MODULES = [
    'ask',
    'log_cmd',
    'todo',
    'config_cmd',
]

# Handler registry: command_name -> handle function
_handlers: Dict[str, Callable] = {}


def register_all(subparsers) -> None:
    """
    Import each module in COMMAND_MODULES, register its parser and its
    handle() function.
    """
    _handlers.clear()

    for module_name in COMMAND_MODULES:
        try:
            module = importlib.import_module(f'.{module_name}', __package__)
        except ImportError as e:
            print(f"Warning: Could not load command module '{module_name}': {e}", file=sys.stderr)
            continue

        if hasattr(module, 'register_parser'):
            module.register_parser(subparsers)

        if hasattr(module, 'handle'):
            # 'log_cmd' -> 'log', 'config_cmd' -> 'config'
            cmd_name = getattr(module, 'COMMAND_NAME', module_name.replace('_cmd', ''))
            _handlers[cmd_name] = module.handle


def dispatch(command: str, cli: Any, args: Any) -> Any:
    """
    Dispatch command to its registered handler.

    Raises:
        KeyError: If command not registered
    """
    if command not in _handlers:
        raise KeyError(f"Unknown command: {command}. Available: {list(_handlers.keys())}")

    return _handlers[command](cli, args)


def get_registered_commands() -> list:
    """Get list of registered command names."""
    return list(_handlers.keys())


__all__ = ['BaseCommand', 'register_all', 'dispatch', 'get_registered_commands']
