"""
tick -- Daily habit journal

Records yes/no answers for recurring habits and shows how well each
habit's cadence is being kept.

Usage:
    tick
    tick ask 3
    tick log
    tick todo
    tick config --set display.symbols ascii
"""

__version__ = "0.1.0"

# Core layer (data)
from .core.errors import TickError, ParseError, StoreError
from .core.habits import Habit, HabitRegistry
from .core.entries import Entry, EntryLog
from .core.status import DayStatus, StatusEngine

# Presentation layer
from .presentation.symbols import get_symbols, SymbolSet, UNICODE, ASCII

# Config (stays at root)
from .config import Config, ConfigManager, get_config, DisplayConfig, HistoryConfig, PathsConfig

__all__ = [
    # Core
    'TickError', 'ParseError', 'StoreError',
    'Habit', 'HabitRegistry',
    'Entry', 'EntryLog',
    'DayStatus', 'StatusEngine',
    # Presentation
    'get_symbols', 'SymbolSet', 'UNICODE', 'ASCII',
    # Config
    'Config', 'ConfigManager', 'get_config', 'DisplayConfig', 'HistoryConfig', 'PathsConfig',
]
