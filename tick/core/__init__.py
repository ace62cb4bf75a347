"""
Core -- Habit definitions, the entry log and the status engine
"""

from .errors import TickError, ParseError, StoreError
from .habits import Habit, HabitRegistry, parse_habits
from .entries import Entry, EntryLog, parse_entries
from .status import DayStatus, StatusEngine, date_range

__all__ = [
    'TickError', 'ParseError', 'StoreError',
    'Habit', 'HabitRegistry', 'parse_habits',
    'Entry', 'EntryLog', 'parse_entries',
    'DayStatus', 'StatusEngine', 'date_range',
]
