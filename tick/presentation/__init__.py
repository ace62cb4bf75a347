"""
Presentation -- Glyphs and the history grid

HistoryView lives in presentation.history and is imported from there.
"""

from .symbols import SymbolSet, UNICODE, ASCII, get_symbols, safe_print, spark_for_score, symbol_for_status

__all__ = [
    'SymbolSet', 'UNICODE', 'ASCII', 'get_symbols', 'safe_print',
    'spark_for_score', 'symbol_for_status',
]
