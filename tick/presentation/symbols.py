"""
Symbols -- Visual vocabulary for day statuses and scores

Progressive enhancement: Unicode when supported, ASCII fallback.
Configurable via the display.symbols setting.

Also provides safe_print() for encoding-safe output of habit names.
"""

import math
import os
import sys
from dataclasses import dataclass
from typing import Optional, Tuple


# Unicode to ASCII replacements used when the terminal cannot encode a glyph
UNICODE_TO_ASCII = {
    '•': '.',
    '━': '=',
    '─': '-',
    '·': '?',
    '▁': '.',
    '▂': ':',
    '▃': '-',
    '▄': '=',
    '▅': '+',
    '▆': '*',
    '▇': '#',
    '█': '@',
    '✓': '[OK]',
    '❌': '[ERR]',
}


def safe_print(text: str, end: str = '\n', file=None) -> None:
    """
    Print with graceful encoding fallback.

    Replaces known glyphs with ASCII equivalents on UnicodeEncodeError,
    then '?' for anything still unencodable.
    """
    if file is None:
        file = sys.stdout

    try:
        print(text, end=end, file=file)
    except UnicodeEncodeError:
        safe_text = text
        for unicode_char, ascii_equiv in UNICODE_TO_ASCII.items():
            safe_text = safe_text.replace(unicode_char, ascii_equiv)

        try:
            print(safe_text, end=end, file=file)
        except UnicodeEncodeError:
            encoding = getattr(file, 'encoding', 'utf-8') or 'utf-8'
            encoded = safe_text.encode(encoding, errors='replace')
            print(encoded.decode(encoding), end=end, file=file)


@dataclass(frozen=True)
class SymbolSet:
    """Glyphs for the history view."""
    # Day statuses
    unknown: str
    not_done: str
    done: str
    satisfied: str

    # Score sparkline, lowest to highest bucket
    sparks: Tuple[str, ...]
    no_score: str

    # Status markers
    check_pass: str
    check_fail: str


UNICODE = SymbolSet(
    unknown='•',
    not_done=' ',
    done='━',
    satisfied='─',
    sparks=(' ', '▁', '▂', '▃', '▄', '▅', '▆', '▇', '█'),
    no_score='·',
    check_pass='✓',
    check_fail='❌',
)

ASCII = SymbolSet(
    unknown='.',
    not_done=' ',
    done='=',
    satisfied='-',
    sparks=(' ', '.', ':', '-', '=', '+', '*', '#', '@'),
    no_score='?',
    check_pass='[OK]',
    check_fail='[ERR]',
)


# Mapping from DayStatus value to symbol attribute
STATUS_TO_SYMBOL = {
    'unknown': 'unknown',
    'not_done': 'not_done',
    'done': 'done',
    'satisfied': 'satisfied',
}


def supports_unicode() -> bool:
    """
    Check if environment likely supports Unicode output.

    Conservative: defaults to ASCII if uncertain.
    """
    if os.environ.get('TICK_ASCII_ONLY', '').lower() in ('1', 'true', 'yes'):
        return False
    if os.environ.get('TICK_UNICODE', '').lower() in ('1', 'true', 'yes'):
        return True

    stdout_encoding = getattr(sys.stdout, 'encoding', None)
    if stdout_encoding:
        encoding_lower = stdout_encoding.lower().replace('-', '').replace('_', '')
        if encoding_lower.startswith('cp') or encoding_lower in ('ascii', 'latin1', 'iso88591'):
            return False
        if 'utf' in encoding_lower:
            return True

    lang = os.environ.get('LANG', '').lower()
    lc_all = os.environ.get('LC_ALL', '').lower()
    if 'utf-8' in lang or 'utf8' in lang or 'utf-8' in lc_all or 'utf8' in lc_all:
        return True

    return False


def get_symbols(preference: Optional[str] = None) -> SymbolSet:
    """
    Get symbol set for "unicode", "ascii" or "auto" (None = auto).
    """
    if preference == 'unicode':
        return UNICODE
    if preference == 'ascii':
        return ASCII
    return UNICODE if supports_unicode() else ASCII


def symbol_for_status(symbols: SymbolSet, status) -> str:
    """Get the glyph for a DayStatus (or its string value)."""
    value = getattr(status, 'value', status)
    return getattr(symbols, STATUS_TO_SYMBOL[value])


def spark_for_score(symbols: SymbolSet, score: Optional[float]) -> str:
    """
    Get the sparkline glyph for a 0-100 score.

    The range is split into as many equal buckets as there are sparks;
    100 lands in the top bucket. A missing score gets the no_score glyph.
    """
    if score is None or math.isnan(score):
        return symbols.no_score
    buckets = len(symbols.sparks)
    index = int(score * buckets / 100)
    return symbols.sparks[max(0, min(index, buckets - 1))]
