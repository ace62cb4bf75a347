"""
Entry Log -- Append-only record of daily answers

Each live line is "<ISO date>\\t<habit name>\\t<value>". Blank lines separate
days for human readers and carry no meaning:

    2024-01-01	run	y
    2024-01-01	floss	n

    2024-01-02	run	n

Entries are never rewritten or deleted. If several lines share a
(date, habit) pair, the first one in file order is the one that counts.
"""

import logging
import os
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from .errors import ParseError, StoreError

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "\t"
DONE = "y"
NOT_DONE = "n"


@dataclass(frozen=True)
class Entry:
    """One recorded answer for one habit on one calendar day."""
    date: date
    habit_name: str
    value: str

    @property
    def is_done(self) -> bool:
        # Anything other than exactly "y" counts as not done
        return self.value == DONE

    def to_line(self) -> str:
        return FIELD_SEPARATOR.join((self.date.isoformat(), self.habit_name, self.value))


def parse_entry(line: str, line_number: Optional[int] = None, path: Optional[Path] = None) -> Entry:
    """Parse a single live log line."""
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) < 3:
        raise ParseError("expected '<date>\\t<habit>\\t<value>'", line, line_number, path)

    try:
        day = date.fromisoformat(parts[0].strip())
    except ValueError:
        raise ParseError(f"invalid date ({parts[0]})", line, line_number, path) from None

    return Entry(date=day, habit_name=parts[1], value=parts[2].strip())


def parse_entries(lines: Iterable[str], path: Optional[Path] = None) -> List[Entry]:
    """
    Parse log lines into entries in file order.

    Blank lines are skipped unconditionally.

    Raises:
        ParseError: On the first malformed line.
    """
    entries = []
    for number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        entries.append(parse_entry(line, number, path))
    return entries


class EntryLog:
    """
    Single-file append-only entry store.

    The in-memory entry list mirrors the file: it is read once by load()
    and extended by append(). The (habit, date) lookup index is derived
    from that list on demand and dropped whenever it grows.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._entries: Optional[List[Entry]] = None
        self._index: Optional[Dict[Tuple[str, date], Entry]] = None

    def load(self) -> List[Entry]:
        """
        Read and parse the log source.

        Raises:
            StoreError: Source missing or unreadable
            ParseError: Malformed log line
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                entries = parse_entries(f, self.path)
        except OSError as e:
            raise StoreError(f"Cannot read log ({e.strerror or e})", self.path) from e

        logger.debug("Loaded %d entries from %s", len(entries), self.path)
        self._entries = entries
        self._reset_index()
        return list(entries)

    @classmethod
    def from_entries(cls, entries: Iterable[Entry], path: Optional[Path] = None) -> "EntryLog":
        """Build a log from already-parsed entries (nothing is written)."""
        log = cls(path or Path("<memory>"))
        log._entries = list(entries)
        return log

    @property
    def entries(self) -> List[Entry]:
        """All entries in file order."""
        return list(self._all())

    def _all(self) -> List[Entry]:
        if self._entries is None:
            self.load()
        return self._entries

    def _reset_index(self):
        self._index = None

    def _ends_mid_line(self) -> bool:
        """True if the file is non-empty and its last byte is not a newline."""
        try:
            with open(self.path, "rb") as f:
                f.seek(0, os.SEEK_END)
                if f.tell() == 0:
                    return False
                f.seek(-1, os.SEEK_END)
                return f.read(1) != b"\n"
        except FileNotFoundError:
            return False
        except OSError as e:
            raise StoreError(f"Cannot read log ({e.strerror or e})", self.path) from e

    def append(self, entry: Entry) -> Entry:
        """
        Append an entry to the store.

        Writes a blank separator line first when the last stored entry is
        from a different day. If the file does not end with a newline (hand
        edit or an interrupted write) the record starts on a fresh line.
        A failure part-way through can leave a partial line at the end of
        the file; earlier lines are never touched.

        Raises:
            StoreError: Source cannot be opened or written
        """
        last = self.last_date()
        lines = []
        if last is not None and last != entry.date:
            lines.append("")
        lines.append(entry.to_line())

        text = "\n".join(lines) + "\n"
        if self._ends_mid_line():
            text = "\n" + text

        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            raise StoreError(f"Cannot append to log ({e.strerror or e})", self.path) from e

        logger.debug("Appended %s to %s", entry.to_line().replace(FIELD_SEPARATOR, " "), self.path)
        self._all().append(entry)
        self._reset_index()
        return entry

    def last_date(self) -> Optional[date]:
        """Date of the most recently stored entry, or None for an empty log."""
        entries = self._all()
        return entries[-1].date if entries else None

    def lookup(self, habit_name: str, day: date) -> Optional[Entry]:
        """First entry in file order for this habit on this exact day."""
        if self._index is None:
            index: Dict[Tuple[str, date], Entry] = {}
            for entry in self._all():
                index.setdefault((entry.habit_name, entry.date), entry)
            self._index = index
        return self._index.get((habit_name, day))

    def __iter__(self):
        return iter(self.entries)
