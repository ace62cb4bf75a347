"""
Tests for StatusEngine -- Day statuses, cadence windows and scores

These tests validate:
- Four-way classification (unknown / done / satisfied / not done)
- Cadence window [day - (cadence - 1), day]
- Outstanding means "no entry for the day", not "not satisfied"
- Score over scored habits only, None when nothing is scored
"""

from datetime import date, timedelta

import pytest

from tick.core.entries import Entry, EntryLog
from tick.core.habits import Habit, HabitRegistry
from tick.core.status import DayStatus, StatusEngine, date_range
from tick.presentation.symbols import ASCII, UNICODE


DAY1 = date(2024, 1, 1)
DAY2 = date(2024, 1, 2)
DAY3 = date(2024, 1, 3)

RUN = Habit("run", 1)
FLOSS = Habit("floss", 3)


def make_engine(habits, entries, symbols=UNICODE) -> StatusEngine:
    return StatusEngine(HabitRegistry.from_habits(habits), EntryLog.from_entries(entries), symbols)


class TestDayStatus:
    """Four-way classification."""

    def test_no_entry_is_unknown(self):
        engine = make_engine([RUN], [])
        assert engine.day_status(RUN, DAY1) == DayStatus.UNKNOWN

    def test_y_is_done(self):
        engine = make_engine([RUN], [Entry(DAY1, "run", "y")])
        assert engine.day_status(RUN, DAY1) == DayStatus.DONE

    def test_n_is_not_done_for_daily_habit(self):
        """Cadence 1: window is the day itself, so SATISFIED is unreachable."""
        engine = make_engine([RUN], [
            Entry(DAY1, "run", "y"),
            Entry(DAY2, "run", "n"),
        ])
        assert engine.day_status(RUN, DAY2) == DayStatus.NOT_DONE

    @pytest.mark.parametrize("value", ["Y", "yes", "maybe", ""])
    def test_anything_but_y_is_not_done(self, value):
        """Only exactly 'y' counts as done."""
        engine = make_engine([RUN], [Entry(DAY1, "run", value)])
        assert engine.day_status(RUN, DAY1) == DayStatus.NOT_DONE

    def test_satisfied_by_earlier_day_in_window(self):
        """n, y, n with cadence 3: day 3 is satisfied by day 2."""
        engine = make_engine([FLOSS], [
            Entry(DAY1, "floss", "n"),
            Entry(DAY2, "floss", "y"),
            Entry(DAY3, "floss", "n"),
        ])
        assert engine.day_status(FLOSS, DAY3) == DayStatus.SATISFIED

    def test_gap_in_window_is_not_done(self):
        """n on days 1 and 3, nothing on day 2: no y in window."""
        engine = make_engine([FLOSS], [
            Entry(DAY1, "floss", "n"),
            Entry(DAY3, "floss", "n"),
        ])
        assert engine.day_status(FLOSS, DAY3) == DayStatus.NOT_DONE

    @pytest.mark.parametrize("cadence", [2, 3, 7, 30])
    def test_window_edge_is_inclusive(self, cadence):
        """A y exactly cadence-1 days back still satisfies."""
        habit = Habit("h", cadence)
        day = date(2024, 3, 1)
        engine = make_engine([habit], [
            Entry(day - timedelta(days=cadence - 1), "h", "y"),
            Entry(day, "h", "n"),
        ])
        assert engine.day_status(habit, day) == DayStatus.SATISFIED

    @pytest.mark.parametrize("cadence", [1, 2, 3, 7])
    def test_just_outside_window_is_not_done(self, cadence):
        """A y cadence days back is outside the window."""
        habit = Habit("h", cadence)
        day = date(2024, 3, 1)
        engine = make_engine([habit], [
            Entry(day - timedelta(days=cadence), "h", "y"),
            Entry(day, "h", "n"),
        ])
        assert engine.day_status(habit, day) == DayStatus.NOT_DONE

    def test_future_y_does_not_satisfy(self):
        """The window only looks backwards."""
        engine = make_engine([FLOSS], [
            Entry(DAY1, "floss", "n"),
            Entry(DAY2, "floss", "y"),
        ])
        assert engine.day_status(FLOSS, DAY1) == DayStatus.NOT_DONE

    def test_unscored_habit_never_satisfied(self):
        """Cadence 0 can be done but never satisfied."""
        read = Habit("read", 0)
        engine = make_engine([read], [
            Entry(DAY1, "read", "y"),
            Entry(DAY2, "read", "n"),
        ])
        assert engine.day_status(read, DAY1) == DayStatus.DONE
        assert engine.day_status(read, DAY2) == DayStatus.NOT_DONE
        assert engine.habit_satisfied(read, DAY1) is False

    def test_first_duplicate_decides(self):
        """With two entries for one day, the first in file order counts."""
        engine = make_engine([RUN], [
            Entry(DAY1, "run", "y"),
            Entry(DAY1, "run", "n"),
        ])
        assert engine.day_status(RUN, DAY1) == DayStatus.DONE

    def test_repeated_calls_agree(self):
        """No hidden state between calls."""
        engine = make_engine([FLOSS], [Entry(DAY2, "floss", "y"), Entry(DAY3, "floss", "n")])
        first = [engine.day_status(FLOSS, d) for d in (DAY1, DAY2, DAY3)]
        second = [engine.day_status(FLOSS, d) for d in (DAY1, DAY2, DAY3)]
        assert first == second == [DayStatus.UNKNOWN, DayStatus.DONE, DayStatus.SATISFIED]


class TestScore:
    """Daily percentage."""

    def test_empty_log_scores_zero(self):
        """Two scored habits, nothing recorded: 0%."""
        engine = make_engine([RUN, FLOSS], [])
        assert engine.score(DAY1) == 0.0

    def test_done_and_satisfied_both_count(self):
        engine = make_engine([RUN, FLOSS], [
            Entry(DAY1, "floss", "y"),
            Entry(DAY2, "run", "y"),
            Entry(DAY2, "floss", "n"),
        ])
        assert engine.score(DAY2) == 100.0

    def test_half(self):
        engine = make_engine([RUN, FLOSS], [Entry(DAY1, "run", "y"), Entry(DAY1, "floss", "n")])
        assert engine.score(DAY1) == 50.0

    def test_unscored_habits_ignored(self):
        """Cadence < 1 is neither numerator nor denominator."""
        read = Habit("read", 0)
        engine = make_engine([RUN, read], [Entry(DAY1, "read", "y")])
        assert engine.score(DAY1) == 0.0

        engine = make_engine([RUN, read], [Entry(DAY1, "run", "y")])
        assert engine.score(DAY1) == 100.0

    def test_no_scored_habits_is_none(self):
        """Zero denominator gives None, not NaN or an exception."""
        assert make_engine([], []).score(DAY1) is None
        assert make_engine([Habit("read", 0)], [Entry(DAY1, "read", "y")]).score(DAY1) is None

    def test_monotonic(self):
        """Marking one more habit done never lowers the score."""
        habits = [Habit(f"h{i}", 1) for i in range(4)]
        entries = []
        previous = make_engine(habits, entries).score(DAY1)
        for habit in habits:
            entries.append(Entry(DAY1, habit.name, "y"))
            current = make_engine(habits, entries).score(DAY1)
            assert current >= previous
            previous = current
        assert previous == 100.0


class TestOutstanding:
    """Habits with no entry for the day."""

    def test_all_outstanding_on_empty_log(self):
        engine = make_engine([RUN, FLOSS], [])
        assert [h.name for h in engine.outstanding(DAY1)] == ["run", "floss"]

    def test_any_value_removes_habit(self):
        """A 'n' answer counts as answered."""
        engine = make_engine([RUN, FLOSS], [Entry(DAY1, "run", "n")])
        assert [h.name for h in engine.outstanding(DAY1)] == ["floss"]

    def test_satisfied_habit_still_outstanding(self):
        """Satisfied by yesterday but unanswered today: still asked."""
        engine = make_engine([FLOSS], [Entry(DAY1, "floss", "y")])
        assert engine.outstanding(DAY2) == [FLOSS]

    def test_registry_order(self):
        habits = [Habit("c", 1), Habit("a", 1), Habit("b", 1)]
        engine = make_engine(habits, [Entry(DAY1, "a", "y")])
        assert [h.name for h in engine.outstanding(DAY1)] == ["c", "b"]


class TestGlyphs:
    """symbol() and sparkline() use the engine's symbol set."""

    def test_unicode_status_symbols(self):
        engine = make_engine([], [])
        assert engine.symbol(DayStatus.UNKNOWN) == "•"
        assert engine.symbol(DayStatus.NOT_DONE) == " "
        assert engine.symbol(DayStatus.DONE) == "━"
        assert engine.symbol(DayStatus.SATISFIED) == "─"

    def test_ascii_status_symbols(self):
        engine = make_engine([], [], symbols=ASCII)
        assert engine.symbol(DayStatus.DONE) == "="
        assert engine.symbol(DayStatus.SATISFIED) == "-"

    def test_sparkline(self):
        engine = make_engine([], [])
        assert engine.sparkline(0) == " "
        assert engine.sparkline(50) == "▄"
        assert engine.sparkline(100) == "█"
        assert engine.sparkline(None) == "·"


class TestDateRange:

    def test_inclusive(self):
        assert date_range(DAY1, DAY3) == [DAY1, DAY2, DAY3]

    def test_single_day(self):
        assert date_range(DAY2, DAY2) == [DAY2]

    def test_crosses_month(self):
        days = date_range(date(2024, 1, 30), date(2024, 2, 2))
        assert len(days) == 4
        assert days[-1] == date(2024, 2, 2)
