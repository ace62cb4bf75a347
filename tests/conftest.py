"""
Shared pytest fixtures for the tick test suite.

Every test gets a clean environment: TICK_* variables are removed so a
developer's own configuration never leaks in.
"""

import pytest

from tests.factories import TickTestFactory


@pytest.fixture(autouse=True)
def clean_tick_env(monkeypatch):
    for name in ("TICK_HOME", "TICK_HABITS_FILE", "TICK_LOG_FILE", "TICK_SYMBOLS",
                 "TICK_DEBUG", "TICK_ASCII_ONLY", "TICK_UNICODE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def tick_factory(tmp_path):
    """Empty tick home with blank habits and log files."""
    return TickTestFactory(tmp_path)


@pytest.fixture
def tick_env(tmp_path):
    """
    Tick home with two scored habits:

        1 run
        3 floss
    """
    factory = TickTestFactory(tmp_path)
    factory.write_habits("1 run", "3 floss")
    return factory
