"""Pytest configuration to ensure the `src` package layout is importable.

This adds the `src/` directory to `sys.path` so tests can import the
`dieroll` package without requiring an editable install in CI.
"""

import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from dieroll.config import Settings  # noqa: E402


class AlwaysLowSource:
    """Terrible source that always returns its lower bound."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, int]] = []

    def random_int(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        return low


@pytest.fixture
def always_low() -> AlwaysLowSource:
    return AlwaysLowSource()


@pytest.fixture
def plain_settings() -> Settings:
    return Settings(history_enabled=False, default_sides=6)


@pytest.fixture
def history_settings() -> Settings:
    return Settings(history_enabled=True, default_sides=6)
