"""Pytest configuration and shared fixtures for dms_tools tests."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from dms_tools.core.sequences import SequenceCombiner


class FakeClock:
    """Manually advanced clock returning epoch milliseconds."""

    def __init__(self, now: int = 1_700_000_000_000) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, millis: int) -> None:
        self.now += millis


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def clock() -> FakeClock:
    """Injectable clock starting at a fixed instant."""
    return FakeClock()


@pytest.fixture
def combiner() -> SequenceCombiner[int]:
    """Empty combiner for integers."""
    return SequenceCombiner()


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()
