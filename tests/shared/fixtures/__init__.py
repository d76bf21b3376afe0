"""Shared test fixtures and utilities."""

from tests.shared.fixtures.factories import make_raw_stories, make_raw_story
from tests.shared.fixtures.fakes import FakeClock, FakeStorySource, SteppingUtcClock

__all__ = [
    "FakeClock",
    "FakeStorySource",
    "SteppingUtcClock",
    "make_raw_stories",
    "make_raw_story",
]
