"""
Shared pytest fixtures and configuration for sigflow tests.
"""

import pytest

from sigflow import make_cached_emitter, make_emitter


class Recorder:
    """Subscriber that records every value it receives."""

    def __init__(self):
        self.values = []

    def __call__(self, value):
        self.values.append(value)

    @property
    def last(self):
        return self.values[-1] if self.values else None

    @property
    def calls(self):
        return len(self.values)


@pytest.fixture
def recorder():
    """Provide a fresh recording subscriber."""
    return Recorder()


@pytest.fixture
def make_recorder():
    """Provide a factory for additional recording subscribers."""
    return Recorder


@pytest.fixture
def emitter():
    """Provide a fresh Emitter instance."""
    return make_emitter("test")


@pytest.fixture
def cached_emitter():
    """Provide a fresh CachedEmitter seeded with 0."""
    return make_cached_emitter(0, "test")
