"""Shared fixtures for tiny-qc tests."""

import pytest


class FixedSource:
    """Random source that replays a fixed sequence of samples."""

    def __init__(self, *samples):
        self._samples = list(samples)
        self.calls = 0

    def random(self):
        sample = self._samples[self.calls % len(self._samples)]
        self.calls += 1
        return sample


@pytest.fixture
def fixed_source():
    """Factory for deterministic random sources: ``fixed_source(0.25, 0.75)``."""
    return FixedSource
