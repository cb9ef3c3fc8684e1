"""Pytest configuration for renderer tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session, and a scripted
random source for deterministic sampling tests.
"""

import itertools

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls which can cause
    segmentation faults due to Taichi runtime conflicts.
    """
    ti.init(arch=ti.cpu, random_seed=42)
    yield


class ScriptedRandom:
    """Random source replaying a fixed sequence of values in a loop."""

    def __init__(self, values):
        self._values = itertools.cycle(values)
        self.calls = 0

    def random(self):
        self.calls += 1
        return next(self._values)


@pytest.fixture
def scripted_rng():
    """Factory for random sources that return the given values in order."""

    def _make(*values):
        return ScriptedRandom(values or (0.5,))

    return _make
