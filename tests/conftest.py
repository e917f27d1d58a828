"""Pytest configuration and shared fixtures for heapgraph tests.

This module provides:
- A deterministic numpy RNG for randomized graph and heap tests
- Debug mode switched on for every test, so heap invariants are checked
  after each mutation
"""

import os

import numpy as np
import pytest

from heapgraph.diagnostics import debug_context


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This keeps tests reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def heap_invariant_checks():
    """Auto-use fixture running every test with debug mode enabled."""
    with debug_context(True):
        yield
