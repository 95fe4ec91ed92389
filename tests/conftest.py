"""
Pytest configuration and shared fixtures for indicator tests.
"""

import numpy as np
import pytest


def generate_random_walk(n_samples: int = 250, start: float = 100.0, seed: int = 42) -> np.ndarray:
    """
    Generate a deterministic random-walk price series.

    Useful for parity checks against vectorized references.
    """
    rng = np.random.default_rng(seed)
    steps = rng.normal(0.0, 1.0, n_samples)
    return start + np.cumsum(steps)


@pytest.fixture
def random_walk() -> np.ndarray:
    """250-sample random walk starting at 100."""
    return generate_random_walk()


@pytest.fixture
def continuation() -> np.ndarray:
    """Second, independent random walk used after checkpoint/restore."""
    return generate_random_walk(n_samples=60, start=95.0, seed=7)
