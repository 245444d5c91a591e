import os
import sys

import numpy as np
import pytest

# Add the repository root to path
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)


def grid_from_counts(counts, cols=8):
    """Build a 2-D uint8 grid holding each symbol `count` times."""
    values = []
    for symbol, count in sorted(counts.items()):
        values.extend([symbol] * count)
    assert len(values) % cols == 0
    return np.array(values, dtype=np.uint8).reshape(-1, cols)


@pytest.fixture
def skewed_grid():
    # p = 0.5, 0.25, 0.125, 0.125
    return grid_from_counts({100: 32, 50: 16, 200: 8, 30: 8})


@pytest.fixture
def random_grid():
    rng = np.random.default_rng(1234)
    return rng.integers(0, 256, size=(64, 48), dtype=np.uint8)
