# filename: histogram.py

import logging

import numpy as np

from errors import EmptySourceError

logger = logging.getLogger(__name__)

LEVELS = 256


class Histogram:
    """Occurrence counts for the 256 possible 8-bit sample values."""

    def __init__(self, counts):
        counts = tuple(int(c) for c in counts)
        if len(counts) != LEVELS:
            raise ValueError(f"expected {LEVELS} counts, got {len(counts)}")
        if any(c < 0 for c in counts):
            raise ValueError("counts must be non-negative")
        self._counts = counts
        self._total = sum(counts)

    @property
    def counts(self):
        return self._counts

    @property
    def total(self):
        return self._total

    @property
    def alphabet_size(self):
        return sum(1 for c in self._counts if c > 0)

    def __getitem__(self, symbol):
        return self._counts[symbol]

    def __eq__(self, other):
        if not isinstance(other, Histogram):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self):
        return f"Histogram(total={self._total}, alphabet_size={self.alphabet_size})"

    def present_symbols(self):
        return [s for s, c in enumerate(self._counts) if c > 0]

    def probabilities(self):
        # (symbol, count / N) for every symbol with count > 0
        if self._total == 0:
            raise EmptySourceError("source contains no samples")
        for symbol, count in enumerate(self._counts):
            if count > 0:
                yield symbol, count / self._total


def build_histogram(grid):
    """Count sample values over a 2-D grid of integers in [0, 255].

    `grid` may be a numpy array or a nested sequence of rows. A grid with no
    rows or no columns gives an all-zero histogram with total 0.
    """
    samples = np.asarray(grid)
    if samples.ndim != 2:
        raise ValueError(f"expected a 2-D grid, got {samples.ndim} dimensions")
    if samples.size == 0:
        logger.debug("empty grid with shape %s", samples.shape)
        return Histogram([0] * LEVELS)
    if not np.issubdtype(samples.dtype, np.integer):
        raise ValueError(f"expected integer samples, got {samples.dtype}")
    if samples.min() < 0 or samples.max() >= LEVELS:
        raise ValueError("sample values must lie in [0, 255]")

    counts = np.bincount(samples.ravel().astype(np.int64), minlength=LEVELS)
    histogram = Histogram(counts.tolist())
    logger.debug(
        "histogram over %dx%d grid: %d distinct values",
        samples.shape[0],
        samples.shape[1],
        histogram.alphabet_size,
    )
    return histogram
