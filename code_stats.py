# filename: code_stats.py

import logging
import math
from collections import namedtuple

from errors import EmptySourceError

logger = logging.getLogger(__name__)

UNDEFINED = "undefined"


class CodeStatistics(namedtuple("CodeStatistics", ["entropy", "average_length", "ratio"])):
    """Entropy and average code length in bits per sample.

    `ratio` is entropy / average_length, or None when the average length is
    zero (a single-symbol source, where both are zero).
    """

    __slots__ = ()

    @property
    def ratio_defined(self):
        return self.ratio is not None

    def format_ratio(self):
        if not self.ratio_defined:
            return UNDEFINED
        return f"{self.ratio:.4f}"

    def report_lines(self):
        return [
            f"Entropy: {self.entropy:.4f} bits",
            f"Average Code Length: {self.average_length:.4f} bits",
            f"Compression Ratio: {self.format_ratio()}",
        ]


def compute_statistics(histogram, codes):
    if histogram.total == 0:
        raise EmptySourceError("cannot compute statistics for an empty source")

    entropy = 0.0
    average_length = 0.0
    for symbol, probability in histogram.probabilities():
        entry = codes.get(symbol)
        if entry is None:
            raise ValueError(f"no code assigned to symbol {symbol}")
        entropy -= probability * math.log2(probability)
        average_length += probability * entry.length

    ratio = entropy / average_length if average_length > 0 else None
    logger.debug(
        "entropy=%.6f average_length=%.6f ratio=%s", entropy, average_length, ratio
    )
    return CodeStatistics(entropy, average_length, ratio)
