# filename: huffman_service.py

import logging
from collections import namedtuple

from code_stats import compute_statistics
from code_table import DEFAULT_OUTPUT, write_code_table
from errors import EmptySourceError
from histogram import build_histogram
from huffman_core import HuffmanLogic

logger = logging.getLogger(__name__)

HuffmanReport = namedtuple("HuffmanReport", ["histogram", "codes", "statistics", "merge_count"])


class HuffmanService:
    def __init__(self, output_path=DEFAULT_OUTPUT):
        self.logic = HuffmanLogic()
        self.output_path = output_path

    def generate_codes(self, histogram):
        # The tree only lives for the duration of this call.
        tree = self.logic.build_tree(histogram)
        return self.logic.generate_codes(tree)

    def analyze(self, grid):
        histogram = build_histogram(grid)
        if histogram.total == 0:
            raise EmptySourceError("the source image contains no pixels")

        codes = self.generate_codes(histogram)
        statistics = compute_statistics(histogram, codes)
        logger.debug(
            "%d samples, %d symbols, %d merges",
            histogram.total,
            len(codes),
            self.logic.merge_count,
        )
        return HuffmanReport(histogram, codes, statistics, self.logic.merge_count)

    def export(self, report, path=None):
        return write_code_table(report.codes, path or self.output_path)

    def run(self, grid, path=None):
        report = self.analyze(grid)
        self.export(report, path)
        return report
