# filename: huffman_core.py

import heapq
import logging
from collections import namedtuple

from errors import EmptySourceError

logger = logging.getLogger(__name__)

# Internal nodes rank after every leaf at equal weight.
INTERNAL_RANK_BASE = 256

CodeEntry = namedtuple("CodeEntry", ["length", "bits"])


class HuffmanNode:
    """A leaf (symbol set) or an internal node owning two children.

    `weight` is the symbol count, or the sum of the children's weights.
    `rank` breaks ties between equal weights: leaves use their symbol,
    internal nodes use INTERNAL_RANK_BASE plus their creation sequence.
    """

    def __init__(self, symbol, weight, rank, left=None, right=None):
        self.symbol = symbol
        self.weight = weight
        self.rank = rank
        self.left = left
        self.right = right

    @classmethod
    def leaf(cls, symbol, weight):
        return cls(symbol, weight, symbol)

    @classmethod
    def merge(cls, left, right, sequence):
        return cls(None, left.weight + right.weight, INTERNAL_RANK_BASE + sequence, left, right)

    @property
    def is_leaf(self):
        return self.left is None and self.right is None

    def __lt__(self, other):
        return (self.weight, self.rank) < (other.weight, other.rank)

    def __repr__(self):
        if self.is_leaf:
            return f"HuffmanNode(symbol={self.symbol}, weight={self.weight})"
        return f"HuffmanNode(weight={self.weight}, rank={self.rank})"


class HuffmanLogic:
    def __init__(self):
        self.merge_count = 0

    def build_tree(self, histogram):
        """Build the Huffman tree for every symbol with a nonzero count.

        The first node popped from the heap becomes the left child (bit 0),
        the second the right child (bit 1). A single present symbol yields a
        lone leaf as the root.
        """
        if histogram.total == 0:
            raise EmptySourceError("cannot build a Huffman tree from an empty source")

        priority_queue = [
            HuffmanNode.leaf(symbol, count)
            for symbol, count in enumerate(histogram.counts)
            if count > 0
        ]
        heapq.heapify(priority_queue)

        self.merge_count = 0
        while len(priority_queue) > 1:
            left = heapq.heappop(priority_queue)
            right = heapq.heappop(priority_queue)
            merged = HuffmanNode.merge(left, right, self.merge_count)
            self.merge_count += 1
            heapq.heappush(priority_queue, merged)

        logger.debug("built Huffman tree with %d merges", self.merge_count)
        return priority_queue[0]

    def generate_codes(self, node, current_code="", codes=None):
        if codes is None:
            codes = {}
        if node.is_leaf:
            codes[node.symbol] = CodeEntry(len(current_code), current_code)
            return codes
        self.generate_codes(node.left, current_code + "0", codes)
        self.generate_codes(node.right, current_code + "1", codes)
        return codes
