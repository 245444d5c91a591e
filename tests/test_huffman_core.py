import numpy as np
import pytest

from conftest import grid_from_counts
from errors import EmptySourceError
from histogram import Histogram, build_histogram
from huffman_core import CodeEntry, HuffmanLogic, HuffmanNode


def _codes_for(grid):
    logic = HuffmanLogic()
    tree = logic.build_tree(build_histogram(grid))
    return logic, tree, logic.generate_codes(tree)


def _leaves(node):
    if node.is_leaf:
        return [node]
    return _leaves(node.left) + _leaves(node.right)


def test_two_equal_symbols_get_one_bit_each():
    _, _, codes = _codes_for(grid_from_counts({10: 50, 20: 50}, cols=10))
    assert codes == {10: CodeEntry(1, "0"), 20: CodeEntry(1, "1")}


def test_textbook_distribution(skewed_grid):
    logic, tree, codes = _codes_for(skewed_grid)
    assert {s: e.length for s, e in codes.items()} == {100: 1, 50: 2, 30: 3, 200: 3}
    # ties: leaf 30 before leaf 200, leaf 50 before the first merged node
    assert codes[100].bits == "0"
    assert codes[50].bits == "10"
    assert codes[30].bits == "110"
    assert codes[200].bits == "111"
    assert tree.weight == skewed_grid.size
    assert logic.merge_count == 3


def test_single_symbol_tree_is_a_lone_leaf():
    logic, tree, codes = _codes_for(np.full((4, 4), 7, dtype=np.uint8))
    assert tree.is_leaf
    assert tree.symbol == 7
    assert logic.merge_count == 0
    assert codes == {7: CodeEntry(0, "")}


def test_empty_histogram_cannot_build_tree():
    with pytest.raises(EmptySourceError):
        HuffmanLogic().build_tree(Histogram([0] * 256))


def test_generate_codes_returns_fresh_table():
    logic = HuffmanLogic()
    first = logic.generate_codes(logic.build_tree(build_histogram([[1, 2]])))
    second = logic.generate_codes(logic.build_tree(build_histogram([[3, 3]])))
    assert set(first) == {1, 2}
    assert set(second) == {3}


def test_internal_weight_is_sum_of_children(random_grid):
    _, tree, _ = _codes_for(random_grid)

    def check(node):
        if node.is_leaf:
            return
        assert node.weight == node.left.weight + node.right.weight
        check(node.left)
        check(node.right)

    check(tree)
    assert tree.weight == random_grid.size


def test_leaves_match_present_symbols(random_grid):
    hist = build_histogram(random_grid)
    _, tree, codes = _codes_for(random_grid)
    leaves = _leaves(tree)
    assert sorted(leaf.symbol for leaf in leaves) == hist.present_symbols()
    assert all(leaf.weight == hist[leaf.symbol] for leaf in leaves)
    assert sorted(codes) == hist.present_symbols()


@pytest.mark.parametrize("alphabet", [1, 2, 3, 17, 128, 256])
def test_merge_count_is_alphabet_minus_one(alphabet):
    rng = np.random.default_rng(alphabet)
    symbols = rng.choice(256, size=alphabet, replace=False)
    counts = {int(s): int(c) for s, c in zip(symbols, rng.integers(1, 40, size=alphabet))}
    values = [s for s, c in counts.items() for _ in range(c)]
    logic = HuffmanLogic()
    logic.build_tree(build_histogram([values]))
    assert logic.merge_count == alphabet - 1


@pytest.mark.timeout(30)
def test_kraft_equality_and_prefix_free_on_full_alphabet():
    rng = np.random.default_rng(7)
    grid = np.arange(256, dtype=np.uint8).reshape(16, 16)
    grid = np.concatenate([grid, rng.integers(0, 256, size=(40, 16), dtype=np.uint8)])
    _, _, codes = _codes_for(grid)
    assert len(codes) == 256
    assert sum(2.0 ** -e.length for e in codes.values()) == pytest.approx(1.0)
    bits = sorted(e.bits for e in codes.values())
    for a, b in zip(bits, bits[1:]):
        assert not b.startswith(a)
    assert all(e.length == len(e.bits) for e in codes.values())


def test_tie_break_is_deterministic(random_grid):
    _, _, first = _codes_for(random_grid)
    _, _, second = _codes_for(random_grid.copy())
    assert first == second


def test_node_ordering_prefers_leaves_then_symbol_then_creation():
    a = HuffmanNode.leaf(5, 3)
    b = HuffmanNode.leaf(9, 3)
    first = HuffmanNode.merge(HuffmanNode.leaf(1, 1), HuffmanNode.leaf(2, 2), 0)
    second = HuffmanNode.merge(HuffmanNode.leaf(3, 1), HuffmanNode.leaf(4, 2), 1)
    assert a < b
    assert b < first
    assert first < second
    assert not first < a
