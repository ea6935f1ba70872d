from collections import Counter

import pytest

from huffpack.huffman_tree import HuffmanTree
from huffpack.node import SymbolCount


def _tree_for(data: bytes) -> HuffmanTree:
    counts = sorted(SymbolCount(f, s) for s, f in sorted(Counter(data).items()))
    return HuffmanTree(counts)


def test_worked_example():
    tree = _tree_for(b"aab")
    assert tree.find_path(ord("b")) == "0"
    assert tree.find_path(ord("a")) == "1"
    assert tree.root.data.freq == 3


def test_root_frequency_is_total():
    data = b"the quick brown fox jumps over the lazy dog"
    assert _tree_for(data).root.data.freq == len(data)


def test_codes_are_prefix_free_and_complete():
    data = b"abracadabra alakazam"
    tree = _tree_for(data)
    codes = [tree.find_path(s) for s in set(data)]
    for a in codes:
        for b in codes:
            if a is not b:
                assert not b.startswith(a)
    assert sum(2.0 ** -len(code) for code in codes) == pytest.approx(1.0)


def test_more_frequent_symbols_get_no_longer_codes():
    data = b"a" * 50 + b"b" * 20 + b"c" * 5 + b"d"
    tree = _tree_for(data)
    lengths = [len(tree.find_path(ord(c))) for c in "abcd"]
    assert lengths == sorted(lengths)


def test_single_symbol_has_empty_path():
    tree = HuffmanTree([SymbolCount(5, ord("x"))])
    assert tree.find_path(ord("x")) == ""
    assert tree.root.is_leaf()


def test_missing_symbol_raises():
    tree = _tree_for(b"aab")
    with pytest.raises(KeyError):
        tree.find_path(ord("z"))


def test_empty_data_raises():
    with pytest.raises(ValueError):
        HuffmanTree([])