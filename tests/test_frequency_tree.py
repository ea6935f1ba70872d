from collections import Counter

import pytest

from huffpack.frequency_tree import FrequencyTree
from huffpack.node import SymbolCount


def _tree(data: bytes) -> FrequencyTree:
    tree = FrequencyTree()
    for byte in data:
        tree.insert(byte)
    return tree


def test_empty_tree():
    tree = FrequencyTree()
    assert len(tree) == 0
    assert tree.inorder() == []
    assert tree.format_inorder() == ""


def test_counts_match_counter():
    data = b"mississippi river"
    tree = _tree(data)
    counts = {item.symbol: item.freq for item in tree.inorder()}
    assert counts == dict(Counter(data))
    assert len(tree) == len(set(data))


def test_inorder_is_sorted_by_symbol():
    data = bytes([200, 5, 130, 5, 255, 0, 127, 128])
    symbols = [item.symbol for item in _tree(data).inorder()]
    assert symbols == sorted(set(data))


def test_repeated_symbol_increments():
    tree = _tree(b"zzz")
    assert tree.inorder() == [SymbolCount(3, ord("z"))]
    assert len(tree) == 1


def test_format_inorder():
    assert _tree(b"bab").format_inorder() == "[a:1]->[b:2]"


@pytest.mark.parametrize("bad", [-1, 256])
def test_insert_rejects_non_bytes(bad):
    with pytest.raises(ValueError):
        FrequencyTree().insert(bad)