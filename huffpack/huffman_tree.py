"""Huffman code tree built from sorted symbol counts."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Tuple

from .node import DEFAULT_SYMBOL, Node, SymbolCount


class HuffmanTree:
    """Prefix code tree; left edges are '0' and right edges are '1'."""

    def __init__(self, data: Iterable[SymbolCount]) -> None:
        queue: List[Node] = [Node(SymbolCount(item.freq, item.symbol)) for item in data]
        if not queue:
            raise ValueError("cannot build a Huffman tree without symbols")
        while len(queue) > 1:
            left, right = queue[0], queue[1]
            parent = Node(
                SymbolCount(left.data.freq + right.data.freq, DEFAULT_SYMBOL),
                left=left,
                right=right,
            )
            del queue[:2]
            index = next(
                (i for i, node in enumerate(queue) if node.data.freq >= parent.data.freq),
                len(queue),
            )
            queue.insert(index, parent)
        self.root: Node = queue[0]
        self._codes: Dict[int, str] = {}
        for symbol, path in self._leaves(self.root, ""):
            self._codes.setdefault(symbol, path)

    def _leaves(self, node: Node, path: str) -> Iterator[Tuple[int, str]]:
        if node.is_leaf():
            yield node.data.symbol, path
            return
        if node.left is not None:
            yield from self._leaves(node.left, path + "0")
        if node.right is not None:
            yield from self._leaves(node.right, path + "1")

    def find_path(self, symbol: int) -> str:
        """Return the bit string leading from the root to the symbol's leaf."""
        try:
            return self._codes[symbol]
        except KeyError:
            raise KeyError(f"couldn't find symbol {symbol!r}") from None