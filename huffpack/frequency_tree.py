"""Binary search tree that counts byte occurrences."""

from __future__ import annotations

from typing import Iterator, List, Optional

from .node import Node, SymbolCount


class FrequencyTree:
    """Counts symbols in a binary search tree keyed by symbol value."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None
        self._count = 0

    def insert(self, symbol: int) -> None:
        """Record one occurrence of a byte value."""
        if not 0 <= symbol <= 255:
            raise ValueError(f"symbol out of byte range: {symbol}")
        if self.root is None:
            self.root = Node(SymbolCount(1, symbol))
            self._count += 1
            return
        node = self.root
        while True:
            current = node.data
            if current.symbol == symbol:
                node.data = SymbolCount(current.freq + 1, symbol)
                return
            side = "left" if symbol < current.symbol else "right"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, Node(SymbolCount(1, symbol)))
                self._count += 1
                return
            node = child

    def __len__(self) -> int:
        return self._count

    def _walk(self) -> Iterator[SymbolCount]:
        stack: List[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def inorder(self) -> List[SymbolCount]:
        """Return the counts in ascending symbol order."""
        return list(self._walk())

    def format_inorder(self) -> str:
        """Render the counts as '[s:f]->[s:f]...' in symbol order."""
        return "->".join(f"[{chr(item.symbol)}:{item.freq}]" for item in self._walk())