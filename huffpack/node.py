"""Tree nodes and the symbol/frequency pairs they carry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_SYMBOL = ord("0")


@dataclass(frozen=True)
class SymbolCount:
    """A byte value together with how often it occurs.

    Ordering compares frequencies only; equality compares both fields.
    """

    freq: int = 0
    symbol: int = DEFAULT_SYMBOL

    def __lt__(self, other: "SymbolCount") -> bool:
        if not isinstance(other, SymbolCount):
            return NotImplemented
        return self.freq < other.freq

    def __gt__(self, other: "SymbolCount") -> bool:
        if not isinstance(other, SymbolCount):
            return NotImplemented
        return self.freq > other.freq


@dataclass(eq=False)
class Node:
    """A binary tree node holding a SymbolCount."""

    data: SymbolCount = SymbolCount()
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    def is_leaf(self) -> bool:
        """Return True when the node has no children."""
        return self.left is None and self.right is None