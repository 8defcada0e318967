"""Node of a Huffman encoding tree."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class HuffmanTreeNode:
    """A tree node; leaves carry a character, inner nodes carry ``'\\0'``."""

    freq: int = 0
    char: str = "\0"
    left: HuffmanTreeNode | None = None
    right: HuffmanTreeNode | None = None

    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None

    def __lt__(self, other: HuffmanTreeNode) -> bool:
        """Order by frequency so a priority queue yields the rarest node first."""
        return self.freq < other.freq