"""Huffman tree nodes and the bounded min-heap used to build the tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = ["HuffmanNode", "PriorityQueue"]


@dataclass(eq=False)
class HuffmanNode:
    """A node of a Huffman tree.

    Leaves carry a symbol (a byte value) and its frequency; internal nodes
    carry the summed frequency of their children.
    """

    freq: int = 0
    symbol: int = 0
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    def is_leaf(self) -> bool:
        """Return True when the node has no children."""
        return self.left is None and self.right is None


class PriorityQueue:
    """A fixed-capacity binary min-heap of nodes ordered by frequency.

    Ties are resolved by the heap's own sift order, so the shape of a tree
    built from it is deterministic for a given push sequence.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._items: list[HuffmanNode] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"PriorityQueue(capacity={self.capacity}, size={len(self._items)})"

    def push(self, node: HuffmanNode) -> None:
        """Insert a node, keeping the heap ordered by frequency."""
        if len(self._items) >= self.capacity:
            raise IndexError("priority queue is full")
        items = self._items
        items.append(node)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent].freq <= items[index].freq:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def pop(self) -> HuffmanNode:
        """Remove and return the node with the lowest frequency."""
        if not self._items:
            raise IndexError("pop from an empty priority queue")
        items = self._items
        smallest = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down()
        return smallest

    def top(self) -> HuffmanNode:
        """Return the node with the lowest frequency without removing it."""
        if not self._items:
            raise IndexError("top of an empty priority queue")
        return self._items[0]

    def _sift_down(self) -> None:
        items = self._items
        last = len(items) - 1
        index, child = 0, 1
        moving = items[0]
        while child <= last:
            if child < last and items[child].freq > items[child + 1].freq:
                child += 1
            if moving.freq <= items[child].freq:
                break
            items[index] = items[child]
            index = child
            child = 2 * child + 1
        items[index] = moving