"""A minimal unbalanced binary search tree keyed by comparable values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A tree node holding a key, its value and two children."""

    key: Any
    value: Any
    left: Optional[Node] = None
    right: Optional[Node] = None

    def next(self, key: Any) -> Optional[Node]:
        """Return this node if it holds ``key``, else the child on ``key``'s side."""
        if key == self.key:
            return self
        return self.left if key < self.key else self.right


class Tree:
    """Binary search tree that never rebalances."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None

    def insert(self, key: Any, value: Any) -> int:
        """Insert ``key`` and return the depth of its new node (the root is 1).

        Raises KeyError if the key is already present.
        """
        parent: Optional[Node] = None
        node = self.root
        depth = 1
        while node is not None:
            if key == node.key:
                raise KeyError(key)
            parent = node
            node = node.left if key < node.key else node.right
            depth += 1
        fresh = Node(key, value)
        if parent is None:
            self.root = fresh
        elif key < parent.key:
            parent.left = fresh
        else:
            parent.right = fresh
        return depth