"""
clue_registry.py
================
Ordered set of collected clue texts, backed by an unbalanced binary search
tree keyed by the clue text (plain ``str`` comparison, so ordering is by
code point and case-sensitive).

The registry owns its root node; callers never rebind it. Nodes are only
ever added, never removed.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from models import ClueNode


class ClueRegistry:
    """Binary search tree of distinct clue texts."""

    def __init__(self) -> None:
        self._root: Optional[ClueNode] = None
        self._size = 0

    @property
    def root(self) -> Optional[ClueNode]:
        return self._root

    def contains(self, text: str) -> bool:
        node = self._root
        while node is not None:
            if text == node.text:
                return True
            node = node.left if text < node.text else node.right
        return False

    def insert_if_absent(self, text: str) -> bool:
        """
        Insert `text` as a new leaf unless an equal clue is already stored.

        Returns:
            True if the clue was inserted, False if it was already present.
        """
        if self._root is None:
            self._root = ClueNode(text)
            self._size = 1
            return True

        node = self._root
        while True:
            if text == node.text:
                return False
            if text < node.text:
                if node.left is None:
                    node.left = ClueNode(text)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = ClueNode(text)
                    break
                node = node.right

        self._size += 1
        return True

    def in_order(self) -> Iterator[str]:
        """
        Lazily yield clue texts in ascending order (left, node, right).

        Each call returns a fresh generator, so the sequence can be restarted.
        Uses an explicit stack; a degenerate tree cannot hit the recursion limit.
        """
        stack: List[ClueNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.text
            node = node.right

    def __iter__(self) -> Iterator[str]:
        return self.in_order()

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and self.contains(text)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._root is not None

    def __repr__(self) -> str:
        return f"ClueRegistry({list(self.in_order())!r})"
