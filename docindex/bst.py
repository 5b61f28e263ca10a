"""An unbalanced binary search tree mapping ordered keys to values."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import islice
from typing import Any, Iterator, Optional


@dataclass(slots=True)
class _Node:
    key: Any
    value: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinarySearchTree:
    """Binary search tree keyed by comparable values.

    Keys that compare equal to an existing key are placed in its right
    subtree, so duplicates are kept rather than replaced.
    """

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def __iter__(self) -> Iterator[Any]:
        for key, _ in self.items_in_order():
            yield key

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items_in_order())!r})"

    def _find(self, key: Any) -> Optional[_Node]:
        node = self._root
        while node is not None:
            if key == node.key:
                return node
            node = node.left if key < node.key else node.right
        return None

    def add(self, key: Any, value: Any) -> None:
        """Insert a key/value pair; equal keys go to the right."""
        new = _Node(key, value)
        if self._root is None:
            self._root = new
        else:
            node = self._root
            while True:
                if key < node.key:
                    if node.left is None:
                        node.left = new
                        break
                    node = node.left
                else:
                    if node.right is None:
                        node.right = new
                        break
                    node = node.right
        self._size += 1

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default``."""
        node = self._find(key)
        return default if node is None else node.value

    def set_value(self, key: Any, value: Any) -> None:
        """Replace the value under ``key``; absent keys are left alone."""
        node = self._find(key)
        if node is not None:
            node.value = value

    def remove(self, key: Any) -> None:
        """Remove one entry with ``key``; raise KeyError if there is none."""
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and key != node.key:
            parent = node
            node = node.left if key < node.key else node.right
        if node is None:
            raise KeyError(key)

        if node.left is not None and node.right is not None:
            succ_parent = node
            succ = node.right
            while succ.left is not None:
                succ_parent = succ
                succ = succ.left
            node.key, node.value = succ.key, succ.value
            if succ_parent is node:
                succ_parent.right = succ.right
            else:
                succ_parent.left = succ.right
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self._root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
        self._size -= 1

    def is_empty(self) -> bool:
        return self._root is None

    def root_value(self) -> Any:
        """Return the value held at the root; raise IndexError if empty."""
        if self._root is None:
            raise IndexError("root_value of an empty tree")
        return self._root.value

    def _leftmost(self) -> Optional[_Node]:
        node = self._root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node

    def _rightmost(self) -> Optional[_Node]:
        node = self._root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node

    def min_key(self) -> Any:
        node = self._leftmost()
        return None if node is None else node.key

    def max_key(self) -> Any:
        node = self._rightmost()
        return None if node is None else node.key

    def min_value(self) -> Any:
        node = self._leftmost()
        return None if node is None else node.value

    def max_value(self) -> Any:
        node = self._rightmost()
        return None if node is None else node.value

    def pop_min(self) -> tuple[Any, Any]:
        """Remove and return the smallest (key, value) pair."""
        node = self._leftmost()
        if node is None:
            raise IndexError("pop_min from an empty tree")
        item = (node.key, node.value)
        self.remove(node.key)
        return item

    def pop_max(self) -> tuple[Any, Any]:
        """Remove and return the largest (key, value) pair."""
        node = self._rightmost()
        if node is None:
            raise IndexError("pop_max from an empty tree")
        item = (node.key, node.value)
        self.remove(node.key)
        return item

    def _item_at(self, index: int) -> tuple[Any, Any]:
        if index < 0 or index >= self._size:
            raise IndexError(f"index {index} out of range for tree of size {self._size}")
        return next(islice(self.items_in_order(), index, None))

    def key_at(self, index: int) -> Any:
        """Return the key at ``index`` in sorted order."""
        return self._item_at(index)[0]

    def value_at(self, index: int) -> Any:
        """Return the value at ``index`` in sorted order."""
        return self._item_at(index)[1]

    def items_in_order(self) -> Iterator[tuple[Any, Any]]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key, node.value
            node = node.right

    def items_pre_order(self) -> Iterator[tuple[Any, Any]]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.key, node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def items_post_order(self) -> Iterator[tuple[Any, Any]]:
        stack = [self._root] if self._root is not None else []
        reversed_order: list[_Node] = []
        while stack:
            node = stack.pop()
            reversed_order.append(node)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        for node in reversed(reversed_order):
            yield node.key, node.value

    def items_level_order(self) -> Iterator[tuple[Any, Any]]:
        queue = deque([self._root] if self._root is not None else [])
        while queue:
            node = queue.popleft()
            yield node.key, node.value
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)