"""Unbalanced binary search tree of unique keys."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Iterator, List, Optional


class _Node:
    __slots__ = ("key", "left", "right")

    def __init__(self, key: Any) -> None:
        self.key = key
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


class BinarySearchTree:
    """Binary search tree; inserting a key already present does nothing."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> None:
        """Add ``key`` unless it is already present."""
        if self._root is None:
            self._root = _Node(key)
            self._size = 1
            return
        node = self._root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = _Node(key)
                    break
                node = node.left
            elif key > node.key:
                if node.right is None:
                    node.right = _Node(key)
                    break
                node = node.right
            else:
                return
        self._size += 1

    def delete(self, key: Any) -> None:
        """Remove ``key`` if present; a missing key is ignored."""
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and node.key != key:
            parent = node
            node = node.left if key < node.key else node.right
        if node is None:
            return
        if node.left is not None and node.right is not None:
            succ_parent, succ = node, node.right
            while succ.left is not None:
                succ_parent, succ = succ, succ.left
            node.key = succ.key
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

    def minimum(self) -> Any:
        """The smallest key."""
        if self._root is None:
            raise ValueError("tree is empty")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.key

    def maximum(self) -> Any:
        """The largest key."""
        if self._root is None:
            raise ValueError("tree is empty")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.key

    def _nodes(self) -> Iterator[_Node]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def inorder(self) -> List[Any]:
        """Keys in ascending order."""
        result: List[Any] = []
        stack: List[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.key)
            node = node.right
        return result

    def preorder(self) -> List[Any]:
        """Keys in node, left, right order."""
        return [node.key for node in self._nodes()]

    def postorder(self) -> List[Any]:
        """Keys in left, right, node order."""
        result: List[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.key)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def level_order(self) -> List[Any]:
        """Keys level by level, left to right."""
        result: List[Any] = []
        queue = deque([self._root] if self._root is not None else [])
        while queue:
            node = queue.popleft()
            result.append(node.key)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def height(self) -> int:
        """Number of levels; 0 for an empty tree."""
        levels = 0
        level = [self._root] if self._root is not None else []
        while level:
            levels += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return levels

    def count_leaves(self) -> int:
        """Number of nodes without children."""
        return sum(
            1 for node in self._nodes() if node.left is None and node.right is None
        )

    def count_internal(self) -> int:
        """Number of nodes with at least one child."""
        return sum(
            1
            for node in self._nodes()
            if node.left is not None or node.right is not None
        )

    def __contains__(self, key: Any) -> bool:
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False

    def __len__(self) -> int:
        return self._size