"""Self-balancing AVL search tree of unique keys."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Optional


class _Node:
    __slots__ = ("key", "left", "right", "height")

    def __init__(self, key: Any) -> None:
        self.key = key
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None
        self.height = 1


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _insert(node: Optional[_Node], key: Any) -> _Node:
    if node is None:
        return _Node(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    else:
        return node
    _update(node)
    balance = _balance(node)
    if balance > 1:
        assert node.left is not None
        if key > node.left.key:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        assert node.right is not None
        if key < node.right.key:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _delete(node: Optional[_Node], key: Any) -> Optional[_Node]:
    if node is None:
        return None
    if key < node.key:
        node.left = _delete(node.left, key)
    elif key > node.key:
        node.right = _delete(node.right, key)
    elif node.left is None or node.right is None:
        return node.left if node.left is not None else node.right
    else:
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.key = successor.key
        node.right = _delete(node.right, successor.key)
    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            assert node.left is not None
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            assert node.right is not None
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _inorder(node: Optional[_Node]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.key
        yield from _inorder(node.right)


def _preorder(node: Optional[_Node]) -> Iterator[Any]:
    if node is not None:
        yield node.key
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Optional[_Node]) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.key


class AVLTree:
    """AVL tree; inserting a present key or deleting a missing one does nothing."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> None:
        """Add ``key`` unless it is already present."""
        self._root = _insert(self._root, key)

    def delete(self, key: Any) -> None:
        """Remove ``key`` if present."""
        self._root = _delete(self._root, key)

    def inorder(self) -> List[Any]:
        """Keys in ascending order."""
        return list(_inorder(self._root))

    def preorder(self) -> List[Any]:
        """Keys in node, left, right order."""
        return list(_preorder(self._root))

    def postorder(self) -> List[Any]:
        """Keys in left, right, node order."""
        return list(_postorder(self._root))

    def height(self) -> int:
        """Number of levels; 0 for an empty tree."""
        return _height(self._root)

    def __contains__(self, key: Any) -> bool:
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False