"""B+ tree mapping keys to values, with linked leaves for range scans."""

from __future__ import annotations

import argparse
import sys
from bisect import bisect_left, bisect_right
from collections import deque
from typing import Any, List, Optional, Sequence, TextIO, Tuple

DEFAULT_ORDER = 4
EMPTY_TREE = "Empty tree."


def _cut(length: int) -> int:
    """Half of ``length``, rounded up."""
    return (length + 1) // 2


class _Node:
    __slots__ = ("keys", "children", "values", "parent", "is_leaf", "next")

    def __init__(self, is_leaf: bool) -> None:
        self.is_leaf = is_leaf
        self.keys: List[Any] = []
        self.children: List[_Node] = []
        self.values: List[Any] = []
        self.parent: Optional[_Node] = None
        self.next: Optional[_Node] = None


def _child_index(parent: _Node, child: _Node) -> int:
    for index, candidate in enumerate(parent.children):
        if candidate is child:
            return index
    raise RuntimeError("node is missing from its parent")


class BPlusTree:
    """B+ tree where nodes hold at most ``order - 1`` keys.

    Values live only in the leaves; inner nodes hold separator keys. Inserting
    an existing key replaces its value.
    """

    def __init__(self, order: int = DEFAULT_ORDER) -> None:
        if order < 3:
            raise ValueError("order must be at least 3")
        self.order = order
        self._root: Optional[_Node] = None

    # lookup

    def _find_leaf(self, key: Any) -> Optional[_Node]:
        node = self._root
        if node is None:
            return None
        while not node.is_leaf:
            node = node.children[bisect_right(node.keys, key)]
        return node

    def _locate(self, key: Any) -> Tuple[Optional[_Node], Optional[int]]:
        leaf = self._find_leaf(key)
        if leaf is None:
            return None, None
        index = bisect_left(leaf.keys, key)
        if index < len(leaf.keys) and leaf.keys[index] == key:
            return leaf, index
        return leaf, None

    def find(self, key: Any) -> Any:
        """The value stored under ``key``; raise KeyError if absent."""
        leaf, index = self._locate(key)
        if leaf is None or index is None:
            raise KeyError(key)
        return leaf.values[index]

    def find_range(self, start: Any, end: Any) -> List[Tuple[Any, Any]]:
        """``(key, value)`` pairs with ``start <= key <= end``, ascending."""
        leaf = self._find_leaf(start)
        found: List[Tuple[Any, Any]] = []
        if leaf is None:
            return found
        index = bisect_left(leaf.keys, start)
        while leaf is not None:
            for key, value in zip(leaf.keys[index:], leaf.values[index:]):
                if key > end:
                    return found
                found.append((key, value))
            leaf = leaf.next
            index = 0
        return found

    # insertion

    def insert(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        if self._root is None:
            leaf = _Node(is_leaf=True)
            leaf.keys.append(key)
            leaf.values.append(value)
            self._root = leaf
            return
        leaf, index = self._locate(key)
        assert leaf is not None
        if index is not None:
            leaf.values[index] = value
            return
        position = bisect_left(leaf.keys, key)
        leaf.keys.insert(position, key)
        leaf.values.insert(position, value)
        if len(leaf.keys) > self.order - 1:
            self._split_leaf(leaf)

    def _split_leaf(self, leaf: _Node) -> None:
        split = _cut(self.order - 1)
        new_leaf = _Node(is_leaf=True)
        new_leaf.keys = leaf.keys[split:]
        new_leaf.values = leaf.values[split:]
        leaf.keys = leaf.keys[:split]
        leaf.values = leaf.values[:split]
        new_leaf.next = leaf.next
        leaf.next = new_leaf
        new_leaf.parent = leaf.parent
        self._insert_into_parent(leaf, new_leaf.keys[0], new_leaf)

    def _insert_into_parent(self, left: _Node, key: Any, right: _Node) -> None:
        parent = left.parent
        if parent is None:
            root = _Node(is_leaf=False)
            root.keys = [key]
            root.children = [left, right]
            left.parent = root
            right.parent = root
            self._root = root
            return
        index = _child_index(parent, left)
        parent.keys.insert(index, key)
        parent.children.insert(index + 1, right)
        right.parent = parent
        if len(parent.keys) <= self.order - 1:
            return
        split = _cut(self.order)
        k_prime = parent.keys[split - 1]
        sibling = _Node(is_leaf=False)
        sibling.keys = parent.keys[split:]
        sibling.children = parent.children[split:]
        parent.keys = parent.keys[: split - 1]
        parent.children = parent.children[:split]
        sibling.parent = parent.parent
        for child in sibling.children:
            child.parent = sibling
        self._insert_into_parent(parent, k_prime, sibling)

    # deletion

    def delete(self, key: Any) -> None:
        """Remove ``key`` and its value; a missing key is ignored."""
        leaf, index = self._locate(key)
        if leaf is None or index is None:
            return
        del leaf.keys[index]
        del leaf.values[index]
        self._rebalance(leaf)

    def _remove_child(self, node: _Node, child: _Node) -> None:
        index = _child_index(node, child)
        del node.children[index]
        del node.keys[index - 1]
        self._rebalance(node)

    def _rebalance(self, node: _Node) -> None:
        if node is self._root:
            if node.keys:
                return
            if node.is_leaf:
                self._root = None
            else:
                self._root = node.children[0]
                self._root.parent = None
            return
        min_keys = _cut(self.order - 1) if node.is_leaf else _cut(self.order) - 1
        if len(node.keys) >= min_keys:
            return
        parent = node.parent
        assert parent is not None
        neighbor_index = _child_index(parent, node) - 1
        k_prime_index = 0 if neighbor_index == -1 else neighbor_index
        k_prime = parent.keys[k_prime_index]
        neighbor = parent.children[1 if neighbor_index == -1 else neighbor_index]
        capacity = self.order if node.is_leaf else self.order - 1
        if len(neighbor.keys) + len(node.keys) < capacity:
            self._coalesce(node, neighbor, neighbor_index, k_prime)
        else:
            self._redistribute(node, neighbor, neighbor_index, k_prime_index, k_prime)

    def _coalesce(
        self, node: _Node, neighbor: _Node, neighbor_index: int, k_prime: Any
    ) -> None:
        if neighbor_index == -1:
            node, neighbor = neighbor, node
        if node.is_leaf:
            neighbor.keys.extend(node.keys)
            neighbor.values.extend(node.values)
            neighbor.next = node.next
        else:
            neighbor.keys.append(k_prime)
            neighbor.keys.extend(node.keys)
            neighbor.children.extend(node.children)
            for child in node.children:
                child.parent = neighbor
        parent = node.parent
        assert parent is not None
        self._remove_child(parent, node)

    def _redistribute(
        self,
        node: _Node,
        neighbor: _Node,
        neighbor_index: int,
        k_prime_index: int,
        k_prime: Any,
    ) -> None:
        parent = node.parent
        assert parent is not None
        if neighbor_index != -1:
            if node.is_leaf:
                node.keys.insert(0, neighbor.keys.pop())
                node.values.insert(0, neighbor.values.pop())
                parent.keys[k_prime_index] = node.keys[0]
            else:
                child = neighbor.children.pop()
                child.parent = node
                node.children.insert(0, child)
                node.keys.insert(0, k_prime)
                parent.keys[k_prime_index] = neighbor.keys.pop()
        elif node.is_leaf:
            node.keys.append(neighbor.keys.pop(0))
            node.values.append(neighbor.values.pop(0))
            parent.keys[k_prime_index] = neighbor.keys[0]
        else:
            node.keys.append(k_prime)
            child = neighbor.children.pop(0)
            child.parent = node
            node.children.append(child)
            parent.keys[k_prime_index] = neighbor.keys.pop(0)

    # structure

    def height(self) -> int:
        """Number of edges from the root to a leaf."""
        if self._root is None:
            raise ValueError("tree is empty")
        levels = 0
        node = self._root
        while not node.is_leaf:
            node = node.children[0]
            levels += 1
        return levels

    def leaves(self) -> List[List[Any]]:
        """The keys of each leaf, from left to right."""
        node = self._root
        if node is None:
            return []
        while not node.is_leaf:
            node = node.children[0]
        result: List[List[Any]] = []
        leaf: Optional[_Node] = node
        while leaf is not None:
            result.append(list(leaf.keys))
            leaf = leaf.next
        return result

    def levels(self) -> List[List[List[Any]]]:
        """The keys of every node, level by level from the root."""
        if self._root is None:
            return []
        result: List[List[List[Any]]] = []
        queue = deque([(self._root, 0)])
        while queue:
            node, depth = queue.popleft()
            if depth == len(result):
                result.append([])
            result[depth].append(list(node.keys))
            if not node.is_leaf:
                queue.extend((child, depth + 1) for child in node.children)
        return result

    def render_tree(self) -> str:
        """One line per level, nodes closed by ``|``."""
        if self._root is None:
            return EMPTY_TREE
        return "\n".join(
            "".join(
                "".join(f"{key} " for key in keys) + "| " for keys in level
            ).rstrip()
            for level in self.levels()
        )

    def render_leaves(self) -> str:
        """The leaf keys on one line, leaves separated by ``|``."""
        if self._root is None:
            return EMPTY_TREE
        return " | ".join(
            " ".join(str(key) for key in keys) for keys in self.leaves()
        )

    def __contains__(self, key: Any) -> bool:
        _, index = self._locate(key)
        return index is not None


def _run(tree: BPlusTree, stream: TextIO, interactive: bool) -> None:
    prompt = "> " if interactive else ""
    print(prompt, end="", flush=True)
    for line in stream:
        tokens = line.split()
        if tokens:
            command, args = tokens[0][0], tokens[1:]
            try:
                numbers = [int(token) for token in args]
                if command == "i":
                    tree.insert(numbers[0], numbers[1])
                elif command == "f":
                    key = numbers[0]
                    try:
                        value = tree.find(key)
                    except KeyError:
                        print(f"Record not found under key {key}.")
                    else:
                        print(f"Record -- key {key}, value {value}.")
                elif command == "p":
                    print(tree.render_tree())
                elif command == "l":
                    print(tree.render_leaves())
                elif command == "d":
                    tree.delete(numbers[0])
                elif command == "x":
                    if tree._root is not None:
                        print(f"Tree height: {tree.height()}")
                elif command == "q":
                    return
            except (ValueError, IndexError):
                print(f"error: bad arguments in {line.strip()!r}", file=sys.stderr)
        print(prompt, end="", flush=True)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command loop on standard input.

    Commands: ``i KEY VALUE`` insert, ``f KEY`` find, ``d KEY`` delete,
    ``p`` print the tree, ``l`` print the leaves, ``x`` print the height,
    ``q`` quit.
    """
    parser = argparse.ArgumentParser(
        prog="labstructs-bplustree",
        description="Insert, find and delete keys in a B+ tree.",
    )
    parser.add_argument("--order", type=int, default=DEFAULT_ORDER)
    args = parser.parse_args(argv)
    try:
        tree = BPlusTree(args.order)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    _run(tree, sys.stdin, sys.stdin.isatty())
    return 0