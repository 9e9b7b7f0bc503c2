"""Huffman code trees: building, code tables, encoding and decoding."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional


@dataclass(eq=False)
class HuffmanNode:
    """A tree node; leaves carry a symbol, inner nodes carry None."""

    symbol: Optional[str]
    freq: int
    left: Optional[HuffmanNode] = None
    right: Optional[HuffmanNode] = None

    def is_leaf(self) -> bool:
        """Whether the node has no children."""
        return self.left is None and self.right is None


def _sift_down(items: List[HuffmanNode], index: int) -> None:
    size = len(items)
    while True:
        smallest = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and items[child].freq < items[smallest].freq:
                smallest = child
        if smallest == index:
            return
        items[index], items[smallest] = items[smallest], items[index]
        index = smallest


def _push(items: List[HuffmanNode], node: HuffmanNode) -> None:
    items.append(node)
    i = len(items) - 1
    while i and node.freq < items[(i - 1) // 2].freq:
        items[i] = items[(i - 1) // 2]
        i = (i - 1) // 2
    items[i] = node


def _pop(items: List[HuffmanNode]) -> HuffmanNode:
    top = items[0]
    last = items.pop()
    if items:
        items[0] = last
        _sift_down(items, 0)
    return top


def build_tree(symbols: Iterable[str], frequencies: Iterable[int]) -> HuffmanNode:
    """Build a Huffman tree, merging the two lightest nodes until one is left."""
    symbols = list(symbols)
    frequencies = list(frequencies)
    if len(symbols) != len(frequencies):
        raise ValueError("symbols and frequencies differ in length")
    if not symbols:
        raise ValueError("at least one symbol is needed")
    heap = [HuffmanNode(s, f) for s, f in zip(symbols, frequencies)]
    for i in range((len(heap) - 2) // 2, -1, -1):
        _sift_down(heap, i)
    while len(heap) > 1:
        left = _pop(heap)
        right = _pop(heap)
        _push(heap, HuffmanNode(None, left.freq + right.freq, left, right))
    return heap[0]


def codes(root: HuffmanNode) -> Dict[str, str]:
    """Map each leaf symbol to its bit string, left branches first."""
    table: Dict[str, str] = {}

    def walk(node: HuffmanNode, prefix: str) -> None:
        if node.left is not None:
            walk(node.left, prefix + "0")
        if node.right is not None:
            walk(node.right, prefix + "1")
        if node.is_leaf():
            table[node.symbol] = prefix

    walk(root, "")
    return table


def encode(root: HuffmanNode, text: Iterable[str]) -> str:
    """Concatenate the codes of the symbols in ``text``."""
    table = codes(root)
    try:
        return "".join(table[symbol] for symbol in text)
    except KeyError as exc:
        raise ValueError(f"symbol {exc.args[0]!r} is not in the tree") from None


def decode(root: HuffmanNode, bits: str) -> str:
    """Decode a bit string; a trailing incomplete code is dropped."""
    if root.is_leaf():
        raise ValueError("a single-leaf tree has no codes to follow")
    decoded: List[str] = []
    node = root
    for bit in bits:
        if bit == "0":
            nxt = node.left
        elif bit == "1":
            nxt = node.right
        else:
            raise ValueError(f"invalid bit {bit!r}")
        if nxt is None:
            raise ValueError("bit string leaves the tree")
        node = nxt
        if node.is_leaf():
            decoded.append(node.symbol)
            node = root
    return "".join(decoded)