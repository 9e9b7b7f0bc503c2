"""Sparse integer matrices stored as (row, column, value) triples."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from itertools import chain
from typing import Dict, Iterable, List, Sequence, Tuple


@dataclass(frozen=True, order=True)
class SparseEntry:
    """One stored element of a sparse matrix."""

    row: int
    col: int
    value: int


@dataclass(frozen=True)
class SparseMatrix:
    """A ``rows`` x ``cols`` matrix holding only its stored entries.

    Entries are kept in row-major order. Matrices built from dense input hold
    only non-zero values; a sum may hold zeros where stored values cancel.
    """

    rows: int
    cols: int
    entries: Tuple[SparseEntry, ...] = ()

    def __post_init__(self) -> None:
        if self.rows < 0 or self.cols < 0:
            raise ValueError("dimensions must not be negative")
        entries = tuple(sorted(self.entries, key=lambda e: (e.row, e.col)))
        seen = set()
        for entry in entries:
            if not (0 <= entry.row < self.rows and 0 <= entry.col < self.cols):
                raise IndexError(f"entry ({entry.row}, {entry.col}) is out of bounds")
            position = (entry.row, entry.col)
            if position in seen:
                raise ValueError(f"duplicate entry at {position}")
            seen.add(position)
        object.__setattr__(self, "entries", entries)

    @property
    def shape(self) -> Tuple[int, int]:
        """The pair ``(rows, cols)``."""
        return self.rows, self.cols

    @classmethod
    def from_dense(cls, matrix: Iterable[Sequence[int]]) -> SparseMatrix:
        """Build a sparse matrix from rows of values, keeping non-zeros."""
        dense = [list(row) for row in matrix]
        cols = len(dense[0]) if dense else 0
        if any(len(row) != cols for row in dense):
            raise ValueError("rows have unequal lengths")
        entries = tuple(
            SparseEntry(i, j, value)
            for i, row in enumerate(dense)
            for j, value in enumerate(row)
            if value != 0
        )
        return cls(len(dense), cols, entries)

    def to_dense(self) -> List[List[int]]:
        """The matrix as a list of rows, zeros filled in."""
        dense = [[0] * self.cols for _ in range(self.rows)]
        for entry in self.entries:
            dense[entry.row][entry.col] = entry.value
        return dense

    def add(self, other: SparseMatrix) -> SparseMatrix:
        """Element-wise sum of two matrices of the same shape."""
        if self.shape != other.shape:
            raise ValueError(
                "Addition not possible! Sparse matrices must have the same dimensions."
            )
        sums: Dict[Tuple[int, int], int] = {}
        for entry in chain(self.entries, other.entries):
            key = (entry.row, entry.col)
            sums[key] = sums.get(key, 0) + entry.value
        entries = tuple(SparseEntry(r, c, v) for (r, c), v in sums.items())
        return SparseMatrix(self.rows, self.cols, entries)

    def multiply(self, other: SparseMatrix) -> SparseMatrix:
        """Matrix product; the result keeps only non-zero values."""
        if self.cols != other.rows:
            raise ValueError(
                "Multiplication not possible! Number of columns in Matrix A must "
                "be equal to the number of rows in Matrix B."
            )
        by_row: Dict[int, List[SparseEntry]] = defaultdict(list)
        for entry in other.entries:
            by_row[entry.row].append(entry)
        products: Dict[Tuple[int, int], int] = defaultdict(int)
        for left in self.entries:
            for right in by_row.get(left.col, ()):
                products[(left.row, right.col)] += left.value * right.value
        entries = tuple(
            SparseEntry(r, c, v) for (r, c), v in products.items() if v != 0
        )
        return SparseMatrix(self.rows, other.cols, entries)

    def render(self) -> str:
        """A table whose first row holds the shape and the entry count."""
        lines = [
            "Sparse Matrix Representation:",
            "Row\tCol\tValue",
            f"{self.rows}\t{self.cols}\t{len(self.entries)}",
        ]
        lines.extend(f"{e.row}\t{e.col}\t{e.value}" for e in self.entries)
        return "\n".join(lines)

    def __add__(self, other: object) -> SparseMatrix:
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return self.add(other)

    def __matmul__(self, other: object) -> SparseMatrix:
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return self.multiply(other)