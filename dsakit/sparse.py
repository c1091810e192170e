"""Sparse matrices stored as row-major lists of non-zero triples."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

MAX_SIZE = 100


@dataclass(frozen=True)
class Element:
    """One stored entry of a sparse matrix."""

    row: int
    col: int
    value: int

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.col)


class SparseMatrix:
    """A sparse matrix whose entries are kept in row-major order."""

    def __init__(self, elements: Iterable[Element | tuple[int, int, int]] = ()) -> None:
        items = [e if isinstance(e, Element) else Element(*e) for e in elements]
        if len(items) > MAX_SIZE:
            raise ValueError(f"a sparse matrix holds at most {MAX_SIZE} elements")
        self._elements = items

    def add(self, other: SparseMatrix) -> SparseMatrix:
        """Return the sum; entries summing to zero are dropped."""
        result: list[Element] = []
        mine, theirs = self._elements, other._elements
        i = j = 0
        while i < len(mine) and j < len(theirs):
            a, b = mine[i], theirs[j]
            if a.position == b.position:
                total = a.value + b.value
                if total != 0:
                    result.append(Element(a.row, a.col, total))
                i += 1
                j += 1
            elif a.position < b.position:
                result.append(a)
                i += 1
            else:
                result.append(b)
                j += 1
        result.extend(mine[i:])
        result.extend(theirs[j:])
        return SparseMatrix(result)

    def __add__(self, other: object) -> SparseMatrix:
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return self.add(other)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def format(self) -> str:
        """Render one ``(row, col) = value`` line per stored entry."""
        return "".join(f"({e.row}, {e.col}) = {e.value}\n" for e in self._elements)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._elements!r})"