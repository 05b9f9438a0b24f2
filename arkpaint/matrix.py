"""A fixed-size two-dimensional grid with forgiving bounds handling."""

from __future__ import annotations

import copy as _copy
from collections.abc import Iterator
from typing import Any


class Matrix:
    """A row-major grid of ``rows`` x ``cols`` cells.

    Reading outside the grid yields the element at (0, 0). Writing outside
    the grid is silently ignored.
    """

    def __init__(self, rows: int = 0, cols: int = 0, fill: Any = 0) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        self._rows = rows
        self._cols = cols
        self._data: list[Any] = [_copy.copy(fill) for _ in range(rows * cols)]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def _inside(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def fill(self, value: Any) -> None:
        """Set every cell to a copy of ``value``."""
        self._data = [_copy.copy(value) for _ in self._data]

    def get(self, row: int, col: int) -> Any:
        """Return the cell at (row, col), or the first cell when out of range."""
        if self._inside(row, col):
            return self._data[row * self._cols + col]
        if not self._data:
            raise IndexError("cannot read from an empty matrix")
        return self._data[0]

    def set(self, row: int, col: int, value: Any) -> None:
        """Store ``value`` at (row, col); out-of-range writes are dropped."""
        if self._inside(row, col):
            self._data[row * self._cols + col] = value

    def copy(self) -> Matrix:
        """Return an independent copy of this matrix."""
        other = Matrix(self._rows, self._cols)
        other._data = [_copy.copy(value) for value in self._data]
        return other

    def iter_rows(self) -> Iterator[list[Any]]:
        """Yield each row as a new list."""
        for start in range(0, len(self._data), self._cols or 1):
            yield self._data[start:start + self._cols]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self._rows, self._cols, self._data) == (
            other._rows,
            other._cols,
            other._data,
        )

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols})"