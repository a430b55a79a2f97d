"""
Board and Snapshot - immutable game state containers.

Boards wrap a flat, read-only int8 array so snapshots kept in history can
be shared freely without copying.
"""

from __future__ import annotations

from typing import Iterator, NamedTuple, Optional

import numpy as np

from tictac_rewind.core.errors import require_index
from tictac_rewind.core.types import Cell, VALID_CODES


class Board:
    """
    Immutable square board.

    Uses a flat int8 array indexed row-major:
        index = row * size + column
    Cell codes follow Cell (0 = empty, 1 = X, 2 = O).
    """
    __slots__ = ('_cells', '_size')

    def __init__(self, cells: np.ndarray, size: int):
        cells = np.array(cells, dtype=np.int8).ravel()
        if cells.size != size * size:
            raise ValueError(
                f"Board of size {size} needs {size * size} cells, got {cells.size}"
            )
        if not set(np.unique(cells).tolist()) <= VALID_CODES:
            raise ValueError(f"Board contains invalid cell codes: {cells.tolist()}")

        # Backed by an immutable bytes buffer: the writeable flag can't be re-enabled
        self._cells = np.frombuffer(cells.tobytes(), dtype=np.int8)
        self._size = size

    @classmethod
    def empty(cls, size: int) -> "Board":
        """All-empty board of the given side length."""
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}")
        return cls(np.zeros(size * size, dtype=np.int8), size)

    @property
    def size(self) -> int:
        """Side length of the square grid."""
        return self._size

    @property
    def cells(self) -> np.ndarray:
        """Flat read-only view of the cell codes."""
        return self._cells

    @property
    def grid(self) -> np.ndarray:
        """2-D read-only view (size x size) of the cell codes."""
        return self._cells.reshape(self._size, self._size)

    def with_mark(self, index: int, mark: Cell) -> "Board":
        """Return a new board equal to this one with cell index set to mark."""
        index = require_index(index, len(self), "cell")
        cells = self._cells.copy()
        cells[index] = mark
        return Board(cells, self._size)

    def __getitem__(self, index: int) -> Cell:
        index = require_index(index, len(self), "cell")
        return Cell(int(self._cells[index]))

    def __len__(self) -> int:
        return self._cells.size

    def __iter__(self) -> Iterator[Cell]:
        return (Cell(int(v)) for v in self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash((self._size, self._cells.tobytes()))

    def __repr__(self) -> str:
        return f"Board(size={self._size}, cells={self._cells.tolist()})"


class Snapshot(NamedTuple):
    """One board configuration plus the cell whose mark produced it."""

    board: Board
    last_moved_cell: Optional[int] = None
