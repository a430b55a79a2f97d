"""
Rules engine - pure functions over a single board.

Nothing here mutates its input. Win lines are derived from the board size
(rows, columns, both diagonals) rather than hardcoded, and are scanned in a
fixed order so the first match is always the same one.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Optional, Tuple

import numpy as np

from tictac_rewind.core.errors import InvalidIndexError, require_index
from tictac_rewind.core.types import Cell, PLAYERS
from tictac_rewind.games.board import Board


# ---------------------------------------------------------------------------
# Grid geometry
# ---------------------------------------------------------------------------

def in_bounds(size: int, r: int, c: int) -> bool:
    """Return True if (r, c) is inside a size x size board."""
    return 0 <= r < size and 0 <= c < size


def cell_index(size: int, r: int, c: int) -> int:
    """Row-major index of the 0-based (r, c) position."""
    if not in_bounds(size, r, c):
        raise InvalidIndexError(f"Position ({r},{c}) is outside a {size}x{size} board")
    return r * size + c


def cell_position(size: int, index: int) -> Tuple[int, int]:
    """0-based (row, col) of a row-major index."""
    index = require_index(index, size * size, "cell")
    return divmod(index, size)


@lru_cache(maxsize=None)
def winning_lines(size: int) -> np.ndarray:
    """
    Index lines that win when filled by one mark, shape (2 * size + 2, size).

    Order: rows top to bottom, columns left to right, main diagonal,
    anti-diagonal. For size 3 these are the classic 8 triples.
    """
    if size < 1:
        raise ValueError(f"Board size must be at least 1, got {size}")

    idx = np.arange(size * size, dtype=np.intp).reshape(size, size)
    lines = np.vstack([
        idx,                         # rows
        idx.T,                       # cols
        idx.diagonal()[None, :],
        np.fliplr(idx).diagonal()[None, :],
    ])
    # Cached and shared between callers
    lines.flags.writeable = False
    return lines


def empty_cells(board: Board) -> List[int]:
    """Indices of empty cells in ascending order."""
    return np.flatnonzero(board.cells == Cell.EMPTY).tolist()


def board_full(board: Board) -> bool:
    """Return True if no cell is empty."""
    return not empty_cells(board)


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

def detect_winner(board: Board) -> Optional[Cell]:
    """Mark filling the first complete line, or None if no line is complete."""
    flat = board.cells
    for line in winning_lines(board.size):
        v = flat[line[0]]
        if v != Cell.EMPTY and np.all(flat[line] == v):
            return Cell(int(v))
    return None


def is_move_legal(board: Board, index: int) -> bool:
    """
    True iff nobody has won yet and the cell is empty.

    Raises:
        InvalidIndexError: If index is not a cell of the board.
    """
    index = require_index(index, len(board), "cell")
    return detect_winner(board) is None and board[index] == Cell.EMPTY


def is_draw(board: Board) -> bool:
    """Board is full and no line is complete."""
    return board_full(board) and detect_winner(board) is None


def player_for_step(step: int) -> Cell:
    """Mark to move at the given step: X on even steps, O on odd ones."""
    if isinstance(step, bool) or not isinstance(step, (int, np.integer)):
        raise InvalidIndexError(f"step index must be an integer, got {step!r}")
    if step < 0:
        raise InvalidIndexError(f"step index {step} is negative")
    return PLAYERS[int(step) % 2]
