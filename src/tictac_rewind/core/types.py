"""
Core types and constants.

This module contains the fundamental values shared by the rules engine,
the history store and the presentation layer:
- Cell: tri-state cell value
- Display strings for each cell value
- Player metadata
"""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Tuple


class Cell(IntEnum):
    """
    Cell value, stored on boards as int8:
        0 = empty
        1 = player A (X)
        2 = player B (O)
    """

    EMPTY = 0
    PLAYER_A = 1
    PLAYER_B = 2

    @property
    def symbol(self) -> str:
        return CELL_STRINGS[self]


# Each cell value maps to its display string
CELL_STRINGS: Dict[Cell, str] = {
    Cell.EMPTY: " ",
    Cell.PLAYER_A: "X",
    Cell.PLAYER_B: "O",
}

# Marks in turn order (step 0 belongs to PLAYERS[0])
PLAYERS: Tuple[Cell, Cell] = (Cell.PLAYER_A, Cell.PLAYER_B)

# Every code a board may legally contain
VALID_CODES = frozenset(int(c) for c in Cell)
