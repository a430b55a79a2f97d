"""
Core module - cell values, display strings and the error taxonomy.

This module provides the building blocks used throughout the engine.
"""

from tictac_rewind.core.types import Cell, CELL_STRINGS, PLAYERS, VALID_CODES
from tictac_rewind.core.errors import (
    TicTacRewindError,
    InvalidIndexError,
    require_index,
)

__all__ = [
    # Types
    "Cell",
    # Constants
    "CELL_STRINGS",
    "PLAYERS",
    "VALID_CODES",
    # Errors
    "TicTacRewindError",
    "InvalidIndexError",
    "require_index",
]
