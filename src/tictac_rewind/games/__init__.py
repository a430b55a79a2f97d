"""
Games module - board value types and the rules engine.
"""

from tictac_rewind.games.board import Board, Snapshot
from tictac_rewind.games.game_rules import (
    in_bounds,
    cell_index,
    cell_position,
    winning_lines,
    empty_cells,
    board_full,
    detect_winner,
    is_move_legal,
    is_draw,
    player_for_step,
)

__all__ = [
    "Board",
    "Snapshot",
    "in_bounds",
    "cell_index",
    "cell_position",
    "winning_lines",
    "empty_cells",
    "board_full",
    "detect_winner",
    "is_move_legal",
    "is_draw",
    "player_for_step",
]
