"""
Text rendering for the terminal front end.

Pure functions over engine output; the move-list ordering flag lives here
and never reaches the store.
"""

from __future__ import annotations

from typing import List, NamedTuple

from tictac_rewind.core.types import CELL_STRINGS, Cell
from tictac_rewind.games.board import Board
from tictac_rewind.history.store import HistoryStore

# Terminal colors
RESET = "\033[0m"
RED = "\033[91m"
GREEN = "\033[92m"

# X is drawn green, O red
MARK_COLORS = {Cell.PLAYER_A: GREEN, Cell.PLAYER_B: RED}


class MoveEntry(NamedTuple):
    step: int
    label: str
    is_current: bool


def cell_string(cell: Cell, color: bool = False) -> str:
    text = CELL_STRINGS[cell]
    if color and cell in MARK_COLORS:
        return f"{MARK_COLORS[cell]}{text}{RESET}"
    return text


def board_string(board: Board, color: bool = False) -> str:
    n = board.size
    grid = board.grid
    lines = ["╭" + "┬".join(["───"] * n) + "╮"]
    for i in range(n):
        row = "│ " + " │ ".join(cell_string(Cell(int(grid[i, j])), color) for j in range(n)) + " │"
        lines.append(row)
        if i < n - 1:
            lines.append("├" + "┼".join(["───"] * n) + "┤")
    lines.append("╰" + "┴".join(["───"] * n) + "╯")
    return "\n".join(lines)


def status_line(store: HistoryStore) -> str:
    """Winner if there is one, otherwise the side to move (or a draw)."""
    winner = store.current_winner()
    if winner is not None:
        return f"Winner: {winner.symbol}"
    if store.is_draw():
        return "Draw"
    return f"Next player: {store.current_player().symbol}"


def move_list(store: HistoryStore, ascending: bool = False) -> List[MoveEntry]:
    """
    Move-list entries, game start first.

    With ascending set the list is reversed, so the latest move comes first.
    """
    current = store.step_number
    entries = [
        MoveEntry(step, label, step == current)
        for step, label in enumerate(store.move_descriptions())
    ]
    if ascending:
        entries.reverse()
    return entries


def move_list_string(store: HistoryStore, ascending: bool = False) -> str:
    return "\n".join(
        f"{'>' if e.is_current else ' '} {e.step:>2}. {e.label}"
        for e in move_list(store, ascending)
    )


def frame(store: HistoryStore, ascending: bool = False, color: bool = False) -> str:
    """Full screen: board, status and move list."""
    order = "ascending" if ascending else "descending"
    return "\n".join([
        board_string(store.current_snapshot().board, color),
        status_line(store),
        f"Move list ({order}):",
        move_list_string(store, ascending),
    ])
