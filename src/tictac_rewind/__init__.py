"""
tictac_rewind - two-player tic-tac-toe with move-history time travel.

The engine keeps an immutable log of board snapshots and a cursor into it.
Jumping moves the cursor; playing from an earlier step discards the
snapshots after it.

Quick Start:
    from tictac_rewind import HistoryStore

    store = HistoryStore(board_size=3)
    store.subscribe(lambda event: print(event.step_number))
    store.apply_move(4)
    store.jump_to(0)
    print(list(store.move_descriptions()))

Modules:
    core     - Cell values, display strings, error taxonomy
    games    - Board / Snapshot values and the rules engine
    history  - HistoryStore and state-change notifications
    api      - Functional facade over a store handle
    render   - Text rendering for the terminal front end
    cli      - Interactive terminal front end
"""

from tictac_rewind.core import Cell, InvalidIndexError, TicTacRewindError
from tictac_rewind.games import (
    Board,
    Snapshot,
    detect_winner,
    is_move_legal,
    player_for_step,
    winning_lines,
)
from tictac_rewind.history import EventBus, HistoryStore, StateChangedEvent

__version__ = "1.0.0"

__all__ = [
    # Engine
    "HistoryStore",
    "EventBus",
    "StateChangedEvent",
    # Rules
    "detect_winner",
    "is_move_legal",
    "player_for_step",
    "winning_lines",
    # Types
    "Cell",
    "Board",
    "Snapshot",
    # Errors
    "TicTacRewindError",
    "InvalidIndexError",
]
