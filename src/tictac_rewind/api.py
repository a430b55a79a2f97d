"""
Public API for embedding the engine in a front end.

Usage:
    from tictac_rewind import api

    handle = api.construct()
    unsubscribe = api.subscribe(handle, lambda event: redraw(event.snapshot))
    api.apply_move(handle, 4)
    api.jump_to(handle, 0)
    labels = api.move_descriptions(handle)
"""

from __future__ import annotations

from typing import Callable, List, Optional

from tictac_rewind.core.types import Cell
from tictac_rewind.games.board import Snapshot
from tictac_rewind.history.events import Subscriber
from tictac_rewind.history.store import HistoryStore
from tictac_rewind.utils.config import DEFAULT_BOARD_SIZE

# Opaque handle handed to front ends
EngineHandle = HistoryStore


def construct(board_size: int = DEFAULT_BOARD_SIZE) -> EngineHandle:
    """New engine at the empty board."""
    return HistoryStore(board_size)


def apply_move(handle: EngineHandle, cell: int) -> None:
    """Play cell for the side to move; filled cells and finished games are no-ops."""
    handle.apply_move(cell)


def jump_to(handle: EngineHandle, step: int) -> None:
    """Move the cursor to step. Raises InvalidIndexError when out of range."""
    handle.jump_to(step)


def current_snapshot(handle: EngineHandle) -> Snapshot:
    return handle.current_snapshot()


def current_winner(handle: EngineHandle) -> Optional[Cell]:
    return handle.current_winner()


def current_player(handle: EngineHandle) -> Cell:
    return handle.current_player()


def move_descriptions(handle: EngineHandle) -> List[str]:
    return list(handle.move_descriptions())


def history_length(handle: EngineHandle) -> int:
    return handle.history_length()


def subscribe(handle: EngineHandle, callback: Subscriber) -> Callable[[], None]:
    """Callback runs synchronously after every accepted state change."""
    return handle.subscribe(callback)


__all__ = [
    "EngineHandle",
    "construct",
    "apply_move",
    "jump_to",
    "current_snapshot",
    "current_winner",
    "current_player",
    "move_descriptions",
    "history_length",
    "subscribe",
]
