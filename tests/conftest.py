"""
Shared test fixtures for tictac_rewind tests.

Design principles:
- Boards built from readable 2-D literals
- Stores driven through the public move API
- Minimal, focused fixtures
"""

from typing import Callable, List, Sequence

import numpy as np
import pytest

from tictac_rewind.games.board import Board
from tictac_rewind.history.events import StateChangedEvent
from tictac_rewind.history.store import HistoryStore


# =============================================================================
# Move Sequences
# =============================================================================

@pytest.fixture
def x_top_row_win() -> List[int]:
    """X takes the top row on the fifth move: X0 O3 X1 O4 X2."""
    return [0, 3, 1, 4, 2]


@pytest.fixture
def draw_sequence() -> List[int]:
    """Ends as  X O X / X O O / O X X  with no complete line."""
    return [0, 1, 2, 4, 3, 5, 7, 6, 8]


# =============================================================================
# Helpers
# =============================================================================

def _make_board(rows: Sequence[Sequence[int]]) -> Board:
    arr = np.array(rows, dtype=np.int8)
    return Board(arr, arr.shape[0])


def _play(store: HistoryStore, moves: Sequence[int]) -> HistoryStore:
    for cell in moves:
        assert store.apply_move(cell), f"move at cell {cell} was rejected"
    return store


@pytest.fixture
def make_board() -> Callable[[Sequence[Sequence[int]]], Board]:
    """Board from a 2-D list of cell codes."""
    return _make_board


@pytest.fixture
def play() -> Callable[[HistoryStore, Sequence[int]], HistoryStore]:
    """Apply each move in order, asserting every one is accepted."""
    return _play


# =============================================================================
# Board / Store Fixtures
# =============================================================================

@pytest.fixture
def empty_board() -> Board:
    return Board.empty(3)


@pytest.fixture
def store() -> HistoryStore:
    """Fresh 3x3 store."""
    return HistoryStore(3)


@pytest.fixture
def won_store(x_top_row_win: List[int]) -> HistoryStore:
    """Store where X has just completed the top row."""
    return _play(HistoryStore(3), x_top_row_win)


@pytest.fixture
def drawn_store(draw_sequence: List[int]) -> HistoryStore:
    """Store with a full board and no winner."""
    return _play(HistoryStore(3), draw_sequence)


@pytest.fixture
def recorder() -> Callable[[StateChangedEvent], None]:
    """Subscriber that records every event it receives in .events."""
    events: List[StateChangedEvent] = []

    def callback(event: StateChangedEvent) -> None:
        events.append(event)

    callback.events = events
    return callback
