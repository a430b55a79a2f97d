"""
History store - the ordered snapshot log and its playback cursor.

The store is the only stateful component. Snapshots are appended, never
edited; jumping only moves the cursor; playing from a rewound position
drops every snapshot after the cursor before appending. Whose turn it is
and who has won are always derived from (history, cursor).
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, Optional, Tuple

from tictac_rewind.core.errors import require_index
from tictac_rewind.core.types import Cell
from tictac_rewind.games.board import Board, Snapshot
from tictac_rewind.games.game_rules import (
    cell_position,
    detect_winner,
    is_draw,
    is_move_legal,
    player_for_step,
)
from tictac_rewind.history.events import EventBus, StateChangedEvent, Subscriber

logger = logging.getLogger(__name__)

GAME_START_LABEL = "Go to game start"


def describe_step(step: int, snapshot: Snapshot, size: int) -> str:
    """
    Move-list label for one history entry.

    Step 0 is the game start; later steps name the move number and the
    1-based (column, row) of the cell that was marked.
    """
    if step == 0 or snapshot.last_moved_cell is None:
        return GAME_START_LABEL
    row, col = cell_position(size, snapshot.last_moved_cell)
    return f"Go to move #{step} ({col + 1}, {row + 1})"


class HistoryStore:
    """
    Owns the snapshot history and the cursor (step number).

    Invariants:
        len(history) >= 1
        0 <= step_number < len(history)
        history[k] differs from history[k - 1] in exactly one cell
    """

    __slots__ = ('_size', '_history', '_step_number', '_event_bus')

    def __init__(self, board_size: int = 3, *, event_bus: Optional[EventBus] = None):
        if isinstance(board_size, bool) or not isinstance(board_size, int) or board_size < 1:
            raise ValueError(f"board_size must be a positive integer, got {board_size!r}")

        self._size = board_size
        self._history: Tuple[Snapshot, ...] = (Snapshot(Board.empty(board_size), None),)
        self._step_number = 0
        self._event_bus = event_bus if event_bus is not None else EventBus()

    # -----------------------------------------------------------------------
    # Read-only accessors
    # -----------------------------------------------------------------------

    @property
    def board_size(self) -> int:
        return self._size

    @property
    def step_number(self) -> int:
        """Index of the snapshot currently displayed and playable."""
        return self._step_number

    @property
    def history(self) -> Tuple[Snapshot, ...]:
        """All snapshots of the current line of play. Safe to retain."""
        return self._history

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    def history_length(self) -> int:
        return len(self._history)

    def current_snapshot(self) -> Snapshot:
        return self._history[self._step_number]

    def current_winner(self) -> Optional[Cell]:
        """Winner at the cursor, or None."""
        return detect_winner(self.current_snapshot().board)

    def current_player(self) -> Cell:
        """
        Mark to move at the cursor.

        Only meaningful while current_winner() is None; check that first.
        """
        return player_for_step(self._step_number)

    def is_draw(self) -> bool:
        """Board at the cursor is full with no winner."""
        return is_draw(self.current_snapshot().board)

    def is_over(self) -> bool:
        return self.current_winner() is not None or self.is_draw()

    def move_descriptions(self) -> Iterator[str]:
        """
        Lazily yield one label per history entry, oldest first.

        Each call starts a fresh pass over the history as it is now.
        """
        history = self._history
        size = self._size
        for step, snapshot in enumerate(history):
            yield describe_step(step, snapshot, size)

    # -----------------------------------------------------------------------
    # Transitions
    # -----------------------------------------------------------------------

    def apply_move(self, cell: int) -> bool:
        """
        Mark cell for the player to move at the cursor.

        Any snapshots after the cursor are discarded first. A filled cell or a
        finished game makes this a no-op.

        Returns:
            True if a snapshot was appended, False for a no-op.

        Raises:
            InvalidIndexError: If cell is not a cell of the board.
        """
        active = self._history[: self._step_number + 1]
        current = active[-1].board

        if not is_move_legal(current, cell):
            logger.debug("Ignored move at cell %s (step %d)", cell, self._step_number)
            return False

        cell = int(cell)
        mark = player_for_step(len(active) - 1)
        snapshot = Snapshot(current.with_mark(cell, mark), cell)

        dropped = len(self._history) - len(active)
        self._history = active + (snapshot,)
        self._step_number = len(self._history) - 1

        logger.debug(
            "Step %d: %s marked cell %d (%d future snapshot(s) discarded)",
            self._step_number, mark.symbol, cell, dropped,
        )
        self._notify("move")
        return True

    def jump_to(self, step: int) -> None:
        """
        Move the cursor to step without touching history.

        Raises:
            InvalidIndexError: If step is not an index into history.
        """
        self._step_number = require_index(step, len(self._history), "step")
        logger.debug("Jumped to step %d of %d", self._step_number, len(self._history) - 1)
        self._notify("jump")

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a state-change callback; returns its unsubscribe function."""
        return self._event_bus.subscribe(callback)

    def _notify(self, reason: str) -> None:
        self._event_bus.publish(
            StateChangedEvent(
                snapshot=self.current_snapshot(),
                step_number=self._step_number,
                history_length=len(self._history),
                reason=reason,
            )
        )

    def __repr__(self) -> str:
        return (
            f"HistoryStore(board_size={self._size}, "
            f"step={self._step_number}, length={len(self._history)})"
        )
