"""
State-change notifications for the history store.

Front ends subscribe once and redraw from the event; there is no polling.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List

from tictac_rewind.games.board import Snapshot

Subscriber = Callable[["StateChangedEvent"], None]


@dataclass(frozen=True)
class StateChangedEvent:
    """What the store looks like right after an accepted move or jump."""

    snapshot: Snapshot
    step_number: int
    history_length: int
    reason: str  # "move" or "jump"


class EventBus:
    """
    Fan-out of StateChangedEvent to front-end callbacks.

    Callbacks run on the caller's stack, oldest subscription first, before
    apply_move / jump_to return. A raising callback aborts the fan-out and
    the error reaches whoever made the move.
    """

    __slots__ = ("_callbacks",)

    def __init__(self) -> None:
        self._callbacks: List[Subscriber] = []

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Add callback; the returned function removes it (safe to call twice)."""
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unsubscribe

    def publish(self, event: StateChangedEvent) -> None:
        # Snapshot the list so a callback may unsubscribe itself mid fan-out
        for callback in tuple(self._callbacks):
            callback(event)

    def __len__(self) -> int:
        return len(self._callbacks)
