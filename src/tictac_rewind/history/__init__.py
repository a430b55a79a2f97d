"""
History module - snapshot log, playback cursor and change notifications.
"""

from tictac_rewind.history.events import EventBus, StateChangedEvent
from tictac_rewind.history.store import HistoryStore, describe_step, GAME_START_LABEL

__all__ = [
    "HistoryStore",
    "EventBus",
    "StateChangedEvent",
    "describe_step",
    "GAME_START_LABEL",
]
