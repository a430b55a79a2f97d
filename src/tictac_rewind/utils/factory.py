"""
Factory functions for creating history stores.
"""

from typing import Optional

from tictac_rewind.history.events import EventBus
from tictac_rewind.history.store import HistoryStore
from tictac_rewind.utils.config import Config, DEFAULT_CONFIG


def create_store(
    config: Optional[Config] = None,
    event_bus: Optional[EventBus] = None,
) -> HistoryStore:
    """
    Create a history store positioned at the empty board.

    Args:
        config: Session configuration (defaults to DEFAULT_CONFIG)
        event_bus: Bus to publish state changes on (a new one if omitted)

    Returns:
        Fresh HistoryStore
    """
    config = config or DEFAULT_CONFIG
    return HistoryStore(config.board_size, event_bus=event_bus)
