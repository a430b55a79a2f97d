"""
Configuration and defaults.
"""

import logging


# ---------------------------------------------------------------------------
# Board limits
# ---------------------------------------------------------------------------

DEFAULT_BOARD_SIZE = 3
MIN_BOARD_SIZE = 1
MAX_BOARD_SIZE = 9  # keeps "row,col" input single-digit

DEFAULT_LOG_LEVEL = "WARNING"


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

def _normalize_log_level(level: str) -> str:
    """Upper-case level name, validated against the logging module."""
    name = str(level).strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ValueError(f"Unknown log level: {level}")
    return name


class Config:
    """Session configuration with sensible defaults."""

    def __init__(
        self,
        board_size: int = DEFAULT_BOARD_SIZE,
        ascending: bool = False,
        color: bool = False,
        log_level: str = DEFAULT_LOG_LEVEL,
    ):
        if not MIN_BOARD_SIZE <= board_size <= MAX_BOARD_SIZE:
            raise ValueError(
                f"Board size must be between {MIN_BOARD_SIZE} and "
                f"{MAX_BOARD_SIZE}, got {board_size}"
            )

        self.board_size = board_size
        self.ascending = ascending
        self.color = color
        self.log_level = _normalize_log_level(log_level)

    @property
    def num_cells(self) -> int:
        return self.board_size * self.board_size


# Default configuration
DEFAULT_CONFIG = Config()
