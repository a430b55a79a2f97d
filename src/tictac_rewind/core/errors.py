"""
Error taxonomy.

Only malformed input raises. A move on a filled cell, or any move once the
game has a winner, is routine and handled as a no-op by the history store.
"""

from __future__ import annotations

import numpy as np


class TicTacRewindError(Exception):
    """Base class for errors raised by tictac_rewind."""


class InvalidIndexError(TicTacRewindError, IndexError):
    """A cell or step index outside its valid bounds (a caller bug)."""


def require_index(value: object, limit: int, kind: str) -> int:
    """
    Validate that value is an integer in [0, limit) and return it as int.

    Args:
        value: Candidate index (Python or NumPy integer).
        limit: Exclusive upper bound.
        kind: Label used in the error message (e.g. "cell", "step").

    Raises:
        InvalidIndexError: If value is not an integer or is out of range.
    """
    # bool is an int subclass; True/False are never meaningful indices
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidIndexError(f"{kind} index must be an integer, got {value!r}")

    index = int(value)
    if not 0 <= index < limit:
        raise InvalidIndexError(f"{kind} index {index} out of range [0, {limit})")
    return index
