"""
Command-line interface for playing with move-history navigation.
"""

import argparse
import logging
from typing import Callable, List, Optional, Tuple

from tictac_rewind import render
from tictac_rewind.core.errors import InvalidIndexError
from tictac_rewind.games.game_rules import cell_index
from tictac_rewind.history.events import StateChangedEvent
from tictac_rewind.history.store import HistoryStore
from tictac_rewind.utils.config import (
    Config,
    DEFAULT_BOARD_SIZE,
    DEFAULT_LOG_LEVEL,
    MAX_BOARD_SIZE,
    MIN_BOARD_SIZE,
)
from tictac_rewind.utils.factory import create_store

logger = logging.getLogger(__name__)

HELP_TEXT = """\
Commands:
  <n>      mark cell n (0-based, row-major)
  r,c      mark the cell at row r, column c (1-based)
  j <n>    jump to step n of the move list
  o        toggle move list order
  h        show this help
  q        quit"""

Command = Tuple[str, int]


def _board_size(raw: str) -> int:
    """argparse type for --size; out-of-range values become usage errors."""
    try:
        size = int(raw)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid board size: '{raw}'") from e
    if not MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE:
        raise argparse.ArgumentTypeError(
            f"board size must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}, got {size}"
        )
    return size


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Two-player tic-tac-toe with time travel through the move history"
    )
    parser.add_argument(
        "--size", "-s",
        type=_board_size,
        default=DEFAULT_BOARD_SIZE,
        help=f"Board side length, {MIN_BOARD_SIZE}-{MAX_BOARD_SIZE} (default: {DEFAULT_BOARD_SIZE})",
    )
    parser.add_argument(
        "--ascending",
        action="store_true",
        help="List the latest move first",
    )
    parser.add_argument(
        "--color",
        action="store_true",
        help="Draw X in green and O in red (ANSI terminals)",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL})",
    )
    return parser.parse_args(argv)


def parse_command(raw: str, board_size: int) -> Command:
    """
    Parse one line of input into (action, argument).

    Raises:
        ValueError: If the line is not a recognised command.
        InvalidIndexError: If a row,col position is off the board.
    """
    text = raw.strip().lower()
    if text in ("q", "quit", "exit"):
        return ("quit", 0)
    if text in ("h", "help", "?"):
        return ("help", 0)
    if text in ("o", "order"):
        return ("order", 0)

    if text.startswith("j"):
        arg = text.removeprefix("jump").removeprefix("j").strip()
        if not arg:
            raise ValueError("Jump needs a step number (e.g. 'j 2')")
        return ("jump", int(arg))

    if "," in text:
        parts = [p.strip() for p in text.split(",")]
        if len(parts) != 2:
            raise ValueError(f"Expected 'row,col', got '{raw.strip()}'")
        r, c = int(parts[0]), int(parts[1])
        return ("move", cell_index(board_size, r - 1, c - 1))

    try:
        return ("move", int(text))
    except ValueError as e:
        raise ValueError(f"Unrecognized command: '{raw.strip()}'") from e


class TerminalView:
    """Redraws the game whenever the store reports a change."""

    def __init__(
        self,
        store: HistoryStore,
        ascending: bool = False,
        output: Callable[[str], None] = print,
        color: bool = False,
    ):
        self.store = store
        self.ascending = ascending
        self.output = output
        self.color = color

    def draw(self) -> None:
        self.output(render.frame(self.store, self.ascending, self.color))

    def toggle_order(self) -> None:
        self.ascending = not self.ascending
        self.draw()

    def __call__(self, event: StateChangedEvent) -> None:
        self.draw()


def run(
    store: HistoryStore,
    ascending: bool = False,
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
    color: bool = False,
) -> None:
    """Interactive loop until 'q' or end of input."""
    view = TerminalView(store, ascending, output, color)
    unsubscribe = store.subscribe(view)
    view.draw()
    output("Type 'h' for help.")

    try:
        while True:
            try:
                raw = input_fn("> ")
            except EOFError:
                break

            if not raw.strip():
                continue

            try:
                action, arg = parse_command(raw, store.board_size)
                if action == "quit":
                    break
                if action == "help":
                    output(HELP_TEXT)
                elif action == "order":
                    view.toggle_order()
                elif action == "jump":
                    store.jump_to(arg)
                elif not store.apply_move(arg):
                    output("Cell taken or game over - pick another move or jump back.")
            except InvalidIndexError as e:
                output(f"Invalid index: {e}")
            except ValueError as e:
                output(f"Invalid input: {e}")
    finally:
        unsubscribe()


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    config = Config(
        board_size=args.size,
        ascending=args.ascending,
        color=args.color,
        log_level=args.log_level,
    )
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = create_store(config)
    logger.info("Starting %dx%d game", config.board_size, config.board_size)

    try:
        run(store, ascending=config.ascending, color=config.color)
    except KeyboardInterrupt:
        print("\nInterrupted")


if __name__ == "__main__":
    main()
