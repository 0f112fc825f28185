# backend/game.py

import logging
from enum import Enum
from typing import Iterable, Optional, Tuple

from .board import Mine, MinesweeperBoard
from .events import Activate, Direction, Move, Press, Quit

logger = logging.getLogger(__name__)

# Errors from the input source that end the event stream instead of the process.
INPUT_FAULTS = (EOFError, OSError)

END_OF_INPUT = object()


class Outcome(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class GameSession:
    """
    Owns a generated board plus the player's cursor and progress, and runs
    the render/input/update loop until the game is decided or abandoned.
    """

    def __init__(self, board: MinesweeperBoard, origin: Tuple[int, int] = (0, 0)):
        self.board = board
        self.origin = origin
        self.cursor = (0, 0)
        self.remaining = board.width * board.height - board.num_mines
        self.outcome = Outcome.IN_PROGRESS
        self.moves_made = 0

    def move_cursor(self, direction: Direction):
        """Step the cursor one cell; moves that would leave the board are ignored."""
        if self.is_game_over():
            return
        x, y = self.cursor
        self.set_cursor(x + direction.dx, y + direction.dy)

    def set_cursor(self, x: int, y: int):
        if self.is_game_over() or not self.board.in_bounds(x, y):
            return
        self.cursor = (x, y)

    def open(self, x: int, y: int):
        """
        Reveal the cell at (x, y).
        - Opening a mine reveals the whole board and loses the game.
        - Opening the last hidden safe cell reveals the whole board and wins.
        - Already revealed cells, out-of-bounds coordinates and finished
          games are left untouched.
        Zero-count cells do not open their neighbors.
        """
        if self.is_game_over():
            return
        if not self.board.is_hidden(x, y):
            return

        cell = self.board.reveal(x, y)
        self.moves_made += 1

        if isinstance(cell, Mine):
            self.board.reveal_all()
            self.outcome = Outcome.LOST
            logger.info("Mine opened at (%d, %d) after %d moves", x, y, self.moves_made)
            return

        self.remaining -= 1
        logger.debug("Opened (%d, %d) count=%d remaining=%d", x, y, cell.count, self.remaining)
        if self.remaining == 0:
            self.board.reveal_all()
            self.outcome = Outcome.WON
            logger.info("Board cleared after %d moves", self.moves_made)

    def open_at_cursor(self):
        self.open(*self.cursor)

    def to_board(self, sx: int, sy: int) -> Optional[Tuple[int, int]]:
        """Map a render-surface coordinate to a board coordinate, or None if off the board."""
        x, y = sx - self.origin[0], sy - self.origin[1]
        if not self.board.in_bounds(x, y):
            return None
        return x, y

    def is_game_over(self) -> bool:
        return self.outcome is not Outcome.IN_PROGRESS

    def is_win(self) -> bool:
        return self.outcome is Outcome.WON

    def get_state(self) -> dict:
        """
        Return a snapshot of the game status.
        """
        return {
            "dimensions": (self.board.height, self.board.width),
            "num_mines": self.board.num_mines,
            "remaining": self.remaining,
            "hidden": self.board.hidden_count,
            "cursor": self.cursor,
            "outcome": self.outcome.value,
            "moves_made": self.moves_made,
        }

    def handle(self, event) -> bool:
        """
        Apply one input event. Returns False when the event asks to stop.
        Unrecognized events are ignored.
        """
        if isinstance(event, Quit):
            return False
        if isinstance(event, Move):
            self.move_cursor(event.direction)
        elif isinstance(event, Activate):
            self.open_at_cursor()
        elif isinstance(event, Press):
            target = self.to_board(event.x, event.y)
            if target is not None:
                self.set_cursor(*target)
                self.open(*target)
        else:
            logger.debug("Ignoring unrecognized event %r", event)
        return True

    def play(self, renderer, events: Iterable) -> Outcome:
        """
        Run the interaction loop: draw, block for the next event, apply it.

        The loop ends on a quit event, when the event stream runs out (or
        fails), or once the game is decided. A decided game is drawn one last
        time with its banner and then waits for a single acknowledging event
        before returning.
        """
        stream = iter(events)
        while True:
            renderer.render(self.board, self.origin, self.cursor, self.outcome)
            event = _next_event(stream)
            if event is END_OF_INPUT:
                logger.info("Input ended with the game %s", self.outcome.value)
                return self.outcome
            if not self.handle(event):
                logger.info("Quit with the game %s", self.outcome.value)
                return self.outcome
            if self.is_game_over():
                break

        renderer.render(self.board, self.origin, self.cursor, self.outcome)
        _next_event(stream)
        return self.outcome


def _next_event(stream):
    """Pull the next event; END_OF_INPUT once the stream is exhausted or broken."""
    try:
        return next(stream)
    except StopIteration:
        return END_OF_INPUT
    except INPUT_FAULTS as exc:
        logger.warning("Input stream failed: %s", exc)
        return END_OF_INPUT
