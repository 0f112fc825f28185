# tui/input.py

import curses
import logging
from typing import Iterator, Optional

from backend.events import Activate, Direction, Move, Press, Quit

logger = logging.getLogger(__name__)

ESCAPE = 27
CTRL_C = 3
CTRL_D = 4

KEY_DIRECTIONS = {
    curses.KEY_UP: Direction.N,
    curses.KEY_DOWN: Direction.S,
    curses.KEY_RIGHT: Direction.E,
    curses.KEY_LEFT: Direction.W,
    curses.KEY_HOME: Direction.NW,
    curses.KEY_PPAGE: Direction.NE,
    curses.KEY_END: Direction.SW,
    curses.KEY_NPAGE: Direction.SE,
    # numpad with num lock off
    curses.KEY_A1: Direction.NW,
    curses.KEY_A3: Direction.NE,
    curses.KEY_C1: Direction.SW,
    curses.KEY_C3: Direction.SE,
    ord("k"): Direction.N,
    ord("j"): Direction.S,
    ord("l"): Direction.E,
    ord("h"): Direction.W,
    ord("y"): Direction.NW,
    ord("u"): Direction.NE,
    ord("b"): Direction.SW,
    ord("n"): Direction.SE,
}

ACTIVATE_KEYS = {curses.KEY_ENTER, ord("\n"), ord("\r"), ord(" ")}
QUIT_KEYS = {ord("q"), ord("Q"), ESCAPE, CTRL_C, CTRL_D}

MOUSE_PRESS_MASK = curses.BUTTON1_PRESSED | curses.BUTTON1_CLICKED


def decode_key(key: int):
    """
    Translate a curses key code into a game event.
    Returns None for keys the game has no use for.
    """
    if key in QUIT_KEYS:
        return Quit()
    if key in ACTIVATE_KEYS:
        return Activate()
    direction = KEY_DIRECTIONS.get(key)
    if direction is not None:
        return Move(direction)
    return None


def decode_mouse(report) -> Optional[Press]:
    """
    Translate a `curses.getmouse()` report (id, x, y, z, bstate) into a
    press event. Only left-button presses count.
    """
    _, x, y, _, bstate = report
    if bstate & MOUSE_PRESS_MASK:
        return Press(x, y)
    return None


def read_events(stdscr) -> Iterator:
    """
    Lazily produce game events from the keyboard and mouse, blocking on each
    read. The stream ends when the terminal read fails; keys without a
    meaning and unreadable mouse reports are skipped.
    """
    while True:
        try:
            key = stdscr.getch()
        except curses.error as exc:
            logger.debug("Input read failed, ending stream: %s", exc)
            return
        if key == curses.ERR:
            logger.debug("Input closed, ending stream")
            return

        if key == curses.KEY_MOUSE:
            try:
                event = decode_mouse(curses.getmouse())
            except curses.error:
                continue
        else:
            event = decode_key(key)
        if event is not None:
            yield event
