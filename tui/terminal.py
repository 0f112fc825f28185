# tui/terminal.py

import curses
import logging
import signal
from contextlib import contextmanager

logger = logging.getLogger(__name__)

# Signals that should still restore the terminal before the process exits.
EXIT_SIGNALS = (signal.SIGTERM, signal.SIGHUP)


def _raise_exit(signum, frame):
    raise SystemExit(128 + signum)


@contextmanager
def terminal_session():
    """
    Put the terminal into the mode the game needs and hand back the screen:
    alternate screen (curses' own init), raw keys, no echo, keypad decoding,
    hidden hardware cursor and mouse press reporting.

    The previous mode is restored on every way out of the block, including
    exceptions and the signals in EXIT_SIGNALS.
    """
    previous_handlers = {sig: signal.signal(sig, _raise_exit) for sig in EXIT_SIGNALS}
    stdscr = curses.initscr()
    try:
        curses.noecho()
        curses.raw()
        stdscr.keypad(True)
        try:
            curses.curs_set(0)
        except curses.error:
            # Not every terminal can hide the cursor.
            pass
        curses.mousemask(curses.BUTTON1_PRESSED | curses.BUTTON1_CLICKED)
        curses.mouseinterval(0)
        logger.debug("Terminal acquired, size %s", stdscr.getmaxyx())
        yield stdscr
    finally:
        stdscr.keypad(False)
        curses.noraw()
        curses.echo()
        curses.endwin()
        for sig, handler in previous_handlers.items():
            signal.signal(sig, handler)
        logger.debug("Terminal restored")


def screen_size(stdscr):
    """Return the screen size as (columns, rows)."""
    rows, cols = stdscr.getmaxyx()
    return cols, rows
