# tui/renderer.py

import curses

from backend.base_renderer import BaseRenderer, banner_lines, board_lines, cell_glyph
from backend.game import Outcome


class CursesRenderer(BaseRenderer):
    """
    Draws the board into a curses window with a one-cell frame around it.
    The cursor cell is shown in reverse video; a finished game gets its
    banner centered over the board.

    curses errors are not caught: a board that cannot be drawn ends the game.
    """

    def __init__(self, stdscr):
        self.stdscr = stdscr

    def render(self, board, origin, cursor, outcome):
        ox, oy = origin
        self.stdscr.erase()
        self._draw_frame(ox - 1, oy - 1, board.width + 2, board.height + 2)

        for y, line in enumerate(board_lines(board)):
            self.stdscr.addstr(oy + y, ox, line)
        cx, cy = cursor
        self.stdscr.addstr(oy + cy, ox + cx, cell_glyph(board.cell(cx, cy)), curses.A_REVERSE)

        if outcome is not Outcome.IN_PROGRESS:
            self._draw_banner(banner_lines(outcome is Outcome.WON), board, origin)

        self.stdscr.refresh()

    def _draw_frame(self, left, top, width, height):
        right, bottom = left + width - 1, top + height - 1
        self.stdscr.addstr(top, left, "+" + "-" * (width - 2) + "+")
        for y in range(top + 1, bottom):
            self.stdscr.addstr(y, left, "|")
            self.stdscr.addstr(y, right, "|")
        # insstr: the frame may end in the screen's bottom-right cell, where
        # addstr fails once it cannot advance the cursor.
        self.stdscr.insstr(bottom, left, "+" + "-" * (width - 2) + "+")

    def _draw_banner(self, lines, board, origin):
        rows, cols = self.stdscr.getmaxyx()
        # Short screens drop the blank padding lines first.
        if len(lines) > rows:
            lines = [line for line in lines if line.strip()][:rows]
        banner_width = len(lines[0])
        # Centered on the board, but kept on screen when the board is narrow.
        center_x = origin[0] + board.width // 2
        center_y = origin[1] + board.height // 2
        left = min(max(center_x - banner_width // 2, 0), max(cols - 1 - banner_width, 0))
        top = min(max(center_y - len(lines) // 2, 0), max(rows - len(lines), 0))
        for i, line in enumerate(lines):
            self.stdscr.addstr(top + i, left, line[:cols - 1 - left], curses.A_BOLD)
