# backend/base_renderer.py

from typing import List, Tuple

from .board import Cell, Empty, MinesweeperBoard
from .game import Outcome

HIDDEN_GLYPH = "*"
ZERO_GLYPH = "."
MINE_GLYPH = "X"

PRESS_ANY_KEY = "[Press any key]"


def cell_glyph(cell: Cell) -> str:
    """
    The single character a cell is drawn as:
    hidden -> "*", revealed empty with no neighbors -> ".",
    revealed empty with N neighboring mines -> "N", revealed mine -> "X".
    """
    if cell.hidden:
        return HIDDEN_GLYPH
    if isinstance(cell, Empty):
        return str(cell.count) if cell.count else ZERO_GLYPH
    return MINE_GLYPH


def board_lines(board: MinesweeperBoard) -> List[str]:
    return ["".join(cell_glyph(cell) for cell in row) for row in board.grid]


def banner_lines(won: bool) -> List[str]:
    """
    Text of the end-of-game banner, top to bottom. The message is framed by
    blank padding lines; every line is padded to the same width so the
    banner can be centered as a block.
    """
    message = "Clear!" if won else "Bomb!"
    lines = ["", message, "", PRESS_ANY_KEY, ""]
    width = max(len(line) for line in lines) + 4
    return [line.center(width) for line in lines]


class BaseRenderer:
    """
    Interface the game loop draws through.
    Implementations own the display; the game never reads anything back.
    """

    def render(self, board: MinesweeperBoard, origin: Tuple[int, int],
               cursor: Tuple[int, int], outcome: Outcome) -> None:
        """
        Draw the board with its top-left cell at `origin`, highlight the
        cell at `cursor` (board coordinates) and, once `outcome` is no
        longer in progress, the end-of-game banner.
        """
        raise NotImplementedError("Renderer must implement render().")
