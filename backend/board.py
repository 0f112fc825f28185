import logging
import random
from dataclasses import dataclass
from typing import Iterator, List, Tuple, Union

import numpy as np

from .utils import NEIGHBOR_OFFSETS, format_layout, iter_coords

logger = logging.getLogger(__name__)


@dataclass
class Empty:
    """A safe cell; count is the number of mines among its neighbors."""
    count: int = 0
    hidden: bool = True


@dataclass
class Mine:
    hidden: bool = True


Cell = Union[Empty, Mine]


class MinesweeperBoard:
    """
    A row-major grid of cells: `grid[y][x]`, `height` rows by `width` columns.

    Boards are normally built by `generate_board()`. The only mutation a board
    supports afterwards is revealing cells, which is one-way.
    """

    def __init__(self, width: int, height: int, grid: List[List[Cell]]):
        self.width = width
        self.height = height
        self.grid = grid
        # Cells never change kind after generation, so the tally is fixed.
        self.num_mines = sum(1 for row in grid for cell in row if isinstance(cell, Mine))

    def in_bounds(self, x, y) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        return self.grid[y][x]

    def is_mine(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and isinstance(self.grid[y][x], Mine)

    def is_hidden(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self.grid[y][x].hidden

    def reveal(self, x: int, y: int) -> Cell:
        cell = self.grid[y][x]
        cell.hidden = False
        return cell

    def reveal_all(self):
        for _, _, cell in self.cells():
            cell.hidden = False

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Yield (x, y, cell) for every cell in row-major order."""
        for x, y in iter_coords(self.width, self.height):
            yield x, y, self.grid[y][x]

    @property
    def hidden_count(self) -> int:
        return sum(1 for _, _, cell in self.cells() if cell.hidden)

    def mine_mask(self) -> np.ndarray:
        """Boolean array of shape (height, width), True where a mine sits."""
        mask = np.zeros((self.height, self.width), dtype=bool)
        for x, y, cell in self.cells():
            if isinstance(cell, Mine):
                mask[y, x] = True
        return mask

    def compute_adjacent_counts(self):
        """
        Store in every empty cell the number of mines among its neighbors.
        The mine mask is zero-padded by one cell so the shifted windows
        clip at the board edges.
        """
        padded = np.pad(self.mine_mask().astype(np.int8), 1)
        counts = np.zeros((self.height, self.width), dtype=np.int8)
        for dx, dy in NEIGHBOR_OFFSETS:
            counts += padded[1 + dy:1 + dy + self.height, 1 + dx:1 + dx + self.width]

        for x, y, cell in self.cells():
            if isinstance(cell, Empty):
                cell.count = int(counts[y, x])


def validate_dimensions(width: int, height: int, num_mines: int):
    if width < 1 or height < 1:
        raise ValueError(f"Board must be at least 1x1, got {width}x{height}.")
    if num_mines < 0:
        raise ValueError(f"Mine count cannot be negative, got {num_mines}.")
    if num_mines > width * height - 1:
        raise ValueError(
            f"Cannot place {num_mines} mines on a {width}x{height} board: "
            f"at most {width * height - 1} leave a safe cell."
        )


def generate_board(width: int, height: int, num_mines: int, rng=None) -> MinesweeperBoard:
    """
    Build a board with exactly `num_mines` mines at uniformly random distinct
    positions and every empty cell's neighbor count filled in.

    rng:
        Random source with a `randrange(n)` method. Defaults to a fresh
        `random.Random()`; the module-level generator is never used.

    Mines are placed by rejection sampling: draw a column, then a row, and
    keep the coordinate only if it does not already hold a mine.
    """
    validate_dimensions(width, height, num_mines)
    if rng is None:
        rng = random.Random()

    grid: List[List[Cell]] = [[Empty() for _ in range(width)] for _ in range(height)]

    placed = 0
    while placed < num_mines:
        x = rng.randrange(width)
        y = rng.randrange(height)
        if isinstance(grid[y][x], Mine):
            continue
        grid[y][x] = Mine()
        placed += 1

    board = MinesweeperBoard(width, height, grid)
    board.compute_adjacent_counts()

    logger.info("Generated %dx%d board with %d mines", width, height, num_mines)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Layout:\n%s", format_layout(board))
    return board
