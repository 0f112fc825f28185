# backend/utils.py

from typing import Iterator, Tuple

NEIGHBOR_OFFSETS = [
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1), (0, 1), (1, 1)
]


def iter_coords(width: int, height: int) -> Iterator[Tuple[int, int]]:
    """Yield every (x, y) of a width x height grid in row-major order."""
    for y in range(height):
        for x in range(width):
            yield x, y


def format_layout(board) -> str:
    """
    Render the full layout of a board (mines and counts, ignoring
    visibility) as text. Used for debug logging of generated boards.
    """
    rows = []
    for y in range(board.height):
        row = ""
        for x in range(board.width):
            if board.is_mine(x, y):
                row += "X"
            else:
                row += str(board.cell(x, y).count)
        rows.append(row)
    return "\n".join(rows)
