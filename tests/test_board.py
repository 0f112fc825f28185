# tests/test_board.py

import random
import unittest

import numpy as np

from backend.board import Empty, Mine, MinesweeperBoard, generate_board
from backend.utils import NEIGHBOR_OFFSETS, format_layout
from _support import ScriptedRandom, board_with_mines


def brute_force_count(board, x, y):
    count = 0
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            nx, ny = x + dx, y + dy
            if 0 <= nx < board.width and 0 <= ny < board.height and board.is_mine(nx, ny):
                count += 1
    return count


class TestMinesweeperBoard(unittest.TestCase):

    def test_board_dimensions(self):
        board = generate_board(width=5, height=4, num_mines=3, rng=random.Random(0))
        self.assertEqual(len(board.grid), 4)
        self.assertEqual(len(board.grid[0]), 5)

    def test_mine_count(self):
        board = generate_board(width=5, height=5, num_mines=5, rng=random.Random(1))
        mines = sum(1 for row in board.grid for cell in row if isinstance(cell, Mine))
        empties = sum(1 for row in board.grid for cell in row if isinstance(cell, Empty))
        self.assertEqual(mines, 5)
        self.assertEqual(empties, 20)
        self.assertEqual(board.num_mines, 5)

    def test_mine_count_across_sizes(self):
        rng = random.Random(7)
        for width, height in [(1, 2), (2, 1), (3, 3), (8, 5), (16, 16)]:
            for num_mines in (0, 1, width * height // 2, width * height - 1):
                board = generate_board(width, height, num_mines, rng)
                self.assertEqual(board.num_mines, num_mines)
                self.assertEqual(int(board.mine_mask().sum()), num_mines)

    def test_every_cell_starts_hidden(self):
        board = generate_board(6, 4, 6, random.Random(3))
        self.assertEqual(board.hidden_count, 24)

    def test_counts_on_fixed_layout(self):
        board = board_with_mines(3, 3, [(0, 0), (2, 1)])
        expected = [
            [None, 2, 1],
            [1, 2, None],
            [0, 1, 1],
        ]
        for x, y, cell in board.cells():
            if expected[y][x] is None:
                self.assertIsInstance(cell, Mine)
            else:
                self.assertIsInstance(cell, Empty)
                self.assertEqual(cell.count, expected[y][x])

    def test_counts_match_brute_force(self):
        rng = random.Random(42)
        for _ in range(50):
            width, height = rng.randint(1, 9), rng.randint(1, 9)
            num_mines = rng.randint(0, width * height - 1)
            board = generate_board(width, height, num_mines, rng)
            for x, y, cell in board.cells():
                if isinstance(cell, Empty):
                    self.assertEqual(cell.count, brute_force_count(board, x, y))

    def test_mines_have_no_count(self):
        board = board_with_mines(2, 2, [(0, 0), (1, 1)])
        self.assertFalse(hasattr(board.cell(0, 0), "count"))

    def test_rejection_sampling_skips_taken_cells(self):
        rng = ScriptedRandom([1, 1, 1, 1, 1, 1, 0, 0])
        board = generate_board(2, 2, 2, rng)
        self.assertEqual(rng.calls, 8)
        self.assertTrue(board.is_mine(1, 1))
        self.assertTrue(board.is_mine(0, 0))
        self.assertFalse(board.is_mine(1, 0))

    def test_draws_column_then_row(self):
        board = generate_board(3, 2, 1, ScriptedRandom([2, 1]))
        self.assertTrue(board.is_mine(2, 1))

    def test_placement_is_uniform(self):
        rng = random.Random(1234)
        totals = np.zeros((2, 2), dtype=int)
        runs = 4000
        for _ in range(runs):
            totals += generate_board(2, 2, 1, rng).mine_mask()
        self.assertEqual(totals.sum(), runs)
        for frequency in totals.flatten():
            self.assertGreater(frequency, 850)
            self.assertLess(frequency, 1150)

    def test_invalid_arguments(self):
        for width, height, num_mines in [(0, 3, 0), (3, 0, 0), (3, 3, -1), (3, 3, 9), (1, 1, 1)]:
            with self.assertRaises(ValueError):
                generate_board(width, height, num_mines, random.Random(0))

    def test_full_board_minus_one(self):
        board = generate_board(3, 3, 8, random.Random(5))
        safe = [(x, y) for x, y, cell in board.cells() if isinstance(cell, Empty)]
        self.assertEqual(len(safe), 1)
        x, y = safe[0]
        neighbors = [(x + dx, y + dy) for dx, dy in NEIGHBOR_OFFSETS if board.in_bounds(x + dx, y + dy)]
        self.assertEqual(board.cell(x, y).count, len(neighbors))

    def test_calls_share_no_state(self):
        first = generate_board(4, 4, 4, random.Random(9))
        second = generate_board(4, 4, 4, random.Random(9))
        first.reveal_all()
        self.assertEqual(second.hidden_count, 16)
        self.assertEqual(format_layout(first), format_layout(second))

    def test_reveal_is_one_way(self):
        board = board_with_mines(2, 2, [(1, 1)])
        board.reveal(0, 0)
        self.assertFalse(board.is_hidden(0, 0))
        board.reveal_all()
        self.assertEqual(board.hidden_count, 0)

    def test_in_bounds(self):
        board = MinesweeperBoard(2, 3, [[Empty(), Empty()] for _ in range(3)])
        self.assertTrue(board.in_bounds(1, 2))
        self.assertFalse(board.in_bounds(2, 0))
        self.assertFalse(board.in_bounds(0, 3))
        self.assertFalse(board.in_bounds(-1, 0))
        self.assertFalse(board.is_mine(5, 5))


class TestUtils(unittest.TestCase):

    def test_neighbor_offsets(self):
        self.assertEqual(len(set(NEIGHBOR_OFFSETS)), 8)
        self.assertNotIn((0, 0), NEIGHBOR_OFFSETS)

    def test_format_layout(self):
        board = board_with_mines(3, 2, [(0, 0)])
        self.assertEqual(format_layout(board), "X10\n110")


if __name__ == "__main__":
    unittest.main()
