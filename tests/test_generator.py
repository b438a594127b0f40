# tests/test_generator.py

import random
import unittest

import numpy as np

from engine.board import CellStatus
from engine.exceptions import InvalidConfiguration, OutOfBounds
from engine.generator import empty_board, generate
from engine.utils import bomb_mask
from tests.helpers import ScriptedRandom


def window_counts(mask):
    """Bombs in every clipped 3x3 block, centre included."""
    padded = np.pad(mask.astype(int), 1)
    rows, cols = mask.shape
    counts = np.zeros((rows, cols), dtype=int)
    for dr in range(3):
        for dc in range(3):
            counts += padded[dr:dr + rows, dc:dc + cols]
    return counts


class TestEmptyBoard(unittest.TestCase):

    def test_empty_board(self):
        board = empty_board(8, 10)
        self.assertEqual((board.rows, board.cols), (8, 10))
        self.assertEqual(board.bomb_count(), 0)
        self.assertEqual(board.count_status(CellStatus.HIDDEN), 80)

    def test_cells_are_distinct_objects(self):
        board = empty_board(3, 3)
        ids = {id(cell) for _, cell in board}
        self.assertEqual(len(ids), 9)

    def test_non_positive_dimensions(self):
        for rows, cols in [(0, 5), (5, 0), (-1, 3)]:
            with self.assertRaises(InvalidConfiguration):
                empty_board(rows, cols)


class TestGenerate(unittest.TestCase):

    def test_bomb_count_and_safe_cell_over_many_layouts(self):
        for seed in range(50):
            rng = random.Random(seed)
            safe = (rng.randrange(8), rng.randrange(10))
            board = generate(8, 10, 10, safe, rng.randrange)
            self.assertEqual(board.bomb_count(), 10)
            self.assertFalse(board.cell(*safe).is_bomb)

    def test_safe_cell_is_the_only_visible_cell(self):
        board = generate(8, 10, 10, (3, 4), random.Random(7).randrange)
        for (r, c), cell in board:
            expected = CellStatus.VISIBLE if (r, c) == (3, 4) else CellStatus.HIDDEN
            self.assertIs(cell.status, expected)

    def test_adjacency_counts_match_final_layout(self):
        for seed in range(20):
            board = generate(8, 10, 15, (0, 0), random.Random(seed).randrange)
            expected = window_counts(bomb_mask(board))
            for (r, c), cell in board:
                self.assertEqual(cell.adjacent_bomb_count, expected[r, c])

    def test_non_bomb_counts_equal_eight_neighbour_count(self):
        board = generate(6, 6, 12, (2, 2), random.Random(3).randrange)
        mask = bomb_mask(board)
        for (r, c), cell in board:
            if cell.is_bomb:
                continue
            neighbours = mask[max(r - 1, 0):r + 2, max(c - 1, 0):c + 2]
            self.assertEqual(cell.adjacent_bomb_count, int(neighbours.sum()))

    def test_rejection_sampling_skips_safe_index(self):
        rng = ScriptedRandom([0, 0, 3])
        board = generate(1, 5, 1, (0, 0), rng)
        self.assertEqual(rng.calls, [5, 5, 5])
        self.assertTrue(board.cell(0, 3).is_bomb)
        self.assertEqual(board.bomb_count(), 1)

    def test_rejection_sampling_skips_existing_bombs(self):
        rng = ScriptedRandom([7, 7, 7, 2])
        board = generate(3, 3, 2, (0, 0), rng)
        self.assertTrue(board.cell(2, 1).is_bomb)
        self.assertTrue(board.cell(0, 2).is_bomb)
        self.assertEqual(board.bomb_count(), 2)

    def test_linear_index_is_row_major(self):
        board = generate(2, 3, 1, (0, 0), ScriptedRandom([4]))
        self.assertTrue(board.cell(1, 1).is_bomb)

    def test_every_cell_but_one_can_be_a_bomb(self):
        board = generate(3, 3, 8, (1, 1), random.Random(1).randrange)
        self.assertEqual(board.bomb_count(), 8)
        self.assertFalse(board.cell(1, 1).is_bomb)
        self.assertEqual(board.cell(1, 1).adjacent_bomb_count, 8)

    def test_zero_bombs(self):
        board = generate(2, 2, 0, (1, 1), ScriptedRandom([]))
        self.assertEqual(board.bomb_count(), 0)

    def test_too_many_bombs(self):
        with self.assertRaises(InvalidConfiguration):
            generate(2, 2, 4, (0, 0), random.Random(0).randrange)
        with self.assertRaises(InvalidConfiguration):
            generate(2, 2, 5, (0, 0), random.Random(0).randrange)

    def test_negative_bombs(self):
        with self.assertRaises(InvalidConfiguration):
            generate(2, 2, -1, (0, 0))

    def test_bad_dimensions(self):
        with self.assertRaises(InvalidConfiguration):
            generate(0, 4, 1, (0, 0))

    def test_safe_cell_out_of_bounds(self):
        with self.assertRaises(OutOfBounds):
            generate(2, 2, 1, (2, 0))


if __name__ == "__main__":
    unittest.main()
