# -*-  coding: utf-8 -*-
"""
Set of test for the board engine.
"""
from unittest import TestCase, main

import numpy as np
from numpy.random import default_rng

from game2048.core.gameboard import (
    BOARD_SIZE,
    MoveOutcome,
    fill_cells,
    is_terminal,
    latent_move,
    move,
    new_grid,
    rotate90,
    slide_and_merge,
    slide_and_merge_line,
    spawn_tile,
)
from game2048.core.gamemove import Direction

FULL_GRID = np.array([[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8192, 16384, 32768, 65536]])


class TestSlideAndMergeLine(TestCase):
    """Test the single-line merge algorithm."""

    def test_no_chained_merge(self):
        """A merged tile does not merge again in the same pass."""
        line, score = slide_and_merge_line(np.array([2, 2, 2, 2]))
        np.testing.assert_array_equal(line, [4, 4, 0, 0])
        self.assertEqual(score, 8)

    def test_compacts_before_merging(self):
        line, score = slide_and_merge_line(np.array([0, 0, 2, 2]))
        np.testing.assert_array_equal(line, [4, 0, 0, 0])
        self.assertEqual(score, 4)

    def test_unchanged_line(self):
        line, score = slide_and_merge_line(np.array([2, 0, 0, 0]))
        np.testing.assert_array_equal(line, [2, 0, 0, 0])
        self.assertEqual(score, 0)

    def test_empty_line(self):
        line, score = slide_and_merge_line(np.zeros(4, dtype=int))
        np.testing.assert_array_equal(line, [0, 0, 0, 0])
        self.assertEqual(score, 0)

    def test_merges_first_pair_only(self):
        """With three equal tiles the leftmost pair merges."""
        line, score = slide_and_merge_line(np.array([4, 4, 4, 0]))
        np.testing.assert_array_equal(line, [8, 4, 0, 0])
        self.assertEqual(score, 8)

    def test_distinct_values_slide(self):
        line, score = slide_and_merge_line(np.array([0, 2, 0, 4]))
        np.testing.assert_array_equal(line, [2, 4, 0, 0])
        self.assertEqual(score, 0)

    def test_length_and_tile_sum_preserved(self):
        """Output keeps the line length and the total tile value."""
        rng = default_rng(7)
        for _ in range(200):
            line = rng.choice([0, 2, 4, 8], size=BOARD_SIZE)
            result, _ = slide_and_merge_line(line)
            self.assertEqual(len(result), BOARD_SIZE)
            self.assertEqual(result.sum(), line.sum())
            self.assertLessEqual(np.count_nonzero(result), np.count_nonzero(line))


class TestRotation(TestCase):
    """Test grid rotation."""

    def test_four_rotations_are_identity(self):
        grid = np.arange(16).reshape(4, 4)
        rotated = grid
        for _ in range(4):
            rotated = rotate90(rotated)
        np.testing.assert_array_equal(rotated, grid)

    def test_rotation_is_counter_clockwise(self):
        grid = np.array([[1, 2, 3, 4], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        np.testing.assert_array_equal(rotate90(grid)[:, 0], [4, 3, 2, 1])

    def test_rotation_returns_new_array(self):
        grid = np.zeros((4, 4), dtype=int)
        rotated = rotate90(grid)
        rotated[0, 0] = 2
        self.assertEqual(grid[0, 0], 0)


class TestMove(TestCase):
    """Test directional moves."""

    def setUp(self):
        self.rng = default_rng(42)

    def test_slide_and_merge_grid(self):
        board = np.array([[2, 2, 4, 4], [0, 2, 2, 4], [2, 0, 0, 2], [2, 2, 2, 2]])
        result, score = slide_and_merge(board)
        expected = np.array([[4, 8, 0, 0], [4, 4, 0, 0], [4, 0, 0, 0], [4, 4, 0, 0]])
        self.assertEqual(score, 28)
        np.testing.assert_array_equal(result, expected)

    def test_latent_move_each_direction(self):
        grid = np.array([[2, 0, 0, 2], [0, 0, 0, 0], [0, 0, 0, 0], [2, 0, 0, 0]])
        expected = {
            Direction.LEFT: np.array([[4, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [2, 0, 0, 0]]),
            Direction.RIGHT: np.array([[0, 0, 0, 4], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 2]]),
            Direction.UP: np.array([[4, 0, 0, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]]),
            Direction.DOWN: np.array([[0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [4, 0, 0, 2]]),
        }
        for direction, board in expected.items():
            result, score = latent_move(grid, direction)
            np.testing.assert_array_equal(result, board, err_msg=direction.name)
            self.assertEqual(score, 4)

    def test_noop_move_spawns_nothing(self):
        grid = np.array([[2, 0, 0, 0], [4, 0, 0, 0], [8, 0, 0, 0], [16, 0, 0, 0]])
        outcome = move(grid, Direction.LEFT, rng=self.rng)
        self.assertIsInstance(outcome, MoveOutcome)
        self.assertFalse(outcome.changed)
        self.assertEqual(outcome.score, 0)
        np.testing.assert_array_equal(outcome.grid, grid)

    def test_changed_move_spawns_one_tile(self):
        """Non-zero count after a move is (before - merges) + 1."""
        grid = np.array([[2, 2, 4, 4], [0, 0, 0, 0], [8, 0, 0, 0], [0, 0, 0, 0]])
        outcome = move(grid, Direction.LEFT, rng=self.rng)
        self.assertTrue(outcome.changed)
        self.assertEqual(outcome.score, 12)
        self.assertEqual(np.count_nonzero(outcome.grid), np.count_nonzero(grid) - 2 + 1)

    def test_move_does_not_mutate_input(self):
        grid = np.array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        original = grid.copy()
        move(grid, Direction.RIGHT, rng=self.rng)
        np.testing.assert_array_equal(grid, original)

    def test_move_rejects_wrong_shape(self):
        with self.assertRaises(ValueError):
            move(np.zeros((3, 3), dtype=int), Direction.LEFT)


class TestSpawn(TestCase):
    """Test tile spawning."""

    def test_new_grid_has_two_tiles(self):
        for seed in range(20):
            grid = new_grid(rng=default_rng(seed))
            self.assertEqual(grid.shape, (BOARD_SIZE, BOARD_SIZE))
            self.assertEqual(np.count_nonzero(grid), 2)
            self.assertTrue(np.all(np.isin(grid[grid != 0], [2, 4])))

    def test_spawn_tile_fills_only_empty_cell(self):
        grid = FULL_GRID.copy()
        grid[2, 1] = 0
        spawned = spawn_tile(grid, rng=default_rng(0))
        self.assertIn(spawned[2, 1], (2, 4))
        self.assertEqual(grid[2, 1], 0)

    def test_fill_cells_on_full_grid(self):
        grid = FULL_GRID.copy()
        np.testing.assert_array_equal(fill_cells(grid, number_tile=1), FULL_GRID)

    def test_fill_cells_caps_at_empty_count(self):
        grid = FULL_GRID.copy()
        grid[0, 0] = 0
        grid[3, 3] = 0
        fill_cells(grid, number_tile=5, rng=default_rng(1))
        self.assertTrue(np.all(grid != 0))

    def test_spawn_value_distribution(self):
        """Roughly 90% of spawned tiles are 2."""
        rng = default_rng(123)
        values = [int(spawn_tile(np.zeros((4, 4), dtype=int), rng=rng).sum()) for _ in range(2000)]
        ratio = values.count(2) / len(values)
        self.assertGreater(ratio, 0.85)
        self.assertLess(ratio, 0.95)


class TestTerminal(TestCase):
    """Test end of game detection."""

    def test_full_grid_without_pairs(self):
        self.assertTrue(is_terminal(FULL_GRID))

    def test_empty_cell_is_not_terminal(self):
        grid = FULL_GRID.copy()
        grid[1, 2] = 0
        self.assertFalse(is_terminal(grid))

    def test_horizontal_pair(self):
        grid = FULL_GRID.copy()
        grid[0, 1] = 2
        self.assertFalse(is_terminal(grid))

    def test_vertical_pair(self):
        grid = FULL_GRID.copy()
        grid[3, 3] = 4096
        self.assertFalse(is_terminal(grid))


if __name__ == "__main__":
    main()
