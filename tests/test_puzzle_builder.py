# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for puzzle construction."""

import os
import string
import sys
import unittest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from helpers import ScriptedSource, FILLER

from word_jumble.exceptions import ErrorKind, WordTooShortError, InvalidDifficultyError
from word_jumble.models import Difficulty, Direction, Position
from word_jumble.puzzle_builder import (
    PuzzleBuilder, build_puzzle, grid_size, valid_directions
)
from word_jumble.random_source import RandomSource, seed_default_source


WORDS = ["cat", "Dog", "FACE", "apple", "Banana", "puzzles", "elephant",
         "crossword", "abcdefghij"]


class TestRandomSource(unittest.TestCase):
    """Tests for RandomSource."""

    def test_ranges(self):
        """Test integers and letters stay in range."""
        source = RandomSource(0)
        for n in (1, 2, 26, 30):
            for _ in range(100):
                self.assertTrue(0 <= source.randrange(n) < n)
        for _ in range(200):
            self.assertIn(source.random_letter(), string.ascii_lowercase)

    def test_reseed_restarts_stream(self):
        """Test reseeding replays the same draws."""
        source = RandomSource(10)
        first = [source.randrange(100) for _ in range(5)]
        source.reseed(10)

        self.assertEqual([source.randrange(100) for _ in range(5)], first)


class TestValidDirections(unittest.TestCase):
    """Tests for direction fitting."""

    def test_order_is_north_south_east_west(self):
        """Test directions come back in evaluation order."""
        # Centre of a 5x5 grid fits a 3-letter word every way
        self.assertEqual(
            valid_directions(2, 2, 5, 3),
            [Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST]
        )

    def test_corner_anchor(self):
        """Test the top-left anchor only fits south and east."""
        self.assertEqual(
            valid_directions(0, 0, 3, 3), [Direction.SOUTH, Direction.EAST]
        )

    def test_bottom_right_anchor(self):
        """Test the bottom-right anchor only fits north and west."""
        self.assertEqual(
            valid_directions(2, 2, 3, 3), [Direction.NORTH, Direction.WEST]
        )

    def test_every_anchor_fits_for_medium_and_hard(self):
        """Test all anchors fit a direction when the grid is at least twice the word."""
        for length in range(3, 11):
            for difficulty in (Difficulty.MEDIUM, Difficulty.HARD):
                size = difficulty.multiplier * length
                for row in range(size):
                    for col in range(size):
                        self.assertTrue(
                            valid_directions(row, col, size, length),
                            f"no direction at ({row}, {col}) size={size} length={length}"
                        )

    def test_easy_only_edge_anchors_fit(self):
        """Test only edge anchors fit when the grid is as long as the word."""
        for length in range(3, 11):
            size = length
            for row in range(size):
                for col in range(size):
                    on_edge = row in (0, size - 1) or col in (0, size - 1)
                    self.assertEqual(
                        bool(valid_directions(row, col, size, length)), on_edge,
                        f"({row}, {col}) size={size}"
                    )


class TestPlacement(unittest.TestCase):
    """Tests for anchor and direction choice with scripted randomness."""

    def test_cat_easy_east(self):
        """Test cat/easy with anchor (0, 0) and the second valid direction."""
        # row, col, direction index into [SOUTH, EAST]
        source = ScriptedSource([0, 0, 1])
        puzzle = PuzzleBuilder(source).build("cat", "easy")

        self.assertEqual(puzzle.size, 3)
        self.assertEqual(puzzle.anchor, Position(0, 0))
        self.assertEqual(puzzle.direction, Direction.EAST)
        self.assertEqual(puzzle.grid[0], ["c", "a", "t"])
        self.assertEqual(puzzle.grid[1], [FILLER] * 3)
        self.assertEqual(puzzle.grid[2], [FILLER] * 3)
        self.assertEqual(source.calls, [3, 3, 2])

    def test_interior_anchor_is_redrawn(self):
        """Test an anchor that fits nothing is replaced by a new draw."""
        # (1, 1) fits nothing in 3x3; (2, 2) fits [NORTH, WEST]
        source = ScriptedSource([1, 1, 2, 2, 0])
        puzzle = PuzzleBuilder(source).build("cat", "easy")

        self.assertEqual(puzzle.anchor, Position(2, 2))
        self.assertEqual(puzzle.direction, Direction.NORTH)
        self.assertEqual([puzzle.grid[r][2] for r in range(3)], ["t", "a", "c"])
        self.assertEqual(puzzle.read_word(), "cat")

    def test_west_word_written_backwards(self):
        """Test a west word appears reversed in row-major order."""
        # size 8: (2, 5) fits [SOUTH, WEST]
        source = ScriptedSource([2, 5, 1])
        puzzle = PuzzleBuilder(source).build("face", "medium")

        self.assertEqual(puzzle.direction, Direction.WEST)
        self.assertEqual(puzzle.grid[2][2:6], ["e", "c", "a", "f"])
        self.assertEqual(puzzle.read_word(), "face")

    def test_north_word_written_backwards(self):
        """Test a north word appears reversed top to bottom."""
        # size 6: (4, 1) fits [NORTH, EAST]
        source = ScriptedSource([4, 1, 0])
        puzzle = PuzzleBuilder(source).build("dog", "medium")

        self.assertEqual(puzzle.direction, Direction.NORTH)
        self.assertEqual([puzzle.grid[r][1] for r in range(2, 5)], ["g", "o", "d"])
        self.assertEqual(puzzle.read_word(), "dog")

    def test_south_word_in_reading_order(self):
        """Test a south word appears in order below the anchor."""
        # size 9 (hard): (1, 0) fits [SOUTH, EAST]
        source = ScriptedSource([1, 0, 0])
        puzzle = PuzzleBuilder(source).build("Sun", "hard")

        self.assertEqual(puzzle.size, 9)
        self.assertEqual(puzzle.direction, Direction.SOUTH)
        self.assertEqual([puzzle.grid[r][0] for r in range(1, 4)], ["S", "u", "n"])

    def test_only_word_cells_hold_word_letters(self):
        """Test every cell off the word's run is filler."""
        source = ScriptedSource([3, 3, 2])
        puzzle = PuzzleBuilder(source).build("abcd", "medium")
        word_cells = {(p.row, p.col) for p in puzzle.word_cells()}

        for row in range(puzzle.size):
            for col in range(puzzle.size):
                if (row, col) not in word_cells:
                    self.assertEqual(puzzle.get_cell(row, col), FILLER)
        self.assertEqual(len(word_cells), 4)


class TestBuildProperties(unittest.TestCase):
    """Tests that hold for any valid input."""

    def test_size_shape_and_word(self):
        """Test size, grid shape and hidden word for many seeds."""
        for seed in range(20):
            source = RandomSource(seed)
            builder = PuzzleBuilder(source)
            for word in WORDS:
                for label in ("easy", "medium", "hard"):
                    puzzle = builder.build(word, label)
                    difficulty = Difficulty[label.upper()]

                    self.assertEqual(puzzle.size, difficulty.multiplier * len(word))
                    self.assertEqual(len(puzzle.grid), puzzle.size)
                    for row in puzzle.grid:
                        self.assertEqual(len(row), puzzle.size)
                    self.assertEqual(puzzle.read_word(), word)
                    self.assertEqual(puzzle.hidden_word, word)
                    self.assertEqual(puzzle.difficulty, difficulty)

    def test_filler_is_lowercase(self):
        """Test cells off the word's run are lowercase letters."""
        builder = PuzzleBuilder(RandomSource(7))
        for word in WORDS:
            puzzle = builder.build(word.upper(), "hard")
            word_cells = {(p.row, p.col) for p in puzzle.word_cells()}
            for row in range(puzzle.size):
                for col in range(puzzle.size):
                    if (row, col) not in word_cells:
                        self.assertIn(puzzle.get_cell(row, col), string.ascii_lowercase)

    def test_easy_anchor_on_edge(self):
        """Test easy puzzles always anchor on the grid edge."""
        builder = PuzzleBuilder(RandomSource(3))
        for _ in range(50):
            puzzle = builder.build("cat", "easy")
            last = puzzle.size - 1
            self.assertTrue(
                puzzle.row_pos in (0, last) or puzzle.col_pos in (0, last)
            )
            self.assertEqual(puzzle.read_word(), "cat")

    def test_same_seed_same_puzzle(self):
        """Test a seeded source reproduces the puzzle."""
        first = PuzzleBuilder(RandomSource(42)).build("planet", "medium")
        second = PuzzleBuilder(RandomSource(42)).build("planet", "medium")

        self.assertEqual(first.grid, second.grid)
        self.assertEqual(first.anchor, second.anchor)
        self.assertEqual(first.direction, second.direction)

    def test_default_source_is_shared(self):
        """Test builders without a source share one stream."""
        seed_default_source(11)
        first = [PuzzleBuilder().build("stream", "medium").grid for _ in range(2)]
        seed_default_source(11)
        second = [build_puzzle("stream", "medium").grid for _ in range(2)]

        self.assertEqual(first, second)

    def test_grid_size(self):
        """Test grid sizing."""
        self.assertEqual(grid_size(Difficulty.EASY, "cat"), 3)
        self.assertEqual(grid_size(Difficulty.HARD, "abcdefghij"), 30)


class TestBuildErrors(unittest.TestCase):
    """Tests for rejected input."""

    def test_build_raises(self):
        """Test build raises on invalid input."""
        builder = PuzzleBuilder(RandomSource(1))
        with self.assertRaises(WordTooShortError):
            builder.build("ab", "easy")
        with self.assertRaises(InvalidDifficultyError):
            builder.build("abc", "Easy")

    def test_difficulty_checked_before_word(self):
        """Test a bad difficulty is reported even when the word is also bad."""
        with self.assertRaises(InvalidDifficultyError):
            PuzzleBuilder(RandomSource(1)).build("a", "extreme")

    def test_try_build_reports_error(self):
        """Test try_build returns the error kind instead of raising."""
        builder = PuzzleBuilder(RandomSource(1))
        cases = {
            ("cat", "Easy"): ErrorKind.INVALID_DIFFICULTY,
            ("abcdefghijk", "easy"): ErrorKind.WORD_TOO_LONG,
            ("ab", "easy"): ErrorKind.WORD_TOO_SHORT,
            ("c4t", "easy"): ErrorKind.INVALID_CHARACTER,
        }
        for (word, label), kind in cases.items():
            result = builder.try_build(word, label)
            self.assertFalse(result.ok)
            self.assertIsNone(result.puzzle)
            self.assertEqual(result.kind, kind)
            self.assertTrue(result.message)

    def test_try_build_success(self):
        """Test try_build wraps a built puzzle."""
        result = PuzzleBuilder(RandomSource(1)).try_build("river", "hard")

        self.assertTrue(result.ok)
        self.assertIsNone(result.kind)
        self.assertEqual(result.puzzle.read_word(), "river")


if __name__ == '__main__':
    unittest.main()
