# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Puzzle Builder

Builds a word jumble:
1. Validate difficulty and hidden word
2. Size the grid (difficulty multiplier x word length)
3. Pick a random anchor and a direction that fits from it
4. Fill the grid row by row, writing the word along its line and
   random letters everywhere else
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .exceptions import ErrorKind, JumbleError
from .models import Difficulty, Direction, Position, Puzzle
from .random_source import RandomSource, get_default_source
from .validation import parse_difficulty, validate_word


logger = logging.getLogger(__name__)

# Evaluation order of directions; direction choice indexes into this order.
DIRECTION_ORDER = [Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST]


def grid_size(difficulty: Difficulty, word: str) -> int:
    """Side length of the grid for a word at a difficulty."""
    return difficulty.multiplier * len(word)


def valid_directions(row: int, col: int, size: int, word_length: int) -> List[Direction]:
    """
    Directions in which a word fits when read from (row, col).

    Args:
        row: Anchor row
        col: Anchor column
        size: Grid side length
        word_length: Length of the hidden word

    Returns:
        Fitting directions, in north, south, east, west order
    """
    letters_to_add = word_length - 1
    fits = {
        Direction.NORTH: row - letters_to_add >= 0,
        Direction.SOUTH: row + letters_to_add < size,
        Direction.EAST: col + letters_to_add < size,
        Direction.WEST: col - letters_to_add >= 0,
    }
    return [d for d in DIRECTION_ORDER if fits[d]]


@dataclass
class BuildResult:
    """Outcome of PuzzleBuilder.try_build: a puzzle or the reason there is none."""
    puzzle: Optional[Puzzle] = None
    error: Optional[JumbleError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error else None

    @property
    def message(self) -> Optional[str]:
        return self.error.message if self.error else None

    def __str__(self):
        if self.ok:
            return f"OK: {self.puzzle.size}x{self.puzzle.size} jumble"
        return f"{self.kind.value}: {self.message}"


class PuzzleBuilder:
    """Builds word jumbles from a hidden word and a difficulty label."""

    def __init__(self, random_source: Optional[RandomSource] = None):
        """
        Initialize builder.

        Args:
            random_source: Source for all random draws. Defaults to the
                shared process-wide source.
        """
        self.random = random_source or get_default_source()

    def build(self, word: str, difficulty: str) -> Puzzle:
        """
        Build a jumble.

        Args:
            word: Word to hide (3-10 ASCII letters)
            difficulty: "easy", "medium" or "hard"

        Returns:
            Fully filled Puzzle

        Raises:
            JumbleError: If the difficulty or word is invalid
        """
        level = parse_difficulty(difficulty)
        hidden_word = validate_word(word)

        size = grid_size(level, hidden_word)
        anchor, direction = self.choose_placement(size, len(hidden_word))
        grid = self.generate_grid(size, direction, anchor, hidden_word)

        logger.info(
            f"Built {size}x{size} jumble for '{hidden_word}' ({level.label}): "
            f"anchor=({anchor.row}, {anchor.col}), direction={direction.label}"
        )

        return Puzzle(
            hidden_word=hidden_word,
            difficulty=level,
            size=size,
            direction=direction,
            anchor=anchor,
            grid=grid,
        )

    def try_build(self, word: str, difficulty: str) -> BuildResult:
        """Build a jumble, reporting invalid input in the result instead of raising."""
        try:
            return BuildResult(puzzle=self.build(word, difficulty))
        except JumbleError as e:
            logger.warning(f"Rejected jumble input: {e.message}")
            return BuildResult(error=e)

    def choose_placement(self, size: int, word_length: int) -> Tuple[Position, Direction]:
        """
        Pick a random anchor and a direction that fits from it.

        The anchor row is drawn before the column. When the grid is exactly
        as long as the word, interior anchors fit no direction and the
        anchor is drawn again.

        Returns:
            (anchor, direction)
        """
        while True:
            row = self.random.randrange(size)
            col = self.random.randrange(size)
            directions = valid_directions(row, col, size, word_length)
            if directions:
                break
            logger.debug(f"Anchor ({row}, {col}) fits no direction, redrawing")

        assert directions, "anchor must fit at least one direction"
        direction = directions[self.random.randrange(len(directions))]
        logger.debug(
            f"Anchor ({row}, {col}) fits {[d.label for d in directions]}, "
            f"chose {direction.label}"
        )
        return Position(row, col), direction

    def generate_grid(
        self,
        size: int,
        direction: Direction,
        anchor: Position,
        word: str
    ) -> List[List[str]]:
        """
        Fill a size x size grid with the word and random letters.

        The grid is filled west to east, north to south. South and east
        words are therefore written in reading order starting at the
        anchor. North and west words are met from their far end first, so
        writing starts at the "corner" word-length-1 cells before the
        anchor with the last letter and walks backwards through the word:

            FACE east:   F A C E
            FACE west:   E C A F   (read right to left from the anchor F)

        Args:
            size: Grid side length
            direction: Reading direction from the anchor
            anchor: Cell holding the word's first letter
            word: Hidden word

        Returns:
            List of rows, each a list of one-letter strings
        """
        letters_to_add = len(word) - 1

        if direction in (Direction.SOUTH, Direction.EAST):
            corner = anchor
            word_index = 0
            step = 1
        elif direction == Direction.NORTH:
            corner = Position(anchor.row - letters_to_add, anchor.col)
            word_index = letters_to_add
            step = -1
        else:  # West
            corner = Position(anchor.row, anchor.col - letters_to_add)
            word_index = letters_to_add
            step = -1

        vertical = direction.is_vertical
        placing = False
        grid = []
        for row in range(size):
            cells = []
            for col in range(size):
                if row == corner.row and col == corner.col:
                    placing = True

                on_line = col == corner.col if vertical else row == corner.row

                if placing and on_line:
                    cells.append(word[word_index])
                    word_index += step
                    if word_index < 0 or word_index == len(word):
                        placing = False
                else:
                    cells.append(self.random.random_letter())
            grid.append(cells)

        return grid


def build_puzzle(
    word: str,
    difficulty: str,
    random_source: Optional[RandomSource] = None
) -> Puzzle:
    """Build a jumble with a one-off PuzzleBuilder."""
    return PuzzleBuilder(random_source).build(word, difficulty)
