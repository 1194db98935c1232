"""
Data models for the word jumble generator.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Dict, Tuple, Any


class Difficulty(Enum):
    """Puzzle difficulty. The value is the grid size multiplier."""
    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def multiplier(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        return self.name.lower()


class Direction(Enum):
    """Reading direction of the hidden word, starting from the anchor."""
    NORTH = "n"
    SOUTH = "s"
    EAST = "e"
    WEST = "w"

    @property
    def delta(self) -> Tuple[int, int]:
        """(row, col) step taken when reading one letter further."""
        return _DELTAS[self]

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.NORTH, Direction.SOUTH)

    @property
    def label(self) -> str:
        return self.name.lower()


_DELTAS = {
    Direction.NORTH: (-1, 0),
    Direction.SOUTH: (1, 0),
    Direction.EAST: (0, 1),
    Direction.WEST: (0, -1),
}


@dataclass(frozen=True)
class Position:
    """A 0-indexed (row, col) grid cell."""
    row: int
    col: int

    def step(self, direction: Direction, count: int = 1) -> 'Position':
        dr, dc = direction.delta
        return Position(self.row + dr * count, self.col + dc * count)


@dataclass
class Puzzle:
    """
    A generated word jumble.

    The grid is fully materialized when the puzzle is built. Reading
    len(hidden_word) cells from the anchor in the puzzle's direction
    spells the hidden word; every other cell is a random lowercase letter.
    """
    hidden_word: str
    difficulty: Difficulty
    size: int
    direction: Direction
    anchor: Position
    grid: List[List[str]] = field(default_factory=list)

    @property
    def row_pos(self) -> int:
        return self.anchor.row

    @property
    def col_pos(self) -> int:
        return self.anchor.col

    def get_cell(self, row: int, col: int) -> str:
        """Get the letter at a position."""
        return self.grid[row][col]

    def get_grid(self) -> List[List[str]]:
        """Return an independent copy of the grid."""
        return [list(row) for row in self.grid]

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    def word_cells(self) -> List[Position]:
        """Cells holding the hidden word, in reading order."""
        return [
            self.anchor.step(self.direction, i)
            for i in range(len(self.hidden_word))
        ]

    def read_word(self) -> str:
        """Read the run that starts at the anchor in the puzzle's direction."""
        return "".join(
            self.get_cell(cell.row, cell.col) for cell in self.word_cells()
        )

    def copy(self) -> 'Puzzle':
        """Duplicate the puzzle; the copy owns its own grid."""
        return Puzzle(
            hidden_word=self.hidden_word,
            difficulty=self.difficulty,
            size=self.size,
            direction=self.direction,
            anchor=self.anchor,
            grid=self.get_grid(),
        )

    def __copy__(self) -> 'Puzzle':
        return self.copy()

    def __deepcopy__(self, memo) -> 'Puzzle':
        return self.copy()

    def assign(self, other: 'Puzzle') -> 'Puzzle':
        """
        Overwrite this puzzle with a duplicate of another one.

        Assigning a puzzle to itself leaves it untouched.
        """
        if other is self:
            return self

        self.hidden_word = other.hidden_word
        self.difficulty = other.difficulty
        self.size = other.size
        self.direction = other.direction
        self.anchor = other.anchor
        self.grid = other.get_grid()
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert puzzle to a plain dictionary."""
        return {
            'hidden_word': self.hidden_word,
            'difficulty': self.difficulty.label,
            'size': self.size,
            'direction': self.direction.label,
            'anchor': {'row': self.anchor.row, 'col': self.anchor.col},
            'grid': ["".join(row) for row in self.grid],
        }
