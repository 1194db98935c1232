# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Word jumble puzzle generator."""

from .models import Difficulty, Direction, Position, Puzzle
from .exceptions import (
    ErrorKind, JumbleError, InvalidDifficultyError, WordTooLongError,
    WordTooShortError, InvalidCharacterError,
)
from .validation import parse_difficulty, validate_word
from .random_source import RandomSource, get_default_source, seed_default_source
from .puzzle_builder import PuzzleBuilder, BuildResult, build_puzzle, valid_directions
from .renderer import render_puzzle, describe_puzzle

__version__ = "1.0.0"

__all__ = [
    # Models
    "Difficulty",
    "Direction",
    "Position",
    "Puzzle",
    # Errors
    "ErrorKind",
    "JumbleError",
    "InvalidDifficultyError",
    "WordTooLongError",
    "WordTooShortError",
    "InvalidCharacterError",
    # Validation
    "parse_difficulty",
    "validate_word",
    # Randomness
    "RandomSource",
    "get_default_source",
    "seed_default_source",
    # Construction
    "PuzzleBuilder",
    "BuildResult",
    "build_puzzle",
    "valid_directions",
    # Rendering
    "render_puzzle",
    "describe_puzzle",
]
