# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Input validation for the jumble builder.

Difficulty labels are matched exactly (no case folding). Hidden words must
be 3 to 10 ASCII letters; their case is preserved.
"""

import string

from .exceptions import (
    InvalidDifficultyError, WordTooLongError, WordTooShortError,
    InvalidCharacterError,
)
from .models import Difficulty


MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 10

VALID_DIFFICULTIES = [d.label for d in Difficulty]

_ALLOWED_LETTERS = frozenset(string.ascii_letters)


def parse_difficulty(label: str) -> Difficulty:
    """
    Map a difficulty label to its Difficulty.

    Args:
        label: One of "easy", "medium" or "hard" (case-sensitive)

    Returns:
        Matching Difficulty

    Raises:
        InvalidDifficultyError: For any other label
    """
    for difficulty in Difficulty:
        if label == difficulty.label:
            return difficulty

    raise InvalidDifficultyError("Difficulty must be either easy, medium or hard.")


def validate_word(word: str) -> str:
    """
    Check that a word can be hidden in a jumble.

    Args:
        word: Candidate hidden word

    Returns:
        The word, unchanged

    Raises:
        WordTooLongError: More than MAX_WORD_LENGTH characters
        WordTooShortError: Fewer than MIN_WORD_LENGTH characters
        InvalidCharacterError: A character outside a-z and A-Z
    """
    if len(word) > MAX_WORD_LENGTH:
        raise WordTooLongError(
            f"Word must not be greater than {MAX_WORD_LENGTH} characters"
        )

    if len(word) < MIN_WORD_LENGTH:
        raise WordTooShortError(
            f"Word must not be less than {MIN_WORD_LENGTH} characters"
        )

    for c in word:
        if c not in _ALLOWED_LETTERS:
            raise InvalidCharacterError(
                f"Only characters between a-z are allowed, got '{c}'."
            )

    return word
