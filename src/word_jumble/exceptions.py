# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Exceptions raised while building a jumble."""

from enum import Enum


class ErrorKind(Enum):
    INVALID_DIFFICULTY = "invalid_difficulty"
    WORD_TOO_LONG = "word_too_long"
    WORD_TOO_SHORT = "word_too_short"
    INVALID_CHARACTER = "invalid_character"


class JumbleError(Exception):
    """Raised when a jumble cannot be built from the given inputs."""
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidDifficultyError(JumbleError):
    """Difficulty label is not easy, medium or hard."""
    kind = ErrorKind.INVALID_DIFFICULTY


class WordTooLongError(JumbleError):
    """Hidden word has more than 10 letters."""
    kind = ErrorKind.WORD_TOO_LONG


class WordTooShortError(JumbleError):
    """Hidden word has fewer than 3 letters."""
    kind = ErrorKind.WORD_TOO_SHORT


class InvalidCharacterError(JumbleError):
    """Hidden word contains something other than a-z or A-Z."""
    kind = ErrorKind.INVALID_CHARACTER
