# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Plain-text rendering of jumbles."""

from .models import Puzzle


def render_puzzle(puzzle: Puzzle, show_solution: bool = False) -> str:
    """
    Convert the grid to text, one row per line.

    Args:
        puzzle: Puzzle to render
        show_solution: Mask every cell that is not part of the hidden word

    Returns:
        Grid text with cells separated by spaces
    """
    word_cells = set()
    if show_solution:
        word_cells = {(p.row, p.col) for p in puzzle.word_cells()}

    lines = []
    for r, row in enumerate(puzzle.grid):
        if show_solution:
            cells = [
                letter if (r, c) in word_cells else "."
                for c, letter in enumerate(row)
            ]
        else:
            cells = row
        lines.append(" ".join(cells))
    return "\n".join(lines)


def describe_puzzle(puzzle: Puzzle) -> str:
    """Summary line giving the hidden word's location."""
    return (
        f"Hidden word '{puzzle.hidden_word}' ({puzzle.difficulty.label}, "
        f"{puzzle.size}x{puzzle.size}) starts at row {puzzle.row_pos}, "
        f"column {puzzle.col_pos}, reading {puzzle.direction.label}"
    )
