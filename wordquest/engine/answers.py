"""Fully solved reference grid for a puzzle."""

from __future__ import annotations

from typing import Sequence

from ..core.constants import BLOCKED
from ..core.models import Puzzle, PuzzleGrid
from ..utils.logger import get_logger
from .geometry import compute_bounds, iter_clue_cells, puzzle_at


LOGGER = get_logger(__name__)


def build_answer_grid(puzzles: Sequence[Puzzle], level: int) -> PuzzleGrid:
    """Answer grid sized like :func:`build_initial_grid`, letters in clue cells.

    Overlapping clues that disagree keep the letter of the clue listed last.
    """

    puzzle = puzzle_at(puzzles, level)
    bounds = compute_bounds(puzzle)
    grid = PuzzleGrid(bounds, fill=BLOCKED)
    for clue in puzzle:
        for (row, col), letter in zip(iter_clue_cells(clue, bounds), clue.answer):
            existing = grid.cell(row, col)
            if existing != BLOCKED and existing != letter:
                LOGGER.warning(
                    "Level %s: clue %r overwrites %r with %r at (%s,%s)",
                    level,
                    clue.answer,
                    existing,
                    letter,
                    row,
                    col,
                )
            grid.set(row, col, letter)
    return grid
