"""Grid geometry derived from a puzzle's clue list.

Both the player grid and the answer grid are sized by :func:`compute_bounds`,
so the verifier can always compare them cell by cell.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Sequence, Tuple

from ..core.constants import BLOCKED, EMPTY, Bounds, Orientation
from ..core.exceptions import LevelIndexError, MalformedPuzzleError
from ..core.models import Clue, Puzzle, PuzzleGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def puzzle_at(puzzles: Sequence[Puzzle], level: int) -> Puzzle:
    """Return the puzzle for ``level`` or raise :class:`LevelIndexError`."""

    if not 0 <= level < len(puzzles):
        raise LevelIndexError(f"No puzzle for level {level} ({len(puzzles)} available)")
    puzzle = puzzles[level]
    if not puzzle:
        raise MalformedPuzzleError(f"Puzzle for level {level} has no clues")
    return puzzle


def compute_bounds(puzzle: Puzzle) -> Bounds:
    """Grid size from the largest 1-based coordinate any clue reaches."""

    max_x = 0
    max_y = 0
    for clue in puzzle:
        max_x = max(max_x, clue.end_x)
        max_y = max(max_y, clue.end_y)
    return Bounds(rows=max_y, cols=max_x)


def iter_clue_cells(clue: Clue, bounds: Bounds) -> List[Tuple[int, int]]:
    """Cells of ``clue``; raises if any falls outside ``bounds``."""

    cells = clue.cells()
    for row, col in cells:
        if not bounds.contains(row, col):
            raise MalformedPuzzleError(
                f"Clue {clue.answer!r} reaches ({row},{col}) outside a "
                f"{bounds.rows}x{bounds.cols} grid"
            )
    return cells


def build_initial_grid(puzzles: Sequence[Puzzle], level: int) -> PuzzleGrid:
    """Blank player grid: clue cells EMPTY, everything else BLOCKED."""

    puzzle = puzzle_at(puzzles, level)
    bounds = compute_bounds(puzzle)
    grid = PuzzleGrid(bounds, fill=BLOCKED)
    for clue in puzzle:
        for row, col in iter_clue_cells(clue, bounds):
            grid.set(row, col, EMPTY)
    LOGGER.debug("Built %sx%s grid for level %s", bounds.rows, bounds.cols, level)
    return grid


def clue_labels(puzzle: Puzzle) -> Dict[Tuple[int, int], List[int]]:
    """Clue numbers to print in each clue's first cell."""

    labels: Dict[Tuple[int, int], List[int]] = defaultdict(list)
    for clue in puzzle:
        key = (clue.start_y - 1, clue.start_x - 1)
        if clue.position not in labels[key]:
            labels[key].append(clue.position)
    return dict(labels)


def clues_by_orientation(puzzle: Puzzle) -> Dict[Orientation, List[Clue]]:
    """Across and Down clue lists, each in puzzle order."""

    grouped: Dict[Orientation, List[Clue]] = {Orientation.ACROSS: [], Orientation.DOWN: []}
    for clue in puzzle:
        grouped[clue.orientation].append(clue)
    return grouped
