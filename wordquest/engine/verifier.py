"""Cell-by-cell comparison of a player grid with its answer grid."""

from __future__ import annotations

from typing import Optional, Tuple

from ..core.constants import VerifyResult
from ..core.exceptions import MalformedPuzzleError
from ..core.models import PuzzleGrid


def first_mismatch(grid: PuzzleGrid, answer: PuzzleGrid) -> Optional[Tuple[int, int]]:
    """Position of the first differing cell in row-major order, or ``None``."""

    if grid.bounds != answer.bounds:
        raise MalformedPuzzleError(
            f"Cannot compare a {grid.height}x{grid.width} grid with a "
            f"{answer.height}x{answer.width} answer grid"
        )
    for r in range(grid.height):
        for c in range(grid.width):
            if grid.cell(r, c) != answer.cell(r, c):
                return r, c
    return None


def verify_grid(grid: PuzzleGrid, answer: PuzzleGrid) -> VerifyResult:
    """CORRECT only when every cell equals the answer; EMPTY never matches."""

    if first_mismatch(grid, answer) is None:
        return VerifyResult.CORRECT
    return VerifyResult.INCORRECT
