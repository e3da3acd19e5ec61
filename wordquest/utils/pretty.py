"""Pretty-print helpers for crossword grids and clue lists."""

from __future__ import annotations

import sys
from typing import Dict, List, Optional, Tuple

from ..core.constants import CellType, Orientation
from ..core.models import Puzzle, PuzzleGrid
from ..engine.geometry import clue_labels, clues_by_orientation


SYMBOLS = {
    CellType.BLOCKED: "#",
    CellType.EMPTY: ".",
}

HEADINGS = {Orientation.ACROSS: "Across", Orientation.DOWN: "Down"}


def cell_symbol(grid: PuzzleGrid, row: int, col: int) -> str:
    cell_type = grid.cell_type(row, col)
    if cell_type == CellType.LETTER:
        return grid.cell(row, col)
    return SYMBOLS[cell_type]


def format_grid(
    grid: PuzzleGrid,
    *,
    labels: Optional[Dict[Tuple[int, int], List[int]]] = None,
    focused: Optional[Tuple[int, int]] = None,
) -> str:
    """Render the grid with row/column indices.

    Clue numbers from ``labels`` are printed in front of the first letter of
    each word and the focused cell is wrapped in brackets.
    """

    labels = labels or {}
    width = grid.width
    header_cells = [f"{c:>4}" for c in range(width)]
    lines = ["    " + "".join(header_cells)]
    lines.append("    " + "-" * (4 * width))
    for r in range(grid.height):
        row_cells = []
        for c in range(width):
            symbol = cell_symbol(grid, r, c)
            if (r, c) == focused:
                symbol = f"[{symbol}]"
            number = labels.get((r, c))
            prefix = str(number[0]) if number else ""
            row_cells.append(f"{prefix + symbol:>4}")
        lines.append(f"{r:>2} |" + "".join(row_cells))
    return "\n".join(lines)


def format_clues(puzzle: Puzzle) -> str:
    """Across and Down clue lists as ``position. hint`` lines."""

    lines: List[str] = []
    for orientation, clues in clues_by_orientation(puzzle).items():
        lines.append(HEADINGS[orientation])
        for clue in clues:
            lines.append(f"  {clue.position}. {clue.hint} ({clue.length})")
    return "\n".join(lines)


def pretty_print_puzzle(
    grid: PuzzleGrid,
    puzzle: Puzzle,
    *,
    label: str | None = None,
    focused: Optional[Tuple[int, int]] = None,
    stream=None,
) -> None:
    """Print the clue lists followed by the grid."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_clues(puzzle), file=stream)
    print(file=stream)
    print(format_grid(grid, labels=clue_labels(puzzle), focused=focused), file=stream)
