"""Data models supporting the crossword engine."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

from .constants import ALPHABET, BLOCKED, EMPTY, Bounds, CellType, Orientation
from .exceptions import MalformedPuzzleError


@dataclass(frozen=True)
class Clue:
    """One word placement: answer, 1-based start coordinate and orientation."""

    answer: str
    start_x: int
    start_y: int
    orientation: Orientation
    hint: str = ""
    position: int = 0

    def __post_init__(self) -> None:
        answer = (self.answer or "").strip()
        if not answer or not ALPHABET.issuperset(answer):
            raise MalformedPuzzleError(f"Clue answer must be non-empty A-Z letters, got {self.answer!r}")
        if self.start_x < 1 or self.start_y < 1:
            raise MalformedPuzzleError(
                f"Clue {answer!r} starts at ({self.start_x},{self.start_y}); coordinates are 1-based"
            )
        orientation = self.orientation
        if isinstance(orientation, str) and not isinstance(orientation, Orientation):
            orientation = orientation.strip().lower()
        try:
            orientation = Orientation(orientation)
        except ValueError as exc:
            raise MalformedPuzzleError(f"Unknown orientation {self.orientation!r}") from exc
        object.__setattr__(self, "answer", answer.upper())
        object.__setattr__(self, "orientation", orientation)

    @property
    def length(self) -> int:
        return len(self.answer)

    @property
    def end_x(self) -> int:
        """1-based column of the last letter."""
        return self.start_x + (self.length - 1 if self.orientation == Orientation.ACROSS else 0)

    @property
    def end_y(self) -> int:
        """1-based row of the last letter."""
        return self.start_y + (self.length - 1 if self.orientation == Orientation.DOWN else 0)

    def cells(self) -> List[Tuple[int, int]]:
        """0-based (row, col) pairs covered by the answer, in letter order."""
        dr, dc = self.orientation.step
        row, col = self.start_y - 1, self.start_x - 1
        return [(row + dr * i, col + dc * i) for i in range(self.length)]

    def contains(self, row: int, col: int) -> bool:
        x, y = self.start_x - 1, self.start_y - 1
        if self.orientation == Orientation.ACROSS:
            return row == y and x <= col < x + self.length
        return col == x and y <= row < y + self.length


Puzzle = Sequence[Clue]


class PuzzleGrid:
    """Rectangular grid of cells holding BLOCKED, EMPTY or an uppercase letter."""

    def __init__(self, bounds: Bounds, fill: str = BLOCKED) -> None:
        self.bounds = bounds
        self.cells: List[List[str]] = [[fill] * bounds.cols for _ in range(bounds.rows)]

    @classmethod
    def from_rows(cls, rows: Sequence[Union[str, Sequence[str]]]) -> "PuzzleGrid":
        """Build a grid from row strings or row lists, e.g. ``["CAT", "A##"]``.

        ``#`` marks a blocked cell and ``.`` an empty one when rows are strings.
        """
        cols = len(rows[0]) if rows else 0
        grid = cls(Bounds(rows=len(rows), cols=cols))
        for r, row in enumerate(rows):
            if len(row) != cols:
                raise MalformedPuzzleError("All rows must have the same width")
            for c, value in enumerate(row):
                grid.cells[r][c] = EMPTY if value == "." else value
        return grid

    @property
    def height(self) -> int:
        return self.bounds.rows

    @property
    def width(self) -> int:
        return self.bounds.cols

    def cell(self, row: int, col: int) -> str:
        return self.cells[row][col]

    def set(self, row: int, col: int, value: str) -> None:
        self.cells[row][col] = value

    def cell_type(self, row: int, col: int) -> CellType:
        value = self.cells[row][col]
        if value == BLOCKED:
            return CellType.BLOCKED
        if value == EMPTY:
            return CellType.EMPTY
        return CellType.LETTER

    def is_editable(self, row: int, col: int) -> bool:
        return self.bounds.contains(row, col) and self.cells[row][col] != BLOCKED

    def is_empty(self, row: int, col: int) -> bool:
        return self.cells[row][col] == EMPTY

    @property
    def filled_ratio(self) -> float:
        playable = 0
        filled = 0
        for row in self.cells:
            for value in row:
                if value == BLOCKED:
                    continue
                playable += 1
                if value != EMPTY:
                    filled += 1
        return (filled / playable) if playable else 0.0

    def copy(self) -> "PuzzleGrid":
        return copy.deepcopy(self)

    def to_jsonable(self) -> List[List[str | None]]:
        """Rows of cells with ``None`` for blocked cells."""
        return [[None if value == BLOCKED else value for value in row] for row in self.cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PuzzleGrid):
            return NotImplemented
        return self.bounds == other.bounds and self.cells == other.cells

    def __repr__(self) -> str:
        return f"PuzzleGrid({self.height}x{self.width})"
