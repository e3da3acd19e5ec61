"""Interactive crossword session: player grid, orientation and focus."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..core.constants import ALPHABET, EMPTY, Orientation, VerifyResult
from ..core.exceptions import CellNotEditableError, LevelIndexError
from ..core.models import Puzzle, PuzzleGrid
from ..utils.logger import get_logger
from .answers import build_answer_grid
from .geometry import build_initial_grid, puzzle_at
from .verifier import verify_grid


LOGGER = get_logger(__name__)

Position = Tuple[int, int]


def normalize_input(text: Optional[str]) -> str:
    """Reduce raw player input to one uppercase letter, or EMPTY for a clear."""

    if not text:
        return EMPTY
    first = text.strip()[:1]
    if first not in ALPHABET:
        return EMPTY
    return first.upper()


class CrosswordSession:
    """Owns the state of the puzzle being played.

    The session is the single owner of the level index, the player grid, the
    current orientation and the focused cell. Hosts feed it input events one
    at a time and read ``grid``, ``orientation`` and ``focused`` back for
    rendering.
    """

    def __init__(self, puzzles: Sequence[Puzzle], level: int = 0) -> None:
        if not puzzles:
            raise LevelIndexError("A session needs at least one puzzle")
        self.puzzles = list(puzzles)
        self.level = level
        self.grid: PuzzleGrid = build_initial_grid(self.puzzles, level)
        self.orientation = Orientation.ACROSS
        self.focused: Optional[Position] = None
        self._focus_targets: List[List[bool]] = []
        self._reset_focus_targets()

    # ------------------------------------------------------------------
    # Level handling
    # ------------------------------------------------------------------
    @property
    def puzzle(self) -> Puzzle:
        return puzzle_at(self.puzzles, self.level)

    @property
    def level_count(self) -> int:
        return len(self.puzzles)

    def next_puzzle(self) -> int:
        """Move to the next level, wrapping to 0 after the last one."""

        return self.go_to_level((self.level + 1) % len(self.puzzles))

    def go_to_level(self, level: int) -> int:
        grid = build_initial_grid(self.puzzles, level)
        self.level = level
        self.grid = grid
        self.orientation = Orientation.ACROSS
        self.focused = None
        self._reset_focus_targets()
        LOGGER.info("Switched to level %s/%s", level + 1, len(self.puzzles))
        return level

    def reset_puzzle(self) -> None:
        """Discard player input; orientation and focus are kept."""

        self.grid = build_initial_grid(self.puzzles, self.level)
        LOGGER.debug("Level %s reset", self.level)

    # ------------------------------------------------------------------
    # Focus targets
    # ------------------------------------------------------------------
    def _reset_focus_targets(self) -> None:
        self._focus_targets = [
            [self.grid.is_editable(r, c) for c in range(self.grid.width)]
            for r in range(self.grid.height)
        ]

    def register_focus_target(self, row: int, col: int) -> None:
        if not self.grid.is_editable(row, col):
            raise CellNotEditableError(f"Cell ({row},{col}) cannot take focus")
        self._focus_targets[row][col] = True

    def unregister_focus_target(self, row: int, col: int) -> None:
        if self.grid.bounds.contains(row, col):
            self._focus_targets[row][col] = False

    def has_focus_target(self, row: int, col: int) -> bool:
        return self.grid.bounds.contains(row, col) and self._focus_targets[row][col]

    # ------------------------------------------------------------------
    # Input handling
    # ------------------------------------------------------------------
    def set_cell(self, row: int, col: int, letter: Optional[str]) -> Optional[Position]:
        """Write normalized input into an editable cell.

        Returns the newly focused cell when the write moved focus.
        """

        if not self.grid.is_editable(row, col):
            raise CellNotEditableError(f"Cell ({row},{col}) is not part of any clue")
        value = normalize_input(letter)
        self.grid.set(row, col, value)
        if value == EMPTY:
            return None
        return self.advance_focus(row, col)

    def focus_cell(self, row: int, col: int) -> Orientation:
        """Focus a cell and pick the orientation of the clue(s) running through it.

        When an across and a down clue both contain the cell, the one listed
        last in the puzzle decides.
        """

        if not self.grid.is_editable(row, col):
            raise CellNotEditableError(f"Cell ({row},{col}) cannot take focus")
        self.focused = (row, col)
        for clue in self.puzzle:
            if clue.contains(row, col):
                self.orientation = clue.orientation
        return self.orientation

    def advance_focus(self, row: int, col: int) -> Optional[Position]:
        """Focus the next empty cell after (row, col) in the current orientation."""

        if self.orientation == Orientation.ACROSS:
            candidates = ((row, c) for c in range(col + 1, self.grid.width))
        else:
            candidates = ((r, col) for r in range(row + 1, self.grid.height))
        for r, c in candidates:
            if self.has_focus_target(r, c) and self.grid.is_empty(r, c):
                self.focused = (r, c)
                return self.focused
        return None

    # ------------------------------------------------------------------
    # Verification
    # ------------------------------------------------------------------
    def answer_grid(self) -> PuzzleGrid:
        return build_answer_grid(self.puzzles, self.level)

    def verify(self) -> VerifyResult:
        result = verify_grid(self.grid, self.answer_grid())
        LOGGER.debug("Level %s verified: %s", self.level, result.value)
        return result

    def solve(self) -> None:
        """Replace the player grid with the answer grid."""

        self.grid = self.answer_grid()
