"""Shared constants and enumerations for the crossword engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from string import ascii_letters
from typing import Tuple


# Cell sentinels. Letters are stored as single uppercase characters, so
# neither marker can collide with a filled cell.
BLOCKED = "#"
EMPTY = ""

# Cells and answers are limited to the unaccented Latin alphabet.
ALPHABET = frozenset(ascii_letters)


class CellType(str, Enum):
    """Classification of a grid cell."""

    BLOCKED = "BLOCKED"
    EMPTY = "EMPTY"
    LETTER = "LETTER"


class Orientation(str, Enum):
    """Direction a word is laid out in."""

    ACROSS = "across"
    DOWN = "down"

    @property
    def step(self) -> Tuple[int, int]:
        """(row, col) delta between consecutive letters."""
        return (0, 1) if self is Orientation.ACROSS else (1, 0)


class VerifyResult(str, Enum):
    """Outcome of comparing the player grid with the answer grid."""

    CORRECT = "CORRECT"
    INCORRECT = "INCORRECT"

    def __bool__(self) -> bool:
        return self is VerifyResult.CORRECT


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
