"""Crossword puzzle engine for the wordquest vocabulary game.

This package exposes the public API surface via:

- ``wordquest.engine.session.CrosswordSession``: plays one puzzle list level by level.
- ``wordquest.engine.geometry`` / ``wordquest.engine.answers``: grid builders.
- ``wordquest.io.puzzles.load_puzzles``: reads puzzle lists from JSON.
"""

from .core.constants import Orientation, VerifyResult
from .core.models import Clue, PuzzleGrid
from .engine.answers import build_answer_grid
from .engine.geometry import build_initial_grid
from .engine.session import CrosswordSession
from .io.puzzles import load_puzzles, parse_puzzles

__all__ = [
    "Clue",
    "CrosswordSession",
    "Orientation",
    "PuzzleGrid",
    "VerifyResult",
    "build_answer_grid",
    "build_initial_grid",
    "load_puzzles",
    "parse_puzzles",
]

__version__ = "0.1.0"
