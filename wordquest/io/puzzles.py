"""Load puzzle lists from JSON documents.

A puzzle file holds one list per level, each a list of clue objects::

    [
      [
        {"answer": "cat", "startx": 1, "starty": 1, "orientation": "across",
         "hint": "Feline pet", "position": 1}
      ]
    ]

``startX``/``startY`` are accepted as aliases of ``startx``/``starty``. A
top-level object with a ``"levels"`` key is accepted as well.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Sequence

from ..core.exceptions import CrosswordError, PuzzleLoadError
from ..core.models import Clue
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

_KEY_ALIASES = {
    "start_x": ("startx", "startX", "start_x"),
    "start_y": ("starty", "startY", "start_y"),
}


def _lookup(raw: Dict[str, Any], field: str) -> Any:
    for key in _KEY_ALIASES.get(field, (field,)):
        if key in raw:
            return raw[key]
    raise PuzzleLoadError(f"Clue is missing '{_KEY_ALIASES.get(field, (field,))[0]}': {raw}")


def parse_clue(raw: Dict[str, Any]) -> Clue:
    if not isinstance(raw, dict):
        raise PuzzleLoadError(f"Clue entries must be objects, got {type(raw).__name__}")
    try:
        return Clue(
            answer=str(_lookup(raw, "answer")),
            start_x=int(_lookup(raw, "start_x")),
            start_y=int(_lookup(raw, "start_y")),
            orientation=str(_lookup(raw, "orientation")),
            hint=str(raw.get("hint", "")),
            position=int(raw.get("position", 0)),
        )
    except (TypeError, ValueError) as exc:
        raise PuzzleLoadError(f"Invalid clue {raw}: {exc}") from exc


def parse_puzzles(data: Any) -> List[List[Clue]]:
    """Turn already-decoded JSON into a list of puzzles."""

    if isinstance(data, dict):
        data = data.get("levels")
    if not isinstance(data, list) or not data:
        raise PuzzleLoadError("Puzzle data must be a non-empty list of levels")
    puzzles: List[List[Clue]] = []
    for index, level in enumerate(data):
        if not isinstance(level, list) or not level:
            raise PuzzleLoadError(f"Level {index} must be a non-empty list of clues")
        try:
            puzzles.append([parse_clue(raw) for raw in level])
        except CrosswordError as exc:
            raise PuzzleLoadError(f"Level {index}: {exc}") from exc
    return puzzles


def load_puzzles(path: Path | str) -> List[List[Clue]]:
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise PuzzleLoadError(f"Cannot read puzzles from {path}: {exc}") from exc
    puzzles = parse_puzzles(data)
    LOGGER.info("Loaded %s puzzle(s) from %s", len(puzzles), path)
    return puzzles


def dump_puzzles(puzzles: Sequence[Sequence[Clue]]) -> List[List[Dict[str, Any]]]:
    """Inverse of :func:`parse_puzzles`, using the ``startx``/``starty`` keys."""

    return [
        [
            {
                "answer": clue.answer,
                "startx": clue.start_x,
                "starty": clue.start_y,
                "orientation": clue.orientation.value,
                "hint": clue.hint,
                "position": clue.position,
            }
            for clue in puzzle
        ]
        for puzzle in puzzles
    ]
