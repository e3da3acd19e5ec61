"""Custom exception hierarchy for the crossword engine."""


class CrosswordError(Exception):
    """Base exception for crossword engine failures."""


class LevelIndexError(CrosswordError, IndexError):
    """Raised when a level index has no corresponding puzzle."""


class MalformedPuzzleError(CrosswordError):
    """Raised when clue data cannot be laid out on the grid."""


class CellNotEditableError(CrosswordError):
    """Raised when input targets a blocked or out-of-range cell."""


class PuzzleLoadError(CrosswordError):
    """Raised when a puzzle file cannot be read or parsed."""


class DictionaryAPIError(CrosswordError):
    """Raised when the dictionary API request fails."""


class WordNotFoundError(DictionaryAPIError):
    """Raised when the dictionary has no entry for a word."""
