import json
import tempfile
import unittest
from pathlib import Path

from wordquest.core.constants import Orientation
from wordquest.core.exceptions import PuzzleLoadError
from wordquest.engine.answers import build_answer_grid
from wordquest.io.puzzles import dump_puzzles, load_puzzles, parse_puzzles


BUNDLED = Path(__file__).resolve().parent.parent / "puzzles" / "unit1.json"

RAW = [
    [
        {"answer": "cat", "startx": 1, "starty": 1, "orientation": "across", "hint": "Feline pet", "position": 1},
        {"answer": "car", "startX": 1, "startY": 1, "orientation": "down", "hint": "Has wheels", "position": 1},
    ]
]


class ParsePuzzlesTests(unittest.TestCase):
    def test_parses_both_key_styles(self) -> None:
        puzzles = parse_puzzles(RAW)
        self.assertEqual(len(puzzles), 1)
        cat, car = puzzles[0]
        self.assertEqual((cat.answer, cat.start_x, cat.start_y), ("CAT", 1, 1))
        self.assertIs(car.orientation, Orientation.DOWN)
        self.assertEqual(car.hint, "Has wheels")

    def test_accepts_levels_object(self) -> None:
        self.assertEqual(len(parse_puzzles({"levels": RAW})), 1)

    def test_missing_field(self) -> None:
        with self.assertRaisesRegex(PuzzleLoadError, "startx"):
            parse_puzzles([[{"answer": "cat", "starty": 1, "orientation": "across"}]])

    def test_bad_values(self) -> None:
        with self.assertRaisesRegex(PuzzleLoadError, "Level 0"):
            parse_puzzles([[{"answer": "cat", "startx": 1, "starty": 1, "orientation": "sideways"}]])
        with self.assertRaises(PuzzleLoadError):
            parse_puzzles([[{"answer": "cat", "startx": "one", "starty": 1, "orientation": "across"}]])

    def test_empty_data(self) -> None:
        with self.assertRaises(PuzzleLoadError):
            parse_puzzles([])
        with self.assertRaises(PuzzleLoadError):
            parse_puzzles([[]])
        with self.assertRaises(PuzzleLoadError):
            parse_puzzles([["cat"]])

    def test_dump_uses_source_keys(self) -> None:
        dumped = dump_puzzles(parse_puzzles(RAW))
        self.assertEqual(dumped[0][1]["startx"], 1)
        self.assertEqual(dumped[0][1]["orientation"], "down")
        self.assertEqual(parse_puzzles(dumped), parse_puzzles(RAW))


class LoadPuzzlesTests(unittest.TestCase):
    def test_load_from_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "puzzles.json"
            path.write_text(json.dumps(RAW), encoding="utf-8")
            puzzles = load_puzzles(path)
        self.assertEqual([c.answer for c in puzzles[0]], ["CAT", "CAR"])

    def test_invalid_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "broken.json"
            path.write_text("[[{", encoding="utf-8")
            with self.assertRaises(PuzzleLoadError):
                load_puzzles(path)

    def test_missing_file(self) -> None:
        with self.assertRaises(PuzzleLoadError):
            load_puzzles("does/not/exist.json")

    def test_bundled_puzzles_have_consistent_overlaps(self) -> None:
        puzzles = load_puzzles(BUNDLED)
        self.assertGreaterEqual(len(puzzles), 1)
        for level, puzzle in enumerate(puzzles):
            answer = build_answer_grid(puzzles, level)
            for clue in puzzle:
                letters = "".join(answer.cell(r, c) for r, c in clue.cells())
                self.assertEqual(letters, clue.answer, f"level {level}")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
