import unittest

from wordquest.core.constants import BLOCKED, EMPTY, Bounds, CellType, Orientation, VerifyResult
from wordquest.core.exceptions import CrosswordError, LevelIndexError, MalformedPuzzleError
from wordquest.core.models import Clue, PuzzleGrid


class ClueTests(unittest.TestCase):
    def test_answer_is_uppercased_and_orientation_coerced(self) -> None:
        clue = Clue(answer="cat", start_x=1, start_y=1, orientation="ACROSS", hint="Feline pet", position=1)
        self.assertEqual(clue.answer, "CAT")
        self.assertIs(clue.orientation, Orientation.ACROSS)
        self.assertEqual(clue.length, 3)

    def test_cells_follow_orientation(self) -> None:
        across = Clue(answer="cat", start_x=2, start_y=3, orientation=Orientation.ACROSS)
        down = Clue(answer="cat", start_x=2, start_y=3, orientation=Orientation.DOWN)
        self.assertEqual(across.cells(), [(2, 1), (2, 2), (2, 3)])
        self.assertEqual(down.cells(), [(2, 1), (3, 1), (4, 1)])
        self.assertEqual((across.end_x, across.end_y), (4, 3))
        self.assertEqual((down.end_x, down.end_y), (2, 5))

    def test_contains(self) -> None:
        clue = Clue(answer="car", start_x=1, start_y=1, orientation=Orientation.DOWN)
        self.assertTrue(clue.contains(2, 0))
        self.assertFalse(clue.contains(3, 0))
        self.assertFalse(clue.contains(0, 1))

    def test_frozen(self) -> None:
        clue = Clue(answer="cat", start_x=1, start_y=1, orientation=Orientation.ACROSS)
        with self.assertRaises(AttributeError):
            clue.answer = "DOG"  # type: ignore[misc]

    def test_rejects_bad_data(self) -> None:
        with self.assertRaises(MalformedPuzzleError):
            Clue(answer="", start_x=1, start_y=1, orientation=Orientation.ACROSS)
        with self.assertRaises(MalformedPuzzleError):
            Clue(answer="ice cream", start_x=1, start_y=1, orientation=Orientation.ACROSS)
        with self.assertRaises(MalformedPuzzleError):
            Clue(answer="cat", start_x=0, start_y=1, orientation=Orientation.ACROSS)
        with self.assertRaises(MalformedPuzzleError):
            Clue(answer="cat", start_x=1, start_y=1, orientation="diagonal")

    def test_rejects_letters_outside_a_to_z(self) -> None:
        with self.assertRaises(MalformedPuzzleError):
            Clue(answer="stra\u00dfe", start_x=1, start_y=1, orientation=Orientation.ACROSS)
        with self.assertRaises(MalformedPuzzleError):
            Clue(answer="caf\u00e9", start_x=1, start_y=1, orientation=Orientation.DOWN)


class PuzzleGridTests(unittest.TestCase):
    def test_new_grid_is_filled(self) -> None:
        grid = PuzzleGrid(Bounds(rows=2, cols=3))
        self.assertEqual(grid.cells, [[BLOCKED] * 3, [BLOCKED] * 3])
        self.assertEqual((grid.height, grid.width), (2, 3))

    def test_from_rows_and_cell_types(self) -> None:
        grid = PuzzleGrid.from_rows(["C.#"])
        self.assertEqual(grid.cell_type(0, 0), CellType.LETTER)
        self.assertEqual(grid.cell_type(0, 1), CellType.EMPTY)
        self.assertEqual(grid.cell_type(0, 2), CellType.BLOCKED)
        self.assertEqual(grid.cell(0, 1), EMPTY)
        self.assertTrue(grid.is_editable(0, 1))
        self.assertFalse(grid.is_editable(0, 2))
        self.assertFalse(grid.is_editable(1, 0))

    def test_from_rows_rejects_ragged_rows(self) -> None:
        with self.assertRaises(MalformedPuzzleError):
            PuzzleGrid.from_rows(["CA", "C"])

    def test_copy_is_independent(self) -> None:
        grid = PuzzleGrid.from_rows(["..."])
        clone = grid.copy()
        clone.set(0, 0, "C")
        self.assertEqual(grid.cell(0, 0), EMPTY)
        self.assertNotEqual(grid, clone)

    def test_filled_ratio_and_json(self) -> None:
        grid = PuzzleGrid.from_rows(["CA", ".#"])
        self.assertAlmostEqual(grid.filled_ratio, 2 / 3)
        self.assertEqual(grid.to_jsonable(), [["C", "A"], ["", None]])


class EnumAndErrorTests(unittest.TestCase):
    def test_verify_result_truthiness(self) -> None:
        self.assertTrue(VerifyResult.CORRECT)
        self.assertFalse(VerifyResult.INCORRECT)

    def test_orientation_step(self) -> None:
        self.assertEqual(Orientation.ACROSS.step, (0, 1))
        self.assertEqual(Orientation.DOWN.step, (1, 0))

    def test_level_index_error_is_index_error(self) -> None:
        self.assertTrue(issubclass(LevelIndexError, IndexError))
        self.assertTrue(issubclass(LevelIndexError, CrosswordError))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
