import random
import string
from typing import List

from wordquest.core.constants import Orientation
from wordquest.core.models import Clue


def across(answer: str, x: int, y: int, position: int = 1, hint: str = "") -> Clue:
    return Clue(answer=answer, start_x=x, start_y=y, orientation=Orientation.ACROSS, hint=hint, position=position)


def down(answer: str, x: int, y: int, position: int = 1, hint: str = "") -> Clue:
    return Clue(answer=answer, start_x=x, start_y=y, orientation=Orientation.DOWN, hint=hint, position=position)


CAT_CAR = [
    across("cat", 1, 1, 1, "Feline pet"),
    down("car", 1, 1, 1, "It has four wheels"),
]


def random_puzzle(rng: random.Random, max_clues: int = 6, max_coord: int = 8, max_len: int = 7) -> List[Clue]:
    """Synthetic puzzle; overlapping clues may disagree on letters."""
    clues = []
    for position in range(1, rng.randint(1, max_clues) + 1):
        answer = "".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(1, max_len)))
        orientation = rng.choice([Orientation.ACROSS, Orientation.DOWN])
        clues.append(
            Clue(
                answer=answer,
                start_x=rng.randint(1, max_coord),
                start_y=rng.randint(1, max_coord),
                orientation=orientation,
                position=position,
            )
        )
    return clues
