import random
from typing import Iterable, Optional

from bingo.models import CalledNumber
from .errors import AllNumbersDrawn

MIN_NUMBER = 1
MAX_NUMBER = 75

# Upper bound of each letter band, in order
LETTER_BANDS = (
    (15, 'B'),
    (30, 'I'),
    (45, 'N'),
    (60, 'G'),
    (75, 'O'),
)


def letter_for(number: int) -> str:
    if not MIN_NUMBER <= number <= MAX_NUMBER:
        raise ValueError(f"number {number} is outside {MIN_NUMBER}-{MAX_NUMBER}")
    for upper, letter in LETTER_BANDS:
        if number <= upper:
            return letter
    raise ValueError(f"no letter band for {number}")


def draw_number(history: Iterable[int], rng: Optional[random.Random] = None) -> CalledNumber:
    """Pick a number uniformly among those not yet in ``history``.

    Raises AllNumbersDrawn once every number 1-75 has been drawn.
    """
    drawn = set(history)
    remaining = [n for n in range(MIN_NUMBER, MAX_NUMBER + 1) if n not in drawn]
    if not remaining:
        raise AllNumbersDrawn()
    number = (rng or random).choice(remaining)
    return CalledNumber(letter=letter_for(number), number=number)
