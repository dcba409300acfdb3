import random

import pytest

from bingo.services.games.draws import draw_number, letter_for
from bingo.services.games.errors import AllNumbersDrawn


@pytest.mark.parametrize('number,letter', [
    (1, 'B'), (15, 'B'),
    (16, 'I'), (30, 'I'),
    (31, 'N'), (45, 'N'),
    (46, 'G'), (60, 'G'),
    (61, 'O'), (75, 'O'),
])
def test_letter_bands(number, letter):
    assert letter_for(number) == letter


@pytest.mark.parametrize('number', [0, 76, -3])
def test_letter_for_rejects_out_of_range(number):
    with pytest.raises(ValueError):
        letter_for(number)


def test_draw_never_repeats_history():
    rng = random.Random(1234)
    history = set()
    for _ in range(75):
        called = draw_number(history, rng=rng)
        assert called.number not in history
        assert 1 <= called.number <= 75
        assert called.letter == letter_for(called.number)
        history.add(called.number)
    assert history == set(range(1, 76))


def test_draw_picks_last_remaining_number():
    history = set(range(1, 76)) - {42}
    called = draw_number(history)
    assert called.number == 42
    assert called.letter == 'N'


def test_draw_raises_when_exhausted():
    with pytest.raises(AllNumbersDrawn):
        draw_number(range(1, 76))
