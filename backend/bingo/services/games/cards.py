from typing import Any, Collection, List, Sequence

from .errors import InvalidCard

FREE = 'FREE'
CARD_SIZE = 5

FULL_CARD = 'full_card'
LINE = 'line'
WIN_RULES = (FULL_CARD, LINE)


def _marked_grid(card: Any, drawn_numbers: Collection[int]) -> List[List[bool]]:
    if not isinstance(card, (list, tuple)) or len(card) != CARD_SIZE:
        raise InvalidCard()
    marked = []
    for row in card:
        if not isinstance(row, (list, tuple)) or len(row) != CARD_SIZE:
            raise InvalidCard()
        marked_row = []
        for cell in row:
            if cell == FREE:
                marked_row.append(True)
            elif isinstance(cell, int) and not isinstance(cell, bool):
                marked_row.append(cell in drawn_numbers)
            else:
                raise InvalidCard(f"unexpected card cell {cell!r}")
        marked.append(marked_row)
    return marked


def _has_line(marked: Sequence[Sequence[bool]]) -> bool:
    if any(all(row) for row in marked):
        return True
    if any(all(row[c] for row in marked) for c in range(CARD_SIZE)):
        return True
    if all(marked[i][i] for i in range(CARD_SIZE)):
        return True
    return all(marked[i][CARD_SIZE - 1 - i] for i in range(CARD_SIZE))


def is_winning(card: Any, drawn_numbers: Collection[int], rule: str = FULL_CARD) -> bool:
    """Check a card against the numbers drawn so far.

    A cell counts as marked when it is FREE or its number has been drawn.
    FULL_CARD needs all 25 cells marked; LINE needs any row, column or
    diagonal. Raises InvalidCard for anything that is not a 5x5 grid.
    """
    if rule not in WIN_RULES:
        raise ValueError(f"unknown win rule {rule!r}")
    marked = _marked_grid(card, drawn_numbers)
    if rule == LINE:
        return _has_line(marked)
    return all(all(row) for row in marked)
