"""Game domain services: room registry, number draws and card checks.

This package contains pure domain logic that is imported by HTTP routes
and socket handlers, keeping transport concerns separated from core game
mechanics.
"""

from .registry import RoomRegistry
from .draws import draw_number, letter_for
from .cards import is_winning, FREE, FULL_CARD, LINE
