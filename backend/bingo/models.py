"""
In-memory data models for bingo rooms.

Rooms live only as long as the process; the registry in
``bingo.services.games.registry`` owns every instance.
"""

import time
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, Set, FrozenSet


@dataclass
class PlayerEntry:
    connection_id: str
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'connection_id': self.connection_id,
            'name': self.name,
        }


@dataclass(frozen=True)
class CalledNumber:
    """A drawn number together with its letter band."""
    letter: str
    number: int

    def to_dict(self) -> Dict[str, Any]:
        return {'letter': self.letter, 'number': self.number}


@dataclass
class Room:
    """State of a single bingo session."""
    id: str
    admin_id: Optional[str] = None
    players: List[PlayerEntry] = field(default_factory=list)
    called_numbers: List[CalledNumber] = field(default_factory=list)
    # Connections joined to the room's broadcast group
    connections: Set[str] = field(default_factory=set)
    created_at: float = field(default_factory=time.time)
    last_activity: float = field(default_factory=time.time)

    @property
    def player_names(self) -> List[str]:
        return [p.name for p in self.players]

    @property
    def drawn_numbers(self) -> FrozenSet[int]:
        return frozenset(c.number for c in self.called_numbers)

    def get_player(self, connection_id: str) -> Optional[PlayerEntry]:
        for player in self.players:
            if player.connection_id == connection_id:
                return player
        return None

    def is_called(self, number: int) -> bool:
        return any(c.number == number for c in self.called_numbers)

    def touch(self) -> None:
        self.last_activity = time.time()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'admin_id': self.admin_id,
            'players': [p.to_dict() for p in self.players],
            'called_numbers': [c.to_dict() for c in self.called_numbers],
            'created_at': self.created_at,
            'last_activity': self.last_activity,
        }
