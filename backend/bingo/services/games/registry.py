import logging
import random
import threading
import time
from typing import Any, Dict, List, Optional, Tuple, FrozenSet

from bingo.models import Room, PlayerEntry, CalledNumber
from .draws import draw_number
from .errors import RoomNotFound, RoomAlreadyExists, AdminExists, NoPermission, NumberNotCalled

logger = logging.getLogger(__name__)


class RoomRegistry:
    """Thread-safe in-memory mapping of room id to Room.

    Socket handlers may run on several worker threads, so every read and
    mutation of a room happens under one re-entrant lock.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rooms: Dict[str, Room] = {}
        self._lock = threading.RLock()
        self._rng = rng

    def __len__(self) -> int:
        with self._lock:
            return len(self._rooms)

    def __contains__(self, room_id) -> bool:
        with self._lock:
            return room_id in self._rooms

    # ---------- lifecycle ---------- #

    def create_room(self, room_id: str, connection_id: str) -> str:
        """Register a new room with the creator as administrator."""
        with self._lock:
            if room_id in self._rooms:
                raise RoomAlreadyExists()
            self._rooms[room_id] = Room(id=room_id, admin_id=connection_id, connections={connection_id})
        logger.info(f"[room-created] room={room_id} admin={connection_id}")
        return room_id

    def get_room(self, room_id: str) -> Room:
        with self._lock:
            room = self._rooms.get(room_id)
            if room is None:
                raise RoomNotFound()
            return room

    def join_room(self, room_id: str, connection_id: str, name: str) -> List[str]:
        """Add a player and return the room's ordered name list.

        A connection that joins twice keeps its place and takes the new name.
        """
        with self._lock:
            room = self.get_room(room_id)
            player = room.get_player(connection_id)
            if player:
                player.name = name
            else:
                room.players.append(PlayerEntry(connection_id=connection_id, name=name))
            room.connections.add(connection_id)
            room.touch()
            return room.player_names

    def claim_admin(self, room_id: str, connection_id: str) -> None:
        with self._lock:
            room = self.get_room(room_id)
            if room.admin_id:
                raise AdminExists()
            room.admin_id = connection_id
            room.connections.add(connection_id)
            room.touch()

    def remove_connection(self, room_id: str, connection_id: str) -> Tuple[List[str], bool]:
        """Drop a connection from a room.

        Returns the remaining player names and whether the admin seat was
        freed.
        """
        with self._lock:
            room = self.get_room(room_id)
            room.players = [p for p in room.players if p.connection_id != connection_id]
            room.connections.discard(connection_id)
            admin_cleared = room.admin_id == connection_id
            if admin_cleared:
                room.admin_id = None
            room.touch()
            return room.player_names, admin_cleared

    def room_state(self, room_id: str) -> Dict[str, Any]:
        with self._lock:
            return self.get_room(room_id).to_dict()

    def rooms_for_connection(self, connection_id: str) -> List[str]:
        with self._lock:
            return [rid for rid, room in self._rooms.items() if connection_id in room.connections]

    # ---------- draws ---------- #

    def call_number(self, room_id: str, connection_id: str) -> CalledNumber:
        """Draw the next number for a room on behalf of its administrator."""
        with self._lock:
            room = self.get_room(room_id)
            if room.admin_id != connection_id:
                raise NoPermission()
            called = draw_number(room.drawn_numbers, rng=self._rng)
            room.called_numbers.append(called)
            room.touch()
            return called

    def drawn_numbers(self, room_id: str) -> FrozenSet[int]:
        with self._lock:
            return self.get_room(room_id).drawn_numbers

    def mark_cell(self, room_id: str, number: int) -> None:
        with self._lock:
            if not self.get_room(room_id).is_called(number):
                raise NumberNotCalled()

    # ---------- eviction ---------- #

    def evict_idle(self, max_idle_sec: float, now: Optional[float] = None) -> List[str]:
        """Remove rooms nobody is connected to that have been idle too long."""
        now = time.time() if now is None else now
        with self._lock:
            stale = [
                rid for rid, room in self._rooms.items()
                if not room.connections and now - room.last_activity > max_idle_sec
            ]
            for rid in stale:
                del self._rooms[rid]
        if stale:
            logger.info(f"[rooms-evicted] count={len(stale)} rooms={stale}")
        return stale
