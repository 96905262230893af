import threading
from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from .errors import RoomNotFound
from .models import Room


@dataclass(frozen=True)
class RoomLookup:
    """Result of a registry lookup: either a room, or not found."""
    room_id: str
    room: Optional[Room] = None

    @property
    def found(self) -> bool:
        return self.room is not None

    def unwrap(self) -> Room:
        if self.room is None:
            raise RoomNotFound()
        return self.room


class RoomRegistry:
    """In-process store of every room, keyed by caller-supplied id.

    ``lock`` serializes whole events: the router holds it for the full
    handling of one inbound message so no other event observes a room
    half-way through a transition.
    """

    def __init__(self):
        self._rooms: Dict[str, Room] = {}
        self.lock = threading.RLock()

    def create(self, room_id: str, host_sid: str) -> Room:
        # Same id overwrites; connections of the previous room are orphaned
        room = Room(room_id=room_id, host_connection=host_sid)
        self._rooms[room_id] = room
        return room

    def lookup(self, room_id: str) -> RoomLookup:
        return RoomLookup(room_id=room_id, room=self._rooms.get(room_id))

    def rooms_with_player(self, sid: str) -> Iterator[Room]:
        for room in list(self._rooms.values()):
            if sid in room.players:
                yield room

    def rooms_hosted_by(self, sid: str) -> Iterator[Room]:
        for room in list(self._rooms.values()):
            if room.is_host(sid):
                yield room

    def __len__(self) -> int:
        return len(self._rooms)

    def __contains__(self, room_id: str) -> bool:
        return room_id in self._rooms
