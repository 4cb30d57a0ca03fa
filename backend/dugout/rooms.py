import logging
import random
import threading
from dataclasses import dataclass
from typing import Dict, List, Optional

from .connections import ConnectionRegistry
from .errors import (
    InvalidAction,
    RoomAlreadyStarted,
    RoomCodeExhausted,
    RoomFull,
    RoomNotFound,
)
from .models import GAME_TYPES, Player, Room, generate_room_code

MAX_NAME_LENGTH = 24


@dataclass
class Departure:
    """What happened when a connection left its room."""
    room: Room
    player: Player
    index: int
    destroyed: bool
    new_host: Optional[Player] = None


def clean_name(name) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidAction('player_name is required')
    return name.strip()[:MAX_NAME_LENGTH]


class RoomStore:
    """In-memory table of active rooms keyed by room code.

    The dict itself is guarded by one short-lived lock; everything that
    touches a single room's membership runs under that room's own lock so
    unrelated games never wait on each other.
    """

    def __init__(self, registry: ConnectionRegistry, capacity: int = 8,
                 code_length: int = 4, code_attempts: int = 50,
                 logger: Optional[logging.Logger] = None, rng=None):
        self.registry = registry
        self.capacity = capacity
        self.code_length = code_length
        self.code_attempts = code_attempts
        self.logger = logger or logging.getLogger(__name__)
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        self._rooms: Dict[str, Room] = {}

    def get(self, code) -> Optional[Room]:
        if not isinstance(code, str):
            return None
        with self._lock:
            return self._rooms.get(code.strip().upper())

    def codes(self) -> List[str]:
        with self._lock:
            return list(self._rooms)

    def __len__(self):
        with self._lock:
            return len(self._rooms)

    def create_room(self, connection_id: str, player_name, game_type) -> Room:
        name = clean_name(player_name)
        if game_type not in GAME_TYPES:
            raise InvalidAction(f'Unknown game type: {game_type}')
        with self._lock:
            for _ in range(self.code_attempts):
                code = generate_room_code(self.code_length, self._rng)
                if code not in self._rooms:
                    break
            else:
                self.logger.error(f"[room-create] no free code after {self.code_attempts} attempts")
                raise RoomCodeExhausted()
            host = Player(connection_id=connection_id, name=name, is_host=True)
            room = Room(code=code, game_type=game_type, host_id=connection_id, players=[host])
            self._rooms[code] = room
        self.registry.bind(connection_id, code)
        self.logger.info(f"[room-create] code={code} type={game_type} host={name}")
        return room

    def join_room(self, code, connection_id: str, player_name) -> Room:
        name = clean_name(player_name)
        room = self.get(code)
        if room is None:
            raise RoomNotFound()
        with room.lock:
            self.check_joinable(room, connection_id)
            room.players.append(Player(connection_id=connection_id, name=name))
            self.registry.bind(connection_id, room.code)
        self.logger.info(f"[room-join] code={room.code} player={name} count={len(room.players)}")
        return room

    def check_joinable(self, room: Room, connection_id: str) -> None:
        """Raise if the connection could not join `room` right now."""
        with room.lock:
            if room.closed:
                raise RoomNotFound()
            if room.started:
                raise RoomAlreadyStarted()
            if room.find_player(connection_id):
                raise InvalidAction('You are already in this room')
            if len(room.players) >= self.capacity:
                raise RoomFull()

    def remove_connection(self, connection_id: str) -> Optional[Departure]:
        code = self.registry.unbind(connection_id)
        if code is None:
            return None
        room = self.get(code)
        if room is None:
            return None
        with room.lock:
            player = room.find_player(connection_id)
            if player is None:
                return None
            index = room.players.index(player)
            room.players.remove(player)
            self.logger.info(f"[room-leave] code={code} player={player.name} remaining={len(room.players)}")
            if not room.players:
                self._destroy(room)
                return Departure(room=room, player=player, index=index, destroyed=True)
            new_host = None
            if room.host_id == connection_id:
                # Deterministic: first remaining player in join order
                new_host = room.players[0]
                room.assign_host(new_host)
                self.logger.info(f"[host-promote] code={code} host={new_host.name}")
            return Departure(room=room, player=player, index=index, destroyed=False, new_host=new_host)

    def _destroy(self, room: Room) -> None:
        room.closed = True
        room.session = None
        with self._lock:
            if self._rooms.get(room.code) is room:
                del self._rooms[room.code]
        self.registry.forget_room(room.code)
        self.logger.info(f"[room-destroy] code={room.code}")
