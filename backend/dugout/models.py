import random
import threading
from dataclasses import dataclass, field
from typing import List, Optional

# No 0/O, 1/I so codes can be read aloud and typed from a TV screen
ROOM_CODE_ALPHABET = 'ABCDEFGHJKLMNPQRSTUVWXYZ23456789'

GAME_TYPES = ('quiz', 'grid', 'speedround')


def generate_room_code(length=4, rng=random):
    """Generate a short room code. Uniqueness is the caller's job."""
    return ''.join(rng.choice(ROOM_CODE_ALPHABET) for _ in range(length))


@dataclass
class Player:
    connection_id: str
    name: str
    score: int = 0
    is_host: bool = False

    def to_dict(self):
        return {
            'id': self.connection_id,
            'name': self.name,
            'score': self.score,
            'is_host': self.is_host,
        }


@dataclass
class Room:
    code: str
    game_type: str
    host_id: str
    players: List[Player] = field(default_factory=list)
    started: bool = False
    session: Optional[object] = None
    # Set once the room has been removed from the store
    closed: bool = False
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    @property
    def loading(self) -> bool:
        return self.started and self.session is None

    def find_player(self, connection_id: str) -> Optional[Player]:
        for p in self.players:
            if p.connection_id == connection_id:
                return p
        return None

    def index_of(self, connection_id: str) -> int:
        for idx, p in enumerate(self.players):
            if p.connection_id == connection_id:
                return idx
        return -1

    def is_host(self, connection_id: str) -> bool:
        return self.host_id == connection_id

    def assign_host(self, player: Player) -> None:
        self.host_id = player.connection_id
        for p in self.players:
            p.is_host = p is player

    def standings(self):
        return [p.to_dict() for p in self.players]

    def to_dict(self):
        return {
            'code': self.code,
            'game_type': self.game_type,
            'host_id': self.host_id,
            'players': self.standings(),
            'started': self.started,
            'loading': self.loading,
        }
