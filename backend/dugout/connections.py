import threading
from typing import Dict, Optional, Set


class ConnectionRegistry:
    """Maps live Socket.IO connections to the room they belong to."""

    def __init__(self):
        self._lock = threading.Lock()
        self._sid_to_room: Dict[str, str] = {}
        self._room_to_sids: Dict[str, Set[str]] = {}

    def bind(self, sid: str, room_code: str) -> None:
        with self._lock:
            previous = self._sid_to_room.get(sid)
            if previous and previous != room_code:
                self._room_to_sids.get(previous, set()).discard(sid)
            self._sid_to_room[sid] = room_code
            self._room_to_sids.setdefault(room_code, set()).add(sid)

    def unbind(self, sid: str) -> Optional[str]:
        with self._lock:
            room_code = self._sid_to_room.pop(sid, None)
            if room_code is not None:
                members = self._room_to_sids.get(room_code)
                if members is not None:
                    members.discard(sid)
                    if not members:
                        del self._room_to_sids[room_code]
            return room_code

    def room_of(self, sid: str) -> Optional[str]:
        with self._lock:
            return self._sid_to_room.get(sid)

    def members(self, room_code: str) -> Set[str]:
        with self._lock:
            return set(self._room_to_sids.get(room_code, ()))

    def forget_room(self, room_code: str) -> None:
        with self._lock:
            for sid in self._room_to_sids.pop(room_code, set()):
                self._sid_to_room.pop(sid, None)

    def __len__(self):
        with self._lock:
            return len(self._sid_to_room)
