import functools
import logging
from typing import Callable, Optional

from .errors import (
    GameError,
    InvalidAction,
    NotHost,
    NotInRoom,
    RoomAlreadyStarted,
    RoomNotFound,
    StillLoading,
)
from .models import GAME_TYPES
from .rooms import RoomStore, clean_name
from .services.games import GameOver, GameSettings, Outcome, Rejected, start_session


def _run_inline(fn, *args):
    return fn(*args)


def reports_errors(fn):
    """Send any GameError raised by an entry point back to its sender only."""
    @functools.wraps(fn)
    def wrapper(self, sid, *args, **kwargs):
        try:
            return fn(self, sid, *args, **kwargs)
        except GameError as exc:
            self.logger.info(f"[reject] sid={sid} op={fn.__name__} code={exc.code}")
            self.gateway.send(sid, 'error', exc.to_dict())
            return None
    return wrapper


class SessionOrchestrator:
    """Routes inbound connection events to rooms and their game sessions.

    Every mutation of a room and every broadcast it causes happen while
    holding that room's lock, so one room's events go out in the order
    its actions were applied.
    """

    def __init__(self, store: RoomStore, gateway, provider,
                 settings: Optional[GameSettings] = None,
                 logger: Optional[logging.Logger] = None,
                 run_task: Optional[Callable] = None):
        self.store = store
        self.gateway = gateway
        self.provider = provider
        self.settings = settings or GameSettings()
        self.logger = logger or logging.getLogger(__name__)
        self.run_task = run_task or _run_inline

    @property
    def registry(self):
        return self.store.registry

    def _room_for(self, sid):
        code = self.registry.room_of(sid)
        room = self.store.get(code) if code else None
        if room is None:
            raise NotInRoom()
        return room

    @reports_errors
    def create_room(self, sid, data):
        data = data if isinstance(data, dict) else {}
        clean_name(data.get('player_name'))
        if data.get('game_type') not in GAME_TYPES:
            raise InvalidAction(f"Unknown game type: {data.get('game_type')}")
        if self.registry.room_of(sid):
            self.leave(sid)
        room = self.store.create_room(sid, data.get('player_name'), data.get('game_type'))
        with room.lock:
            self.gateway.enroll(sid, room.code)
            self.gateway.send(sid, 'room_created', {'room_code': room.code, 'player_id': sid, 'room': room.to_dict()})
        return room

    @reports_errors
    def join_room(self, sid, data):
        data = data if isinstance(data, dict) else {}
        code = data.get('room_code')
        if not isinstance(code, str) or not code.strip():
            raise RoomNotFound('room_code is required')
        code = code.strip().upper()
        current = self.registry.room_of(sid)
        if current == code:
            raise InvalidAction('You are already in this room')
        room = self.store.get(code)
        if room is None:
            raise RoomNotFound()
        clean_name(data.get('player_name'))
        # A failed switch must not cost the player their current seat
        self.store.check_joinable(room, sid)
        if current:
            self.leave(sid)
        with room.lock:
            self.store.join_room(code, sid, data.get('player_name'))
            self.gateway.enroll(sid, room.code)
            self.gateway.send(sid, 'room_joined', {'room_code': room.code, 'player_id': sid, 'room': room.to_dict()})
            self.gateway.broadcast(room.code, 'player_joined', {'players': room.standings()})
        return room

    @reports_errors
    def start_game(self, sid, data=None):
        room = self._room_for(sid)
        with room.lock:
            if room.closed:
                raise RoomNotFound()
            if not room.is_host(sid):
                raise NotHost()
            if room.started:
                raise RoomAlreadyStarted()
            room.started = True
            self.logger.info(f"[game-loading] code={room.code} type={room.game_type}")
            self.gateway.broadcast(room.code, 'loading_game', {'message': 'Loading questions...'})
        self.run_task(self._load_and_start, room)
        return room

    def _load_and_start(self, room):
        try:
            session = start_session(room, self.provider, self.settings)
        except Exception:
            self.logger.exception(f"[game-loading] code={room.code} content load failed")
            with room.lock:
                if room.closed:
                    return
                room.started = False
                self.gateway.broadcast(room.code, 'error', {'code': 'ContentUnavailable', 'message': 'Could not load the game, try again'})
            return
        with room.lock:
            if room.closed:
                return
            room.session = session
            self.logger.info(f"[game-start] code={room.code} type={room.game_type} players={len(room.players)}")
            self.gateway.broadcast(room.code, 'game_started', {'state': session.public_state(), 'room': room.to_dict()})
            if session.finished:
                self._game_over(room, GameOver(events=[('game_over', {'players': room.standings()})]))

    @reports_errors
    def handle_action(self, sid, action) -> Optional[Outcome]:
        room = self._room_for(sid)
        with room.lock:
            if room.closed:
                raise RoomNotFound()
            if room.find_player(sid) is None:
                raise NotInRoom()
            if room.loading:
                raise StillLoading()
            if room.session is None:
                raise InvalidAction('The game has not started')
            if not isinstance(action, dict):
                raise InvalidAction('Action must be an object')
            if action.get('type') in room.session.host_actions and not room.is_host(sid):
                raise NotHost()
            outcome = room.session.apply_action(room, sid, action)
            self._deliver(room, sid, outcome)
            return outcome

    def _deliver(self, room, sid, outcome: Outcome) -> None:
        if isinstance(outcome, Rejected):
            self.logger.info(f"[reject] code={room.code} sid={sid} reason={outcome.error.code}")
            self.gateway.send(sid, 'error', outcome.error.to_dict())
            return
        for event, payload in outcome.private:
            self.gateway.send(sid, event, payload)
        if isinstance(outcome, GameOver):
            self._game_over(room, outcome)
            return
        for event, payload in outcome.events:
            if event in ('answer_revealed', 'round_revealed'):
                self.logger.info(f"[reveal] code={room.code} event={event}")
            self.gateway.broadcast(room.code, event, payload)

    def _game_over(self, room, outcome: GameOver) -> None:
        # The room stays around but its session rejects everything from here on
        for event, payload in outcome.events:
            self.gateway.broadcast(room.code, event, payload)
        self.logger.info(f"[game-over] code={room.code} standings={[(p.name, p.score) for p in room.players]}")

    def leave(self, sid) -> None:
        code = self.registry.room_of(sid)
        room = self.store.get(code) if code else None
        if room is None:
            self.registry.unbind(sid)
            return
        with room.lock:
            departure = self.store.remove_connection(sid)
            if departure is None or departure.destroyed:
                return
            self.gateway.withdraw(sid, room.code)
            self.gateway.broadcast(room.code, 'player_left', {
                'player_id': sid,
                'players': room.standings(),
                'host_id': room.host_id,
            })
            if room.session is not None:
                outcome = room.session.player_left(room, sid, departure.index)
                if outcome is not None:
                    self._deliver(room, sid, outcome)

    def disconnect(self, sid) -> None:
        self.leave(sid)
