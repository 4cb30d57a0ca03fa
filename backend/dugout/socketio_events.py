from flask import current_app, request
from flask_socketio import emit

from dugout import socketio

NAMESPACE = '/ws'


def _orchestrator():
    return current_app.extensions['dugout']


def _get_sid() -> str:
    # request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def handle_connect(auth=None):
    emit('connected', {'message': f'Connected to {NAMESPACE}', 'player_id': _get_sid()})


def handle_disconnect(reason=None):
    _orchestrator().disconnect(_get_sid())


def handle_create_room(data=None):
    _orchestrator().create_room(_get_sid(), data)


def handle_join_room(data=None):
    _orchestrator().join_room(_get_sid(), data)


def handle_start_game(data=None):
    _orchestrator().start_game(_get_sid(), data)


def handle_game_action(data=None):
    _orchestrator().handle_action(_get_sid(), data)


def handle_leave_room(data=None):
    _orchestrator().leave(_get_sid())
    emit('left', {})


def handle_ping(data=None):
    emit('pong', data or {})


HANDLERS = {
    'connect': handle_connect,
    'disconnect': handle_disconnect,
    'create_room': handle_create_room,
    'join_room': handle_join_room,
    'start_game': handle_start_game,
    'game_action': handle_game_action,
    'leave_room': handle_leave_room,
    'ping': handle_ping,
}


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on namespace '/ws'."""
    for event, handler in HANDLERS.items():
        socketio.on_event(event, handler, namespace=NAMESPACE)
