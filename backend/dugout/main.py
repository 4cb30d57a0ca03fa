from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the Dugout party game server!'})


@main.route('/health')
def health():
    store = current_app.extensions['dugout'].store
    return jsonify({'status': 'ok', 'rooms': len(store)})


@main.route('/api/rooms/<string:room_code>')
def get_room(room_code):
    """Returns a snapshot of a room and its public game state."""
    room = current_app.extensions['dugout'].store.get(room_code)
    if room is None:
        return jsonify({'error': 'Room not found'}), 404
    with room.lock:
        payload = room.to_dict()
        payload['state'] = room.session.public_state() if room.session is not None else None
    return jsonify(payload)
