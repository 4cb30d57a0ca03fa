import os
import sys
import pytest

# Ensure the backend root (containing the `dugout` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from dugout import create_app, socketio
from dugout.connections import ConnectionRegistry
from dugout.content import ContentProvider, GridContent, Question, SpeedRound
from dugout.models import Player, Room
from dugout.orchestrator import SessionOrchestrator
from dugout.rooms import RoomStore
from dugout.services.games import GameSettings

NAMESPACE = '/ws'


class FixedContentProvider(ContentProvider):
    """Predictable content: the right answer is always spelled out."""

    def load_quiz(self, count):
        questions = [
            Question(prompt='Q1?', options=['X', 'Y'], correct='X'),
            Question(prompt='Q2?', options=['A', 'B'], correct='B'),
        ]
        return questions[:count]

    def load_grid(self):
        categories = [f'C{i}' for i in range(9)]
        challenges = {c: [Question(prompt=f'{c}?', options=['right', 'wrong'], correct='right')] for c in categories}
        return GridContent(categories=categories, challenges=challenges)

    def load_speedround(self):
        return [
            SpeedRound(title='R1', clue='first', answers=['a', 'b', 'c'], points=[100, 50]),
            SpeedRound(title='R2', clue='second', answers=['x', 'y'], points=[10, 20]),
        ]


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ORIGINS = ['http://localhost:5173']
    ROOM_CAPACITY = 8
    ROOM_CODE_LENGTH = 4
    ROOM_CODE_ATTEMPTS = 50
    QUIZ_QUESTION_COUNT = 1
    SPEEDROUND_MAX_ROUNDS = 5
    CORRECT_ANSWER_POINTS = 100
    LOAD_CONTENT_IN_BACKGROUND = False
    CONTENT_PROVIDER = FixedContentProvider()


class RecordingGateway:
    """Stands in for the Socket.IO gateway and remembers what went out."""

    def __init__(self):
        self.sent = []
        self.enrolled = []

    def enroll(self, sid, room_code):
        self.enrolled.append((sid, room_code))

    def withdraw(self, sid, room_code):
        self.enrolled = [e for e in self.enrolled if e != (sid, room_code)]

    def broadcast(self, room_code, event, payload):
        self.sent.append(('room', room_code, event, payload))

    def send(self, sid, event, payload):
        self.sent.append(('sid', sid, event, payload))

    def events(self, name):
        return [s for s in self.sent if s[2] == name]

    def to(self, sid):
        return [s for s in self.sent if s[0] == 'sid' and s[1] == sid]


def make_room(game_type, *names):
    """A room whose players' connection ids are their names."""
    players = [Player(connection_id=n, name=n, is_host=(i == 0)) for i, n in enumerate(names)]
    return Room(code='ABCD', game_type=game_type, host_id=names[0], players=players)


@pytest.fixture()
def registry():
    return ConnectionRegistry()


@pytest.fixture()
def store(registry):
    return RoomStore(registry, capacity=8)


@pytest.fixture()
def gateway():
    return RecordingGateway()


@pytest.fixture()
def orchestrator(store, gateway):
    return SessionOrchestrator(store, gateway, FixedContentProvider(), settings=GameSettings(quiz_question_count=1))


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def make_sio_client(flask_app):
    clients = []

    def _make():
        test_client = socketio.test_client(
            flask_app,
            flask_test_client=flask_app.test_client(),
            namespace=NAMESPACE
        )
        clients.append(test_client)
        return test_client

    yield _make
    for test_client in clients:
        try:
            if test_client.is_connected(NAMESPACE):
                test_client.disconnect(namespace=NAMESPACE)
        except Exception:
            pass


@pytest.fixture()
def sio_client(make_sio_client):
    return make_sio_client()
