import os
import sys
import pytest

# Ensure the backend root (containing the `quizroom` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from quizroom import create_app, socketio
from quizroom.registry import RoomRegistry
from quizroom.router import QuizRouter


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ALLOWED_ORIGINS = '*'
    SOCKETIO_NAMESPACE = '/'
    NOTIFY_HOST_DISCONNECT = False
    LOG_LEVEL = 'WARNING'


class RecordingTransport:
    """In-memory transport: remembers every send, broadcast and subscription."""

    def __init__(self):
        self.sent = []
        self.broadcasts = []
        self.subscriptions = []

    def send(self, sid, event, payload):
        self.sent.append((sid, event, payload))

    def broadcast(self, room_id, event, payload):
        self.broadcasts.append((room_id, event, payload))

    def subscribe(self, sid, room_id):
        self.subscriptions.append((sid, room_id))

    def sent_to(self, sid, event=None):
        return [p for s, e, p in self.sent if s == sid and (event is None or e == event)]

    def broadcast_to(self, room_id, event=None):
        return [p for r, e, p in self.broadcasts if r == room_id and (event is None or e == event)]

    def clear(self):
        self.sent.clear()
        self.broadcasts.clear()


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_factory(flask_app):
    """Build connected Socket.IO test clients; all are disconnected on teardown."""
    created = []

    def _make():
        test_client = socketio.test_client(
            flask_app,
            flask_test_client=flask_app.test_client(),
        )
        created.append(test_client)
        return test_client

    yield _make
    for test_client in created:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass


@pytest.fixture()
def transport():
    return RecordingTransport()


@pytest.fixture()
def router(transport):
    return QuizRouter(RoomRegistry(), transport)
