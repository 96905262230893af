from flask import current_app, request
from flask_socketio import SocketIO

from quizroom import socketio
from quizroom.router import QuizRouter


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _router() -> QuizRouter:
    return current_app.extensions['quizroom']


def handle_connect(auth=None):
    _router().connect(_get_sid())


def handle_disconnect(reason=None):
    _router().disconnect(_get_sid())


def handle_create_room(data=None):
    _router().handle('createRoom', _get_sid(), data)


def handle_join_room(data=None):
    _router().handle('joinRoom', _get_sid(), data)


def handle_add_question(data=None):
    _router().handle('addQuestion', _get_sid(), data)


def handle_start_quiz(data=None):
    _router().handle('startQuiz', _get_sid(), data)


def handle_submit_answer(data=None):
    _router().handle('submitAnswer', _get_sid(), data)


def handle_next_question(data=None):
    _router().handle('nextQuestion', _get_sid(), data)


def handle_end_quiz(data=None):
    _router().handle('endQuiz', _get_sid(), data)


def handle_send_manual_question(data=None):
    _router().handle('sendManualQuestion', _get_sid(), data)


def handle_get_quiz_status(data=None):
    _router().handle('getQuizStatus', _get_sid(), data)


EVENT_HANDLERS = {
    'connect': handle_connect,
    'disconnect': handle_disconnect,
    'createRoom': handle_create_room,
    'joinRoom': handle_join_room,
    'addQuestion': handle_add_question,
    'startQuiz': handle_start_quiz,
    'submitAnswer': handle_submit_answer,
    'nextQuestion': handle_next_question,
    'endQuiz': handle_end_quiz,
    'sendManualQuestion': handle_send_manual_question,
    'getQuizStatus': handle_get_quiz_status,
}


def register_socketio_handlers(namespace: str = '/', sio: SocketIO = socketio) -> None:
    """Register Socket.IO event handlers on ``namespace``."""
    for event, handler in EVENT_HANDLERS.items():
        sio.on_event(event, handler, namespace=namespace)
