from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config, setup_logging

socketio = SocketIO(async_mode=None)


def _allowed_origins(value):
    if not value or value.strip() == '*':
        return '*'
    return [origin.strip() for origin in value.split(',') if origin.strip()]


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    setup_logging(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = _allowed_origins(flask_app.config.get('CORS_ALLOWED_ORIGINS', '*'))
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from quizroom.main import main
    flask_app.register_blueprint(main)

    # One router (and one room registry) per application instance
    from quizroom.registry import RoomRegistry
    from quizroom.router import QuizRouter
    from quizroom.transport import SocketIOTransport
    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/')
    flask_app.extensions['quizroom'] = QuizRouter(
        RoomRegistry(),
        SocketIOTransport(socketio, namespace=namespace),
        notify_host_disconnect=flask_app.config.get('NOTIFY_HOST_DISCONNECT', False),
    )

    # Register Socket.IO event handlers
    # Importing here ensures the handlers bind to the initialized socketio instance
    from quizroom.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=namespace)
    flask_app.logger.info(f"[startup] Socket.IO handlers registered on namespace '{namespace}'")

    return flask_app
