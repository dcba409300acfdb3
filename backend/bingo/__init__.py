from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from bingo.config import Config

socketio = SocketIO(async_mode=None)

ROOMS_EXTENSION = 'bingo_rooms'


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    from bingo.services.games import RoomRegistry
    from bingo.services.games.cards import WIN_RULES
    win_rule = flask_app.config.get('WIN_RULE')
    if win_rule not in WIN_RULES:
        raise ValueError(f"WIN_RULE must be one of {WIN_RULES}, got {win_rule!r}")

    allowed_origins = flask_app.config.get('CORS_ALLOWED_ORIGINS') or []
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Room state lives on the app, one registry per application instance
    flask_app.extensions[ROOMS_EXTENSION] = RoomRegistry()

    # Import and register blueprints here
    from bingo.main import main
    flask_app.register_blueprint(main)

    from bingo.api.rooms import rooms
    flask_app.register_blueprint(rooms, url_prefix='/api/rooms')

    # Register Socket.IO event handlers
    # Importing here ensures the handlers bind to the initialized socketio instance
    from bingo.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    return flask_app
