"""
Word Grid Game Server Application Package

A single-player five-letter word guessing game: key input drives a 6x5 tile
board, submitted rows are scored against a configured target word.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Logger is created at import time; align its level with this config
    from .utils.game_logger import game_logger
    game_logger.configure(app.config['LOG_LEVEL'])

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.game_controller import game_bp

    app.register_blueprint(game_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio, app.config['OUTCOME_NOTIFY_DELAY_SECONDS'])

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
