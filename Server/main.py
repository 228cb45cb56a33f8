"""
Word Grid Game Server - Main Entry Point

This is the main entry point for the game server.
It initializes the game service and starts the Flask-SocketIO application.
"""

from wordgrid import create_app
from wordgrid.config import config
from wordgrid.config.game_settings import MAX_ROWS, ROW_LENGTH
from wordgrid.services.game_service import initialize_game_service
from wordgrid.utils.game_logger import game_logger


def main(config_name='default'):
    """Main function to initialize services and start the server."""
    config_class = config[config_name]
    try:
        print("Initializing services...")

        game_service = initialize_game_service(config_class.TARGET_WORD)
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app, socketio = create_app(config_class)
        print("✓ Flask application created successfully")

        game_logger.logger.info(
            f"Word Grid Server starting - {MAX_ROWS} rows x {ROW_LENGTH} tiles, "
            f"target word length {len(game_service.target_word)}"
        )

        print(f"\nStarting Word Grid Game Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Word Grid Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
