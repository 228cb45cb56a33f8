import os
import tempfile

# Keep test runs from writing log files into the working directory
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordgrid-logs-'))

import pytest

from wordgrid import create_app
from wordgrid.config import TestingConfig
from wordgrid.services.game_service import initialize_game_service


@pytest.fixture
def game_service():
    return initialize_game_service(TestingConfig.TARGET_WORD)


@pytest.fixture
def app_and_socketio(game_service):
    app, socketio = create_app(TestingConfig)
    return app, socketio


@pytest.fixture
def client(app_and_socketio):
    app, _ = app_and_socketio
    return app.test_client()


@pytest.fixture
def socket_client(app_and_socketio):
    app, socketio = app_and_socketio
    sio_client = socketio.test_client(app)
    yield sio_client
    if sio_client.is_connected():
        sio_client.disconnect()
