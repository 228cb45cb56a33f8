"""
WebSocket Event Handlers

Handles the real-time key input channel of the game.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..utils.decorators import websocket_game_service_required
from ..utils.game_logger import game_logger


def game_room(game_id):
    return f"game_{game_id}"


def register_websocket_handlers(socketio, notify_delay_seconds=0.0):
    """
    Register all WebSocket event handlers.

    Args:
        socketio: SocketIO instance
        notify_delay_seconds: How long to hold back the 'game_ended' event
            after the final guess. The game status has already changed by then.
    """

    def announce_game_end(game_id, state):
        payload = {
            'game_id': game_id,
            'status': state.status,
            'won': state.won,
            'target_word': state.answer,
            'rounds_used': len(state.guesses)
        }

        if notify_delay_seconds <= 0:
            socketio.emit('game_ended', payload, room=game_room(game_id))
            return

        def deferred_emit():
            socketio.sleep(notify_delay_seconds)
            socketio.emit('game_ended', payload, room=game_room(game_id))

        socketio.start_background_task(deferred_emit)

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.logger.debug(f"WebSocket: client {request.sid} connected")

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        """Handle WebSocket disconnection."""
        game_logger.logger.debug(f"WebSocket: client {request.sid} disconnected")

    @socketio.on('start_game')
    @websocket_game_service_required
    def handle_start_game(data=None, game_service=None):
        """Create a new game and join its room."""
        try:
            game_id = game_service.create_new_game()
            join_room(game_room(game_id))

            game_logger.log_game_event(game_id, 'game_started', request.remote_addr or 'unknown', sid=request.sid)

            emit('game_state_update', {
                'success': True,
                'game_id': game_id,
                'state': asdict(game_service.get_game_state(game_id))
            })

        except Exception as e:
            game_logger.logger.error(f"Error starting game over WebSocket: {e}")
            emit('error', {'error': str(e)})

    @socketio.on('join_game')
    @websocket_game_service_required
    def handle_join_game(data, game_service=None):
        """Join an existing game room for real-time updates."""
        game_id = (data or {}).get('game_id')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        state = game_service.get_game_state(game_id)
        if state is None:
            emit('error', {'error': 'Game not found'})
            return

        join_room(game_room(game_id))
        game_logger.logger.info(f"WebSocket: {request.sid} joined game {game_id}")

        emit('game_state_update', {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        })

    @socketio.on('leave_game')
    def handle_leave_game(data):
        """Leave a game room."""
        game_id = (data or {}).get('game_id')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        leave_room(game_room(game_id))
        game_logger.logger.info(f"WebSocket: {request.sid} left game {game_id}")

    @socketio.on('key_press')
    @websocket_game_service_required
    def handle_key_press(data, game_service=None):
        """Feed one key event to a game."""
        data = data or {}
        game_id = data.get('game_id')
        key = data.get('key')

        if not game_id or key is None:
            emit('error', {'error': 'Game ID and key required'})
            return

        result = game_service.press_key(game_id, key)
        if result is None:
            emit('key_result', {'success': False, 'error': 'Game not found'})
            return

        state = game_service.get_game_state(game_id)

        emit('key_result', {
            'success': result.accepted,
            'result': result.to_dict()
        })

        if not result.accepted:
            return

        socketio.emit('game_state_update', {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }, room=game_room(game_id))

        if result.verdicts and state.game_over:
            announce_game_end(game_id, state)
