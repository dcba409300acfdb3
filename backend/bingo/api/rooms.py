from flask import Blueprint, jsonify, current_app
from bingo import ROOMS_EXTENSION
from bingo.services.games.errors import RoomNotFound

rooms = Blueprint('rooms', __name__)


@rooms.route('/<string:room_id>', methods=['GET'])
def get_room_state(room_id):
    """Read-only snapshot of a room: admin, players and called numbers."""
    registry = current_app.extensions[ROOMS_EXTENSION]
    try:
        state = registry.room_state(room_id)
    except RoomNotFound as exc:
        return jsonify({'error': exc.message}), 404
    return jsonify(state), 200
