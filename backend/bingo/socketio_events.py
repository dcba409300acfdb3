from flask import current_app, request
from flask_socketio import join_room, emit
from bingo import socketio, ROOMS_EXTENSION
from bingo.services.games import RoomRegistry, is_winning, FULL_CARD
from bingo.services.games.errors import (
    BingoError,
    RoomNotFound,
    RoomAlreadyExists,
    AdminExists,
    NoPermission,
    AllNumbersDrawn,
    InvalidClaim,
)
from typing import Any, Dict

NAMESPACE = '/'


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _registry() -> RoomRegistry:
    return current_app.extensions[ROOMS_EXTENSION]


def _valid_room_id(room_id) -> bool:
    return isinstance(room_id, str) and bool(room_id)


def handle_connect(auth=None):
    current_app.logger.info(f"[connect] sid={_get_sid()}")


def handle_disconnect(reason=None):
    """Remove the connection from every room it joined and notify the rest."""
    sid = _get_sid()
    registry = _registry()
    for room_id in registry.rooms_for_connection(sid):
        try:
            names, admin_cleared = registry.remove_connection(room_id, sid)
        except RoomNotFound:
            continue
        if admin_cleared:
            emit('system-message', 'The administrator disconnected', to=room_id, include_self=False)
        emit('player-joined', names, to=room_id, include_self=False)
        current_app.logger.info(f"[disconnect] sid={sid} left room={room_id} admin_cleared={admin_cleared}")


def handle_create_room(room_id=None):
    sid = _get_sid()
    if not _valid_room_id(room_id):
        emit('error-room', 'room id is required')
        return
    registry = _registry()
    ttl = current_app.config.get('ROOM_IDLE_TTL_SEC', 0)
    if ttl:
        registry.evict_idle(ttl)
    try:
        registry.create_room(room_id, sid)
    except RoomAlreadyExists as exc:
        emit('error-room', exc.message)
        return
    join_room(room_id)
    emit('room-created', room_id)
    emit('system-message', f"Room {room_id} created. Administrator: {sid}", to=room_id)
    current_app.logger.info(f"[create-room] room={room_id} admin={sid}")


def handle_join_room(room_id=None, player_name=None):
    sid = _get_sid()
    if not _valid_room_id(room_id):
        emit('error-room', 'room id is required')
        return
    if not isinstance(player_name, str) or not player_name:
        emit('error-room', 'player name is required')
        return
    try:
        names = _registry().join_room(room_id, sid, player_name)
    except RoomNotFound as exc:
        emit('error-room', exc.message)
        return
    join_room(room_id)
    emit('player-joined', names, to=room_id)
    current_app.logger.info(f"[join-room] room={room_id} sid={sid} name={player_name}")


def handle_request_admin(room_id=None):
    sid = _get_sid()
    if not _valid_room_id(room_id):
        emit('admin-denied', RoomNotFound.default_message)
        return
    try:
        _registry().claim_admin(room_id, sid)
    except (RoomNotFound, AdminExists) as exc:
        emit('admin-denied', exc.message)
        return
    join_room(room_id)
    emit('admin-approved')
    emit('system-message', 'An administrator was assigned', to=room_id)
    current_app.logger.info(f"[request-admin] room={room_id} admin={sid}")


def handle_call_number(room_id=None):
    sid = _get_sid()
    if not _valid_room_id(room_id):
        emit('error-room', RoomNotFound.default_message)
        return
    try:
        called = _registry().call_number(room_id, sid)
    except RoomNotFound as exc:
        emit('error-room', exc.message)
        return
    except (NoPermission, AllNumbersDrawn) as exc:
        emit('error-msg', exc.message)
        return
    emit('number-called', called.to_dict(), to=room_id)
    current_app.logger.info(f"[call-number] room={room_id} called={called.letter}{called.number}")


def handle_player_bingo(room_id=None, player_name=None, card=None):
    """Validate a win claim against the room's draw history.

    A valid claim is announced to the whole room; an invalid one is only
    reported back to the claimant.
    """
    sid = _get_sid()
    if not _valid_room_id(room_id):
        emit('error-room', RoomNotFound.default_message)
        return
    rule = current_app.config.get('WIN_RULE', FULL_CARD)
    try:
        drawn = _registry().drawn_numbers(room_id)
        if not is_winning(card, drawn, rule=rule):
            raise InvalidClaim()
    except RoomNotFound as exc:
        emit('error-room', exc.message)
        return
    except InvalidClaim as exc:
        emit('invalid-bingo')
        current_app.logger.info(f"[player-bingo] room={room_id} sid={sid} name={player_name} rejected: {exc.message}")
        return
    emit('winner', player_name, to=room_id)
    current_app.logger.info(f"[player-bingo] room={room_id} sid={sid} name={player_name} won")


def handle_mark_cell(room_id=None, number=None) -> Dict[str, Any]:
    """Acknowledge whether ``number`` has been called in the room."""
    if not _valid_room_id(room_id):
        return {'success': False, 'message': RoomNotFound.default_message}
    if not isinstance(number, int) or isinstance(number, bool):
        return {'success': False, 'message': 'number must be an integer'}
    try:
        _registry().mark_cell(room_id, number)
    except BingoError as exc:
        current_app.logger.info(f"[mark-cell] room={room_id} sid={_get_sid()} number={number} refused: {exc.message}")
        return {'success': False, 'message': exc.message}
    return {'success': True}


def register_socketio_handlers(namespace: str = NAMESPACE) -> None:
    """Register Socket.IO event handlers on the given namespace."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('create-room', handle_create_room, namespace=namespace)
    socketio.on_event('join-room', handle_join_room, namespace=namespace)
    socketio.on_event('request-admin', handle_request_admin, namespace=namespace)
    socketio.on_event('call-number', handle_call_number, namespace=namespace)
    socketio.on_event('player-bingo', handle_player_bingo, namespace=namespace)
    socketio.on_event('mark-cell', handle_mark_cell, namespace=namespace)
