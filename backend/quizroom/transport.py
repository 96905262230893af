from typing import Any, Protocol

from flask_socketio import join_room


class Transport(Protocol):
    """What the router needs from the connection layer."""

    def send(self, sid: str, event: str, payload: Any) -> None: ...

    def broadcast(self, room_id: str, event: str, payload: Any) -> None: ...

    def subscribe(self, sid: str, room_id: str) -> None: ...


class SocketIOTransport:
    def __init__(self, socketio, namespace: str = '/'):
        self.socketio = socketio
        self.namespace = namespace

    def send(self, sid: str, event: str, payload: Any) -> None:
        self.socketio.emit(event, payload, to=sid, namespace=self.namespace)

    def broadcast(self, room_id: str, event: str, payload: Any) -> None:
        self.socketio.emit(event, payload, to=room_id, namespace=self.namespace)

    def subscribe(self, sid: str, room_id: str) -> None:
        join_room(room_id, sid=sid, namespace=self.namespace)
