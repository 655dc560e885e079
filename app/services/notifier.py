import json
import logging
import uuid

from broadcaster import Broadcast
from fastapi import WebSocket
from fastapi.websockets import WebSocketDisconnect, WebSocketState

from ..config import LOBBY_CHANNEL
from ..game import Notification

log = logging.getLogger(__name__)


class NotificationSink:
    """Delivers engine notifications to sockets.

    Addressed notifications are written straight to the target socket;
    broadcasts are published on the lobby channel, which every connection's
    sender task is subscribed to.
    """

    def __init__(self, broadcast: Broadcast, channel: str = LOBBY_CHANNEL):
        self.broadcast = broadcast
        self.channel = channel
        self._connections: dict[str, WebSocket] = {}

    def attach(self, websocket: WebSocket) -> str:
        connection_id = str(uuid.uuid4())
        self._connections[connection_id] = websocket
        log.info(f"Connection {connection_id} opened")
        return connection_id

    def detach(self, connection_id: str) -> None:
        self._connections.pop(connection_id, None)

    async def deliver(self, notifications: list[Notification]) -> None:
        for notification in notifications:
            if notification.is_broadcast:
                await self.publish(notification.to_message())
            else:
                await self.send(notification.connection_id, notification.to_message())

    async def publish(self, message: dict) -> None:
        await self.broadcast.publish(channel=self.channel, message=json.dumps(message))

    async def send(self, connection_id: str, message: dict) -> None:
        websocket = self._connections.get(connection_id)
        if websocket is None or websocket.client_state != WebSocketState.CONNECTED:
            log.warning(f"Connection {connection_id} is gone, dropping {message['type']}")
            return
        try:
            await websocket.send_text(json.dumps(message))
        except (WebSocketDisconnect, RuntimeError) as e:
            log.warning(f"Failed to send {message['type']} to {connection_id}: {e}")
