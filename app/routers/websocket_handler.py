import logging

import anyio
from fastapi import WebSocket
from fastapi.websockets import WebSocketState

from ..game import GameSessionEngine
from ..services import NotificationSink

log = logging.getLogger(__name__)


class WebSocketHandler:
    """Handles WebSocket message processing and communication"""

    @staticmethod
    async def handle_messages(
            websocket: WebSocket,
            connection_id: str,
            engine: GameSessionEngine,
            sink: NotificationSink,
            lock: anyio.Lock,
    ) -> None:
        """Main message handling loop for one connection"""
        try:
            async for message in websocket.iter_text():
                # one command and the delivery of its events never interleave
                # with another connection's command
                async with lock:
                    result = engine.handle(connection_id, message)
                    await sink.deliver(result.notifications)
        finally:
            sink.detach(connection_id)
            engine.disconnect(connection_id)

    @staticmethod
    async def broadcast_to_client(websocket: WebSocket, sink: NotificationSink) -> None:
        """Forward lobby broadcasts to this WebSocket client"""
        async with sink.broadcast.subscribe(channel=sink.channel) as subscriber:
            async for event in subscriber:
                if websocket.client_state == WebSocketState.CONNECTED:
                    await websocket.send_text(event.message)
