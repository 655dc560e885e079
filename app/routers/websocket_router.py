import logging

import anyio
from fastapi import APIRouter, WebSocket

from ..dependencies import EngineDep, SinkDep
from .websocket_handler import WebSocketHandler

log = logging.getLogger(__name__)
router = APIRouter()


@router.websocket("/")
async def websocket_endpoint(
        websocket: WebSocket,
        engine: EngineDep,
        sink: SinkDep,
) -> None:
    """Main WebSocket endpoint; one socket per player session"""
    await websocket.accept()
    connection_id = sink.attach(websocket)
    lock = websocket.app.state.command_lock

    try:
        async with anyio.create_task_group() as task_group:

            async def run_message_handler() -> None:
                """Task to handle incoming WebSocket messages"""
                await WebSocketHandler.handle_messages(
                    websocket=websocket,
                    connection_id=connection_id,
                    engine=engine,
                    sink=sink,
                    lock=lock,
                )
                task_group.cancel_scope.cancel()

            task_group.start_soon(run_message_handler)

            # Handle outgoing broadcasts to this client
            await WebSocketHandler.broadcast_to_client(websocket=websocket, sink=sink)

    except Exception as e:
        log.error(f"WebSocket error on connection {connection_id}: {e}")
        raise
