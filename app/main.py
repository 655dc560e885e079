import logging
import random
from contextlib import asynccontextmanager

import anyio
from broadcaster import Broadcast
from fastapi import FastAPI

from .config import BROADCAST_URL
from .game import GameSessionEngine
from .middleware import add_cors_middleware, add_logging_middleware
from .routers import players_router, rooms_router, websocket_router
from .services import NotificationSink

log = logging.getLogger(__name__)


def create_app(rng: random.Random | None = None, broadcast_url: str = BROADCAST_URL) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        broadcast = Broadcast(broadcast_url)
        await broadcast.connect()
        app.state.engine = GameSessionEngine(rng=rng)
        app.state.sink = NotificationSink(broadcast)
        app.state.command_lock = anyio.Lock()
        log.info(f"Game server ready, broadcasting via {broadcast_url}")
        yield
        await broadcast.disconnect()
        log.info("shutting down")

    app = FastAPI(lifespan=lifespan)
    app.add_middleware(add_cors_middleware)
    app.add_middleware(add_logging_middleware)

    app.include_router(players_router)
    app.include_router(rooms_router)
    app.include_router(websocket_router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
