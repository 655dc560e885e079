from .players import router as players_router
from .rooms import router as rooms_router
from .websocket_router import router as websocket_router

__all__ = ["players_router", "rooms_router", "websocket_router"]
