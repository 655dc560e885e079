from typing import Annotated

from fastapi import Depends
from starlette.requests import HTTPConnection

from .game import GameSessionEngine
from .services import NotificationSink


def get_engine(connection: HTTPConnection) -> GameSessionEngine:
    """The engine built by the application lifespan."""
    return connection.app.state.engine


def get_sink(connection: HTTPConnection) -> NotificationSink:
    return connection.app.state.sink


# convenience type aliases for dependency injection
EngineDep = Annotated[GameSessionEngine, Depends(get_engine)]
SinkDep = Annotated[NotificationSink, Depends(get_sink)]
