from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .game import Ship
from ..config import BOARD_SIZE


class Message(BaseModel):
    """Envelope shared by every inbound and outbound frame."""

    type: str
    data: Any = None
    id: int = 0


class WirePayload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RegData(WirePayload):
    name: str = Field(min_length=1)
    password: str


class AddUserToRoomData(WirePayload):
    index_room: str


class AddShipsData(WirePayload):
    game_id: str
    index_player: str
    ships: list[Ship]


class RandomAttackData(WirePayload):
    game_id: str
    index_player: str


class AttackData(RandomAttackData):
    x: int = Field(ge=0, lt=BOARD_SIZE)
    y: int = Field(ge=0, lt=BOARD_SIZE)
