from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..models.game import Position, Ship


class EventPayload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class RegResult(EventPayload):
    name: str
    index: str | None = None
    error: bool = False
    error_text: str = ""


class RoomUser(EventPayload):
    name: str
    index: str


class RoomSummary(EventPayload):
    room_id: str
    room_users: list[RoomUser]


class WinnerEntry(EventPayload):
    name: str
    wins: int


class CreateGame(EventPayload):
    id_game: str
    id_player: str


class StartGame(EventPayload):
    ships: list[Ship]
    current_player_index: str


class Turn(EventPayload):
    current_player: str


class AttackFeedback(EventPayload):
    position: Position
    current_player: str
    status: str


class Finish(EventPayload):
    win_player: str


class PlayerPublic(EventPayload):
    index: str
    name: str
    wins: int
