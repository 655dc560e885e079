from pydantic import BaseModel, Field

from .user import PlayerIdentity


class Room(BaseModel):
    room_id: str
    room_users: list[PlayerIdentity] = Field(default_factory=list)

    @property
    def is_open(self) -> bool:
        return len(self.room_users) == 1
