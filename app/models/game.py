from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .user import PlayerIdentity


class Position(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: int
    y: int


class ShipType(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    HUGE = "huge"


class Ship(BaseModel):
    """A ship as placed by its owner.

    ``direction`` is the horizontal flag: ``True`` lays the ship out along +x
    from ``position``, ``False`` along +y. ``hit_cells`` is server-side
    bookkeeping and is never sent back to clients.
    """

    position: Position
    direction: bool
    length: int = Field(ge=1, le=4)
    type: ShipType

    _hit_cells: set[Position] = PrivateAttr(default_factory=set)

    @property
    def hit_cells(self) -> set[Position]:
        return self._hit_cells


class GameParticipant(BaseModel):
    identity: PlayerIdentity
    participant_id: str
    ships: list[Ship] = Field(default_factory=list)
    ready: bool = False


class GamePhase(str, Enum):
    AWAITING_FLEETS = "awaiting_fleets"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"
