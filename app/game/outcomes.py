from dataclasses import dataclass, field
from typing import Any

from .errors import ErrorKind


@dataclass
class Notification:
    """One outbound frame.

    Addressed to a player (``player_id``) while the game logic builds it; the
    engine swaps that for the player's bound ``connection_id`` before handing
    it to the transport. With neither set it goes to every connection.
    """

    type: str
    data: Any
    player_id: str | None = None
    connection_id: str | None = None

    @property
    def is_broadcast(self) -> bool:
        return self.player_id is None and self.connection_id is None

    def to_message(self) -> dict:
        return {"type": self.type, "data": self.data, "id": 0}


@dataclass
class CommandResult:
    accepted: bool
    error: ErrorKind | None = None
    notifications: list[Notification] = field(default_factory=list)

    @classmethod
    def ok(cls, notifications: list[Notification]) -> "CommandResult":
        return cls(accepted=True, notifications=notifications)

    @classmethod
    def rejected(
        cls, error: ErrorKind, notifications: list[Notification] | None = None
    ) -> "CommandResult":
        return cls(accepted=False, error=error, notifications=notifications or [])

    def of_type(self, event_type: str) -> list[Notification]:
        return [n for n in self.notifications if n.type == event_type]
