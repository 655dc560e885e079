from .events import (
    AttackFeedback,
    CreateGame,
    Finish,
    PlayerPublic,
    RegResult,
    RoomSummary,
    RoomUser,
    StartGame,
    Turn,
    WinnerEntry,
)

__all__ = [
    "AttackFeedback",
    "CreateGame",
    "Finish",
    "PlayerPublic",
    "RegResult",
    "RoomSummary",
    "RoomUser",
    "StartGame",
    "Turn",
    "WinnerEntry",
]
