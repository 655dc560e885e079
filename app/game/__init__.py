from .engine import GameSessionEngine
from .errors import ErrorKind, GameError
from .game_state import GameState
from .leaderboard import Leaderboard
from .outcomes import CommandResult, Notification
from .registry import PlayerRegistry
from .room_manager import RoomManager

__all__ = [
    "GameSessionEngine",
    "ErrorKind",
    "GameError",
    "GameState",
    "Leaderboard",
    "CommandResult",
    "Notification",
    "PlayerRegistry",
    "RoomManager",
]
