from .user import PlayerIdentity
from .room import Room
from .message import Message
from .game import GameParticipant, GamePhase, Position, Ship, ShipType

__all__ = [
    "PlayerIdentity",
    "Room",
    "Message",
    "GameParticipant",
    "GamePhase",
    "Position",
    "Ship",
    "ShipType",
]
