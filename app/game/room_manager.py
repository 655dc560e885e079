import logging
import random
import uuid

from .errors import UnknownOrInvalidTarget
from .game_state import GameState
from .leaderboard import Leaderboard
from .outcomes import Notification
from ..models.room import Room
from ..models.user import PlayerIdentity
from ..schemas import CreateGame, RoomSummary, RoomUser

log = logging.getLogger(__name__)


class RoomManager:
    """Open rooms waiting for a second player, and the games they became."""

    def __init__(self, leaderboard: Leaderboard, rng: random.Random):
        self.rooms: dict[str, Room] = {}
        self.games: dict[str, GameState] = {}
        self._leaderboard = leaderboard
        self._rng = rng

    def create_room(self, identity: PlayerIdentity) -> Room:
        room = Room(room_id=str(uuid.uuid4()), room_users=[identity])
        self.rooms[room.room_id] = room
        log.info(f"Player {identity.name} opened room {room.room_id}")
        return room

    def get_room(self, room_id: str) -> Room | None:
        return self.rooms.get(room_id)

    def get_game(self, game_id: str) -> GameState:
        game = self.games.get(game_id)
        if game is None:
            raise UnknownOrInvalidTarget(f"Game {game_id} not found")
        return game

    def join_room(self, identity: PlayerIdentity, room_id: str) -> GameState:
        room = self.rooms.get(room_id)
        if room is None:
            raise UnknownOrInvalidTarget(f"Room {room_id} not found")
        if not room.is_open:
            raise UnknownOrInvalidTarget(f"Room {room_id} is not open")
        if room.room_users[0].id == identity.id:
            raise UnknownOrInvalidTarget(f"Player {identity.name} is already in room {room_id}")

        room.room_users.append(identity)
        del self.rooms[room_id]
        log.info(f"Player {identity.name} joined room {room_id}")

        game = GameState(
            game_id=str(uuid.uuid4()),
            players=list(room.room_users),
            leaderboard=self._leaderboard,
            rng=self._rng,
        )
        self.games[game.game_id] = game
        return game

    def open_rooms(self) -> list[RoomSummary]:
        return [
            RoomSummary(
                room_id=room.room_id,
                room_users=[RoomUser(name=u.name, index=u.id) for u in room.room_users],
            )
            for room in self.rooms.values()
            if room.is_open
        ]

    def room_list_notification(self) -> Notification:
        return Notification(
            type="update_room", data=[room.to_wire() for room in self.open_rooms()]
        )

    @staticmethod
    def create_game_notifications(game: GameState) -> list[Notification]:
        return [
            Notification(
                type="create_game",
                data=CreateGame(
                    id_game=game.game_id, id_player=p.participant_id
                ).to_wire(),
                player_id=p.identity.id,
            )
            for p in game.participants
        ]
