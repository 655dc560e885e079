import json
import logging
import random
from typing import Any

from pydantic import BaseModel, ValidationError

from .errors import (
    GameError,
    MalformedMessage,
    UnknownOrInvalidTarget,
    UnregisteredConnection,
    WrongCredentials,
)
from .game_state import GameState
from .leaderboard import Leaderboard
from .outcomes import CommandResult, Notification
from .registry import PlayerRegistry
from .room_manager import RoomManager
from ..models.game import Position
from ..models.message import (
    AddShipsData,
    AddUserToRoomData,
    AttackData,
    Message,
    RandomAttackData,
    RegData,
)
from ..models.user import PlayerIdentity
from ..schemas import RegResult

log = logging.getLogger(__name__)


class GameSessionEngine:
    """Everything a running server knows about players, rooms and games.

    ``handle`` takes one raw inbound frame from one connection and returns a
    ``CommandResult`` whose notifications are already addressed to
    connections (or to everyone). Nothing in here performs I/O.
    """

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()
        self.leaderboard = Leaderboard()
        self.players = PlayerRegistry()
        self.rooms = RoomManager(self.leaderboard, self.rng)

        self._handlers = {
            "reg": (RegData, self._handle_reg),
            "create_room": (None, self._handle_create_room),
            "add_user_to_room": (AddUserToRoomData, self._handle_add_user_to_room),
            "add_ships": (AddShipsData, self._handle_add_ships),
            "attack": (AttackData, self._handle_attack),
            "randomAttack": (RandomAttackData, self._handle_random_attack),
        }

    @property
    def games(self) -> dict[str, GameState]:
        return self.rooms.games

    def handle(self, connection_id: str, raw: str | bytes | dict) -> CommandResult:
        try:
            message = self._parse(raw)
            log.info(f"Received {message.type} from {connection_id}: {message.data}")
            notifications = self._dispatch(connection_id, message)
        except WrongCredentials as e:
            log.info(f"Rejected reg from {connection_id}: {e}")
            reply = RegResult(name=e.name, error=True, error_text="Wrong password")
            result = CommandResult.rejected(
                e.kind,
                [
                    Notification(
                        type="reg", data=reply.to_wire(), connection_id=connection_id
                    )
                ],
            )
        except GameError as e:
            log.info(f"Dropped command from {connection_id}: {e.kind.value} {e}")
            result = CommandResult.rejected(e.kind)
        else:
            result = CommandResult.ok(self._route(notifications))

        log.info(
            f"Result for {connection_id}: accepted={result.accepted} "
            f"events={[n.type for n in result.notifications]}"
        )
        return result

    def disconnect(self, connection_id: str) -> None:
        # Rooms and games stay as they are; the player may reconnect.
        self.players.unbind(connection_id)
        log.info(f"Connection {connection_id} closed")

    def _parse(self, raw: str | bytes | dict) -> Message:
        if isinstance(raw, (str, bytes)):
            try:
                raw = json.loads(raw)
            except ValueError as e:
                raise MalformedMessage(f"Invalid JSON: {e}") from e
        try:
            return Message.model_validate(raw)
        except ValidationError as e:
            raise MalformedMessage(f"Invalid envelope: {e}") from e

    def _dispatch(self, connection_id: str, message: Message) -> list[Notification]:
        entry = self._handlers.get(message.type)
        if entry is None:
            raise MalformedMessage(f"Unknown message type {message.type!r}")

        schema, handler = entry
        payload = self._payload(schema, message.data)

        if message.type == "reg":
            return handler(connection_id, payload)

        identity = self.players.find_by_connection(connection_id)
        if identity is None:
            raise UnregisteredConnection(f"Connection {connection_id} is not registered")
        return handler(identity, payload)

    @staticmethod
    def _payload(schema: type[BaseModel] | None, data: Any) -> BaseModel | None:
        if schema is None:
            return None
        try:
            return schema.model_validate(data)
        except ValidationError as e:
            raise MalformedMessage(f"Invalid {schema.__name__}: {e}") from e

    def _route(self, notifications: list[Notification]) -> list[Notification]:
        routed = []
        for notification in notifications:
            if notification.player_id is None:
                routed.append(notification)
                continue
            connection_id = self.players.connection_for(notification.player_id)
            if connection_id is None:
                log.warning(
                    f"Player {notification.player_id} has no connection, "
                    f"dropping {notification.type}"
                )
                continue
            notification.connection_id = connection_id
            routed.append(notification)
        return routed

    def _game_for(self, identity: PlayerIdentity, game_id: str, participant_id: str) -> GameState:
        game = self.rooms.get_game(game_id)
        if game.participant(participant_id).identity.id != identity.id:
            raise UnknownOrInvalidTarget(
                f"Participant {participant_id} does not belong to {identity.name}"
            )
        return game

    def _handle_reg(self, connection_id: str, data: RegData) -> list[Notification]:
        identity, created = self.players.register(data.name, data.password, connection_id)
        if created:
            self.leaderboard.enroll(identity)

        reply = RegResult(name=identity.name, index=identity.id)
        return [
            Notification(type="reg", data=reply.to_wire(), connection_id=connection_id),
            self.rooms.room_list_notification(),
            self.leaderboard.notification(),
        ]

    def _handle_create_room(self, identity: PlayerIdentity, _) -> list[Notification]:
        self.rooms.create_room(identity)
        return [self.rooms.room_list_notification()]

    def _handle_add_user_to_room(
        self, identity: PlayerIdentity, data: AddUserToRoomData
    ) -> list[Notification]:
        game = self.rooms.join_room(identity, data.index_room)
        return [
            self.rooms.room_list_notification(),
            *self.rooms.create_game_notifications(game),
        ]

    def _handle_add_ships(
        self, identity: PlayerIdentity, data: AddShipsData
    ) -> list[Notification]:
        game = self._game_for(identity, data.game_id, data.index_player)
        return game.add_ships(data.index_player, data.ships)

    def _handle_attack(self, identity: PlayerIdentity, data: AttackData) -> list[Notification]:
        game = self._game_for(identity, data.game_id, data.index_player)
        return game.attack(data.index_player, Position(x=data.x, y=data.y))

    def _handle_random_attack(
        self, identity: PlayerIdentity, data: RandomAttackData
    ) -> list[Notification]:
        game = self._game_for(identity, data.game_id, data.index_player)
        return game.random_attack(data.index_player)
