import logging
import random
import uuid

from .errors import UnknownOrInvalidTarget
from .fleet import (
    StrikeResult,
    fleet_destroyed,
    register_fleet,
    resolve_strike,
    surrounding_miss_cells,
)
from .leaderboard import Leaderboard
from .outcomes import Notification
from ..config import BOARD_SIZE
from ..models.game import GameParticipant, GamePhase, Position, Ship
from ..models.user import PlayerIdentity
from ..schemas import AttackFeedback, Finish, StartGame, Turn

log = logging.getLogger(__name__)

MISS = "miss"
SHOT = "shot"
KILLED = "killed"


class GameState:
    """Turn order and combat for one two-player game.

    Methods return the notifications the move produced, addressed by player
    id. Rejected moves raise ``UnknownOrInvalidTarget`` before anything is
    mutated.
    """

    def __init__(
        self,
        game_id: str,
        players: list[PlayerIdentity],
        leaderboard: Leaderboard,
        rng: random.Random,
        board_size: int = BOARD_SIZE,
    ):
        if len(players) != 2:
            raise ValueError(f"A game needs exactly 2 players, got {len(players)}")

        log.info(f"Creating game {game_id} for {', '.join(p.name for p in players)}")
        self.game_id = game_id
        self.board_size = board_size
        self.participants = [
            GameParticipant(identity=player, participant_id=str(uuid.uuid4()))
            for player in players
        ]
        self.turn_index = rng.randrange(2)
        self.phase = GamePhase.AWAITING_FLEETS

        self._leaderboard = leaderboard
        self._rng = rng

    @property
    def finished(self) -> bool:
        return self.phase is GamePhase.FINISHED

    @property
    def current_participant(self) -> GameParticipant:
        return self.participants[self.turn_index]

    @property
    def participant_ids(self) -> list[str]:
        return [p.participant_id for p in self.participants]

    def participant(self, participant_id: str) -> GameParticipant:
        for participant in self.participants:
            if participant.participant_id == participant_id:
                return participant
        raise UnknownOrInvalidTarget(
            f"Participant {participant_id} is not part of game {self.game_id}"
        )

    def opponent_of(self, participant: GameParticipant) -> GameParticipant:
        return self.participants[1 - self.participants.index(participant)]

    def add_ships(self, participant_id: str, ships: list[Ship]) -> list[Notification]:
        participant = self.participant(participant_id)
        if self.phase is not GamePhase.AWAITING_FLEETS:
            raise UnknownOrInvalidTarget(f"Game {self.game_id} is already {self.phase.value}")

        register_fleet(participant, ships)
        log.info(
            f"Participant {participant_id} placed {len(ships)} ship(s) in game {self.game_id}"
        )
        if not all(p.ready for p in self.participants):
            return []

        self.phase = GamePhase.IN_PROGRESS
        log.info(
            f"Game {self.game_id} started, "
            f"{self.current_participant.identity.name} moves first"
        )
        notifications = [
            self._to(
                p,
                "start_game",
                StartGame(ships=p.ships, current_player_index=p.participant_id),
            )
            for p in self.participants
        ]
        notifications.extend(self._turn_notifications())
        return notifications

    def attack(self, participant_id: str, position: Position) -> list[Notification]:
        attacker = self._attacker(participant_id)
        return self._resolve_attack(attacker, position)

    def random_attack(self, participant_id: str) -> list[Notification]:
        attacker = self._attacker(participant_id)
        defender = self.opponent_of(attacker)

        struck: set[Position] = set()
        for ship in defender.ships:
            struck |= ship.hit_cells
        candidates = [
            Position(x=x, y=y)
            for x in range(self.board_size)
            for y in range(self.board_size)
            if Position(x=x, y=y) not in struck
        ]
        if not candidates:
            return []

        return self._resolve_attack(attacker, self._rng.choice(candidates))

    def _attacker(self, participant_id: str) -> GameParticipant:
        attacker = self.participant(participant_id)
        if self.phase is not GamePhase.IN_PROGRESS:
            raise UnknownOrInvalidTarget(f"Game {self.game_id} is {self.phase.value}")
        if attacker is not self.current_participant:
            raise UnknownOrInvalidTarget(
                f"It is not {participant_id}'s turn in game {self.game_id}"
            )
        return attacker

    def _resolve_attack(
        self, attacker: GameParticipant, position: Position
    ) -> list[Notification]:
        defender = self.opponent_of(attacker)

        status = MISS
        killed: Ship | None = None
        for ship in defender.ships:
            result = resolve_strike(ship, position)
            if result is None or result is StrikeResult.ALREADY_HIT:
                continue
            if result is StrikeResult.SUNK:
                status = KILLED
                killed = ship
            else:
                status = SHOT
            break

        notifications = self._attack_notifications(attacker, position, status)

        if killed is not None:
            around = sorted(
                surrounding_miss_cells(killed, self.board_size),
                key=lambda cell: (cell.x, cell.y),
            )
            for cell in around:
                notifications.extend(self._attack_notifications(attacker, cell, MISS))

        if fleet_destroyed(defender.ships):
            return notifications + self._finish(attacker)

        if status == MISS:
            self.turn_index = self.participants.index(defender)
        notifications.extend(self._turn_notifications())
        return notifications

    def _finish(self, winner: GameParticipant) -> list[Notification]:
        self.phase = GamePhase.FINISHED
        log.info(f"Game {self.game_id} won by {winner.identity.name}")

        notifications = [
            self._to(p, "finish", Finish(win_player=winner.participant_id))
            for p in self.participants
        ]
        self._leaderboard.record_win(winner.identity.name)
        notifications.append(self._leaderboard.notification())
        return notifications

    def _attack_notifications(
        self, attacker: GameParticipant, position: Position, status: str
    ) -> list[Notification]:
        feedback = AttackFeedback(
            position=position, current_player=attacker.participant_id, status=status
        )
        return [self._to(p, "attack", feedback) for p in self.participants]

    def _turn_notifications(self) -> list[Notification]:
        turn = Turn(current_player=self.current_participant.participant_id)
        return [self._to(p, "turn", turn) for p in self.participants]

    @staticmethod
    def _to(participant: GameParticipant, event_type: str, payload) -> Notification:
        return Notification(
            type=event_type,
            data=payload.to_wire(),
            player_id=participant.identity.id,
        )
