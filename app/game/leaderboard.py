import logging

from .outcomes import Notification
from ..models.user import PlayerIdentity
from ..schemas import WinnerEntry

log = logging.getLogger(__name__)


class Leaderboard:
    """Win counters keyed by player name.

    Counters live on the enrolled ``PlayerIdentity`` objects, so this is the
    only place that changes ``PlayerIdentity.wins``.
    """

    def __init__(self):
        self._entries: dict[str, PlayerIdentity] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def enroll(self, identity: PlayerIdentity) -> None:
        self._entries.setdefault(identity.name, identity)

    def wins_for(self, name: str) -> int:
        entry = self._entries.get(name)
        return entry.wins if entry else 0

    def record_win(self, name: str) -> int:
        entry = self._entries[name]
        entry.wins += 1
        log.info(f"Player {name} now has {entry.wins} win(s)")
        return entry.wins

    def snapshot(self) -> list[WinnerEntry]:
        entries = sorted(self._entries.values(), key=lambda e: e.wins, reverse=True)
        return [WinnerEntry(name=e.name, wins=e.wins) for e in entries]

    def notification(self) -> Notification:
        return Notification(
            type="update_winners",
            data=[entry.to_wire() for entry in self.snapshot()],
        )
