import logging
import secrets
import uuid

from pydantic import SecretStr

from .errors import WrongCredentials
from ..models.user import PlayerIdentity

log = logging.getLogger(__name__)


class PlayerRegistry:
    """Player identities plus the table of which connection speaks for whom.

    A connection is bound to at most one identity and an identity to at most
    one connection; the latest binding wins on both sides.
    """

    def __init__(self):
        self._players: dict[str, PlayerIdentity] = {}
        self._by_name: dict[str, str] = {}
        self._sessions: dict[str, str] = {}
        self._connections: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._players)

    def get(self, player_id: str) -> PlayerIdentity | None:
        return self._players.get(player_id)

    def get_by_name(self, name: str) -> PlayerIdentity | None:
        player_id = self._by_name.get(name)
        return self._players.get(player_id) if player_id else None

    def register(
        self, name: str, password: str, connection_id: str
    ) -> tuple[PlayerIdentity, bool]:
        """Create or re-open the identity called ``name``.

        Returns the identity and whether it was newly created. Raises
        ``WrongCredentials`` without touching any state when ``name`` exists
        under another password.
        """
        identity = self.get_by_name(name)
        created = False

        if identity is None:
            identity = PlayerIdentity(
                id=str(uuid.uuid4()), name=name, password=SecretStr(password)
            )
            self._players[identity.id] = identity
            self._by_name[name] = identity.id
            created = True
            log.info(f"Registered new player {name} ({identity.id})")
        elif not secrets.compare_digest(
            identity.password.get_secret_value().encode(), password.encode()
        ):
            raise WrongCredentials(name)
        else:
            log.info(f"Player {name} reconnected on {connection_id}")

        self.bind(connection_id, identity.id)
        return identity, created

    def bind(self, connection_id: str, player_id: str) -> None:
        previous_player = self._sessions.pop(connection_id, None)
        if previous_player is not None:
            self._connections.pop(previous_player, None)

        previous_connection = self._connections.pop(player_id, None)
        if previous_connection is not None:
            self._sessions.pop(previous_connection, None)

        self._sessions[connection_id] = player_id
        self._connections[player_id] = connection_id

    def unbind(self, connection_id: str) -> None:
        player_id = self._sessions.pop(connection_id, None)
        if player_id is not None:
            self._connections.pop(player_id, None)

    def find_by_connection(self, connection_id: str) -> PlayerIdentity | None:
        player_id = self._sessions.get(connection_id)
        return self._players.get(player_id) if player_id else None

    def connection_for(self, player_id: str) -> str | None:
        return self._connections.get(player_id)
