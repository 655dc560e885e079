from pydantic import SecretStr

from app.game import GameSessionEngine
from app.models.game import Position, Ship, ShipType
from app.models.user import PlayerIdentity


class FixedRandom:
    """Deterministic stand-in for ``random.Random``."""

    def __init__(self, start: int = 0, pick: int = 0):
        self.start = start
        self.pick = pick
        self.choices: list[list] = []

    def randrange(self, stop: int) -> int:
        return self.start % stop

    def choice(self, seq):
        self.choices.append(list(seq))
        return seq[self.pick]


def make_ship(x: int, y: int, length: int = 1, horizontal: bool = True) -> Ship:
    ship_type = [ShipType.SMALL, ShipType.MEDIUM, ShipType.LARGE, ShipType.HUGE][length - 1]
    return Ship(position=Position(x=x, y=y), direction=horizontal, length=length, type=ship_type)


def ship_payload(x: int, y: int, length: int = 1, horizontal: bool = True) -> dict:
    return make_ship(x, y, length, horizontal).model_dump(mode="json")


def send(engine: GameSessionEngine, connection_id: str, msg_type: str, data=None):
    return engine.handle(connection_id, {"type": msg_type, "data": data, "id": 0})


def make_identity(name: str) -> PlayerIdentity:
    return PlayerIdentity(id=f"id-{name}", name=name, password=SecretStr("secret"))
