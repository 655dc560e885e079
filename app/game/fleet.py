"""Ship geometry and strike bookkeeping.

Pure functions over ``Ship`` models; nothing here knows about games,
connections or turn order.
"""

from enum import Enum

from ..config import BOARD_SIZE
from ..models.game import GameParticipant, Position, Ship


class StrikeResult(str, Enum):
    ALREADY_HIT = "already_hit"
    HIT = "hit"
    SUNK = "sunk"


def occupied_cells(ship: Ship) -> list[Position]:
    x, y = ship.position.x, ship.position.y
    if ship.direction:
        return [Position(x=x + i, y=y) for i in range(ship.length)]
    return [Position(x=x, y=y + i) for i in range(ship.length)]


def is_sunk(ship: Ship) -> bool:
    return len(ship.hit_cells) == ship.length


def fleet_destroyed(ships: list[Ship]) -> bool:
    return all(is_sunk(ship) for ship in ships)


def register_fleet(participant: GameParticipant, ships: list[Ship]) -> None:
    # Layouts are taken as sent: no bounds, overlap or adjacency checks.
    participant.ships = list(ships)
    participant.ready = True


def resolve_strike(ship: Ship, position: Position) -> StrikeResult | None:
    """Apply a strike to ``ship``.

    Returns ``None`` when the ship does not occupy ``position``. A cell that
    was already struck reports ``ALREADY_HIT`` and is not counted again.
    """
    if position not in occupied_cells(ship):
        return None
    if position in ship.hit_cells:
        return StrikeResult.ALREADY_HIT

    ship.hit_cells.add(position)
    if is_sunk(ship):
        return StrikeResult.SUNK
    return StrikeResult.HIT


def surrounding_miss_cells(ship: Ship, board_size: int = BOARD_SIZE) -> set[Position]:
    cells = set(occupied_cells(ship))
    around: set[Position] = set()
    for cell in cells:
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                nx, ny = cell.x + dx, cell.y + dy
                if not (0 <= nx < board_size and 0 <= ny < board_size):
                    continue
                around.add(Position(x=nx, y=ny))
    return around - cells
