from types import SimpleNamespace

import pytest

from app.game import GameSessionEngine, GameState, Leaderboard
from helpers import FixedRandom, make_identity, send, ship_payload


@pytest.fixture
def rng() -> FixedRandom:
    return FixedRandom()


@pytest.fixture
def leaderboard() -> Leaderboard:
    return Leaderboard()


@pytest.fixture
def game(leaderboard, rng) -> GameState:
    alice, bob = make_identity("alice"), make_identity("bob")
    leaderboard.enroll(alice)
    leaderboard.enroll(bob)
    return GameState(game_id="game-1", players=[alice, bob], leaderboard=leaderboard, rng=rng)


@pytest.fixture
def engine(rng) -> GameSessionEngine:
    return GameSessionEngine(rng=rng)


@pytest.fixture
def matched(engine) -> SimpleNamespace:
    """Alice (conn-a) created a room and Bob (conn-b) joined it."""
    send(engine, "conn-a", "reg", {"name": "alice", "password": "a-pass"})
    send(engine, "conn-b", "reg", {"name": "bob", "password": "b-pass"})
    send(engine, "conn-a", "create_room")
    room_id = next(iter(engine.rooms.rooms))
    result = send(engine, "conn-b", "add_user_to_room", {"indexRoom": room_id})

    created = {n.connection_id: n.data for n in result.of_type("create_game")}
    game_id = created["conn-a"]["idGame"]
    return SimpleNamespace(
        engine=engine,
        room_id=room_id,
        game_id=game_id,
        game=engine.games[game_id],
        alice=created["conn-a"]["idPlayer"],
        bob=created["conn-b"]["idPlayer"],
    )


@pytest.fixture
def started(matched) -> SimpleNamespace:
    """Both fleets placed; Bob defends one large ship at (2,3)-(4,3)."""
    send(matched.engine, "conn-a", "add_ships", {
        "gameId": matched.game_id,
        "indexPlayer": matched.alice,
        "ships": [ship_payload(0, 0)],
    })
    send(matched.engine, "conn-b", "add_ships", {
        "gameId": matched.game_id,
        "indexPlayer": matched.bob,
        "ships": [ship_payload(2, 3, length=3)],
    })
    return matched
