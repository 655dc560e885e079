import pytest

from app.game import RoomManager
from app.game.errors import UnknownOrInvalidTarget
from app.models.game import GamePhase
from helpers import make_identity


@pytest.fixture
def manager(leaderboard, rng) -> RoomManager:
    return RoomManager(leaderboard, rng)


def test_create_room_lists_it_as_open(manager):
    alice = make_identity("alice")
    room = manager.create_room(alice)

    [summary] = manager.open_rooms()
    assert summary.to_wire() == {
        "roomId": room.room_id,
        "roomUsers": [{"name": "alice", "index": alice.id}],
    }


def test_room_list_never_exposes_passwords(manager):
    manager.create_room(make_identity("alice"))
    notification = manager.room_list_notification()
    assert notification.is_broadcast
    assert "password" not in str(notification.data)


def test_self_join_is_rejected(manager):
    alice = make_identity("alice")
    room = manager.create_room(alice)

    with pytest.raises(UnknownOrInvalidTarget):
        manager.join_room(alice, room.room_id)

    assert len(manager.get_room(room.room_id).room_users) == 1
    assert manager.games == {}


def test_join_unknown_room(manager):
    with pytest.raises(UnknownOrInvalidTarget):
        manager.join_room(make_identity("bob"), "missing")


def test_join_fills_room_and_creates_game(manager, rng):
    alice, bob = make_identity("alice"), make_identity("bob")
    room = manager.create_room(alice)

    game = manager.join_room(bob, room.room_id)

    assert manager.get_room(room.room_id) is None
    assert manager.open_rooms() == []
    assert manager.get_game(game.game_id) is game
    assert [p.identity for p in game.participants] == [alice, bob]
    assert game.phase is GamePhase.AWAITING_FLEETS
    assert game.turn_index == rng.start


def test_filled_room_cannot_be_joined_again(manager):
    room = manager.create_room(make_identity("alice"))
    manager.join_room(make_identity("bob"), room.room_id)

    with pytest.raises(UnknownOrInvalidTarget):
        manager.join_room(make_identity("carol"), room.room_id)


def test_create_game_notifications_are_private(manager):
    alice, bob = make_identity("alice"), make_identity("bob")
    room = manager.create_room(alice)
    game = manager.join_room(bob, room.room_id)

    notifications = manager.create_game_notifications(game)

    by_player = {n.player_id: n.data for n in notifications}
    assert by_player[alice.id] == {"idGame": game.game_id, "idPlayer": game.participants[0].participant_id}
    assert by_player[bob.id] == {"idGame": game.game_id, "idPlayer": game.participants[1].participant_id}


def test_unknown_game(manager):
    with pytest.raises(UnknownOrInvalidTarget):
        manager.get_game("missing")
