import pytest

from app.game import PlayerRegistry
from app.game.errors import WrongCredentials


@pytest.fixture
def registry() -> PlayerRegistry:
    return PlayerRegistry()


def test_first_registration_creates_identity(registry):
    identity, created = registry.register("alice", "pw", "conn-1")

    assert created
    assert identity.name == "alice"
    assert identity.wins == 0
    assert registry.find_by_connection("conn-1") is identity
    assert registry.connection_for(identity.id) == "conn-1"


def test_same_password_reuses_identity(registry):
    first, _ = registry.register("alice", "pw", "conn-1")
    again, created = registry.register("alice", "pw", "conn-1")

    assert not created
    assert again is first
    assert len(registry) == 1


def test_wrong_password_is_rejected_without_changes(registry):
    identity, _ = registry.register("alice", "pw", "conn-1")
    identity.wins = 3

    with pytest.raises(WrongCredentials):
        registry.register("alice", "nope", "conn-2")

    assert len(registry) == 1
    assert identity.wins == 3
    assert registry.find_by_connection("conn-2") is None
    assert registry.connection_for(identity.id) == "conn-1"


def test_reconnect_moves_binding_to_new_connection(registry):
    identity, _ = registry.register("alice", "pw", "conn-1")
    registry.register("alice", "pw", "conn-2")

    assert registry.find_by_connection("conn-1") is None
    assert registry.find_by_connection("conn-2") is identity
    assert registry.connection_for(identity.id) == "conn-2"


def test_connection_switching_identity_releases_the_old_one(registry):
    alice, _ = registry.register("alice", "pw", "conn-1")
    bob, _ = registry.register("bob", "pw", "conn-1")

    assert registry.find_by_connection("conn-1") is bob
    assert registry.connection_for(alice.id) is None


def test_unbind(registry):
    identity, _ = registry.register("alice", "pw", "conn-1")
    registry.unbind("conn-1")

    assert registry.find_by_connection("conn-1") is None
    assert registry.connection_for(identity.id) is None
    assert registry.get(identity.id) is identity


def test_password_is_not_exposed(registry):
    identity, _ = registry.register("alice", "hunter2", "conn-1")
    assert "hunter2" not in repr(identity)
    assert "hunter2" not in identity.model_dump_json()
