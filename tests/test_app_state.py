"""
Tests for the AppState lifecycle.
"""
import pytest

from instaclone.app_state import AppState
from instaclone.errors import ErrorKind, StoreError


def test_init_seeds_mock_data(state):
    assert [u.username for u in state.users.all_users] == ["johndoe", "janedoe", "samsmith"]
    assert [p.id for p in state.posts.posts] == ["1", "2", "3"]
    assert state.users.current_user is None


def test_session_survives_reload(john, storage):
    john.users.follow_user("3")

    reloaded = AppState(storage=storage, latency=0).init()
    assert reloaded.users.current_user.id == "1"
    assert "3" in reloaded.users.current_user.following


def test_reload_resets_everything_but_the_session(john, storage):
    john.posts.create_post("https://img/new.jpg")
    john.posts.add_comment("2", "nice")

    reloaded = AppState(storage=storage, latency=0).init()
    assert [p.id for p in reloaded.posts.posts] == ["1", "2", "3"]
    assert reloaded.posts.get_post("2").comments == ()


def test_reset_keeps_persisted_session(john, storage):
    john.reset()
    assert john.users.current_user is None
    assert storage.load().id == "1"


def test_dispose_clears_session(john, storage):
    john.dispose()
    assert john.users.current_user is None
    assert storage.load() is None


def test_store_error_to_dict(state):
    with pytest.raises(StoreError) as exc:
        state.users.login("nobody@example.com", "password")
    assert exc.value.to_dict() == {
        "code": ErrorKind.INVALID_CREDENTIALS.value,
        "message": "Invalid email or password",
    }
