"""
Tests for keyring-backed session persistence.
"""
import keyring

from instaclone.data_models import User
from instaclone.session_storage import SessionStorage


def make_user(**overrides):
    fields = dict(id="1", username="johndoe", email="john@example.com", full_name="John Doe")
    fields.update(overrides)
    return User(**fields)


def test_load_without_session_returns_none(storage):
    assert storage.load() is None


def test_save_and_load(storage):
    user = make_user(following=("2",))
    storage.save(user)
    assert storage.load() == user


def test_large_snapshot_is_chunked(memory_keyring):
    storage = SessionStorage(service="instaclone-test", chunk_size=64)
    user = make_user(profile_image="data:image/png;base64," + "A" * 500)
    storage.save(user)

    assert keyring.get_password("instaclone-test", "currentUser") is None
    parts = int(keyring.get_password("instaclone-test", "currentUser.parts"))
    assert parts > 1
    assert storage.load() == user


def test_small_save_replaces_chunked_snapshot(memory_keyring):
    storage = SessionStorage(service="instaclone-test", chunk_size=400)
    storage.save(make_user(profile_image="data:image/png;base64," + "A" * 500))
    storage.save(make_user())

    assert keyring.get_password("instaclone-test", "currentUser.parts") is None
    assert storage.load().profile_image is None


def test_clear_removes_all_entries(memory_keyring):
    storage = SessionStorage(service="instaclone-test", chunk_size=64)
    storage.save(make_user(bio="x" * 300))
    storage.clear()

    assert storage.load() is None
    assert memory_keyring.entries == {}


def test_unreadable_snapshot_is_ignored(storage):
    keyring.set_password("instaclone-test", "currentUser", "{not json")
    assert storage.load() is None
