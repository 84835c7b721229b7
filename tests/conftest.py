"""
Shared pytest fixtures for instaclone tests.
"""
import keyring
import pytest
from keyring.backend import KeyringBackend
from keyring.errors import PasswordDeleteError

from instaclone.app_state import AppState
from instaclone.session_storage import SessionStorage


class MemoryKeyring(KeyringBackend):
    """Keyring backend that keeps credentials in a dict."""

    priority = 1

    def __init__(self):
        super().__init__()
        self.entries = {}

    def get_password(self, service, username):
        return self.entries.get((service, username))

    def set_password(self, service, username, password):
        self.entries[(service, username)] = password

    def delete_password(self, service, username):
        try:
            del self.entries[(service, username)]
        except KeyError:
            raise PasswordDeleteError(username)


@pytest.fixture
def memory_keyring():
    previous = keyring.get_keyring()
    backend = MemoryKeyring()
    keyring.set_keyring(backend)
    yield backend
    keyring.set_keyring(previous)


@pytest.fixture
def storage(memory_keyring):
    return SessionStorage(service="instaclone-test")


@pytest.fixture
def state(storage):
    """Seeded app state with nobody logged in."""
    return AppState(storage=storage, latency=0).init()


@pytest.fixture
def john(state):
    """Seeded app state logged in as johndoe (id "1")."""
    state.users.login("john@example.com", "password")
    return state
