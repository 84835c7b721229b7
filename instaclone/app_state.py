"""
State owner for the instaclone application.

The view layer constructs one AppState and talks to its two stores:

    state = AppState().init()
    state.users.login("john@example.com", "password")
    feed = state.posts.get_feed_posts()
"""
from typing import Optional

from .logging_utils import get_logger
from .mock_data import seed_posts, seed_users
from .post_feed import PostFeedStore
from .session_storage import SessionStorage
from .user_directory import UserDirectory

logger = get_logger("instaclone.app_state")


class AppState:
    def __init__(self, storage: Optional[SessionStorage] = None, latency: Optional[float] = None):
        self.storage = storage or SessionStorage()
        self.users = UserDirectory(self.storage, latency=latency)
        self.posts = PostFeedStore(self.users, latency=latency)

    def init(self) -> "AppState":
        """Seed mock data and restore the persisted session, if any."""
        self.reset()
        user = self.users.restore_session()
        logger.debug("app_state: initialised (session=%s)", user.id if user else None)
        return self

    def reset(self) -> None:
        """Reseed both stores in memory. Persisted storage is left alone."""
        self.users.reset(seed_users())
        self.posts.reset(seed_posts())

    def dispose(self) -> None:
        """Drop the persisted session and log out."""
        self.users.logout()
