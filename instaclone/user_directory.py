"""
User Directory: every known account, the authenticated session and the
follow graph.

Failures are raised as StoreError after the message has been recorded on
``error`` so a view can display it; state is left as it was before the call.
"""
import time
from typing import Iterable, List, Optional

from . import config
from .data_models import User, new_id
from .errors import ErrorKind, StoreError
from .logging_utils import get_logger
from .session_storage import SessionStorage

logger = get_logger("instaclone.user_directory")

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6


class UserDirectory:
    def __init__(
        self,
        storage: SessionStorage,
        users: Optional[Iterable[User]] = None,
        latency: Optional[float] = None,
    ):
        self.storage = storage
        self.latency = config.SIMULATED_LATENCY if latency is None else latency
        self.all_users: List[User] = list(users or [])
        self.current_user: Optional[User] = None
        self.is_loading = False
        self.error: Optional[str] = None

    # --- helpers ---
    def _simulate_latency(self) -> None:
        if self.latency > 0:
            time.sleep(self.latency)

    def _fail(self, kind: ErrorKind, message: str) -> None:
        self.error = message
        logger.info("user_directory: %s (%s)", message, kind.value)
        raise StoreError(kind, message)

    def _upsert(self, *updated: User) -> None:
        by_id = {u.id: u for u in updated}
        users = [by_id.pop(u.id, u) for u in self.all_users]
        users.extend(by_id.values())
        self.all_users = users

    def _set_current(self, user: User) -> None:
        self.current_user = user
        self.storage.save(user)

    # --- lifecycle ---
    def reset(self, users: Iterable[User]) -> None:
        """Replace the directory and forget the in-memory session."""
        self.all_users = list(users)
        self.current_user = None
        self.is_loading = False
        self.error = None

    def restore_session(self) -> Optional[User]:
        """Load the persisted snapshot, if any, and make it the current user.

        The snapshot also replaces (or is added to) the directory record so
        lookups by id keep working for accounts created before a reload.
        """
        user = self.storage.load()
        if user is None:
            return None
        self._upsert(user)
        self.current_user = user
        logger.debug("user_directory: restored session for %s", user.username)
        return user

    # --- authentication ---
    def login(self, email: str, password: str) -> User:
        """Log in by email.

        The password is only required to be non-empty; it is not checked
        against anything since accounts carry no credentials.
        """
        self.is_loading = True
        self.error = None
        try:
            self._simulate_latency()
            user = next((u for u in self.all_users if u.email == email), None)
            if user is None or not password:
                self._fail(ErrorKind.INVALID_CREDENTIALS, "Invalid email or password")
            self._set_current(user)
            logger.info("user_directory: %s logged in", user.username)
            return user
        finally:
            self.is_loading = False

    def signup(self, username: str, email: str, password: str, full_name: str) -> User:
        self.is_loading = True
        self.error = None
        try:
            self._simulate_latency()
            if not (username or "").strip() or not (email or "").strip() or not (full_name or "").strip():
                self._fail(ErrorKind.VALIDATION, "Please fill in all fields")
            if len(username) < MIN_USERNAME_LENGTH:
                self._fail(
                    ErrorKind.VALIDATION,
                    f"Username must be at least {MIN_USERNAME_LENGTH} characters",
                )
            if len(password) < MIN_PASSWORD_LENGTH:
                self._fail(
                    ErrorKind.VALIDATION,
                    f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
                )
            if any(u.email == email for u in self.all_users):
                self._fail(ErrorKind.DUPLICATE_EMAIL, "Email already in use")
            if any(u.username == username for u in self.all_users):
                self._fail(ErrorKind.DUPLICATE_USERNAME, "Username already taken")

            user = User(
                id=new_id(),
                username=username,
                email=email,
                full_name=full_name,
                is_creator=True,
            )
            self.all_users = self.all_users + [user]
            self._set_current(user)
            logger.info("user_directory: created user %s (id=%s)", user.username, user.id)
            return user
        finally:
            self.is_loading = False

    def logout(self) -> None:
        self.storage.clear()
        self.current_user = None
        self.error = None

    # --- follow graph ---
    def follow_user(self, target_id: str) -> None:
        """Make the current user follow ``target_id``.

        Does nothing when logged out, for the current user's own id, for an
        unknown id, or when the target is already followed.
        """
        me = self.current_user
        if me is None:
            return
        if target_id == me.id:
            logger.debug("user_directory: ignoring self-follow by %s", me.id)
            return
        target = self.get_user(target_id)
        if target is None or target_id in me.following:
            return

        updated_me = me.with_following(target_id)
        self._upsert(updated_me, target.with_follower(me.id))
        self._set_current(updated_me)
        logger.debug("user_directory: %s followed %s", me.id, target_id)

    def unfollow_user(self, target_id: str) -> None:
        me = self.current_user
        if me is None:
            return
        updated = [me.without_following(target_id)]
        target = self.get_user(target_id)
        if target is not None and target_id != me.id:
            updated.append(target.without_follower(me.id))
        self._upsert(*updated)
        self._set_current(updated[0])
        logger.debug("user_directory: %s unfollowed %s", me.id, target_id)

    def is_following(self, user_id: str) -> bool:
        return self.current_user is not None and user_id in self.current_user.following

    # --- profile ---
    def update_profile(self, **changes) -> Optional[User]:
        """Edit the current user's full_name, bio or profile_image.

        Posts and comments keep the author details they were created with.
        """
        me = self.current_user
        if me is None:
            return None
        self.error = None
        try:
            updated = me.with_profile(**changes)
        except ValueError as e:
            self._fail(ErrorKind.VALIDATION, str(e))
        self._upsert(updated)
        self._set_current(updated)
        logger.debug("user_directory: %s updated profile fields %s", me.id, sorted(changes))
        return updated

    # --- lookups ---
    def get_user(self, user_id: str) -> Optional[User]:
        return next((u for u in self.all_users if u.id == user_id), None)

    def search_users(self, query: str) -> List[User]:
        """Case-insensitive match on username or full name.

        A blank query lists everyone except the current user.
        """
        q = query.strip().lower()
        if not q:
            me = self.current_user
            return [u for u in self.all_users if me is None or u.id != me.id]
        return [
            u
            for u in self.all_users
            if q in u.username.lower() or q in u.full_name.lower()
        ]

    def suggested_users(self) -> List[User]:
        """Accounts the current user could follow."""
        me = self.current_user
        if me is None:
            return []
        return [u for u in self.all_users if u.id != me.id and u.id not in me.following]

    # --- cross-store writes ---
    def record_post(self, user_id: str, post_id: str) -> User:
        """Append ``post_id`` to the author's post list."""
        me = self.current_user
        if me is not None and me.id == user_id:
            updated = me.with_post(post_id)
            self._upsert(updated)
            self._set_current(updated)
            return updated
        author = self.get_user(user_id)
        if author is None:
            raise LookupError(f"User {user_id} not found")
        updated = author.with_post(post_id)
        self._upsert(updated)
        return updated
