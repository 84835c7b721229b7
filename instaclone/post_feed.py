"""
Post Feed Store: every known post, likes/dislikes, comments and the
derived feed for the current user.
"""
import time
from typing import Callable, Iterable, List, Optional

from . import config
from .data_models import Comment, Post, new_id
from .errors import ErrorKind, StoreError
from .logging_utils import get_logger
from .media import load_upload
from .user_directory import UserDirectory

logger = get_logger("instaclone.post_feed")


class PostFeedStore:
    def __init__(
        self,
        directory: UserDirectory,
        posts: Optional[Iterable[Post]] = None,
        latency: Optional[float] = None,
    ):
        self.directory = directory
        self.latency = config.SIMULATED_LATENCY if latency is None else latency
        self.posts: List[Post] = list(posts or [])
        self.user_posts: List[Post] = []
        self.is_loading = False
        self.error: Optional[str] = None

    # --- helpers ---
    def _simulate_latency(self) -> None:
        if self.latency > 0:
            time.sleep(self.latency)

    def _fail(self, kind: ErrorKind, message: str) -> None:
        self.error = message
        logger.info("post_feed: %s (%s)", message, kind.value)
        raise StoreError(kind, message)

    def _update_post(self, post_id: str, change: Callable[[Post], Post]) -> Optional[Post]:
        current = self.get_post(post_id)
        if current is None:
            return None
        updated = change(current)
        self.posts = [updated if p.id == post_id else p for p in self.posts]
        self.user_posts = [updated if p.id == post_id else p for p in self.user_posts]
        return updated

    def reset(self, posts: Iterable[Post]) -> None:
        self.posts = list(posts)
        self.user_posts = []
        self.is_loading = False
        self.error = None

    # --- reads ---
    def fetch_posts(self) -> List[Post]:
        self.is_loading = True
        self.error = None
        try:
            self._simulate_latency()
            return list(self.posts)
        finally:
            self.is_loading = False

    def fetch_user_posts(self, user_id: str) -> List[Post]:
        """Refresh the profile cache. Only one user's posts are cached at a time."""
        self.is_loading = True
        self.error = None
        try:
            self._simulate_latency()
            self.user_posts = [p for p in self.posts if p.user_id == user_id]
            return list(self.user_posts)
        finally:
            self.is_loading = False

    def get_post(self, post_id: str) -> Optional[Post]:
        return next((p for p in self.posts if p.id == post_id), None)

    def post_count(self, user_id: str) -> int:
        return sum(1 for p in self.posts if p.user_id == user_id)

    def get_feed_posts(self) -> List[Post]:
        """Posts by the current user and the accounts they follow, newest first.

        Logged out, every post is returned in store order.
        """
        me = self.directory.current_user
        if me is None:
            return list(self.posts)
        feed = [p for p in self.posts if p.user_id == me.id or p.user_id in me.following]
        return sorted(feed, key=lambda p: p.created_at, reverse=True)

    # --- writes ---
    def create_post(self, media_url: str, caption: str = "") -> Optional[Post]:
        """Share a new post as the current user.

        Returns None when nobody is logged in. The post is stored first and
        then recorded on the author; if the author cannot be recorded the
        post is removed again.
        """
        me = self.directory.current_user
        if me is None:
            return None
        self.error = None
        if not me.is_creator:
            self._fail(ErrorKind.NOT_CREATOR, "Only creators can share posts")
        if not media_url:
            self._fail(ErrorKind.VALIDATION, "Please select an image")

        post = Post(
            id=new_id(),
            user_id=me.id,
            username=me.username,
            user_profile_image=me.profile_image,
            media_url=media_url,
            caption=caption or "",
        )
        self.posts = [post] + self.posts
        try:
            self.directory.record_post(me.id, post.id)
        except LookupError:
            self.posts = [p for p in self.posts if p.id != post.id]
            logger.exception("post_feed: could not record post %s on author %s", post.id, me.id)
            raise
        logger.info("post_feed: post created: %s by user %s", post.id, me.id)
        return post

    def create_post_from_upload(self, data: bytes, content_type: str, caption: str = "") -> Optional[Post]:
        """Validate raw image bytes and share them inline as a data URL."""
        if self.directory.current_user is None:
            return None
        try:
            media_url = load_upload(data, content_type)
        except StoreError as e:
            self.error = e.message
            raise
        return self.create_post(media_url, caption)

    def like_post(self, post_id: str) -> Optional[Post]:
        """Toggle the current user's like; liking clears a previous dislike."""
        me = self.directory.current_user
        if me is None:
            return None
        return self._update_post(post_id, lambda p: p.with_like_toggled(me.id))

    def dislike_post(self, post_id: str) -> Optional[Post]:
        """Toggle the current user's dislike; disliking clears a previous like."""
        me = self.directory.current_user
        if me is None:
            return None
        return self._update_post(post_id, lambda p: p.with_dislike_toggled(me.id))

    def add_comment(self, post_id: str, content: str) -> Optional[Comment]:
        me = self.directory.current_user
        if me is None:
            return None
        text = (content or "").strip()
        if not text or self.get_post(post_id) is None:
            return None

        comment = Comment(
            id=new_id(),
            post_id=post_id,
            user_id=me.id,
            username=me.username,
            user_profile_image=me.profile_image,
            content=text,
        )
        self._update_post(post_id, lambda p: p.with_comment(comment))
        logger.debug("post_feed: comment %s added to post %s", comment.id, post_id)
        return comment
