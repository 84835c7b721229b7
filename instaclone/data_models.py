"""
Data models for the instaclone application.
These models define the structure of data used throughout the app.

Records are immutable; every change goes through a ``with_*`` method that
returns a new value. Author fields copied onto posts and comments
(username, profile image) are a snapshot taken at creation time and are
never refreshed afterwards.
"""
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, Optional, Tuple


def new_id() -> str:
    return uuid.uuid4().hex


def _parse_ts(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if value:
        return datetime.fromisoformat(value)
    return datetime.now()


def _without(ids: Tuple[str, ...], item: str) -> Tuple[str, ...]:
    return tuple(i for i in ids if i != item)


def _with(ids: Tuple[str, ...], item: str) -> Tuple[str, ...]:
    if item in ids:
        return ids
    return ids + (item,)


@dataclass(frozen=True)
class User:
    """Represents a user in the directory."""
    id: str
    username: str
    email: str
    full_name: str
    bio: str = ""
    profile_image: Optional[str] = None
    followers: Tuple[str, ...] = ()
    following: Tuple[str, ...] = ()
    is_creator: bool = True
    posts: Tuple[str, ...] = ()
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        if not self.id:
            raise ValueError("User id must not be empty")
        if not self.username:
            raise ValueError("User username must not be empty")
        if not self.email:
            raise ValueError("User email must not be empty")
        # accept lists from callers and seed data
        object.__setattr__(self, "followers", tuple(self.followers))
        object.__setattr__(self, "following", tuple(self.following))
        object.__setattr__(self, "posts", tuple(self.posts))

    def with_follower(self, user_id: str) -> "User":
        return replace(self, followers=_with(self.followers, user_id))

    def without_follower(self, user_id: str) -> "User":
        return replace(self, followers=_without(self.followers, user_id))

    def with_following(self, user_id: str) -> "User":
        return replace(self, following=_with(self.following, user_id))

    def without_following(self, user_id: str) -> "User":
        return replace(self, following=_without(self.following, user_id))

    def with_post(self, post_id: str) -> "User":
        return replace(self, posts=self.posts + (post_id,))

    def with_profile(self, **changes: Any) -> "User":
        """Update profile fields (full_name, bio, profile_image)."""
        allowed = {"full_name", "bio", "profile_image"}
        unknown = set(changes) - allowed
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "fullName": self.full_name,
            "bio": self.bio,
            "profileImage": self.profile_image,
            "followers": list(self.followers),
            "following": list(self.following),
            "isCreator": self.is_creator,
            "posts": list(self.posts),
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            id=str(data.get("id") or ""),
            username=data.get("username") or "",
            email=data.get("email") or "",
            full_name=data.get("fullName") or data.get("full_name") or "",
            bio=data.get("bio") or "",
            profile_image=data.get("profileImage") or data.get("profile_image"),
            followers=tuple(data.get("followers") or ()),
            following=tuple(data.get("following") or ()),
            is_creator=bool(data.get("isCreator", data.get("is_creator", True))),
            posts=tuple(data.get("posts") or ()),
            created_at=_parse_ts(data.get("createdAt") or data.get("created_at")),
        )


@dataclass(frozen=True)
class Comment:
    """Represents a comment attached to exactly one post."""
    id: str
    post_id: str
    user_id: str
    username: str  # Denormalized from the author at creation
    content: str
    user_profile_image: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        if not self.id or not self.post_id or not self.user_id:
            raise ValueError("Comment ids must not be empty")
        if not self.content or not self.content.strip():
            raise ValueError("Comment content must not be empty")


@dataclass(frozen=True)
class Post:
    """Represents a shared photo."""
    id: str
    user_id: str
    username: str  # Denormalized from the author at creation
    media_url: str
    user_profile_image: Optional[str] = None
    caption: str = ""
    likes: Tuple[str, ...] = ()
    dislikes: Tuple[str, ...] = ()
    comments: Tuple[Comment, ...] = ()
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        if not self.id or not self.user_id:
            raise ValueError("Post ids must not be empty")
        if not self.media_url:
            raise ValueError("Post media_url must not be empty")
        object.__setattr__(self, "likes", tuple(self.likes))
        object.__setattr__(self, "dislikes", tuple(self.dislikes))
        object.__setattr__(self, "comments", tuple(self.comments))
        if set(self.likes) & set(self.dislikes):
            raise ValueError("A user cannot both like and dislike a post")

    def with_like_toggled(self, user_id: str) -> "Post":
        if user_id in self.likes:
            return replace(self, likes=_without(self.likes, user_id))
        return replace(
            self,
            likes=self.likes + (user_id,),
            dislikes=_without(self.dislikes, user_id),
        )

    def with_dislike_toggled(self, user_id: str) -> "Post":
        if user_id in self.dislikes:
            return replace(self, dislikes=_without(self.dislikes, user_id))
        return replace(
            self,
            dislikes=self.dislikes + (user_id,),
            likes=_without(self.likes, user_id),
        )

    def with_comment(self, comment: Comment) -> "Post":
        return replace(self, comments=self.comments + (comment,))
