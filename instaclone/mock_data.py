# mock_data.py
from datetime import datetime
from typing import List

from .data_models import Post, User

_PEXELS = "https://images.pexels.com/photos/{id}/pexels-photo-{id}.jpeg?auto=compress&cs=tinysrgb&w=1260&h=750&dpr=1"

JOHN_AVATAR = _PEXELS.format(id=220453)
JANE_AVATAR = _PEXELS.format(id=774909)
SAM_AVATAR = _PEXELS.format(id=614810)


def seed_users() -> List[User]:
    """Return a fresh copy of the demo directory."""
    return [
        User(
            id="1",
            username="johndoe",
            email="john@example.com",
            full_name="John Doe",
            bio="Photography enthusiast",
            profile_image=JOHN_AVATAR,
            followers=("2", "3"),
            following=("2",),
            is_creator=True,
            posts=("1", "3"),
            created_at=datetime(2023, 1, 1),
        ),
        User(
            id="2",
            username="janedoe",
            email="jane@example.com",
            full_name="Jane Doe",
            bio="Travel lover",
            profile_image=JANE_AVATAR,
            followers=("1",),
            following=("1", "3"),
            is_creator=True,
            posts=("2",),
            created_at=datetime(2023, 1, 15),
        ),
        User(
            id="3",
            username="samsmith",
            email="sam@example.com",
            full_name="Sam Smith",
            bio="Just browsing",
            profile_image=SAM_AVATAR,
            followers=("2",),
            following=("1",),
            is_creator=False,
            created_at=datetime(2023, 2, 1),
        ),
    ]


def seed_posts() -> List[Post]:
    """Return a fresh copy of the demo posts, newest first."""
    return [
        Post(
            id="1",
            user_id="1",
            username="johndoe",
            user_profile_image=JOHN_AVATAR,
            media_url=_PEXELS.format(id=2325446),
            caption="Beautiful sunset at the beach",
            likes=("2",),
            created_at=datetime(2023, 4, 15),
        ),
        Post(
            id="2",
            user_id="2",
            username="janedoe",
            user_profile_image=JANE_AVATAR,
            media_url=_PEXELS.format(id=2662116),
            caption="Adventure in the mountains!",
            likes=("1", "3"),
            created_at=datetime(2023, 4, 10),
        ),
        Post(
            id="3",
            user_id="1",
            username="johndoe",
            user_profile_image=JOHN_AVATAR,
            media_url=_PEXELS.format(id=699963),
            caption="City lights",
            dislikes=("2",),
            created_at=datetime(2023, 4, 5),
        ),
    ]
