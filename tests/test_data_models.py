"""
Unit tests for the immutable User / Post / Comment records.
"""
from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest

from instaclone.data_models import Comment, Post, User, new_id


def make_post(**overrides):
    fields = dict(id="p1", user_id="1", username="johndoe", media_url="https://img/1.jpg")
    fields.update(overrides)
    return Post(**fields)


class TestUser:
    def test_records_are_frozen(self):
        user = User(id="1", username="johndoe", email="john@example.com", full_name="John Doe")
        with pytest.raises(FrozenInstanceError):
            user.bio = "changed"

    def test_lists_are_stored_as_tuples(self):
        user = User(id="1", username="a", email="a@x.io", full_name="A", followers=["2", "3"])
        assert user.followers == ("2", "3")

    @pytest.mark.parametrize("field", ["id", "username", "email"])
    def test_rejects_empty_identity_fields(self, field):
        fields = dict(id="1", username="a", email="a@x.io", full_name="A")
        fields[field] = ""
        with pytest.raises(ValueError):
            User(**fields)

    def test_follow_updates_return_new_values(self):
        user = User(id="1", username="a", email="a@x.io", full_name="A")
        followed = user.with_following("2")
        assert followed.following == ("2",)
        assert user.following == ()
        assert followed.with_following("2").following == ("2",)
        assert followed.without_following("2").following == ()

    def test_with_profile_rejects_identity_changes(self):
        user = User(id="1", username="a", email="a@x.io", full_name="A")
        assert user.with_profile(bio="hi").bio == "hi"
        with pytest.raises(ValueError):
            user.with_profile(email="b@x.io")

    def test_dict_snapshot_uses_camel_case_keys(self):
        created = datetime(2023, 1, 1, 12, 30)
        user = User(
            id="1",
            username="johndoe",
            email="john@example.com",
            full_name="John Doe",
            profile_image="https://img/john.jpg",
            following=("2",),
            is_creator=False,
            created_at=created,
        )
        data = user.to_dict()
        assert data["fullName"] == "John Doe"
        assert data["isCreator"] is False
        assert data["createdAt"] == "2023-01-01T12:30:00"
        assert User.from_dict(data) == user


class TestPost:
    def test_rejects_missing_media(self):
        with pytest.raises(ValueError):
            make_post(media_url="")

    def test_rejects_overlapping_likes_and_dislikes(self):
        with pytest.raises(ValueError):
            make_post(likes=("2",), dislikes=("2",))

    def test_like_clears_dislike(self):
        post = make_post(dislikes=("2",)).with_like_toggled("2")
        assert post.likes == ("2",)
        assert post.dislikes == ()

    def test_dislike_clears_like(self):
        post = make_post(likes=("2",)).with_dislike_toggled("2")
        assert post.dislikes == ("2",)
        assert post.likes == ()

    def test_toggle_twice_restores_state(self):
        post = make_post(likes=("3",))
        assert post.with_like_toggled("2").with_like_toggled("2") == post

    def test_comments_keep_insertion_order(self):
        post = make_post()
        first = Comment(id="c1", post_id="p1", user_id="2", username="janedoe", content="first")
        second = Comment(id="c2", post_id="p1", user_id="3", username="samsmith", content="second")
        post = post.with_comment(first).with_comment(second)
        assert [c.id for c in post.comments] == ["c1", "c2"]


class TestComment:
    def test_rejects_blank_content(self):
        with pytest.raises(ValueError):
            Comment(id="c1", post_id="p1", user_id="2", username="janedoe", content="   ")


def test_new_ids_are_unique():
    ids = {new_id() for _ in range(1000)}
    assert len(ids) == 1000
