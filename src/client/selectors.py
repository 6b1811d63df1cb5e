"""Derived reads over the state tree used by views."""

from typing import Any

from client.store import State


def current_user_id(state: State) -> str | None:
    return state["auth"]["user"].get("id")


def has_liked(state: State, post: dict[str, Any]) -> bool:
    user_id = current_user_id(state)
    return user_id is not None and any(
        like.get("user_id") == user_id for like in post.get("likes", [])
    )


def is_own_comment(state: State, comment: dict[str, Any]) -> bool:
    """Whether the delete button should be offered for a comment."""
    user_id = current_user_id(state)
    return user_id is not None and comment.get("user_id") == user_id
