"""Reducers for the ``auth``, ``errors``, ``profile`` and ``post`` slices."""

from collections.abc import Mapping
from typing import Any

from client.store import Action, Reducer, Store

# Action types
SET_CURRENT_USER = "SET_CURRENT_USER"
GET_ERRORS = "GET_ERRORS"
CLEAR_ERRORS = "CLEAR_ERRORS"
PROFILE_LOADING = "PROFILE_LOADING"
GET_PROFILE = "GET_PROFILE"
GET_PROFILES = "GET_PROFILES"
CLEAR_CURRENT_PROFILE = "CLEAR_CURRENT_PROFILE"
POST_LOADING = "POST_LOADING"
GET_POSTS = "GET_POSTS"
GET_POST = "GET_POST"
ADD_POST = "ADD_POST"
DELETE_POST = "DELETE_POST"

AUTH_INITIAL: dict[str, Any] = {"is_authenticated": False, "user": {}}
PROFILE_INITIAL: dict[str, Any] = {"profile": None, "profiles": None, "loading": False}
POST_INITIAL: dict[str, Any] = {"posts": [], "post": {}, "loading": False}


def auth_reducer(state: dict[str, Any] | None, action: Action) -> dict[str, Any]:
    state = AUTH_INITIAL if state is None else state
    if action.type == SET_CURRENT_USER:
        user = dict(action.payload or {})
        return {**state, "is_authenticated": bool(user), "user": user}
    return state


def errors_reducer(state: Any, action: Action) -> Any:
    """Holds the last error payload verbatim."""
    state = {} if state is None else state
    if action.type == GET_ERRORS:
        return action.payload
    if action.type == CLEAR_ERRORS:
        return {}
    return state


def profile_reducer(state: dict[str, Any] | None, action: Action) -> dict[str, Any]:
    state = PROFILE_INITIAL if state is None else state
    if action.type == PROFILE_LOADING:
        return {**state, "loading": True}
    if action.type == GET_PROFILE:
        return {**state, "profile": action.payload, "loading": False}
    if action.type == GET_PROFILES:
        return {**state, "profiles": action.payload, "loading": False}
    if action.type == CLEAR_CURRENT_PROFILE:
        return {**state, "profile": None}
    return state


def post_reducer(state: dict[str, Any] | None, action: Action) -> dict[str, Any]:
    state = POST_INITIAL if state is None else state
    if action.type == POST_LOADING:
        return {**state, "loading": True}
    if action.type == GET_POSTS:
        return {**state, "posts": action.payload, "loading": False}
    if action.type == GET_POST:
        return {**state, "post": action.payload, "loading": False}
    if action.type == ADD_POST:
        return {**state, "posts": [action.payload, *state["posts"]]}
    if action.type == DELETE_POST:
        return {
            **state,
            "posts": [p for p in state["posts"] if p.get("id") != action.payload],
        }
    return state


def combine_reducers(reducers: Mapping[str, Reducer]) -> Reducer:
    """Build a root reducer that hands each slice to its own reducer."""

    def root(state: dict[str, Any] | None, action: Action) -> dict[str, Any]:
        state = state or {}
        next_state = {key: reducer(state.get(key), action) for key, reducer in reducers.items()}
        # Keep identity when nothing changed so subscribers can compare cheaply
        if state and all(next_state[key] is state.get(key) for key in reducers):
            return state
        return next_state

    return root


root_reducer = combine_reducers(
    {
        "auth": auth_reducer,
        "profile": profile_reducer,
        "post": post_reducer,
        "errors": errors_reducer,
    }
)


def create_store(extra: Any = None) -> Store:
    """Build a store over the application's root reducer."""
    return Store(root_reducer, extra)
