"""Action creators.

Network actions return thunks. A thunk issues its request through the
``ThunkContext`` handed to the store as ``extra`` and reports the outcome
only by dispatching: success data to its slice, failures verbatim to
``errors``.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import structlog

from client.api import ApiClient, ApiError
from client.reducers import (
    ADD_POST,
    CLEAR_CURRENT_PROFILE,
    CLEAR_ERRORS,
    DELETE_POST,
    GET_ERRORS,
    GET_POST,
    GET_POSTS,
    GET_PROFILE,
    GET_PROFILES,
    POST_LOADING,
    PROFILE_LOADING,
    SET_CURRENT_USER,
)
from client.session import Session, decode_token
from client.store import Action, Dispatch, GetState, RequestTracker, Thunk

logger = structlog.get_logger()

Navigate = Callable[[str], None]


@dataclass
class ThunkContext:
    """Everything a thunk needs to talk to the API."""

    api: ApiClient
    session: Session
    requests: RequestTracker = field(default_factory=RequestTracker)


def get_errors(payload: Any) -> Action:
    return Action(GET_ERRORS, payload)


def clear_errors() -> Action:
    return Action(CLEAR_ERRORS)


# Auth


def set_current_user(decoded: dict[str, Any]) -> Action:
    """An empty mapping marks the user as logged out."""
    return Action(SET_CURRENT_USER, decoded)


def register_user(data: dict[str, Any], navigate: Navigate) -> Thunk:
    async def thunk(dispatch: Dispatch, get_state: GetState, ctx: ThunkContext) -> None:
        try:
            await ctx.api.post("/api/users/register", data)
        except ApiError as e:
            dispatch(get_errors(e.payload))
            return
        navigate("/login")

    return thunk


def login_user(data: dict[str, Any]) -> Thunk:
    async def thunk(dispatch: Dispatch, get_state: GetState, ctx: ThunkContext) -> None:
        try:
            body = await ctx.api.post("/api/users/login", data)
        except ApiError as e:
            dispatch(get_errors(e.payload))
            return

        token = body["token"]
        ctx.session.authorize(token)
        dispatch(set_current_user(decode_token(token)))

    return thunk


def logout_user() -> Thunk:
    async def thunk(dispatch: Dispatch, get_state: GetState, ctx: ThunkContext) -> None:
        ctx.session.clear()
        dispatch(set_current_user({}))

    return thunk


def restore_session() -> Thunk:
    """Pick up a token persisted by an earlier run."""

    async def thunk(dispatch: Dispatch, get_state: GetState, ctx: ThunkContext) -> None:
        claims = ctx.session.restore()
        if claims is None:
            dispatch(set_current_user({}))
            return
        dispatch(set_current_user(claims))

    return thunk


# Profile


def clear_current_profile() -> Action:
    return Action(CLEAR_CURRENT_PROFILE)


def _load(
    key: str,
    path: str,
    loading: str,
    loaded: str,
    not_found: Any = None,
) -> Thunk:
    """GET ``path`` into a slice, dropping the response if a newer load for ``key`` started."""

    async def thunk(dispatch: Dispatch, get_state: GetState, ctx: ThunkContext) -> None:
        seq = ctx.requests.begin(key)
        dispatch(Action(loading))
        try:
            data = await ctx.api.get(path)
        except ApiError as e:
            if not ctx.requests.is_latest(key, seq):
                return
            if e.status_code == 404:
                dispatch(Action(loaded, not_found))
            else:
                dispatch(get_errors(e.payload))
            return

        if not ctx.requests.is_latest(key, seq):
            logger.debug("stale_response_dropped", key=key, seq=seq)
            return
        dispatch(Action(loaded, data))

    return thunk


def get_current_profile() -> Thunk:
    """An account without a profile ends up with ``{}``, not an error."""
    return _load("profile", "/api/profile", PROFILE_LOADING, GET_PROFILE, not_found={})


def get_profile_by_handle(handle: str) -> Thunk:
    return _load("profile", f"/api/profile/handle/{handle}", PROFILE_LOADING, GET_PROFILE)


def get_profiles() -> Thunk:
    return _load("profiles", "/api/profile/all", PROFILE_LOADING, GET_PROFILES)


def _submit(path: str, data: dict[str, Any], navigate: Navigate, target: str) -> Thunk:
    async def thunk(dispatch: Dispatch, get_state: GetState, ctx: ThunkContext) -> None:
        try:
            await ctx.api.post(path, data)
        except ApiError as e:
            dispatch(get_errors(e.payload))
            return
        navigate(target)

    return thunk


def create_profile(data: dict[str, Any], navigate: Navigate) -> Thunk:
    """Create or update the caller's profile, then go to the dashboard."""
    return _submit("/api/profile", data, navigate, "/dashboard")


def add_experience(data: dict[str, Any], navigate: Navigate) -> Thunk:
    return _submit("/api/profile/experience", data, navigate, "/dashboard")


def add_education(data: dict[str, Any], navigate: Navigate) -> Thunk:
    return _submit("/api/profile/education", data, navigate, "/dashboard")


def _delete_entry(path: str) -> Thunk:
    async def thunk(dispatch: Dispatch, get_state: GetState, ctx: ThunkContext) -> None:
        try:
            profile = await ctx.api.delete(path)
        except ApiError as e:
            dispatch(get_errors(e.payload))
            return
        dispatch(Action(GET_PROFILE, profile))

    return thunk


def delete_experience(exp_id: str) -> Thunk:
    return _delete_entry(f"/api/profile/experience/{exp_id}")


def delete_education(edu_id: str) -> Thunk:
    return _delete_entry(f"/api/profile/education/{edu_id}")


def delete_account() -> Thunk:
    """Remove user, profile and posts; the session is dropped as on logout."""

    async def thunk(dispatch: Dispatch, get_state: GetState, ctx: ThunkContext) -> None:
        try:
            await ctx.api.delete("/api/profile")
        except ApiError as e:
            dispatch(get_errors(e.payload))
            return
        ctx.session.clear()
        dispatch(set_current_user({}))

    return thunk


# Posts


def get_posts() -> Thunk:
    return _load("posts", "/api/posts", POST_LOADING, GET_POSTS, not_found=[])


def get_post(post_id: str) -> Thunk:
    return _load("post", f"/api/posts/{post_id}", POST_LOADING, GET_POST)


def add_post(data: dict[str, Any]) -> Thunk:
    async def thunk(dispatch: Dispatch, get_state: GetState, ctx: ThunkContext) -> None:
        dispatch(clear_errors())
        try:
            post = await ctx.api.post("/api/posts", data)
        except ApiError as e:
            dispatch(get_errors(e.payload))
            return
        dispatch(Action(ADD_POST, post))

    return thunk


def delete_post(post_id: str) -> Thunk:
    async def thunk(dispatch: Dispatch, get_state: GetState, ctx: ThunkContext) -> None:
        try:
            await ctx.api.delete(f"/api/posts/{post_id}")
        except ApiError as e:
            dispatch(get_errors(e.payload))
            return
        dispatch(Action(DELETE_POST, post_id))

    return thunk


def _toggle_like(path: str) -> Thunk:
    async def thunk(dispatch: Dispatch, get_state: GetState, ctx: ThunkContext) -> None:
        try:
            await ctx.api.post(path)
        except ApiError as e:
            dispatch(get_errors(e.payload))
            return
        dispatch(get_posts())

    return thunk


def add_like(post_id: str) -> Thunk:
    return _toggle_like(f"/api/posts/like/{post_id}")


def remove_like(post_id: str) -> Thunk:
    return _toggle_like(f"/api/posts/unlike/{post_id}")


def add_comment(post_id: str, data: dict[str, Any]) -> Thunk:
    async def thunk(dispatch: Dispatch, get_state: GetState, ctx: ThunkContext) -> None:
        dispatch(clear_errors())
        try:
            post = await ctx.api.post(f"/api/posts/comment/{post_id}", data)
        except ApiError as e:
            dispatch(get_errors(e.payload))
            return
        dispatch(Action(GET_POST, post))

    return thunk


def delete_comment(post_id: str, comment_id: str) -> Thunk:
    async def thunk(dispatch: Dispatch, get_state: GetState, ctx: ThunkContext) -> None:
        try:
            post = await ctx.api.delete(f"/api/posts/comment/{post_id}/{comment_id}")
        except ApiError as e:
            dispatch(get_errors(e.payload))
            return
        dispatch(Action(GET_POST, post))

    return thunk
