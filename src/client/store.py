"""Predictable state container.

Plain ``Action`` objects are reduced synchronously. Anything callable is a
thunk: it is scheduled as an asyncio task and reports back only by
dispatching further actions, never through a return value.
"""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

import structlog

logger = structlog.get_logger()

State = dict[str, Any]
Listener = Callable[[State], None]


@dataclass(frozen=True)
class Action:
    type: str
    payload: Any = None


Reducer = Callable[[Any, Action], Any]
Dispatch = Callable[[Any], None]
GetState = Callable[[], State]
Thunk = Callable[[Dispatch, GetState, Any], Awaitable[None]]


class RequestTracker:
    """Sequence numbers per request key, so late responses can be dropped."""

    def __init__(self) -> None:
        self._latest: dict[str, int] = {}

    def begin(self, key: str) -> int:
        seq = self._latest.get(key, 0) + 1
        self._latest[key] = seq
        return seq

    def is_latest(self, key: str, seq: int) -> bool:
        return self._latest.get(key) == seq


class Store:
    """Holds the state tree and notifies subscribers after every reduction."""

    def __init__(self, reducer: Reducer, extra: Any = None) -> None:
        self._reducer = reducer
        self._extra = extra
        self._state: State = reducer(None, Action("@@INIT"))
        self._listeners: list[Listener] = []
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def extra(self) -> Any:
        return self._extra

    @property
    def state(self) -> State:
        return self._state

    def get_state(self) -> State:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: Action | Thunk) -> None:
        if isinstance(action, Action):
            self._state = self._reducer(self._state, action)
            for listener in list(self._listeners):
                listener(self._state)
            return

        if not callable(action):
            raise TypeError(f"Cannot dispatch {action!r}")

        task = asyncio.get_running_loop().create_task(
            action(self.dispatch, self.get_state, self._extra)
        )
        self._pending.add(task)
        task.add_done_callback(self._on_thunk_done)

    def _on_thunk_done(self, task: "asyncio.Task[None]") -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("thunk_failed", error=str(exc), error_type=type(exc).__name__)

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        """Wait for every in-flight thunk, including ones they dispatch."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
