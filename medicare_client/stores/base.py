"""Reducer-backed store.

Pattern: state is an immutable snapshot; `dispatch(action)` runs the pure
reducer under a lock, swaps the snapshot, runs the commit hook, then calls
subscribers. Network calls happen outside the lock, so concurrent actions
interleave freely and the last reducer application wins.
"""
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, List, TypeVar

S = TypeVar("S")


@dataclass(frozen=True)
class Action:
    """A named transition with an optional payload."""
    type: Enum
    payload: Any = field(default=None)


Reducer = Callable[[S, Action], S]
Listener = Callable[[S], None]


class Store(Generic[S]):
    """Holds one state snapshot and applies actions to it."""

    def __init__(self, reducer: Reducer, initial_state: S):
        self._reducer = reducer
        self._state = initial_state
        self._lock = threading.Lock()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> S:
        """Current snapshot (never mutated in place)."""
        return self._state

    def dispatch(self, action_type: Enum, payload: Any = None) -> S:
        """
        Apply an action and return the new snapshot.

        Args:
            action_type: Member of the store's action Enum
            payload: Action payload

        Returns:
            State after the transition
        """
        with self._lock:
            previous = self._state
            self._state = self._reducer(previous, Action(action_type, payload))
            self._on_commit(previous, self._state)
            current = self._state

        for listener in list(self._listeners):
            listener(current)

        return current

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called with each new snapshot.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _on_commit(self, previous: S, current: S) -> None:
        """Hook run inside the lock after each transition."""
