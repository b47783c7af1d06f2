# observer.py
from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class StateNotSetError(RuntimeError):
    """notify() was called before any state was published."""


class Listener(Protocol):
    def update(self, state: str) -> None: ...


class Subject:
    """
    Notification registry: an ordered list of listeners plus the current state.

    Listeners are called synchronously, in registration order, every time
    update_state() runs. The registry only keeps references; it never creates
    or disposes of listeners. The same listener may be registered twice and
    will then be notified twice.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener] = []
        self._state: str | None = None

    # ===== registration =====
    def register(self, listener: Listener) -> None:
        self._listeners.append(listener)
        logger.debug("Registered %r (%d listeners)", listener, len(self._listeners))

    def unregister(self, listener: Listener) -> None:
        """
        Removes the first occurrence of `listener`, compared by identity.
        Unknown listeners are ignored.
        """
        for idx, registered in enumerate(self._listeners):
            if registered is listener:
                del self._listeners[idx]
                logger.debug(
                    "Unregistered %r (%d listeners)", listener, len(self._listeners)
                )
                return
        logger.debug("Unregister ignored, %r is not registered", listener)

    @property
    def listeners(self) -> tuple[Listener, ...]:
        return tuple(self._listeners)

    def __len__(self) -> int:
        return len(self._listeners)

    # ===== state =====
    @property
    def current_state(self) -> str | None:
        return self._state

    def update_state(self, new_state: str) -> None:
        """Publishes `new_state`; None is rejected and the previous state is kept."""
        if new_state is None:
            raise ValueError("new_state must be a string, got None.")
        self._state = new_state
        self.notify()

    def notify(self) -> None:
        """
        Pushes the current state to every registered listener.
        A listener that raises stops the pass; the error reaches the caller.
        """
        if self._state is None:
            raise StateNotSetError("No state has been published yet; call update_state() first.")
        state = self._state
        logger.debug("Notifying %d listeners: %s", len(self._listeners), state)
        for listener in self._listeners:
            listener.update(state)
