"""
Observable session state.

The session is held as one immutable snapshot. Every transition builds a
new snapshot and swaps it in under a lock together with the matching
token-store write, so readers see either the old triple or the new one.
"""

import logging
import threading
from dataclasses import dataclass, replace
from typing import Callable, List, Optional

from ..api.models import AuthStatus, User

logger = logging.getLogger(__name__)

Listener = Callable[["SessionState"], None]


@dataclass(frozen=True)
class SessionState:
    """Read-only snapshot of the session."""

    user: Optional[User] = None
    status: AuthStatus = AuthStatus.CHECKING
    version: int = 0

    @property
    def is_authenticated(self) -> bool:
        return self.status is AuthStatus.AUTHENTICATED


class SessionStateHolder:
    """Holds the current SessionState and notifies subscribers of changes."""

    def __init__(self, initial: Optional[SessionState] = None):
        self._state = initial or SessionState()
        self._lock = threading.Lock()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> SessionState:
        return self._state

    def transition(
        self,
        user: Optional[User],
        status: AuthStatus,
        persist: Optional[Callable[[], None]] = None,
    ) -> SessionState:
        """
        Swap in a new snapshot.

        Args:
            user: User of the new snapshot
            status: Status of the new snapshot
            persist: Token-store write applied in the same critical section;
                if it raises, the snapshot is left unchanged

        Returns:
            The committed snapshot
        """
        with self._lock:
            if persist is not None:
                persist()
            new_state = self._commit(user=user, status=status)
        self._notify(new_state)
        return new_state

    def set_status(self, status: AuthStatus) -> SessionState:
        """Swap in a new snapshot that keeps the current user."""
        with self._lock:
            new_state = self._commit(user=self._state.user, status=status)
        self._notify(new_state)
        return new_state

    def _commit(self, user: Optional[User], status: AuthStatus) -> SessionState:
        self._state = replace(
            self._state, user=user, status=status, version=self._state.version + 1
        )
        return self._state

    def _notify(self, state: SessionState) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(state)
            except Exception:
                logger.exception("Session listener failed")

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called with every committed snapshot.

        Returns:
            Callable that removes the listener again
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe
