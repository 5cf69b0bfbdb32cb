"""
Session manager.

Owns the authentication state of the client: current user, status and
the persisted token. Nothing else may change them.

Status transitions:
    checking         -> authenticated      login / successful check
    checking         -> notAuthenticated   failed check / no stored token
    authenticated    -> notAuthenticated   logout / failed check
    notAuthenticated -> authenticated      login / successful check

A failed check only changes the status; the user and the stored token
are kept. Logout clears all three.

Overlapping login or check calls are not deduplicated: whichever
response resolves last decides the final state.
"""

import logging
from typing import Callable, Optional

from ..api.models import AuthResponse, AuthStatus, User
from ..storage.store import TokenStore
from .exceptions import AuthenticationError
from .interfaces import AuthBackend
from .state import Listener, SessionState, SessionStateHolder

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_KEY = "token"


class SessionManager:
    """
    Client-side session manager.

    Construction does no I/O and leaves the status at ``checking``; the
    hosting application calls :meth:`initialize` once at start-up to resolve
    it from any previously stored token.
    """

    def __init__(
        self,
        backend: AuthBackend,
        token_store: TokenStore,
        token_key: str = DEFAULT_TOKEN_KEY,
    ):
        """
        Initialize with injected dependencies.

        Args:
            backend: Remote authentication API
            token_store: Persistence for the session token
            token_key: Storage key holding the token
        """
        self.backend = backend
        self.token_store = token_store
        self.token_key = token_key
        self._state = SessionStateHolder()

    # Read-only observables

    @property
    def state(self) -> SessionState:
        return self._state.state

    @property
    def current_user(self) -> Optional[User]:
        return self._state.state.user

    @property
    def auth_status(self) -> AuthStatus:
        return self._state.state.status

    @property
    def is_authenticated(self) -> bool:
        return self._state.state.is_authenticated

    @property
    def token(self) -> Optional[str]:
        """Currently stored token, for attaching to other API requests."""
        return self.token_store.get(self.token_key) or None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call listener with every new session snapshot; returns an unsubscribe callable."""
        return self._state.subscribe(listener)

    # Operations

    async def initialize(self) -> bool:
        """Resolve the initial status from the stored token."""
        logger.debug("Initializing session from stored token")
        return await self.check_auth_status()

    async def login(self, email: str, password: str) -> bool:
        """
        Log in with credentials.

        Returns:
            True once the session is authenticated

        Raises:
            AuthenticationError: With the server message; state is unchanged
        """
        try:
            response = await self.backend.login(email, password)
        except AuthenticationError as e:
            logger.info(f"Login rejected: {e.message}")
            raise

        return self._set_authentication(response)

    async def check_auth_status(self) -> bool:
        """
        Verify the stored token with the server.

        Never raises for a rejected token or a failed call; those end in
        ``notAuthenticated`` and a False result.
        """
        token = self.token_store.get(self.token_key)
        if not token:
            logger.debug("No stored token, logging out")
            self.logout()
            return False

        try:
            response = await self.backend.check_token(token)
        except Exception as e:
            logger.info(f"Stored token could not be verified: {e}")
            self._state.set_status(AuthStatus.NOT_AUTHENTICATED)
            return False

        return self._set_authentication(response)

    def logout(self) -> None:
        """Forget the user and the stored token. No network call."""
        self._state.transition(
            None,
            AuthStatus.NOT_AUTHENTICATED,
            persist=lambda: self.token_store.delete(self.token_key),
        )

    def _set_authentication(self, response: AuthResponse) -> bool:
        self._state.transition(
            response.user,
            AuthStatus.AUTHENTICATED,
            persist=lambda: self.token_store.set(self.token_key, response.token),
        )
        logger.debug(f"Session authenticated for user id {response.user.id}")
        return True
