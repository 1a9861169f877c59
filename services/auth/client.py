"""Authentication collaborator.

Keeps the single active user session for this process and notifies
subscribers whenever the signed-in user or the loading flag changes.
"""

from typing import Callable, List, NamedTuple, Optional
from common.result import RemoteResult
import logging

logger = logging.getLogger(__name__)


class AuthUser(NamedTuple):
    id: str
    email: Optional[str] = None


class AuthState(NamedTuple):
    user: Optional[AuthUser]
    is_loading: bool

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None


AuthHandler = Callable[[AuthState], None]


class AuthClient:
    """Session-based auth with change notifications."""

    def __init__(self):
        self._user: Optional[AuthUser] = None
        self._is_loading = False
        self._handlers: List[AuthHandler] = []

    @property
    def state(self) -> AuthState:
        return AuthState(user=self._user, is_loading=self._is_loading)

    def get_current_user(self) -> RemoteResult:
        """Signed-in user, or a failure when nobody is signed in."""
        if self._user is None:
            return RemoteResult.failure("Not authenticated")
        return RemoteResult.success(self._user)

    def login(self, user_id: str, email: Optional[str] = None) -> AuthUser:
        self._set(loading=True)
        self._user = AuthUser(id=user_id, email=email)
        self._set(loading=False)
        logger.info(f"User {user_id} signed in")
        return self._user

    def logout(self) -> None:
        if self._user is not None:
            logger.info(f"User {self._user.id} signed out")
        self._user = None
        self._set(loading=False)

    def on_auth_state_change(self, handler: AuthHandler) -> Callable[[], None]:
        """Subscribe to state changes; the handler also gets the current state right away.

        Returns a callable that unsubscribes the handler.
        """
        self._handlers.append(handler)
        handler(self.state)

        def unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return unsubscribe

    def _set(self, loading: bool) -> None:
        self._is_loading = loading
        state = self.state
        for handler in list(self._handlers):
            handler(state)
