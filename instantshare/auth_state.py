"""Authentication state and signed-in user."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AuthUser:
    """A signed-in user."""

    id: str
    email: Optional[str] = None
    refresh_token: Optional[str] = None


class AuthStatus(enum.Enum):
    """Stage of the authentication lifecycle."""

    LOADING = "loading"
    UNAUTHENTICATED = "unauthenticated"
    GUEST = "guest"
    AUTHENTICATED = "authenticated"


_SIGNED_IN = (AuthStatus.GUEST, AuthStatus.AUTHENTICATED)


@dataclass(frozen=True)
class AuthState:
    """Authentication state: loading, unauthenticated, guest or authenticated.

    Guest and authenticated states carry the user; the others carry none.
    The default is loading.
    """

    status: AuthStatus = AuthStatus.LOADING
    user: Optional[AuthUser] = None

    def __post_init__(self) -> None:
        if (self.status in _SIGNED_IN) != (self.user is not None):
            raise ValueError("a user belongs to, and only to, the guest and authenticated states")

    @classmethod
    def loading(cls) -> "AuthState":
        return cls(AuthStatus.LOADING)

    @classmethod
    def unauthenticated(cls) -> "AuthState":
        return cls(AuthStatus.UNAUTHENTICATED)

    @classmethod
    def guest(cls, user: AuthUser) -> "AuthState":
        return cls(AuthStatus.GUEST, user)

    @classmethod
    def authenticated(cls, user: AuthUser) -> "AuthState":
        return cls(AuthStatus.AUTHENTICATED, user)

    def is_signed_in(self) -> bool:
        """True for a guest or an authenticated user."""
        return self.status in _SIGNED_IN