"""Connection lifecycle state of a sync engine."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class ConnectionKind(enum.Enum):
    """The stage of the connection lifecycle."""

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    AUTHENTICATED = "authenticated"
    ERROR = "error"


@dataclass(frozen=True)
class ConnectionState:
    """Connection state: disconnected, connecting, connected, authenticated or error.

    An authenticated state carries its session id; an error state carries
    its message. The default is disconnected.
    """

    kind: ConnectionKind = ConnectionKind.DISCONNECTED
    session_id: Optional[str] = None
    message: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.kind is ConnectionKind.AUTHENTICATED) != (self.session_id is not None):
            raise ValueError("a session id belongs to, and only to, the authenticated state")
        if (self.kind is ConnectionKind.ERROR) != (self.message is not None):
            raise ValueError("a message belongs to, and only to, the error state")

    @classmethod
    def disconnected(cls) -> "ConnectionState":
        return cls(ConnectionKind.DISCONNECTED)

    @classmethod
    def connecting(cls) -> "ConnectionState":
        return cls(ConnectionKind.CONNECTING)

    @classmethod
    def connected(cls) -> "ConnectionState":
        return cls(ConnectionKind.CONNECTED)

    @classmethod
    def authenticated(cls, session_id: str) -> "ConnectionState":
        return cls(ConnectionKind.AUTHENTICATED, session_id=session_id)

    @classmethod
    def error(cls, message: str) -> "ConnectionState":
        return cls(ConnectionKind.ERROR, message=message)

    def is_connected(self) -> bool:
        """True when connected or authenticated."""
        return self.kind in (ConnectionKind.CONNECTED, ConnectionKind.AUTHENTICATED)

    def is_authenticated(self) -> bool:
        return self.kind is ConnectionKind.AUTHENTICATED

    def is_error(self) -> bool:
        return self.kind is ConnectionKind.ERROR

    def __str__(self) -> str:
        if self.kind is ConnectionKind.AUTHENTICATED:
            return f"authenticated (session: {self.session_id})"
        if self.kind is ConnectionKind.ERROR:
            return f"error: {self.message}"
        return self.kind.value