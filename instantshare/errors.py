"""Error hierarchy shared by every part of the package."""

from __future__ import annotations


class SharingInstantError(Exception):
    """Base class for all errors raised by this package."""

    prefix = "error"

    def __init__(self, message: str = "") -> None:
        self.detail = message
        super().__init__(f"{self.prefix}: {message}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.detail!r})"


class NotFoundError(SharingInstantError):
    """A fetch returned no rows where at least one was expected."""

    prefix = "not found"

    def __init__(self, entity: str, query: str) -> None:
        self.entity = entity
        self.query = query
        super().__init__(f"{entity} matching {query}")

    def __repr__(self) -> str:
        return f"NotFoundError(entity={self.entity!r}, query={self.query!r})"


class ConnectionFailedError(SharingInstantError):
    """The connection to the database could not be established."""

    prefix = "connection failed"


class QueryFailedError(SharingInstantError):
    """A query was malformed or referenced unknown schema elements."""

    prefix = "query failed"


class TransactionFailedError(SharingInstantError):
    """A create, update or delete was rejected."""

    prefix = "transaction failed"


class SerializationError(SharingInstantError):
    """A value could not be converted to or from a model."""

    prefix = "serialization error"


class SubscriptionError(SharingInstantError):
    """A reactive subscription was broken or closed."""

    prefix = "subscription error"


class SharedKeyError(SharingInstantError):
    """Loading or saving a shared key failed."""

    prefix = "key error"


class RoomError(SharingInstantError):
    """A room operation (join, leave, presence) failed."""

    prefix = "room error"


class TopicError(SharingInstantError):
    """A topic operation (subscribe, publish) failed."""

    prefix = "topic error"


class AuthError(SharingInstantError):
    """An authentication operation failed."""

    prefix = "auth error"