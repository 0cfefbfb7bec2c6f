"""Requests that combine several queries into one result."""

from __future__ import annotations

import abc
from typing import Any, Generic, List, TypeVar

from .database import Database

V = TypeVar("V")


class FetchKeyRequest(abc.ABC, Generic[V]):
    """A fetch that combines several queries into a single result.

    ``fetch`` builds the combined value from the database; ``queries``
    names the queries whose changes should cause the fetch to run again.
    """

    @abc.abstractmethod
    def fetch(self, db: Database) -> V:
        """Run the fetch against the database and return the combined value."""

    @abc.abstractmethod
    def queries(self) -> List[Any]:
        """The queries this request depends on."""