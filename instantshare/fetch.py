"""Reactive observation of a request that combines several queries."""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

from .database import Database
from .errors import SharingInstantError
from .fetch_key_request import FetchKeyRequest
from .watch import Watch

V = TypeVar("V")


class Fetch(Generic[V]):
    """Keeps the combined result of a FetchKeyRequest up to date.

    The request runs once on construction. Whenever any of the queries it
    depends on changes, the whole request runs again and the new value is
    published. Until the first successful run the value is None.
    """

    def __init__(self, request: FetchKeyRequest[V], db: Database) -> None:
        self._request = request
        self._db = db
        self._lock = threading.Lock()
        self._value: Optional[V] = None
        self._loading = True
        self._error: Optional[SharingInstantError] = None
        self._watch: Watch[Optional[V]] = Watch(None)
        self._sources: List[Tuple[Watch[Optional[Any]], Callable[[], None]]] = []

        self._load_sync()
        self._setup_subscriptions()

    def get(self) -> Optional[V]:
        """The current combined value, or None before any successful fetch."""
        with self._lock:
            return self._value

    def is_loading(self) -> bool:
        """Whether a load is in progress."""
        with self._lock:
            return self._loading

    def load_error(self) -> Optional[str]:
        """The message of the most recent load error, if any."""
        with self._lock:
            return str(self._error) if self._error is not None else None

    def watch(self) -> Watch[Optional[V]]:
        """A watch that receives every new combined value."""
        return self._watch

    def close(self) -> None:
        """Stop following the database and close the watch."""
        sources, self._sources = self._sources, []
        for source, unsubscribe in sources:
            unsubscribe()
            source.close()
        self._watch.close()

    def _load_sync(self) -> None:
        with self._lock:
            self._loading = True
        try:
            value = self._request.fetch(self._db)
        except SharingInstantError as exc:
            with self._lock:
                self._error = exc
                self._loading = False
            return
        self._publish(value)
        with self._lock:
            self._error = None
            self._loading = False

    def _setup_subscriptions(self) -> None:
        for q in self._request.queries():
            try:
                source = self._db.subscribe(q)
            except SharingInstantError:
                continue
            self._sources.append((source, source.subscribe(self._on_change)))

    def _on_change(self, _result: Optional[Any]) -> None:
        try:
            value = self._request.fetch(self._db)
        except SharingInstantError:
            return
        self._publish(value)

    def _publish(self, value: V) -> None:
        with self._lock:
            self._value = value
        if not self._watch.closed:
            self._watch.send(value)