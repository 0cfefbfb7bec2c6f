"""Reactive observation of the first row a query returns."""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, Optional, TypeVar

from .database import Database
from .errors import NotFoundError, SharingInstantError
from .watch import Watch

T = TypeVar("T")

_PARSE_FAILURES = (SharingInstantError, KeyError, TypeError, ValueError)


def _identity(row: Any) -> Any:
    return row


class FetchOne(Generic[T]):
    """Keeps the first matching row of a table up to date with the database.

    ``parse`` turns a raw row into an item; if it rejects the first row the
    value is None. Without ``query`` the first row of ``table`` is fetched.
    """

    def __init__(
        self,
        db: Database,
        table: str,
        parse: Optional[Callable[[Any], T]] = None,
        query: Any = None,
    ) -> None:
        self._db = db
        self._table = table
        self._parse: Callable[[Any], T] = parse if parse is not None else _identity
        self._query = query if query is not None else {table: {"$": {"limit": 1}}}
        self._lock = threading.Lock()
        self._item: Optional[T] = None
        self._loading = True
        self._error: Optional[SharingInstantError] = None
        self._watch: Watch[Optional[T]] = Watch(None)
        self._source: Optional[Watch[Optional[Any]]] = None
        self._unsubscribe: Optional[Callable[[], None]] = None

        self._load_sync()
        self._setup_subscription()

    def get(self) -> Optional[T]:
        """The current item, or None if there is none."""
        with self._lock:
            return self._item

    def require(self) -> T:
        """The current item; raises NotFoundError if there is none."""
        item = self.get()
        if item is None:
            raise NotFoundError(self._table, "FetchOne")
        return item

    def is_loading(self) -> bool:
        """Whether a load is in progress."""
        with self._lock:
            return self._loading

    def load_error(self) -> Optional[str]:
        """The message of the most recent load error, if any."""
        with self._lock:
            return str(self._error) if self._error is not None else None

    def watch(self) -> Watch[Optional[T]]:
        """A watch that receives every new value."""
        return self._watch

    def close(self) -> None:
        """Stop following the database and close the watch."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        if self._source is not None:
            self._source.close()
            self._source = None
        self._watch.close()

    def _load_sync(self) -> None:
        with self._lock:
            self._loading = True
        try:
            result = self._db.query(self._query)
        except SharingInstantError as exc:
            with self._lock:
                self._error = exc
                self._loading = False
            return
        self._publish(self._parse_first(result))
        with self._lock:
            self._error = None
            self._loading = False

    def _setup_subscription(self) -> None:
        try:
            source = self._db.subscribe(self._query)
        except SharingInstantError:
            return
        self._source = source
        self._unsubscribe = source.subscribe(self._on_change)

    def _on_change(self, result: Optional[Any]) -> None:
        if result is None:
            return
        self._publish(self._parse_first(result))

    def _publish(self, item: Optional[T]) -> None:
        with self._lock:
            self._item = item
        if not self._watch.closed:
            self._watch.send(item)

    def _parse_first(self, result: Any) -> Optional[T]:
        if not isinstance(result, dict):
            return None
        rows = result.get(self._table)
        if isinstance(rows, list):
            first = next(iter(rows), None)
        elif isinstance(rows, dict):
            first = next(iter(rows.values()), None)
        else:
            return None
        if first is None:
            return None
        try:
            return self._parse(first)
        except _PARSE_FAILURES:
            return None