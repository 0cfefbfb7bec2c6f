"""Reactive observation of every row a query returns."""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, List, Optional, TypeVar

from .database import Database
from .errors import QueryFailedError, SharingInstantError
from .watch import Watch

T = TypeVar("T")

_PARSE_FAILURES = (SharingInstantError, KeyError, TypeError, ValueError)


def _identity(row: Any) -> Any:
    return row


class FetchAll(Generic[T]):
    """Keeps the rows of a table up to date with the database.

    ``parse`` turns a raw row into an item; rows it rejects (by raising) are
    left out. Without ``query`` every row of ``table`` is fetched. The
    initial load runs on construction, and later changes arrive through a
    database subscription.
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
        self._query = query if query is not None else {table: {}}
        self._lock = threading.Lock()
        self._items: List[T] = []
        self._loading = True
        self._error: Optional[SharingInstantError] = None
        self._watch: Watch[List[T]] = Watch([])
        self._source: Optional[Watch[Optional[Any]]] = None
        self._unsubscribe: Optional[Callable[[], None]] = None

        self._load_sync()
        self._setup_subscription()

    def get(self) -> List[T]:
        """The current items."""
        with self._lock:
            return list(self._items)

    def is_loading(self) -> bool:
        """Whether a load is in progress."""
        with self._lock:
            return self._loading

    def load_error(self) -> Optional[str]:
        """The message of the most recent load error, if any."""
        with self._lock:
            return str(self._error) if self._error is not None else None

    def watch(self) -> Watch[List[T]]:
        """A watch that receives every new list of items."""
        return self._watch

    def load(self) -> None:
        """Reload from the database; raises QueryFailedError if the query fails."""
        self._load_sync()
        with self._lock:
            error = self._error
        if error is not None:
            raise QueryFailedError(str(error)) from error

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
        self._publish(self._parse_results(result))
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
        self._publish(self._parse_results(result))

    def _publish(self, items: List[T]) -> None:
        with self._lock:
            self._items = list(items)
        if not self._watch.closed:
            self._watch.send(list(items))

    def _parse_results(self, result: Any) -> List[T]:
        if not isinstance(result, dict):
            return []
        rows = result.get(self._table)
        if isinstance(rows, list):
            candidates = rows
        elif isinstance(rows, dict):
            candidates = list(rows.values())
        else:
            return []
        items: List[T] = []
        for row in candidates:
            try:
                items.append(self._parse(row))
            except _PARSE_FAILURES:
                continue
        return items