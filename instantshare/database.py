"""Database abstraction, an in-memory store and the process-wide default database."""

from __future__ import annotations

import abc
import copy
import threading
from typing import Any, Dict, List, Optional, Tuple

from .errors import TransactionFailedError
from .watch import Watch

_WRITE_OPS = frozenset({"update", "create", "merge"})
_DELETE_OP = "delete"


class Database(abc.ABC):
    """Read and write access to an entity store.

    Queries are mappings of the form ``{"tableName": {...options}}`` and
    results map each table name to a list of rows. Transactions are lists
    of steps ``[op, entity_type, entity_id, data]``.
    """

    @abc.abstractmethod
    def query(self, q: Any) -> Any:
        """Run a read-only query and return its result."""

    @abc.abstractmethod
    def transact(self, tx_steps: Any) -> None:
        """Apply a list of create, update, merge or delete steps."""

    @abc.abstractmethod
    def subscribe(self, q: Any) -> Watch[Optional[Any]]:
        """Return a watch that holds the query result and updates when it changes."""


class InMemoryDatabase(Database):
    """An entity store kept in memory, for tests and previews.

    Entities are kept per type and id. Every write re-runs each subscribed
    query and sends the new result to its watch.
    """

    def __init__(self) -> None:
        self._entities: Dict[str, Dict[str, Any]] = {}
        self._subscriptions: List[Tuple[Any, Watch[Optional[Any]]]] = []
        self._lock = threading.RLock()

    def insert(self, entity_type: str, entity_id: str, data: Any) -> None:
        """Store (or replace) an entity and notify subscribers."""
        with self._lock:
            self._entities.setdefault(entity_type, {})[entity_id] = copy.deepcopy(data)
        self._notify_subscriptions()

    def remove(self, entity_type: str, entity_id: str) -> None:
        """Remove an entity if present and notify subscribers."""
        with self._lock:
            table = self._entities.get(entity_type)
            if table is not None:
                table.pop(entity_id, None)
        self._notify_subscriptions()

    def query(self, q: Any) -> Any:
        return self._execute_query(q)

    def transact(self, tx_steps: Any) -> None:
        if not isinstance(tx_steps, list):
            raise TransactionFailedError("tx_steps must be an array")
        for step in tx_steps:
            if not isinstance(step, list) or len(step) < 4:
                continue
            op, entity_type, entity_id, data = step[:4]
            if not all(isinstance(part, str) for part in (op, entity_type, entity_id)):
                continue
            if op in _WRITE_OPS:
                self.insert(entity_type, entity_id, data)
            elif op == _DELETE_OP:
                self.remove(entity_type, entity_id)

    def subscribe(self, q: Any) -> Watch[Optional[Any]]:
        watch: Watch[Optional[Any]] = Watch(self._execute_query(q))
        with self._lock:
            self._subscriptions.append((copy.deepcopy(q), watch))
        return watch

    def _execute_query(self, q: Any) -> Dict[str, List[Any]]:
        if not isinstance(q, dict):
            return {}
        with self._lock:
            return {
                table_name: [copy.deepcopy(row) for row in self._entities.get(table_name, {}).values()]
                for table_name in q
            }

    def _notify_subscriptions(self) -> None:
        with self._lock:
            self._subscriptions = [(q, w) for q, w in self._subscriptions if not w.closed]
            subscriptions = list(self._subscriptions)
        for q, watch in subscriptions:
            if not watch.closed:
                watch.send(self._execute_query(q))


class DefaultDatabase:
    """Process-wide database, set once at start-up and read from anywhere.

    Only the first ``set`` takes effect; later calls are ignored.
    """

    _db: Optional[Database] = None
    _lock = threading.Lock()

    @classmethod
    def set(cls, db: Database) -> None:
        with cls._lock:
            if cls._db is None:
                cls._db = db

    @classmethod
    def get(cls) -> Database:
        with cls._lock:
            if cls._db is None:
                raise RuntimeError(
                    "DefaultDatabase not initialized. Call DefaultDatabase.set() at startup."
                )
            return cls._db

    @classmethod
    def is_initialized(cls) -> bool:
        with cls._lock:
            return cls._db is not None

    @classmethod
    def _reset(cls) -> None:
        with cls._lock:
            cls._db = None