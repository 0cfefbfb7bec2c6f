# instantshare

Reactive views over an entity store that stay up to date as the data changes.

`instantshare` provides a small database abstraction with three operations:
`query`, `transact` and `subscribe`. On top of it sit observers that keep
their results current:

- `FetchAll`: every row of a table, kept current.
- `FetchOne`: the first row of a table, or `None`. `require()` raises
  `NotFoundError` when there is no row.
- `Fetch`: runs a custom `FetchKeyRequest` that combines several queries
  into one result. It runs again whenever any of those queries changes.

`InMemoryDatabase` implements the database interface entirely in memory,
for tests and previews.

## Installation

```
pip install instantshare
```

The package has no dependencies outside the standard library.

## Storing and querying data

A query is a dictionary keyed by table name. The result maps each of those
table names to a list of its rows. A table with no rows gives an empty list.

A transaction is a list of steps of the form `[op, table, id, data]`. The
ops work as follows:

- `"create"`, `"update"` and `"merge"` all store `data` as the whole entity.
  They replace anything already stored under that id.
- `"delete"` removes the entity.

Some steps are skipped without an error:

- steps with fewer than four parts;
- steps whose op, table or id is not a string;
- steps with an unknown op.

```python
from instantshare.database import InMemoryDatabase

db = InMemoryDatabase()
db.insert("reminders", "r1", {"id": "r1", "title": "Buy milk", "is_completed": False})

db.transact([
    ["update", "reminders", "r1", {"id": "r1", "title": "Buy oat milk", "is_completed": False}],
    ["create", "reminders", "r2", {"id": "r2", "title": "Call the plumber", "is_completed": True}],
])

result = db.query({"reminders": {}})
# {"reminders": [{...}, {...}]}
```

`transact` raises `TransactionFailedError` if it is given anything other
than a list. Writes are last-write-wins.

## Subscriptions

`subscribe` returns a `Watch` (from `instantshare.watch`) that holds the
latest query result. After every `insert`, `remove` or applied transaction
step, the database re-runs each subscribed query and sends the new result
to its watch.

```python
watch = db.subscribe({"reminders": {}})
print(len(watch.get()["reminders"]))

unsubscribe = watch.subscribe(lambda value: print("changed:", value))
db.remove("reminders", "r2")
unsubscribe()
watch.close()
```

`Watch` has the following members:

- `get()` returns the latest value.
- `send(value)` replaces the value and calls the subscribers in the order
  they subscribed.
- `version` counts the values sent so far.
- `close()` drops all subscribers. After that, `send` and `subscribe`
  raise `SubscriptionError`. The `closed` property reports whether the
  watch has been closed.

## Observers

```python
from instantshare.fetch_all import FetchAll
from instantshare.fetch_one import FetchOne
from instantshare.models import Reminder, make_test_db

db = make_test_db()
db.insert("reminders", "r1", {
    "id": "r1", "title": "Buy milk", "is_completed": False,
    "priority": None, "reminders_list_id": "l1",
})

reminders = FetchAll(db, "reminders", Reminder.from_dict)
print([r.title for r in reminders.get()])
print(reminders.is_loading(), reminders.load_error())

first = FetchOne(db, "reminders", Reminder.from_dict)
print(first.require().title)

reminders.close()
first.close()
```

Both observers take the same arguments: `(db, table, parse=None, query=None)`.

- `parse` turns a raw row into an item. Without it, rows are returned as
  they are.
- Without `query`, the observer uses `{table: {}}`. For `FetchOne` that
  query also carries a limit of one.

Rows that `parse` rejects are handled as follows:

- `FetchAll` leaves them out.
- `FetchOne` reports `None` when its first row is rejected.

Loading and changes:

- Each observer loads once when it is created, then follows the database
  through a subscription.
- `FetchAll.load()` reloads on demand and raises `QueryFailedError` if the
  query fails.
- `watch()` returns the observer's own `Watch`, which receives every new
  result.
- `close()` stops following the database.

### Combining queries

Subclass `FetchKeyRequest` and implement two methods:

- `fetch(db)` builds the combined value.
- `queries()` lists the queries to follow.

```python
from instantshare.fetch import Fetch
from instantshare.fetch_key_request import FetchKeyRequest

class ReminderCounts(FetchKeyRequest):
    def fetch(self, db):
        rows = db.query({"reminders": {}})["reminders"]
        return {"total": len(rows), "done": sum(r["is_completed"] for r in rows)}

    def queries(self):
        return [{"reminders": {}}]

counts = Fetch(ReminderCounts(), db)
print(counts.get())
counts.close()
```

`Fetch.get()` returns `None` until `fetch` has succeeded once. A failure
during the initial load is reported by `load_error()`.

## Sample models

`instantshare.models` provides the following:

- `Reminder` and `RemindersList`: frozen dataclasses with a `TABLE_NAME`,
  `columns()` (a tuple of `ColumnDef`), `from_dict()` and `to_dict()`.
  `from_dict()` raises `SerializationError` on a missing or mistyped field.
- `make_test_db()`: returns a fresh `InMemoryDatabase`.

## A process-wide database

```python
from instantshare.database import DefaultDatabase, InMemoryDatabase

DefaultDatabase.set(InMemoryDatabase())
db = DefaultDatabase.get()
```

Only the first `set` takes effect. Later calls are ignored.

`get()` raises `RuntimeError` if nothing has been set.
`DefaultDatabase.is_initialized()` reports whether a database has been set.

## Other pieces

- `instantshare.errors` holds `SharingInstantError` and its subclasses:
  `NotFoundError`, `ConnectionFailedError`, `QueryFailedError`,
  `TransactionFailedError`, `SerializationError`, `SubscriptionError`,
  `SharedKeyError`, `RoomError`, `TopicError` and `AuthError`.
- `instantshare.connection_state.ConnectionState` describes a connection
  with its `ConnectionKind`: disconnected, connecting, connected,
  authenticated (with a session id) or error (with a message). It offers
  `is_connected()`, `is_authenticated()` and `is_error()`.
- `instantshare.auth_state.AuthState` describes who is signed in. Its
  `AuthStatus` is loading, unauthenticated, guest or authenticated. Guest
  and authenticated states carry an `AuthUser`.
- `instantshare.naming` derives table names from class names, for example
  `table_name_for("RemindersList") == "reminders_lists"`.

## What it does not do

The only store in the package is `InMemoryDatabase`. It has no network
connection, no server, no persistence to disk, no authentication flow and
no rooms or topics. Connection and authentication states are plain value
types; nothing in the package drives them.

The in-memory store does not interpret query options. Filters such as
`where`, ordering and limits are ignored, and every row of each named table
is returned.

## Running the tests

```
pip install -e ".[test]"
pytest
```