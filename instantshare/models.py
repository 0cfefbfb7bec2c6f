"""Sample models describing reminders and reminder lists, with a test database helper."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Mapping, Optional, Tuple

from .database import InMemoryDatabase
from .errors import SerializationError


@dataclass(frozen=True)
class ColumnDef:
    """Metadata for one column of a table."""

    name: str
    python_type: str
    value_type: str
    is_optional: bool = False
    is_primary_key: bool = False
    is_unique: bool = False
    is_indexed: bool = False


def _mapping(data: Any, model: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise SerializationError(f"{model} expects an object, got {type(data).__name__}")
    return data


def _field(data: Mapping[str, Any], key: str, kind: type, optional: bool = False) -> Any:
    if key not in data or data[key] is None:
        if optional:
            return None
        raise SerializationError(f"missing field `{key}`")
    value = data[key]
    if kind is int and isinstance(value, bool):
        raise SerializationError(f"field `{key}` expects int, got bool")
    if not isinstance(value, kind):
        raise SerializationError(
            f"field `{key}` expects {kind.__name__}, got {type(value).__name__}"
        )
    return value


_REMINDER_COLUMNS: Tuple[ColumnDef, ...] = (
    ColumnDef("id", "str", "string", is_primary_key=True, is_unique=True, is_indexed=True),
    ColumnDef("title", "str", "string"),
    ColumnDef("isCompleted", "bool", "boolean"),
    ColumnDef("priority", "Optional[int]", "number", is_optional=True),
    ColumnDef("remindersListId", "str", "string"),
)

_REMINDERS_LIST_COLUMNS: Tuple[ColumnDef, ...] = (
    ColumnDef("id", "str", "string", is_primary_key=True, is_unique=True, is_indexed=True),
    ColumnDef("title", "str", "string"),
    ColumnDef("color", "Optional[str]", "string", is_optional=True),
)


@dataclass(frozen=True)
class Reminder:
    """A reminder belonging to a reminders list."""

    TABLE_NAME: ClassVar[str] = "reminders"

    id: str
    title: str
    is_completed: bool
    priority: Optional[int]
    reminders_list_id: str

    @classmethod
    def columns(cls) -> Tuple[ColumnDef, ...]:
        return _REMINDER_COLUMNS

    @classmethod
    def from_dict(cls, data: Any) -> "Reminder":
        """Build a reminder from a row; raises SerializationError on a bad row."""
        row = _mapping(data, "Reminder")
        return cls(
            id=_field(row, "id", str),
            title=_field(row, "title", str),
            is_completed=_field(row, "is_completed", bool),
            priority=_field(row, "priority", int, optional=True),
            reminders_list_id=_field(row, "reminders_list_id", str),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "is_completed": self.is_completed,
            "priority": self.priority,
            "reminders_list_id": self.reminders_list_id,
        }


@dataclass(frozen=True)
class RemindersList:
    """A named list of reminders."""

    TABLE_NAME: ClassVar[str] = "reminders_lists"

    id: str
    title: str
    color: Optional[str] = None

    @classmethod
    def columns(cls) -> Tuple[ColumnDef, ...]:
        return _REMINDERS_LIST_COLUMNS

    @classmethod
    def from_dict(cls, data: Any) -> "RemindersList":
        """Build a list from a row; raises SerializationError on a bad row."""
        row = _mapping(data, "RemindersList")
        return cls(
            id=_field(row, "id", str),
            title=_field(row, "title", str),
            color=_field(row, "color", str, optional=True),
        )

    def to_dict(self) -> dict:
        return {"id": self.id, "title": self.title, "color": self.color}


def make_test_db() -> InMemoryDatabase:
    """A fresh, empty in-memory database."""
    return InMemoryDatabase()