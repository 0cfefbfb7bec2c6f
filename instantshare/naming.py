"""Derivation of table names from model class names."""

from __future__ import annotations


def to_snake_case(name: str) -> str:
    """Convert PascalCase to snake_case: "RemindersList" -> "reminders_list"."""
    parts = []
    for position, ch in enumerate(name):
        if ch.isupper() and position > 0:
            parts.append("_")
        parts.append(ch.lower()[:1])
    return "".join(parts)


def pluralize(word: str) -> str:
    """Naive English plural: "reminder" -> "reminders", "category" -> "categories"."""
    if word.endswith("y") and not word.endswith(("ey", "ay", "oy")):
        return word[:-1] + "ies"
    if word.endswith(("s", "sh", "ch", "x")):
        return word + "es"
    return word + "s"


def table_name_for(class_name: str) -> str:
    """The table name for a model class: snake_case, pluralised."""
    return pluralize(to_snake_case(class_name))