"""Reactive observers over an entity store, with an in-memory database, errors and state types."""

__version__ = "0.1.0"