"""A single-value channel that keeps the latest value and notifies subscribers."""

from __future__ import annotations

import threading
from typing import Callable, Generic, List, TypeVar

from .errors import SubscriptionError

T = TypeVar("T")


class Watch(Generic[T]):
    """Holds the latest value; each send replaces it and notifies subscribers.

    Subscribers are called with the new value, in the order they subscribed,
    outside the internal lock. Once closed, the watch accepts no more values
    or subscribers.
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._version = 0
        self._closed = False
        self._callbacks: List[Callable[[T], None]] = []
        self._lock = threading.Lock()

    def get(self) -> T:
        """The latest value."""
        with self._lock:
            return self._value

    @property
    def version(self) -> int:
        """Number of values sent since creation."""
        with self._lock:
            return self._version

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    def send(self, value: T) -> None:
        """Replace the value and notify every subscriber."""
        with self._lock:
            if self._closed:
                raise SubscriptionError("watch is closed")
            self._value = value
            self._version += 1
            callbacks = list(self._callbacks)
        for callback in callbacks:
            callback(value)

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register a callback for future values; returns a function that removes it."""
        with self._lock:
            if self._closed:
                raise SubscriptionError("watch is closed")
            self._callbacks.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._callbacks:
                    self._callbacks.remove(callback)

        return unsubscribe

    def close(self) -> None:
        """Drop all subscribers and refuse further values."""
        with self._lock:
            self._closed = True
            self._callbacks.clear()