"""A minimal observer pattern: listeners that react to values sent by a notifier."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class OnChangeListener(Generic[T]):
    """Wraps a callable that is run whenever a notifier it listens to fires."""

    def __init__(self, reaction: Callable[[T], object] | None = None) -> None:
        self.reaction = reaction

    def react(self, value: T) -> None:
        """Run the reaction with ``value``; does nothing if no reaction is set."""
        if self.reaction is not None:
            self.reaction(value)


class OnChangeNotifier(Generic[T]):
    """Keeps an ordered set of listeners and notifies each of them in turn."""

    def __init__(self) -> None:
        self._listeners: list[OnChangeListener[T]] = []

    def add_listener(self, listener: OnChangeListener[T]) -> None:
        """Register ``listener``; adding the same listener twice has no effect."""
        if not any(existing is listener for existing in self._listeners):
            self._listeners.append(listener)

    def remove_listener(self, listener: OnChangeListener[T]) -> None:
        """Unregister ``listener``; removing an unknown listener has no effect."""
        self._listeners = [existing for existing in self._listeners if existing is not listener]

    def notify_listeners(self, value: T) -> None:
        """Send ``value`` to every registered listener in registration order."""
        for listener in list(self._listeners):
            listener.react(value)

    def __len__(self) -> int:
        return len(self._listeners)