"""
sigflow Emitter - Core Signal Implementation
============================================

This module provides the fundamental building blocks of sigflow: emitters that
hold an ordered set of subscribers and deliver values to them synchronously.

Two flavours exist:

- `SimpleEmitter`: the bare subscribe/emit primitive.
- `Emitter`: a SimpleEmitter that also republishes its subscriber count
  through `n_of_subscriptions_signal`, a cached signal seeded at 0. Composite
  signals rely on it to notice "first subscriber arrived" and "last
  subscriber left" without polling.

Delivery Guarantees
-------------------

`emit()` iterates the subscribers that were registered when the emission
began, in subscription order. A subscriber may subscribe or unsubscribe
anything (itself included) or emit again while being notified; such changes
only take effect for later emissions.

```python
from sigflow import make_emitter

signal = make_emitter()

def first(value):
    unsubscribe_second()  # second still runs for this emission

unsubscribe_first = signal.subscribe(first)
unsubscribe_second = signal.subscribe(print)

signal.emit(1)  # prints 1
signal.emit(2)  # prints nothing
```

Deduplication
-------------

Subscribing the same function twice keeps one subscription. Every call to
`subscribe()` returns an unsubscribe function; all of them remove the same
membership and calling any of them again is a no-op.
"""

from typing import TYPE_CHECKING, Generic, Optional

from ...util.subscriber_list import SubscriberList
from ..types.common_types import T, Subscriber, Unsubscribe
from .once import subscribe_once

if TYPE_CHECKING:
    from .cached import SimpleCachedEmitter


class SimpleEmitter(Generic[T]):
    """
    Bare signal: an ordered, deduplicated set of subscribers.

    Example:
        ```python
        signal = SimpleEmitter[int]()
        unsubscribe = signal.subscribe(lambda v: print(v))
        signal.emit(3)   # prints 3
        unsubscribe()
        signal.emit(42)  # nothing happens
        ```
    """

    def __init__(self, key: Optional[str] = None) -> None:
        self._key = key or "<unnamed>"
        self._subscribers = SubscriberList()

    @property
    def key(self) -> str:
        """Get the key/identifier for this signal."""
        return self._key

    @property
    def n_of_subscriptions(self) -> int:
        """Current number of active subscriptions."""
        return len(self._subscribers)

    def subscribe(self, callback: Subscriber[T]) -> Unsubscribe:
        """
        Subscribe a function to this signal.

        Args:
            callback: Function called with every emitted value.

        Returns:
            A function removing this subscription. Calling it more than once,
            or after the callback was removed some other way, does nothing.

        Raises:
            TypeError: If callback is not callable.
        """
        if not callable(callback):
            raise TypeError(
                f"Subscriber must be callable, got {type(callback).__name__}"
            )

        if self._subscribers.add(callback):
            self._on_subscriptions_changed()

        def unsubscribe() -> None:
            self.unsubscribe(callback)

        return unsubscribe

    def unsubscribe(self, callback: Subscriber[T]) -> None:
        """Remove a subscriber; no-op if it is not subscribed."""
        if self._subscribers.discard(callback):
            self._on_subscriptions_changed()

    def subscribe_once(self, callback: Subscriber[T]) -> Unsubscribe:
        """Subscribe for the next notification only."""
        return subscribe_once(self, callback)

    def emit(self, value: T = None) -> None:  # type: ignore[assignment]
        """
        Emit a value to every current subscriber.

        Subscribers are taken from a snapshot made before the first one is
        called. Exceptions raised by a subscriber propagate to the caller.
        """
        for subscriber in self._subscribers.snapshot():
            subscriber(value)

    def emit_for(self, callback: Subscriber[T], value: T = None) -> None:  # type: ignore[assignment]
        """Emit a value to callback only, if it is currently subscribed."""
        if callback in self._subscribers:
            callback(value)

    def clear_subscriptions(self) -> None:
        """Remove every subscriber as a single change."""
        if self._subscribers.clear():
            self._on_subscriptions_changed()

    def _on_subscriptions_changed(self) -> None:
        """Hook called after the subscriber set actually changed."""

    def __contains__(self, callback: object) -> bool:
        return callback in self._subscribers

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._key!r}, subscribers={self.n_of_subscriptions})"


class Emitter(SimpleEmitter[T]):
    """
    Signal that also publishes its subscriber count reactively.

    `n_of_subscriptions_signal` emits the new count right after a subscribe,
    unsubscribe or clear changed it, and replays the current count to new
    subscribers.

    Example:
        ```python
        signal = Emitter[int]()
        signal.n_of_subscriptions_signal.subscribe(print)  # prints 0
        unsubscribe = signal.subscribe(lambda v: None)    # prints 1
        unsubscribe()                                     # prints 0
        ```
    """

    def __init__(self, key: Optional[str] = None) -> None:
        super().__init__(key)

        from .cached import SimpleCachedEmitter

        self._n_of_subscriptions_signal: "SimpleCachedEmitter[int]" = (
            SimpleCachedEmitter(0, key=f"{self._key}.n_of_subscriptions")
        )

    @property
    def n_of_subscriptions_signal(self) -> "SimpleCachedEmitter[int]":
        """Cached signal carrying the current number of subscriptions."""
        return self._n_of_subscriptions_signal

    def _on_subscriptions_changed(self) -> None:
        self._n_of_subscriptions_signal.emit(len(self._subscribers))


def make_simple_emitter(key: Optional[str] = None) -> SimpleEmitter:
    """Create a bare signal without a subscription-count signal."""
    return SimpleEmitter(key)


def make_emitter(key: Optional[str] = None) -> Emitter:
    """
    Create a signal.

    Example:
        ```python
        signal = make_emitter()
        signal.emit(10)

        # Signals carrying no data
        ping = make_emitter()
        ping.emit()
        ```
    """
    return Emitter(key)
