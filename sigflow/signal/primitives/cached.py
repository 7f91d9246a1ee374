"""
sigflow Cached Emitters - Signals That Remember Their Last Value
================================================================

A cached emitter stores the last emitted value and hands it to every new
subscriber straight away, so late subscribers never miss the current state.

```python
from sigflow import make_cached_emitter

counter = make_cached_emitter(0)
counter.subscribe(print)               # prints 0 immediately
counter.emit(counter.last_emitted + 1) # prints 1
```

`last_emitted` is updated before subscribers are notified. A subscriber that
unsubscribes and re-subscribes during a notification is replayed the new
value, not the previous one.
"""

from typing import Optional

from ..types.common_types import T, Subscriber, Unsubscribe
from .emitter import Emitter, SimpleEmitter


class SimpleCachedEmitter(SimpleEmitter[T]):
    """
    Bare cached signal, without a subscription-count signal.

    This is the type of every `n_of_subscriptions_signal`.
    """

    def __init__(self, initial: T, key: Optional[str] = None) -> None:
        self._last_emitted = initial
        super().__init__(key)

    @property
    def last_emitted(self) -> T:
        """The seed value, or the value of the most recent emit()."""
        return self._last_emitted

    def subscribe(self, callback: Subscriber[T]) -> Unsubscribe:
        """Subscribe, then immediately deliver last_emitted to callback."""
        unsubscribe = super().subscribe(callback)
        callback(self._last_emitted)
        return unsubscribe

    def emit(self, value: T = None) -> None:  # type: ignore[assignment]
        self._last_emitted = value
        super().emit(value)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._key!r}, last_emitted={self._last_emitted!r}, "
            f"subscribers={self.n_of_subscriptions})"
        )


class CachedEmitter(SimpleCachedEmitter[T], Emitter[T]):
    """Cached signal that also publishes its subscriber count reactively."""


def make_simple_cached_emitter(initial: T, key: Optional[str] = None) -> SimpleCachedEmitter[T]:
    """Create a bare cached signal seeded with initial."""
    return SimpleCachedEmitter(initial, key)


def make_cached_emitter(initial: T, key: Optional[str] = None) -> CachedEmitter[T]:
    """
    Create a cached signal seeded with initial.

    Example:
        ```python
        signal = make_cached_emitter(0)
        signal.subscribe(print)  # prints 0
        signal.emit(10)          # prints 10
        signal.subscribe(lambda v: print(f"late: {v}"))  # prints "late: 10"
        ```
    """
    return CachedEmitter(initial, key)
