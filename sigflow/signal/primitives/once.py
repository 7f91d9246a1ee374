"""
sigflow Once-Subscriptions
==========================

Single-shot subscriptions: the wrapped callback receives exactly one value and
the subscription removes itself.

The wrapper detaches from its signal *before* invoking the user callback, so
anything inspecting the subscriber count from inside that callback (a
composite deciding whether to drop its upstream subscriptions, for instance)
already sees the reduced count.
"""

from typing import Generic

from ..types.common_types import T, Subscriber, Unsubscribe
from ..types.protocols import ReadonlySignal


class OnceSubscriber(Generic[T]):
    """
    Subscriber wrapper that fires at most once, then unsubscribes itself.

    Each instance is a distinct subscriber, so wrapping the same callback N
    times gives N independent one-shot subscriptions.
    """

    __slots__ = ("_source", "_callback", "_done")

    def __init__(self, source: ReadonlySignal[T], callback: Subscriber[T]) -> None:
        self._source = source
        self._callback = callback
        self._done = False

    @property
    def done(self) -> bool:
        """True once the wrapper has fired or been cancelled."""
        return self._done

    def __call__(self, value: T) -> None:
        # An outer emission snapshot may still hold us after a nested emit fired us
        if self._done:
            return
        self._done = True
        self._source.unsubscribe(self)
        self._callback(value)

    def cancel(self) -> None:
        """Detach without firing. Safe to call repeatedly."""
        self._done = True
        self._source.unsubscribe(self)

    def __repr__(self) -> str:
        state = "done" if self._done else "pending"
        return f"OnceSubscriber({self._callback!r}, {state})"


def subscribe_once(signal: ReadonlySignal[T], callback: Subscriber[T]) -> Unsubscribe:
    """
    Subscribe callback to signal for exactly one notification.

    Args:
        signal: Any signal exposing subscribe/unsubscribe.
        callback: Function receiving the next emitted value.

    Returns:
        An idempotent function that cancels the subscription if it has not
        fired yet.

    Example:
        ```python
        from sigflow import make_emitter, subscribe_once

        clicks = make_emitter()
        subscribe_once(clicks, lambda v: print(f"first click: {v}"))
        clicks.emit(1)  # prints "first click: 1"
        clicks.emit(2)  # prints nothing
        ```
    """
    if not callable(callback):
        raise TypeError(f"Subscriber must be callable, got {type(callback).__name__}")

    wrapper = OnceSubscriber(signal, callback)
    signal.subscribe(wrapper)
    return wrapper.cancel
