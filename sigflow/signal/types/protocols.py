"""
sigflow Signal Protocols - Structural Interface Definitions
===========================================================

This module defines Protocol-based interfaces for signals. Combinators accept
anything that satisfies `ReadonlySignal`, so a composite signal can itself be
used as a source for further composition.

Protocols are structural types: no inheritance is required. Both are marked
@runtime_checkable so they can be used with isinstance().
"""

from typing import Protocol, runtime_checkable

from .common_types import T, Subscriber, Unsubscribe


@runtime_checkable
class ReadonlySignal(Protocol[T]):
    """
    A signal that can be subscribed to but not emitted on from outside.

    Composite signals (merge, derive, coalesce) only expose this interface.
    """

    def subscribe(self, callback: Subscriber[T]) -> Unsubscribe:
        """
        Subscribe a function to this signal.

        Subscribers are deduplicated: subscribing the same function twice keeps
        a single subscription. Wrap it in a lambda to subscribe it again.
        """
        ...

    def unsubscribe(self, callback: Subscriber[T]) -> None:
        """Remove a subscriber; no-op if it is not subscribed."""
        ...

    def subscribe_once(self, callback: Subscriber[T]) -> Unsubscribe:
        """Subscribe for exactly one notification."""
        ...

    @property
    def n_of_subscriptions(self) -> int:
        """Current number of active subscriptions."""
        ...


@runtime_checkable
class Signal(ReadonlySignal[T], Protocol[T]):
    """A signal that can also be emitted on."""

    def emit(self, value: T) -> None:
        """Emit a value to all subscribers."""
        ...

    def emit_for(self, callback: Subscriber[T], value: T) -> None:
        """Emit a value to one specific subscriber of this signal."""
        ...

    def clear_subscriptions(self) -> None:
        """Remove every subscriber at once."""
        ...
