"""
sigflow CompositeSignal - Lazily Attached Derived Signals
=========================================================

This module provides CompositeSignal, the shared machinery behind every
combinator (merge, derive, derive_multi, coalesce).

A composite owns a private `Emitter` that downstream subscribers attach to.
It only subscribes to its upstream sources while that emitter has at least
one subscriber:

- the subscriber count going from 0 to 1 attaches to every source, in order;
- the count going back to 0 detaches from every source.

Lifecycle State Machine
-----------------------

The composite listens to its own `n_of_subscriptions_signal` and moves
between two states, `DETACHED` and `ATTACHED`, based on the delivered count.
Transitions such as 1 -> 2 -> 1 leave upstream attachment untouched.

```
              count > 0
   DETACHED ------------> ATTACHED
       ^                      |
       +----------------------+
              count == 0
```

Because the count signal fires after the subscriber set has changed, a last
subscriber leaving from inside an emission callback detaches the composite
right after its unsubscribe call. Upstream emitters iterate a snapshot, so
dropping our subscription mid-emission is safe.

Attaching can re-enter: a cached source replays its value while we subscribe,
and a downstream subscriber may react by unsubscribing (which detaches us) or
even subscribing again. Every attach/detach bumps a generation counter; an
attach pass that finds its generation superseded undoes its last
subscription and stops. If subscribing to a source raises (for instance a
transform failing on a cached replay), that source subscription is removed
before the exception propagates.

A composite nobody observes is never referenced by its sources and can be
garbage-collected.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, List, Optional, Sequence, Tuple

from ..primitives.cached import SimpleCachedEmitter
from ..primitives.emitter import Emitter
from ..primitives.once import subscribe_once
from ..types.common_types import AttachmentState, T, Subscriber, Unsubscribe
from ..types.protocols import ReadonlySignal


class CompositeSignal(ABC, Generic[T]):
    """
    Read-only signal derived from one or more upstream signals.

    Subclasses implement `_forward(index, value)`, called whenever the source
    at position `index` emits while the composite is attached.
    """

    def __init__(
        self, sources: Sequence[ReadonlySignal[Any]], key: Optional[str] = None
    ) -> None:
        if not sources:
            raise ValueError("At least one source signal must be provided")

        self._key = key or "<composite>"
        self._sources: Tuple[ReadonlySignal[Any], ...] = tuple(sources)
        self._base: Emitter[T] = Emitter(self._key)
        self._state = AttachmentState.DETACHED
        self._generation = 0
        self._unsubscribe_sources: List[Unsubscribe] = []

        # Replays 0 immediately, which leaves us detached
        self._base.n_of_subscriptions_signal.subscribe(self._on_subscriptions_changed)

    @property
    def key(self) -> str:
        """Get the key/identifier for this signal."""
        return self._key

    @property
    def sources(self) -> Tuple[ReadonlySignal[Any], ...]:
        """The upstream signals, in attachment order."""
        return self._sources

    @property
    def attachment_state(self) -> AttachmentState:
        """Whether the composite is currently subscribed to its sources."""
        return self._state

    @property
    def is_attached(self) -> bool:
        """True while the composite holds subscriptions on its sources."""
        return self._state is AttachmentState.ATTACHED

    @property
    def n_of_subscriptions(self) -> int:
        """Current number of downstream subscriptions."""
        return self._base.n_of_subscriptions

    @property
    def n_of_subscriptions_signal(self) -> SimpleCachedEmitter[int]:
        """Cached signal carrying the number of downstream subscriptions."""
        return self._base.n_of_subscriptions_signal

    def subscribe(self, callback: Subscriber[T]) -> Unsubscribe:
        """
        Subscribe a function to this composite.

        The first subscription attaches the composite to all of its sources.
        """
        return self._base.subscribe(callback)

    def unsubscribe(self, callback: Subscriber[T]) -> None:
        """
        Remove a subscriber; no-op if it is not subscribed.

        Removing the last subscription detaches from all sources.
        """
        self._base.unsubscribe(callback)

    def subscribe_once(self, callback: Subscriber[T]) -> Unsubscribe:
        """Subscribe for the next notification only."""
        return subscribe_once(self, callback)

    def _emit(self, value: T) -> None:
        self._base.emit(value)

    @abstractmethod
    def _forward(self, index: int, value: Any) -> None:
        """Handle a value emitted by the source at position `index`."""

    def _make_forwarder(self, index: int) -> Callable[[Any], None]:
        def forward(value: Any) -> None:
            self._forward(index, value)

        return forward

    def _on_subscriptions_changed(self, count: int) -> None:
        if count > 0 and self._state is AttachmentState.DETACHED:
            self._attach()
        elif count == 0 and self._state is AttachmentState.ATTACHED:
            self._detach()

    def _attach(self) -> None:
        self._generation += 1
        generation = self._generation
        self._state = AttachmentState.ATTACHED
        logging.debug(
            f"Composite '{self._key}' attaching to {len(self._sources)} source(s)"
        )

        for index, source in enumerate(self._sources):
            forwarder = self._make_forwarder(index)
            try:
                unsubscribe = source.subscribe(forwarder)
            except Exception:
                # A cached replay raised after the forwarder was added
                source.unsubscribe(forwarder)
                raise
            if self._generation != generation:
                # Detached (and possibly re-attached) while subscribing
                unsubscribe()
                return
            self._unsubscribe_sources.append(unsubscribe)

    def _detach(self) -> None:
        self._generation += 1
        self._state = AttachmentState.DETACHED
        unsubscribe_sources, self._unsubscribe_sources = self._unsubscribe_sources, []
        logging.debug(
            f"Composite '{self._key}' detaching from {len(unsubscribe_sources)} source(s)"
        )

        for unsubscribe in unsubscribe_sources:
            unsubscribe()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._key!r}, sources={len(self._sources)}, "
            f"subscribers={self.n_of_subscriptions}, state={self._state.value})"
        )
