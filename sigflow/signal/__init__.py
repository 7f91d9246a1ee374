"""
sigflow Signal Package
======================

Emitters, cached emitters, once-subscriptions and the composition layer.
"""

from .composite import (
    CoalescedSignal,
    CompositeSignal,
    DerivedSignal,
    MergedSignal,
    coalesce,
    derive,
    derive_multi,
    merge,
)
from .primitives import (
    CachedEmitter,
    Emitter,
    OnceSubscriber,
    SimpleCachedEmitter,
    SimpleEmitter,
    make_cached_emitter,
    make_emitter,
    make_simple_cached_emitter,
    make_simple_emitter,
    subscribe_once,
)
from .types import (
    AttachmentState,
    ChangeVector,
    ReadonlySignal,
    Signal,
    Subscriber,
    Unsubscribe,
    is_composite,
    is_signal,
)

__all__ = [
    "AttachmentState",
    "CachedEmitter",
    "ChangeVector",
    "CoalescedSignal",
    "CompositeSignal",
    "DerivedSignal",
    "Emitter",
    "MergedSignal",
    "OnceSubscriber",
    "ReadonlySignal",
    "Signal",
    "SimpleCachedEmitter",
    "SimpleEmitter",
    "Subscriber",
    "Unsubscribe",
    "coalesce",
    "derive",
    "derive_multi",
    "is_composite",
    "is_signal",
    "make_cached_emitter",
    "make_emitter",
    "make_simple_cached_emitter",
    "make_simple_emitter",
    "merge",
    "subscribe_once",
]
