"""
sigflow - Lazy Composable Signals

A minimal reactive-value primitive: emitters that deliver values synchronously
to their subscribers, plus combinators (merge, derive, derive_multi, coalesce)
that only subscribe to their sources while someone is listening.
"""

# Import the emitter primitives
from .signal.primitives import (
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

# Import the composition layer
from .signal.composite import (
    CoalescedSignal,
    CompositeSignal,
    DerivedSignal,
    MergedSignal,
    coalesce,
    derive,
    derive_multi,
    merge,
)

# Import shared types and helpers
from .signal.types import (
    AttachmentState,
    ChangeVector,
    ReadonlySignal,
    Signal,
    Subscriber,
    Unsubscribe,
    is_composite,
    is_signal,
)

__version__ = "0.1.0"

# Export all the main classes and functions
__all__ = [
    # Emitters
    "SimpleEmitter",
    "Emitter",
    "SimpleCachedEmitter",
    "CachedEmitter",
    "OnceSubscriber",
    # Factory functions
    "make_emitter",
    "make_cached_emitter",
    "make_simple_emitter",
    "make_simple_cached_emitter",
    "subscribe_once",
    # Combinators
    "CompositeSignal",
    "MergedSignal",
    "DerivedSignal",
    "CoalescedSignal",
    "merge",
    "derive",
    "derive_multi",
    "coalesce",
    # Types
    "AttachmentState",
    "ChangeVector",
    "ReadonlySignal",
    "Signal",
    "Subscriber",
    "Unsubscribe",
    "is_signal",
    "is_composite",
]
