"""
sigflow Primitives
==================

Emitters, cached emitters and once-subscriptions.
"""

from .cached import (
    CachedEmitter,
    SimpleCachedEmitter,
    make_cached_emitter,
    make_simple_cached_emitter,
)
from .emitter import Emitter, SimpleEmitter, make_emitter, make_simple_emitter
from .once import OnceSubscriber, subscribe_once

__all__ = [
    "CachedEmitter",
    "Emitter",
    "OnceSubscriber",
    "SimpleCachedEmitter",
    "SimpleEmitter",
    "make_cached_emitter",
    "make_emitter",
    "make_simple_cached_emitter",
    "make_simple_emitter",
    "subscribe_once",
]
