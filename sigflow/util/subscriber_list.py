"""
Copy-on-Write Subscriber List
=============================

This module provides SubscriberList, the ordered set of callbacks that backs
every emitter in sigflow.

Subscribers live in an immutable tuple. Every mutation builds a new tuple and
swaps it in, so taking a snapshot for an emission is O(1): the emitter simply
keeps a reference to the tuple that was current when emission began.
Subscribe/unsubscribe calls made while that emission runs replace the list's
tuple but never touch the one being iterated.

Example:
    subscribers = SubscriberList()
    subscribers.add(on_change)

    for subscriber in subscribers.snapshot():
        subscriber(value)  # may call subscribers.discard(...) safely
"""

from types import BuiltinMethodType, MethodType
from typing import Callable, Iterator, Optional, Tuple


def same_callback(a: object, b: object) -> bool:
    """Identity match; bound methods match on the identity of instance and function."""
    if a is b:
        return True
    if isinstance(a, MethodType) and isinstance(b, MethodType):
        return a.__self__ is b.__self__ and a.__func__ is b.__func__
    if isinstance(a, BuiltinMethodType) and isinstance(b, BuiltinMethodType):
        return a.__self__ is b.__self__ and a.__name__ == b.__name__
    return False


class SubscriberList:
    """
    Copy-on-write, insertion-ordered set of callbacks.

    Membership is identity-based: a callback is stored at most once, and two
    distinct callables never collapse into one even if they compare equal.
    Bound methods count as the same callback when they wrap the same function
    on the same instance.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: Tuple[Callable, ...] = ()

    def _index_of(self, callback: object) -> Optional[int]:
        for index, entry in enumerate(self._entries):
            if same_callback(entry, callback):
                return index
        return None

    def add(self, callback: Callable) -> bool:
        """Append callback if absent. Returns True if membership changed."""
        if self._index_of(callback) is not None:
            return False
        self._entries = self._entries + (callback,)
        return True

    def discard(self, callback: Callable) -> bool:
        """Remove callback if present. Returns True if membership changed."""
        index = self._index_of(callback)
        if index is None:
            return False
        entries = self._entries
        self._entries = entries[:index] + entries[index + 1 :]
        return True

    def clear(self) -> bool:
        """Drop every callback at once. Returns True if anything was removed."""
        if not self._entries:
            return False
        self._entries = ()
        return True

    def snapshot(self) -> Tuple[Callable, ...]:
        """Return the current subscribers; later mutations never alter it."""
        return self._entries

    def __contains__(self, callback: object) -> bool:
        return self._index_of(callback) is not None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Callable]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"SubscriberList({len(self._entries)} subscribers)"
