"""
sigflow Signal Type Helpers
===========================

Type helper functions for signal classes. These use dynamic imports to avoid
circular dependency concerns.
"""

from typing import Any


def is_signal(obj: Any) -> bool:
    """
    Check if an object is one of sigflow's own emitters.

    Args:
        obj: The object to check

    Returns:
        True if obj is a SimpleEmitter (or subclass), False otherwise

    Example:
        ```python
        from sigflow import make_emitter, is_signal

        print(is_signal(make_emitter()))  # True
        print(is_signal(5))               # False
        ```
    """
    from ..primitives.emitter import SimpleEmitter

    return isinstance(obj, SimpleEmitter)


def is_composite(obj: Any) -> bool:
    """
    Check if an object is a composite signal built by merge/derive/coalesce.

    Args:
        obj: The object to check

    Returns:
        True if obj is a CompositeSignal, False otherwise
    """
    from ..composite.composite import CompositeSignal

    return isinstance(obj, CompositeSignal)
