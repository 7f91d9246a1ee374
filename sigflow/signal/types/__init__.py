"""
sigflow Signal Types
====================

Shared type aliases, protocols and type helpers.
"""

from .common_types import (
    AttachmentState,
    ChangeVector,
    Subscriber,
    TransformFunction,
    Unsubscribe,
)
from .helpers import is_composite, is_signal
from .protocols import ReadonlySignal, Signal

__all__ = [
    "AttachmentState",
    "ChangeVector",
    "ReadonlySignal",
    "Signal",
    "Subscriber",
    "TransformFunction",
    "Unsubscribe",
    "is_composite",
    "is_signal",
]
