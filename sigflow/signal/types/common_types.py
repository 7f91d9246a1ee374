"""
sigflow Common Types - Shared Type Definitions
==============================================

This module contains shared type definitions used across the sigflow signal
package. It helps avoid circular imports and provides a single source of truth
for common types.
"""

from enum import Enum
from typing import Any, Callable, Optional, Tuple, TypeVar

# ============================================================================
# TYPE VARIABLES
# ============================================================================

T = TypeVar("T")
U = TypeVar("U")

# ============================================================================
# SUBSCRIPTION TYPES
# ============================================================================

# A function receiving the emitted value as its only argument
Subscriber = Callable[[T], Any]

# Idempotent handle removing one specific subscription
Unsubscribe = Callable[[], None]

# ============================================================================
# COMPOSITION TYPES
# ============================================================================

# One slot per merged source, None everywhere except the source that emitted
ChangeVector = Tuple[Optional[Any], ...]

TransformFunction = Callable[[T], U]


class AttachmentState(Enum):
    """Whether a composite signal is currently subscribed to its sources."""

    DETACHED = "detached"
    ATTACHED = "attached"
