"""
sigflow Composite Module
========================

Combinators building lazily attached signals out of existing ones.
"""

from .coalesced import CoalescedSignal, coalesce
from .composite import CompositeSignal
from .derived import DerivedSignal, derive, derive_multi
from .merged import MergedSignal, merge

__all__ = [
    "CoalescedSignal",
    "CompositeSignal",
    "DerivedSignal",
    "MergedSignal",
    "coalesce",
    "derive",
    "derive_multi",
    "merge",
]
