"""
sigflow Utils
=============

Support data structures for the sigflow signal primitives.

Classes:
- SubscriberList: Copy-on-write ordered subscriber set with O(1) snapshots
"""

from .subscriber_list import SubscriberList, same_callback

__all__ = [
    "SubscriberList",
    "same_callback",
]
