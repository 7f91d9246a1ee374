"""
sigflow MergedSignal - Positional Change Vectors
================================================

This module provides `merge`, which observes several signals at once and
emits a change vector each time any of them emits.

A change vector is a tuple with one slot per source. Every slot is None except
the one belonging to the source that just emitted:

```python
from sigflow import make_emitter, merge

year = make_emitter()
month = make_emitter()
merged = merge([year, month])
merged.subscribe(lambda changes: print(changes))

year.emit(2020)     # (2020, None)
month.emit("July")  # (None, 'July')
```

A fresh tuple is built for every emission, so subscribers may keep it.
"""

from typing import Any, Optional, Sequence

from ..types.common_types import ChangeVector
from ..types.protocols import ReadonlySignal
from .composite import CompositeSignal


class MergedSignal(CompositeSignal[ChangeVector]):
    """Composite emitting a change vector whenever any source emits."""

    def __init__(
        self, sources: Sequence[ReadonlySignal[Any]], key: Optional[str] = None
    ) -> None:
        super().__init__(sources, key or "merged")
        self._n_sources = len(self._sources)

    def _forward(self, index: int, value: Any) -> None:
        changes = [None] * self._n_sources
        changes[index] = value
        self._emit(tuple(changes))


def merge(
    sources: Sequence[ReadonlySignal[Any]], key: Optional[str] = None
) -> MergedSignal:
    """
    Create a signal observing all the given signals.

    Args:
        sources: Signals to observe. Must not be empty.
        key: Optional name used in repr() and log messages.

    Returns:
        A read-only signal emitting a change vector each time a source emits.

    Raises:
        ValueError: If no sources are given.
    """
    return MergedSignal(sources, key)
