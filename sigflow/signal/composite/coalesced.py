"""
sigflow CoalescedSignal - Fan-In Passthrough
============================================

`coalesce` forwards whatever any source emits, untouched:

```python
from sigflow import make_emitter, coalesce

year = make_emitter()
month = make_emitter()
coalesced = coalesce([year, month])
coalesced.subscribe(print)

year.emit(2020)     # 2020
month.emit("July")  # July
```

Unlike `merge`, values are not wrapped in a change vector, and None is
forwarded like any other value.
"""

from typing import Any, Optional, Sequence

from ..types.protocols import ReadonlySignal
from .composite import CompositeSignal


class CoalescedSignal(CompositeSignal[Any]):
    """Composite re-emitting the raw value of whichever source emitted."""

    def __init__(
        self, sources: Sequence[ReadonlySignal[Any]], key: Optional[str] = None
    ) -> None:
        super().__init__(sources, key or "coalesced")

    def _forward(self, index: int, value: Any) -> None:
        self._emit(value)


def coalesce(
    sources: Sequence[ReadonlySignal[Any]], key: Optional[str] = None
) -> CoalescedSignal:
    """
    Create a signal emitting the latest value emitted by any source.

    Raises:
        ValueError: If no sources are given.
    """
    return CoalescedSignal(sources, key)
