"""
sigflow DerivedSignal - Transformed Signals
===========================================

`derive` maps every value of one source through a function:

```python
from sigflow import make_emitter, derive

signal = make_emitter()
derived = derive(signal, lambda n: n + 100)
derived.subscribe(print)
signal.emit(3)  # prints 103
```

`derive_multi` does the same over several sources by deriving from their
merged change vector:

```python
first = make_emitter()
second = make_emitter()
total = 0

def accumulate(changes):
    global total
    n1, n2 = changes
    total += n1 if n1 is not None else n2 or 0
    return total

summed = derive_multi([first, second], accumulate)
summed.subscribe(print)
first.emit(3)   # prints 3
second.emit(2)  # prints 5
```

The transform runs once per upstream emission while someone is subscribed.
Results are neither cached nor deduplicated.
"""

from typing import Any, Optional, Sequence

from ..types.common_types import ChangeVector, T, TransformFunction, U
from ..types.protocols import ReadonlySignal
from .composite import CompositeSignal
from .merged import merge


class DerivedSignal(CompositeSignal[U]):
    """Composite emitting transform(value) for every value of its source."""

    def __init__(
        self,
        source: ReadonlySignal[T],
        transform: TransformFunction[T, U],
        key: Optional[str] = None,
    ) -> None:
        if not callable(transform):
            raise TypeError(
                f"Transform must be callable, got {type(transform).__name__}"
            )
        super().__init__([source], key or "derived")
        self._transform = transform

    @property
    def transform(self) -> TransformFunction[T, U]:
        return self._transform

    def _forward(self, index: int, value: Any) -> None:
        self._emit(self._transform(value))


def derive(
    source: ReadonlySignal[T],
    transform: TransformFunction[T, U],
    key: Optional[str] = None,
) -> DerivedSignal[U]:
    """
    Create a signal emitting transform(value) whenever source emits value.

    Args:
        source: The signal to observe.
        transform: Function applied to every emitted value.
        key: Optional name used in repr() and log messages.

    Raises:
        TypeError: If transform is not callable.
    """
    return DerivedSignal(source, transform, key)


def derive_multi(
    sources: Sequence[ReadonlySignal[Any]],
    transform: TransformFunction[ChangeVector, U],
    key: Optional[str] = None,
) -> DerivedSignal[U]:
    """
    Create a signal emitting transform(changes) whenever any source emits.

    `changes` is the change vector described in `merge`.

    Raises:
        ValueError: If no sources are given.
        TypeError: If transform is not callable.
    """
    return derive(merge(sources), transform, key)
