# querykit/query/utils.py
"""Small helpers for possibly-absent collections."""

from collections.abc import Iterable, Sized
from typing import TypeVar

T = TypeVar("T")

_MISSING = object()


def or_empty_if_absent(collection: Iterable[T] | None) -> Iterable[T]:
    """Return the collection itself, or an empty tuple when it is None."""
    return collection if collection is not None else ()


def is_absent_or_empty(collection: Iterable[T] | None) -> bool:
    """
    True if the collection is None or has no elements.

    Non-sized iterables are probed for a first element; a one-shot
    iterator (e.g. a generator) loses that element.
    """
    if collection is None:
        return True
    if isinstance(collection, Sized):
        return len(collection) == 0
    return next(iter(collection), _MISSING) is _MISSING
