"""Immutable List: defensive read-only copies of iterables.

Invariants:
    - copy_of returns a tuple: no append/clear/item assignment
    - The copy is a snapshot; later mutation of the source is not reflected
"""

from collections.abc import Iterable
from typing import TypeVar

from tazkiyatech_utils.core.errors import ErrorContext, InvalidArgumentError

T = TypeVar("T")


def copy_of(items: Iterable[T]) -> tuple[T, ...]:
    """Creates an immutable copy of `items`, preserving order."""
    if items is None:
        raise InvalidArgumentError(
            "copy_of() requires an iterable, got None",
            argument="items",
            context=ErrorContext(operation="copy_of"),
        )
    return tuple(items)
