"""Optional: a container that holds either exactly one non-None value or nothing.

Invariants:
    - The slot is a private (Presence, value) pair fixed at construction; instances are frozen
    - String tags are coerced to Presence before the invariants are checked
    - PRESENT never holds None; ABSENT never holds a value (checked for every construction path)
    - of(None) fails fast with InvalidArgumentError; it never degrades to empty()
    - get() on an empty instance raises NoValuePresentError; or_else() never raises
    - Equal instances hash equal (both derived from the same (presence, value) pair)

Design Decisions:
    - Presence tag instead of a bare `value is None` check: absence is its own case,
      not a reused None (ADR: tagged union)
    - Frozen dataclass: generated __eq__/__hash__ compare the tag and the held value together
    - No map/flat_map/filter: construction, presence check and extraction only
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from tazkiyatech_utils.core.domain_types import Presence
from tazkiyatech_utils.core.errors import (
    ErrorContext,
    InvalidArgumentError,
    NoValuePresentError,
)

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


@dataclass(frozen=True, repr=False)
class Optional(Generic[T]):
    """Zero-or-one value of type T. Build with empty(), of() or of_nullable().

    The slot fields are private: read the value through get(), or_else() or
    or_else_throw() only.
    """

    _presence: Presence
    _value: T | None = None

    def __post_init__(self):
        try:
            presence = Presence(self._presence)
        except ValueError:
            raise InvalidArgumentError(
                f"Unknown presence tag {self._presence!r}",
                argument="presence",
                context=ErrorContext(operation="Optional"),
            ) from None
        object.__setattr__(self, "_presence", presence)

        if presence is Presence.PRESENT and self._value is None:
            raise InvalidArgumentError(
                "Optional.of() requires a non-None value; "
                "use Optional.of_nullable() for a value that may be missing",
                argument="value",
                context=ErrorContext(operation="Optional.of"),
            )
        if presence is Presence.ABSENT and self._value is not None:
            raise InvalidArgumentError(
                "An empty Optional cannot hold a value",
                argument="value",
                context=ErrorContext(operation="Optional.empty"),
            )

    # ─── Construction ────────────────────────────────────────────

    @classmethod
    def empty(cls) -> "Optional[T]":
        """Returns an instance holding no value."""
        return cls(Presence.ABSENT)

    @classmethod
    def of(cls, value: T) -> "Optional[T]":
        """Returns an instance holding `value`.

        Raises:
            InvalidArgumentError: if `value` is None.
        """
        return cls(Presence.PRESENT, value)

    @classmethod
    def of_nullable(cls, value: T | None) -> "Optional[T]":
        """Returns empty() if `value` is None, otherwise of(value)."""
        if value is None:
            return cls.empty()
        return cls.of(value)

    # ─── Query / Extraction ──────────────────────────────────────

    def is_present(self) -> bool:
        return self._presence is Presence.PRESENT

    def get(self) -> T:
        """Returns the held value.

        Raises:
            NoValuePresentError: if this Optional is empty.
        """
        if self._presence is Presence.ABSENT:
            raise NoValuePresentError(context=ErrorContext(operation="Optional.get"))
        return self._value

    def or_else(self, fallback: T | None) -> T | None:
        """Returns the held value if present, otherwise `fallback` (may be None)."""
        if self._presence is Presence.ABSENT:
            return fallback
        return self._value

    def or_else_throw(self, error: E) -> T:
        """Returns the held value if present, otherwise raises `error` itself."""
        if self._presence is Presence.ABSENT:
            raise error
        return self._value

    def __repr__(self) -> str:
        if self._presence is Presence.ABSENT:
            return "Optional.empty"
        return f"Optional[{self._value!r}]"
