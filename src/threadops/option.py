"""Option type: Some[T] | Nothing, the optional container the combinators act on."""

from __future__ import annotations

from collections.abc import Callable
from typing import NoReturn, TypeIs

import msgspec

__all__ = ['Nothing', 'NothingType', 'Option', 'Some', 'from_optional']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Present variant of Option holding exactly one value of type T.

    `Some(None)` is a present value; only `Nothing` is absent.

    Examples:
        >>> Some(42).map(lambda x: x * 2)
        Some(value=84)
        >>> Some(3).and_then(lambda x: Nothing if x % 2 else Some(x))
        NothingType()
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling the fallback."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply f to the contained value and wrap the result in Some."""
        return Some(f(self.value))

    def and_then[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply an Option-returning function to the contained value.

        Also known as flatMap or bind.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Return self unchanged; the fallback thunk is never called."""
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return self if predicate(value) holds, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing

    def zip[U](self, other: Some[U] | NothingType) -> Some[tuple[T, U]] | NothingType:
        """Pair two present values; Nothing if other is absent."""
        if isinstance(other, Some):
            return Some((self.value, other.value))
        return Nothing

    def flatten[U](self: Some[Some[U] | NothingType]) -> Some[U] | NothingType:
        """Convert Option[Option[U]] into Option[U]."""
        return self.value  # type: ignore[return-value]

    def to_optional(self) -> T:
        """Return the bare value (the built-in optional representation)."""
        return self.value


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Absent variant of Option.

    Absence is absorbing: map, and_then, filter and zip all return Nothing.
    Use the `Nothing` singleton rather than instantiating this class.

    Examples:
        >>> Nothing.unwrap_or(0)
        0
        >>> Nothing.or_else(lambda: Some(5))
        Some(value=5)
    """

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since Nothing has no value.

        Raises:
            RuntimeError: Always.
        """
        raise RuntimeError('Called unwrap on Nothing')

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value."""
        return f()

    def expect(self, msg: str) -> NoReturn:
        """Raise RuntimeError carrying msg."""
        raise RuntimeError(msg)

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing; f is not called."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Return Nothing; f is not called."""
        return self

    def or_else[T](self, f: Callable[[], Some[T] | NothingType]) -> Some[T] | NothingType:
        """Evaluate the fallback thunk and return its Option."""
        return f()

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing."""
        return self

    def zip[U](self, _other: Some[U] | NothingType) -> NothingType:
        """Return Nothing."""
        return self

    def flatten(self) -> NothingType:
        """Return Nothing."""
        return self

    def to_optional(self) -> None:
        """Return None."""
        return None


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def from_optional[T](value: T | None) -> Some[T] | NothingType:
    """Lift a built-in optional (`None` or a value) into an Option.

    Examples:
        >>> from_optional(None)
        NothingType()
        >>> from_optional('x')
        Some(value='x')
    """
    if value is None:
        return Nothing
    return Some(value)
