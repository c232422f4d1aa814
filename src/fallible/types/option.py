"""Option type: Some[T] | Nothing for optional values."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from fallible._logging import get_logger
from fallible.errors import UnwrapError

if TYPE_CHECKING:
    from fallible.types.result import Err, Ok

__all__ = [
    "AsyncNothing",
    "AsyncNothingType",
    "AsyncSome",
    "Nothing",
    "NothingType",
    "Option",
    "Some",
]

_logger = get_logger(__name__)


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. ``Some(None)`` is a present
    value and is never equal to Nothing.

    Examples:
        >>> some = Some(42)
        >>> some.unwrap()
        42
        >>> some.map(lambda x: x * 2)
        Some(value=84)
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def map_nullable[U](self, f: Callable[[T], U | None]) -> Some[U] | NothingType:
        """Apply a function whose result may be None.

        A None result collapses to Nothing. Falsy values such as 0 or ""
        are present values and stay wrapped in Some.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Nothing if f returned None, else Some of the result.
        """
        result = f(self.value)
        if result is None:
            return Nothing
        return Some(result)

    def map_or[U](self, default: U, f: Callable[[T], U]) -> Some[U]:  # noqa: ARG002
        """Apply f to the value, ignoring the default.

        Returns:
            Some containing f(value).
        """
        return Some(f(self.value))

    def map_or_else[U](self, fallback: Callable[[], U], f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return f(value), ignoring the fallback."""
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return Some if the predicate is satisfied, else Nothing.

        Args:
            predicate: Function that returns True to keep the value.

        Returns:
            Some(value) if predicate(value) is True, else Nothing.
        """
        if predicate(self.value):
            return self
        return Nothing

    def and_[U](self, other: Some[U] | NothingType) -> Some[U] | NothingType:
        """Return other if self is Some, else return Nothing.

        Since this is Some, returns other.
        """
        return other

    def and_then[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def or_(self, _other: Some[T] | NothingType) -> Some[T]:
        """Return self since this is Some."""
        return self

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def xor(self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return Some if exactly one of self and other is Some.

        Since this is Some, returns self when other is Nothing and Nothing
        when both are Some.
        """
        if other.is_some():
            return Nothing
        return self

    def zip[U](self, other: Some[U] | NothingType) -> Some[tuple[T, U]] | NothingType:
        """Combine two Some values into a tuple.

        If both are Some, returns Some((self.value, other.value)).
        If other is Nothing, returns Nothing.
        """
        return other.map(lambda u: (self.value, u))

    def ok_or[E](self, _err: E) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from fallible.types.result import Ok

        return Ok(self.value)

    def ok_or_else[E](self, _f: Callable[[], E]) -> Ok[T]:
        """Convert to Result, returning Ok(value) without calling _f."""
        from fallible.types.result import Ok

        return Ok(self.value)

    def unwrap(self) -> T:
        """Return the contained Some value.

        Since this is Some, this always succeeds.
        """
        return self.value

    def unwrap_nullable(self) -> T:
        """Return the contained Some value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the fallback function."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Some value, ignoring the message."""
        return self.value

    def inspect(self, f: Callable[[T], Any]) -> Some[T]:
        """Call f with the value for side effects and return self."""
        f(self.value)
        return self

    def flatten[U](self: Some[Some[U] | NothingType]) -> Some[U] | NothingType:
        """Flatten a nested Option.

        Converts Option[Option[T]] into Option[T].

        Raises:
            TypeError: If the contained value is not an Option.
        """
        if not isinstance(self.value, Some | NothingType):
            msg = f"flatten requires an Option payload, got {type(self.value).__name__}"
            raise TypeError(msg)
        return self.value

    def async_(self) -> AsyncSome[T]:
        """Return the async view over this value."""
        return AsyncSome(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly. None of its combinators call the function
    they are given, except the fallbacks (``or_else``, ``map_or_else``,
    ``ok_or_else``, ``unwrap_or_else``).

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def map_nullable[T, U](self, _f: Callable[[T], U | None]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def map_or[T, U](self, default: U, _f: Callable[[T], U]) -> Some[U]:
        """Wrap the default in Some since there's no value to map."""
        return Some(default)

    def map_or_else[T, U](self, fallback: Callable[[], U], _f: Callable[[T], U]) -> U:
        """Compute and return the fallback since there's no value to map."""
        return fallback()

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def and_[U](self, _other: Some[U] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def or_[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return other since self is Nothing."""
        return other

    def or_else[T](self, f: Callable[[], Some[T] | NothingType]) -> Some[T] | NothingType:
        """Apply a recovery function since this is Nothing.

        Args:
            f: Function that returns a new Option.

        Returns:
            The Option returned by f.
        """
        return f()

    def xor[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return other since self is Nothing."""
        return other

    def zip[U](self, _other: Some[U] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def ok_or[E](self, err: E) -> Err[E]:
        """Convert to Result, returning Err(err).

        Args:
            err: The error value to wrap.

        Returns:
            Err containing the error.
        """
        from fallible.types.result import Err

        return Err(err)

    def ok_or_else[E](self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, computing the error.

        Args:
            f: Function that produces the error value.

        Returns:
            Err containing the computed error.
        """
        from fallible.types.result import Err

        return Err(f())

    def unwrap(self) -> NoReturn:
        """Raise an exception since this is Nothing.

        Raises:
            UnwrapError: Always, since Nothing has no value to unwrap.
        """
        _logger.debug("unwrap_failed", variant="Nothing")
        raise UnwrapError("Called unwrap on Nothing")

    def unwrap_nullable(self) -> None:
        """Return None since this is Nothing."""
        return None

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def expect(self, msg: str) -> NoReturn:
        """Raise an exception with a custom message.

        Args:
            msg: Custom error message.

        Raises:
            UnwrapError: Always, with the custom message.
        """
        _logger.debug("expect_failed", variant="Nothing", message=msg)
        raise UnwrapError(msg)

    def inspect[T](self, _f: Callable[[T], Any]) -> NothingType:
        """Return Nothing without calling _f."""
        return self

    def flatten(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return self

    def async_(self) -> AsyncNothingType:
        """Return the async view of Nothing."""
        return AsyncNothing


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


class AsyncSome[T](msgspec.Struct, frozen=True, gc=False):
    """Async view of Some.

    Every transformer returns an awaitable. Each method awaits it once and
    resolves to a plain Option (or bare value), so a chain awaits between
    ``async_()`` calls:

        >>> async def square(n):
        ...     return n * n
        >>> async def example():
        ...     four = await Some(2).async_().map(square)
        ...     return await four.async_().map(square)
    """

    value: T

    async def map[U](self, f: Callable[[T], Awaitable[U]]) -> Some[U]:
        """Await f(value) and wrap the result in Some."""
        return Some(await f(self.value))

    async def map_nullable[U](self, f: Callable[[T], Awaitable[U | None]]) -> Some[U] | NothingType:
        """Await f(value); a None result collapses to Nothing."""
        result = await f(self.value)
        if result is None:
            return Nothing
        return Some(result)

    async def filter(self, predicate: Callable[[T], Awaitable[bool]]) -> Some[T] | NothingType:
        """Keep the value if the awaited predicate is True."""
        if await predicate(self.value):
            return Some(self.value)
        return Nothing

    async def and_then[U](self, f: Callable[[T], Awaitable[Some[U] | NothingType]]) -> Some[U] | NothingType:
        """Await f(value) and return the Option it produces."""
        return await f(self.value)

    async def or_else(self, _f: Callable[[], Awaitable[Some[T] | NothingType]]) -> Some[T]:
        """Return Some(value) without calling _f."""
        return Some(self.value)

    async def ok_or_else[E](self, _f: Callable[[], Awaitable[E]]) -> Ok[T]:
        """Return Ok(value) without calling _f."""
        from fallible.types.result import Ok

        return Ok(self.value)

    async def unwrap_or_else(self, _f: Callable[[], Awaitable[T]]) -> T:
        """Return the value without calling _f."""
        return self.value


class AsyncNothingType(msgspec.Struct, frozen=True, gc=False):
    """Async view of Nothing. Use the `AsyncNothing` constant."""

    async def map[T, U](self, _f: Callable[[T], Awaitable[U]]) -> NothingType:
        """Return Nothing without calling _f."""
        return Nothing

    async def map_nullable[T, U](self, _f: Callable[[T], Awaitable[U | None]]) -> NothingType:
        """Return Nothing without calling _f."""
        return Nothing

    async def filter[T](self, _predicate: Callable[[T], Awaitable[bool]]) -> NothingType:
        """Return Nothing without calling _predicate."""
        return Nothing

    async def and_then[T, U](self, _f: Callable[[T], Awaitable[Some[U] | NothingType]]) -> NothingType:
        """Return Nothing without calling _f."""
        return Nothing

    async def or_else[T](self, f: Callable[[], Awaitable[Some[T] | NothingType]]) -> Some[T] | NothingType:
        """Await f() and return the Option it produces."""
        return await f()

    async def ok_or_else[E](self, f: Callable[[], Awaitable[E]]) -> Err[E]:
        """Await f() and wrap the result in Err."""
        from fallible.types.result import Err

        return Err(await f())

    async def unwrap_or_else[T](self, f: Callable[[], Awaitable[T]]) -> T:
        """Await f() and return its result."""
        return await f()


AsyncNothing: AsyncNothingType = AsyncNothingType()
"""Singleton async view of Nothing."""
