"""Result type: Ok[T] | Err[E] for explicit error handling."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from fallible._logging import get_logger
from fallible.errors import UnwrapError, raise_payload

if TYPE_CHECKING:
    from fallible.types.option import NothingType, Some

__all__ = ["AsyncErr", "AsyncOk", "Err", "Ok", "Result", "collect"]

_logger = get_logger(__name__)


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Ok represents the successful outcome of an operation. It wraps a value
    that can be extracted, transformed, or propagated through a chain of
    Result-returning operations.

    Examples:
        >>> ok = Ok(42)
        >>> ok.unwrap()
        42
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[Any], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return f(value), ignoring the default."""
        return f(self.value)

    def map_or_else[U](self, fallback: Callable[[Any], U], f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Return f(value), ignoring the fallback."""
        return f(self.value)

    def and_[U, E](self, other: Ok[U] | Err[E]) -> Ok[U] | Err[E]:
        """Return other if self is Ok, else return self (Err).

        Since this is Ok, returns other.
        """
        return other

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def or_[F](self, _other: Ok[T] | Err[F]) -> Ok[T]:
        """Return self since this is Ok."""
        return self

    def or_else[F](self, _f: Callable[[Any], Ok[T] | Err[F]]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def ok(self) -> Some[T]:
        """Convert to Option, returning Some(value)."""
        from fallible.types.option import Some

        return Some(self.value)

    def err(self) -> NothingType:
        """Convert to Option, returning Nothing since this is Ok."""
        from fallible.types.option import Nothing

        return Nothing

    def unwrap(self) -> T:
        """Return the contained Ok value.

        Since this is Ok, this always succeeds.
        """
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise an exception since this is Ok.

        Raises:
            UnwrapError: Always, carrying the Ok value as its payload.
        """
        _logger.debug("unwrap_err_failed", variant="Ok")
        raise UnwrapError(f"Called unwrap_err on Ok: {self.value!r}", self.value)

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def expect_err(self, msg: str) -> NoReturn:
        """Raise an UnwrapError with a custom message since this is Ok."""
        _logger.debug("expect_err_failed", variant="Ok", message=msg)
        raise UnwrapError(f"{msg}: {self.value!r}", self.value)

    def inspect(self, f: Callable[[T], Any]) -> Ok[T]:
        """Call f with the value for side effects and return self."""
        f(self.value)
        return self

    def inspect_err(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self without calling _f."""
        return self

    def flatten[U, E](self: Ok[Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Flatten a nested Result.

        Converts Result[Result[T, E], E] into Result[T, E].

        Raises:
            TypeError: If the contained value is not a Result.
        """
        if not isinstance(self.value, Ok | Err):
            msg = f"flatten requires a Result payload, got {type(self.value).__name__}"
            raise TypeError(msg)
        return self.value

    def async_(self) -> AsyncOk[T]:
        """Return the async view over this value."""
        return AsyncOk(self.value)


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Err represents the failure outcome of an operation. It wraps an error
    value that can be transformed, recovered from, or propagated.

    Examples:
        >>> err = Err("something went wrong")
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def map_or[T, U](self, default: U, _f: Callable[[T], U]) -> U:
        """Return the default since there's no value to map."""
        return default

    def map_or_else[T, U](self, fallback: Callable[[E], U], _f: Callable[[T], U]) -> U:
        """Return fallback(error) since there's no value to map."""
        return fallback(self.error)

    def and_[U](self, _other: Ok[U] | Err[E]) -> Err[E]:
        """Return self since this is Err."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def or_[T, F](self, other: Ok[T] | Err[F]) -> Ok[T] | Err[F]:
        """Return other since this is Err."""
        return other

    def or_else[T, F](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def ok(self) -> NothingType:
        """Convert to Option, returning Nothing since this is Err."""
        from fallible.types.option import Nothing

        return Nothing

    def err(self) -> Some[E]:
        """Convert to Option, returning Some(error)."""
        from fallible.types.option import Some

        return Some(self.error)

    def unwrap(self) -> NoReturn:
        """Raise the contained error.

        The error payload itself is raised so whoever catches it gets the
        original object. A payload that is not an exception is carried on
        an UnwrapError instead. Raising records the traceback on the
        payload, see ``raise_payload``.

        Raises:
            BaseException: The error payload, when it is an exception.
            UnwrapError: Carrying the payload otherwise.
        """
        _logger.debug("unwrap_failed", variant="Err", error_type=type(self.error).__name__)
        raise_payload(self.error, "Called unwrap on Err")

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a default value from the error."""
        return f(self.error)

    def expect(self, msg: str) -> NoReturn:
        """Raise an UnwrapError with a custom message.

        The error payload is kept on ``payload`` and, when it is an
        exception, chained as ``__cause__``.

        Args:
            msg: Custom error message.

        Raises:
            UnwrapError: Always, with the custom message.
        """
        _logger.debug("expect_failed", variant="Err", message=msg)
        cause = self.error if isinstance(self.error, BaseException) else None
        raise UnwrapError(f"{msg}: {self.error!r}", self.error) from cause

    def expect_err(self, _msg: str) -> E:
        """Return the contained error, ignoring the message."""
        return self.error

    def inspect[T](self, _f: Callable[[T], Any]) -> Err[E]:
        """Return self without calling _f."""
        return self

    def inspect_err(self, f: Callable[[E], Any]) -> Err[E]:
        """Call f with the error for side effects and return self."""
        f(self.error)
        return self

    def flatten(self) -> Err[E]:
        """Return self since this is Err (nothing to flatten)."""
        return self

    def async_(self) -> AsyncErr[E]:
        """Return the async view over this error."""
        return AsyncErr(self.error)


type Result[T, E = Exception] = Ok[T] | Err[E]


class AsyncOk[T](msgspec.Struct, frozen=True, gc=False):
    """Async view of Ok.

    Every transformer returns an awaitable; each method awaits it once and
    resolves to a plain Result or a bare value.
    """

    value: T

    async def map[U](self, f: Callable[[T], Awaitable[U]]) -> Ok[U]:
        """Await f(value) and wrap the result in Ok."""
        return Ok(await f(self.value))

    async def map_err[F](self, _f: Callable[[Any], Awaitable[F]]) -> Ok[T]:
        """Return Ok(value) without calling _f."""
        return Ok(self.value)

    async def map_or[U](self, _default: U, f: Callable[[T], Awaitable[U]]) -> U:
        """Await and return f(value)."""
        return await f(self.value)

    async def map_or_else[U](
        self,
        _fallback: Callable[[Any], Awaitable[U]],
        f: Callable[[T], Awaitable[U]],
    ) -> U:
        """Await and return f(value) without calling _fallback."""
        return await f(self.value)

    async def and_then[U, E](self, f: Callable[[T], Awaitable[Ok[U] | Err[E]]]) -> Ok[U] | Err[E]:
        """Await f(value) and return the Result it produces."""
        return await f(self.value)

    async def or_else[F](self, _f: Callable[[Any], Awaitable[Ok[T] | Err[F]]]) -> Ok[T]:
        """Return Ok(value) without calling _f."""
        return Ok(self.value)

    async def unwrap_or_else(self, _f: Callable[[Any], Awaitable[T]]) -> T:
        """Return the value without calling _f."""
        return self.value


class AsyncErr[E](msgspec.Struct, frozen=True, gc=False):
    """Async view of Err."""

    error: E

    async def map[T, U](self, _f: Callable[[T], Awaitable[U]]) -> Err[E]:
        """Return Err(error) without calling _f."""
        return Err(self.error)

    async def map_err[F](self, f: Callable[[E], Awaitable[F]]) -> Err[F]:
        """Await f(error) and wrap the result in Err."""
        return Err(await f(self.error))

    async def map_or[T, U](self, default: U, _f: Callable[[T], Awaitable[U]]) -> U:
        """Return the default without calling _f."""
        return default

    async def map_or_else[T, U](
        self,
        fallback: Callable[[E], Awaitable[U]],
        _f: Callable[[T], Awaitable[U]],
    ) -> U:
        """Await and return fallback(error)."""
        return await fallback(self.error)

    async def and_then[T, U](self, _f: Callable[[T], Awaitable[Ok[U] | Err[E]]]) -> Err[E]:
        """Return Err(error) without calling _f."""
        return Err(self.error)

    async def or_else[T, F](self, f: Callable[[E], Awaitable[Ok[T] | Err[F]]]) -> Ok[T] | Err[F]:
        """Await f(error) and return the Result it produces."""
        return await f(self.error)

    async def unwrap_or_else[T](self, f: Callable[[E], Awaitable[T]]) -> T:
        """Await f(error) and return its result."""
        return await f(self.error)


def collect[T, E](results: Iterable[Ok[T] | Err[E]]) -> Ok[list[T]] | Err[E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered.

    Args:
        results: An iterable of Result values.

    Returns:
        Ok(list[T]) if all results are Ok, otherwise the first Err.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> collect([Ok(1), Err("fail"), Ok(3)])
        Err(error='fail')
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)
