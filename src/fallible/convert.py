"""Free functions converting plain Python values into Option and Result.

Example:
    ```python
    from fallible import as_result, join, optionify, resultify

    optionify(None)  # Nothing
    optionify(0)  # Some(value=0)

    as_result(int, "12")  # Ok(value=12)
    as_result(int, "x")  # Err(error=ValueError(...))

    join(Some(1), Some("a"))  # Some(value=(1, 'a'))

    async def main():
        return await resultify(fetch())  # Ok(...) or Err(exc)
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from functools import reduce
from typing import Any

from fallible._logging import get_logger
from fallible.types.option import Nothing, NothingType, Some
from fallible.types.result import Err, Ok

__all__ = ["as_result", "capture", "capture_async", "join", "optionify", "resultify", "zip2"]

_logger = get_logger(__name__)

type ExceptionTypes = tuple[type[BaseException], ...]


def optionify[T](value: T | None) -> Some[T] | NothingType:
    """Convert a nullable value to an Option.

    Only None is absence. Falsy values (0, "", [], {}, False) are present
    and become Some.

    Args:
        value: A value that may be None.

    Returns:
        Nothing if value is None, else Some(value).

    Examples:
        >>> optionify(None)
        NothingType()
        >>> optionify("")
        Some(value='')
    """
    if value is None:
        return Nothing
    return Some(value)


def capture[T](
    f: Callable[..., T],
    args: tuple[Any, ...] = (),
    kwargs: dict[str, Any] | None = None,
    *,
    exceptions: ExceptionTypes = (Exception,),
    event: str = "as_result_captured",
) -> Ok[T] | Err[Any]:
    """Call f(*args, **kwargs) and capture the listed exceptions as Err.

    Shared by ``as_result`` and the ``safe`` decorator. Exceptions outside
    ``exceptions`` propagate unchanged.

    Args:
        f: The function to call.
        args: Positional arguments passed to f.
        kwargs: Keyword arguments passed to f.
        exceptions: Exception types turned into Err.
        event: Name of the debug event logged on capture.

    Returns:
        Ok(return value), or Err holding the caught exception object.
    """
    try:
        value = f(*args, **(kwargs or {}))
    except exceptions as e:
        _logger.debug(event, function=getattr(f, "__qualname__", repr(f)), error_type=type(e).__name__)
        return Err(e)
    return Ok(value)


async def capture_async[T](
    awaitable: Awaitable[T],
    *,
    exceptions: ExceptionTypes = (Exception,),
    event: str = "resultify_captured",
    function: str | None = None,
) -> Ok[T] | Err[Any]:
    """Await an awaitable and capture the listed exceptions as Err.

    Shared by ``resultify`` and the ``safe_async`` decorator.

    Args:
        awaitable: The awaitable to resolve.
        exceptions: Exception types turned into Err.
        event: Name of the debug event logged on capture.
        function: Qualified name of the coroutine function, for the log.

    Returns:
        Ok(value) on resolution, Err(exception) on a caught failure.
    """
    try:
        value = await awaitable
    except exceptions as e:
        if function is None:
            _logger.debug(event, error_type=type(e).__name__)
        else:
            _logger.debug(event, function=function, error_type=type(e).__name__)
        return Err(e)
    return Ok(value)


async def resultify[T](awaitable: Awaitable[T]) -> Ok[T] | Err[Exception]:
    """Await an awaitable and capture its outcome as a Result.

    An exception raised while awaiting becomes Err holding that exact
    exception object. Exceptions outside ``Exception`` (for example
    ``asyncio.CancelledError``) propagate.

    Args:
        awaitable: The awaitable to resolve.

    Returns:
        Ok(value) on resolution, Err(exception) on failure.
    """
    return await capture_async(awaitable)


def as_result[T](f: Callable[..., T], *args: Any, **kwargs: Any) -> Ok[T] | Err[Exception]:
    """Call a function and capture its outcome as a Result.

    Args:
        f: The function to call.
        *args: Positional arguments passed to f.
        **kwargs: Keyword arguments passed to f.

    Returns:
        Ok(return value), or Err holding the exception f raised.

    Examples:
        >>> as_result(int, "12")
        Ok(value=12)
    """
    return capture(f, args, kwargs)


def zip2[T, U](first: Some[T] | NothingType, second: Some[U] | NothingType) -> Some[tuple[T, U]] | NothingType:
    """Pair the values of two Options, or Nothing if either is Nothing."""
    return first.and_then(lambda a: second.map(lambda b: (a, b)))


def join(first: Some[Any] | NothingType, *rest: Some[Any] | NothingType) -> Some[tuple[Any, ...]] | NothingType:
    """Join Options into one Option of a tuple of their values.

    Options are combined left to right; the first Nothing ends the chain
    and the result is Nothing.

    Args:
        first: The first Option.
        *rest: Further Options, of any payload types.

    Returns:
        Some(tuple of values in input order), or Nothing.

    Examples:
        >>> join(Some(1), Some(2), Some(3))
        Some(value=(1, 2, 3))
        >>> join(Some(1), Nothing, Some(3))
        NothingType()
    """
    return reduce(
        lambda acc, opt: acc.and_then(lambda values: opt.map(lambda value: (*values, value))),
        rest,
        first.map(lambda value: (value,)),
    )
