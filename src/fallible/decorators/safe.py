"""Decorator forms of as_result and resultify."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from fallible.convert import ExceptionTypes, capture, capture_async
from fallible.types.result import Err, Ok

__all__ = ["safe", "safe_async"]


@overload
def safe[**P, T](func: Callable[P, T], /) -> Callable[P, Ok[T] | Err[Exception]]: ...


@overload
def safe[**P, T](*, exceptions: ExceptionTypes) -> Callable[[Callable[P, T]], Callable[P, Ok[T] | Err[Any]]]: ...


def safe(func: Callable[..., Any] | None = None, /, *, exceptions: ExceptionTypes = (Exception,)) -> Any:
    """Make a function return a Result instead of raising.

    Calls go through ``capture``, the same path as ``as_result``: a return
    value becomes Ok and a raised exception listed in ``exceptions`` becomes
    Err holding that exception. Anything else propagates.

    Usable bare or with arguments:

        @safe
        def parse(text): ...

        @safe(exceptions=(ValueError,))
        def parse_strict(text): ...

    Args:
        func: The function to wrap, when used without parentheses.
        exceptions: Exception types turned into Err. Defaults to (Exception,).

    Returns:
        The wrapped function, or a decorator when func is omitted.
    """

    @wrapt.decorator
    def wrapper(wrapped: Callable[..., Any], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        return capture(wrapped, args, kwargs, exceptions=exceptions, event="safe_captured")

    return wrapper if func is None else wrapper(func)


@overload
def safe_async[**P, T](func: Callable[P, Awaitable[T]], /) -> Callable[P, Awaitable[Ok[T] | Err[Exception]]]: ...


@overload
def safe_async[**P, T](
    *, exceptions: ExceptionTypes
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Ok[T] | Err[Any]]]]: ...


def safe_async(func: Callable[..., Any] | None = None, /, *, exceptions: ExceptionTypes = (Exception,)) -> Any:
    """Make a coroutine function resolve to a Result instead of raising.

    The awaited call goes through ``capture_async``, the same path as
    ``resultify``.

    Args:
        func: The coroutine function to wrap, when used without parentheses.
        exceptions: Exception types turned into Err. Defaults to (Exception,).

    Returns:
        The wrapped coroutine function, or a decorator when func is omitted.
    """

    @wrapt.decorator
    async def wrapper(wrapped: Callable[..., Any], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        return await capture_async(
            wrapped(*args, **kwargs),
            exceptions=exceptions,
            event="safe_async_captured",
            function=wrapped.__qualname__,
        )

    return wrapper if func is None else wrapper(func)
