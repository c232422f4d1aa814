"""Error types raised by the unwrap family."""

from __future__ import annotations

from typing import Any, NoReturn

__all__ = ["UnwrapError", "raise_payload"]


class UnwrapError(RuntimeError):
    """A container was unwrapped in the wrong variant.

    Raised by ``unwrap`` on Nothing, ``unwrap_err`` on Ok, ``expect`` and
    ``expect_err``, and by ``Err.unwrap`` when the error payload is not an
    exception and so cannot be raised itself.

    Attributes:
        payload: The value held by the container that was unwrapped, or
            None when the container was Nothing.
    """

    __slots__ = ("_payload",)

    def __init__(self, message: str, payload: Any = None) -> None:
        """Initialize UnwrapError.

        Args:
            message: Diagnostic message.
            payload: The value held by the unwrapped container.
        """
        self._payload = payload
        super().__init__(message)

    @property
    def payload(self) -> Any:
        """The value held by the unwrapped container."""
        return self._payload


def raise_payload(error: Any, message: str) -> NoReturn:
    """Raise an Err payload as-is, or wrapped when it is not an exception.

    The payload object itself is raised, so Python records the new raise on
    it: frames are added to its ``__traceback__``, and raising inside an
    ``except`` block sets its ``__context__``. Unwrapping the same Err many
    times grows that traceback. Match on the Err or use ``unwrap_or_else``
    where an Err is unwrapped repeatedly.

    Args:
        error: The error payload of an Err.
        message: Message used when the payload has to be wrapped.

    Raises:
        BaseException: The payload itself when it is an exception.
        UnwrapError: Carrying the payload otherwise.
    """
    if isinstance(error, BaseException):
        raise error
    raise UnwrapError(f"{message}: {error!r}", error)
