"""Core types: Option (Some, Nothing), Result (Ok, Err) and their async views."""

from fallible.types.option import (
    AsyncNothing,
    AsyncNothingType,
    AsyncSome,
    Nothing,
    NothingType,
    Option,
    Some,
)
from fallible.types.result import AsyncErr, AsyncOk, Err, Ok, Result, collect

__all__ = [
    "AsyncErr",
    "AsyncNothing",
    "AsyncNothingType",
    "AsyncOk",
    "AsyncSome",
    "Err",
    "Nothing",
    "NothingType",
    "Ok",
    "Option",
    "Result",
    "Some",
    "collect",
]
