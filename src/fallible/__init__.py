"""fallible: Option and Result types with async views for Python 3.13+.

Flat imports (preferred):
    from fallible import Option, Some, Nothing, Result, Ok, Err
    from fallible import optionify, resultify, as_result, join

Submodule imports (for organization):
    from fallible.types import Option, Result
    from fallible.convert import optionify
    from fallible.decorators import safe
"""

# Configuration
from fallible._config import FallibleConfig, get_config, init

# Free functions
from fallible.convert import as_result, join, optionify, resultify, zip2

# Decorators
from fallible.decorators import safe, safe_async

# Errors
from fallible.errors import UnwrapError

# Types
from fallible.types import (
    AsyncErr,
    AsyncNothing,
    AsyncNothingType,
    AsyncOk,
    AsyncSome,
    Err,
    Nothing,
    NothingType,
    Ok,
    Option,
    Result,
    Some,
    collect,
)

__all__ = [
    "AsyncErr",
    "AsyncNothing",
    "AsyncNothingType",
    "AsyncOk",
    "AsyncSome",
    "Err",
    "FallibleConfig",
    "Nothing",
    "NothingType",
    "Ok",
    "Option",
    "Result",
    "Some",
    "UnwrapError",
    "as_result",
    "collect",
    "get_config",
    "init",
    "join",
    "optionify",
    "resultify",
    "safe",
    "safe_async",
    "zip2",
]
