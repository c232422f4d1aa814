"""Library configuration: logging level and output format."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from fallible._logging import configure_logging

__all__ = [
    "FallibleConfig",
    "get_config",
    "init",
]

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class FallibleConfig:
    """Configuration for fallible.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Emit JSON logs when True, console logs otherwise.
    """

    log_level: str | None = None
    json_output: bool = True


_config: FallibleConfig | None = None


def _normalize_level(level: str, source: str) -> str | None:
    """Upper-case a level name, or warn and return None if logging has no such level."""
    level = level.strip().upper()
    if not level:
        return None
    if level not in logging.getLevelNamesMapping():
        logging.warning("Unknown %s value '%s', logging stays silent", source, level)
        return None
    return level


def _detect_log_level() -> str | None:
    """Read the logging level from FALLIBLE_LOG_LEVEL."""
    return _normalize_level(os.environ.get("FALLIBLE_LOG_LEVEL", ""), "FALLIBLE_LOG_LEVEL")


def _detect_json_output() -> bool:
    """Read the output format from FALLIBLE_LOG_JSON (default: JSON)."""
    value = os.environ.get("FALLIBLE_LOG_JSON", "").strip().lower()
    if value in _FALSY:
        return False
    if value and value not in _TRUTHY:
        logging.warning("Unknown FALLIBLE_LOG_JSON value '%s', defaulting to JSON", value)
    return True


def init(
    log_level: str | None = None,
    json_output: bool | None = None,
) -> FallibleConfig:
    """Initialize fallible with the specified configuration.

    Arguments left as None are read from the environment. A level name
    that logging does not know is reported with a warning and leaves
    logging silent, wherever it came from.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_output: Emit JSON logs when True, console logs otherwise.

    Returns:
        The FallibleConfig that was set.

    Example:
        ```python
        import fallible

        fallible.init(log_level="DEBUG", json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = _normalize_level(log_level, "log_level") if log_level is not None else _detect_log_level()
    resolved_json = json_output if json_output is not None else _detect_json_output()

    _config = FallibleConfig(log_level=resolved_level, json_output=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> FallibleConfig:
    """Get the current configuration.

    Returns:
        The current FallibleConfig.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = "fallible not initialized. Call fallible.init() first."
        raise RuntimeError(msg)
    return _config
