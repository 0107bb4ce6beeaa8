"""Exception types raised by oohtml."""

from __future__ import annotations

from typing import Any


class OohtmlError(Exception):
    """Base class for library errors."""


class InvalidRenderable(OohtmlError, TypeError):
    """Raised when embedded content cannot be turned into text."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"expected renderable content, got {type(value).__name__}")


class InvalidArgumentType(OohtmlError, TypeError):
    """Raised when a setter receives a non-string where a string is required."""

    def __init__(self, argument: str, value: Any) -> None:
        self.argument = argument
        self.value = value
        super().__init__(f"{argument} must be a string, got {type(value).__name__}")


class BlockNotFound(OohtmlError, LookupError):
    """Raised when a named block template does not exist."""


class ConfigError(OohtmlError, ValueError):
    """Raised when the configuration file is missing or invalid."""


def expect_string(argument: str, value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentType(argument, value)
    return value


__all__ = [
    "BlockNotFound",
    "ConfigError",
    "InvalidArgumentType",
    "InvalidRenderable",
    "OohtmlError",
    "expect_string",
]
