"""Error types raised by the greeter package."""

from __future__ import annotations

from typing import Any


class GreeterError(Exception):
    """Base class for greeter errors."""


class InvalidTimesError(GreeterError, ValueError, TypeError):
    """Raised when a repeat count is not a non-negative integer."""

    def __init__(self, times: Any):
        self.times = times
        if isinstance(times, int) and not isinstance(times, bool):
            message = f"times must be >= 0, got {times}"
        else:
            message = f"times must be an integer, got {type(times).__name__}"
        super().__init__(message)


class ConfigError(GreeterError):
    """Raised when a configuration value cannot be parsed."""

    def __init__(self, key: str, value: str, reason: str):
        self.key = key
        self.value = value
        super().__init__(f"Invalid value for {key}: {value!r} ({reason})")
