"""Greeter entity and the registry that counts its constructions."""

from __future__ import annotations

import logging
import sys
import threading
from typing import Iterator, List, Optional, TextIO

from . import __version__
from .errors import InvalidTimesError
from .models.responses import GreetingLine

logger = logging.getLogger(__name__)

GREETING_FORMAT = "Hello, {name}! #{index}"


class GreeterRegistry:
    """Factory that owns a construction counter.

    Every greeter built through a registry bumps its ``count`` by one. The
    counter only moves forward.
    """

    def __init__(self) -> None:
        self._count = 0
        self._lock = threading.Lock()

    @property
    def count(self) -> int:
        return self._count

    def create(self, name: str) -> "Greeter":
        """Construct a greeter counted against this registry."""
        return Greeter(name, registry=self)

    def _register(self, greeter: "Greeter") -> int:
        with self._lock:
            self._count += 1
            count = self._count
        logger.debug(f"Registered greeter {greeter.name!r} (count={count})")
        return count

    def __repr__(self) -> str:
        return f"<GreeterRegistry count={self._count}>"


# Process-wide registry used when no registry is passed explicitly
_default_registry = GreeterRegistry()


def default_registry() -> GreeterRegistry:
    """Get the process-wide registry."""
    return _default_registry


def _check_times(times: int) -> int:
    if isinstance(times, bool) or not isinstance(times, int) or times < 0:
        raise InvalidTimesError(times)
    return times


class Greeter:
    """A named entity that prints numbered greetings.

    Example:
        >>> g = Greeter("Ruby")
        >>> g.greet(2)
        Hello, Ruby! #1
        Hello, Ruby! #2
    """

    VERSION = __version__

    def __init__(self, name: str, registry: Optional[GreeterRegistry] = None) -> None:
        self._name = name
        self._registry = registry if registry is not None else _default_registry
        self._registry._register(self)

    @property
    def name(self) -> str:
        return self._name

    @property
    def registry(self) -> GreeterRegistry:
        return self._registry

    def lines(self, times: int = 1) -> Iterator[str]:
        """Lazily yield ``times`` greeting strings, numbered from 1.

        ``times`` is checked immediately; the returned iterator is single-use.

        Raises:
            InvalidTimesError: If times is negative or not an integer
        """
        _check_times(times)
        return self._iter_lines(times)

    def _iter_lines(self, times: int) -> Iterator[str]:
        for index in range(1, times + 1):
            yield GREETING_FORMAT.format(name=self._name, index=index)

    def greeting_lines(self, times: int = 1) -> List[GreetingLine]:
        """Structured form of :meth:`lines`."""
        return [
            GreetingLine(name=self._name, index=index, text=text)
            for index, text in enumerate(self.lines(times), start=1)
        ]

    def greet(self, times: int = 1, stream: Optional[TextIO] = None) -> None:
        """Print ``times`` greetings, one per line.

        Args:
            times: Number of lines to print (default 1, zero prints nothing)
            stream: Text stream to write to (default: standard output)

        Raises:
            InvalidTimesError: If times is negative or not an integer
        """
        out = stream if stream is not None else sys.stdout
        for line in self.lines(times):
            print(line, file=out)

    def __repr__(self) -> str:
        return f"<Greeter {self._name!r}>"
