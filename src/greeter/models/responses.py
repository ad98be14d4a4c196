from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GreetingLine:
    """One emitted greeting."""

    name: str
    index: int  # 1-based
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Token:
    """A lexeme produced by the Ruby lexer."""

    type: str  # e.g. "KEYWORD", "CLASS_VAR", "ERROR"
    lexeme: str
    line: int  # 1-based
    column: int  # 1-based, counted in characters
