"""Data models returned by greeter operations."""

from .responses import GreetingLine, Token

__all__ = ["GreetingLine", "Token"]
