"""Greeter: a named entity that counts its constructions and prints greetings,
plus a tokenizer for the Ruby sources it is modelled on."""

__version__ = "1.0.0"

from .core import Greeter, GreeterRegistry, default_registry
from .errors import ConfigError, GreeterError, InvalidTimesError
from .lexer import RubyLexer
from .models import GreetingLine, Token

__all__ = [
    "__version__",
    "Greeter",
    "GreeterRegistry",
    "default_registry",
    "GreeterError",
    "InvalidTimesError",
    "ConfigError",
    "GreetingLine",
    "RubyLexer",
    "Token",
]
