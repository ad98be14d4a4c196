"""Command-line entry points for greeter.

``greeter`` with no arguments greets the configured default name (``Ruby``)
the configured default number of times (2). ``greeter-lex`` prints the tokens
of a Ruby source file, one ``< lexeme , TYPE >`` per line.

Example:
    greeter Ada --times 3
    greeter-lex examples/classes.rb
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import GreeterConfig, load_config
from .core import GreeterRegistry
from .errors import GreeterError
from .lexer import RubyLexer, format_token

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="greeter", description="Print numbered greetings for a name"
    )
    parser.add_argument("name", nargs="?", help="Name to greet (default from config)")
    parser.add_argument(
        "-t", "--times", type=int, default=None, help="Number of greetings to print"
    )
    parser.add_argument(
        "--project",
        type=Path,
        default=None,
        help="Directory containing .greeter.toml (default: current directory)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging on stderr"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _setup_logging(config: GreeterConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.logging.level)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Run the greeter CLI.

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)
    project_path = (args.project or Path.cwd()).resolve()

    try:
        config = load_config(project_path)
    except GreeterError as e:
        print(f"greeter: {e}", file=sys.stderr)
        return 2

    _setup_logging(config, args.verbose)
    logger.debug(f"Loaded config from {project_path}")

    name = args.name if args.name is not None else config.greeting.default_name
    times = args.times if args.times is not None else config.greeting.default_times

    registry = GreeterRegistry()
    try:
        registry.create(name).greet(times)
    except GreeterError as e:
        print(f"greeter: {e}", file=sys.stderr)
        return 2

    logger.debug(f"Constructed {registry.count} greeter(s)")
    return 0


def build_lex_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="greeter-lex", description="Print the tokens of a Ruby source file"
    )
    parser.add_argument("path", nargs="?", help="Ruby file to tokenize (prompted if omitted)")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging on stderr"
    )
    return parser


def _prompt_for_path() -> str:
    try:
        return input("Enter the path to the Ruby file (.rb): ").strip()
    except EOFError:
        return ""


def lex_main(argv: Optional[List[str]] = None) -> int:
    """Tokenize a Ruby file and print one token per line.

    Returns:
        Process exit status (1 when the file cannot be read)
    """
    args = build_lex_parser().parse_args(argv)

    try:
        config = load_config(Path.cwd())
    except GreeterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    _setup_logging(config, args.verbose)

    path = args.path.strip() if args.path is not None else _prompt_for_path()
    if not path:
        print("You must enter the path to the file.", file=sys.stderr)
        return 1

    try:
        source = Path(path).read_bytes().decode("utf-8", errors="replace")
    except OSError as e:
        logger.debug(f"Failed to read {path}: {e}")
        print(f"Error: Cannot open file: {path}", file=sys.stderr)
        return 1

    for token in RubyLexer().iter_tokens(source):
        print(format_token(token))
    return 0


if __name__ == "__main__":
    sys.exit(main())
