"""Regex-driven tokenizer for Ruby source.

Rules are tried in order at the current position and the first match wins,
so longer or more specific forms must come before the general ones (block
comments before ``=``, ``@@`` before ``@``, floats before ints, multi-char
operators before single-char ones). Whitespace is consumed but not emitted.
A character no rule accepts becomes a one-character ``ERROR`` token.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import FrozenSet, Iterator, List, Tuple

from .models.responses import Token

logger = logging.getLogger(__name__)

KEYWORDS: FrozenSet[str] = frozenset(
    {
        "__ENCODING__", "__LINE__", "__FILE__",
        "BEGIN", "END",
        "alias", "and", "begin", "break", "case", "class", "def", "defined?",
        "do", "else", "elsif", "end", "ensure", "false", "for", "if", "in",
        "module", "next", "nil", "not", "or", "redo", "rescue", "retry",
        "return", "self", "super", "then", "true", "undef", "unless", "until",
        "when", "while", "yield",
    }
)

IDENT_OR_KW = "IDENT_OR_KW"
ERROR = "ERROR"


@dataclass(frozen=True)
class LexRule:
    """A single tokenizer rule."""

    type: str
    pattern: re.Pattern[str]
    skip: bool = False


def _rule(type_: str, pattern: str, skip: bool = False) -> LexRule:
    return LexRule(type=type_, pattern=re.compile(pattern), skip=skip)


# Order matters
RULES: Tuple[LexRule, ...] = (
    _rule("COMMENT_BLOCK", r"=begin[\s\S]*?=end"),
    _rule("COMMENT", r"#[^\r\n]*"),
    _rule("STRING", r'"(?:\\.|[\s\S])*?"'),
    _rule("STRING", r"'(?:\\.|[\s\S])*?'"),
    _rule("REGEX", r"/(?:\\/|\\.|[^/\n])[\s\S]*?/[a-zA-Z]*"),
    _rule("SYMBOL", r":'(?:\\.|[\s\S])*?'"),
    _rule("SYMBOL", r':"(?:\\.|[\s\S])*?"'),
    _rule("SYMBOL", r":[A-Za-z_][A-Za-z0-9_]*[!?=]?"),
    _rule("CLASS_VAR", r"@@[A-Za-z_][A-Za-z0-9_]*"),
    _rule("INSTANCE_VAR", r"@[A-Za-z_][A-Za-z0-9_]*"),
    _rule("GLOBAL_VAR", r"\$[0-9]+"),
    _rule("GLOBAL_VAR", r"\$[A-Za-z_][A-Za-z0-9_]*"),
    _rule("NUMBER_HEX", r"0[xX][0-9A-Fa-f_]+"),
    _rule("NUMBER_BIN", r"0[bB][01_]+"),
    _rule("NUMBER_OCT", r"0[oO][0-7_]+"),
    _rule("NUMBER_FLOAT", r"[0-9][0-9_]*\.[0-9][0-9_]*(?:[eE][+-]?[0-9][0-9_]*)?"),
    _rule("NUMBER_FLOAT", r"[0-9][0-9_]*[eE][+-]?[0-9][0-9_]*"),
    _rule("NUMBER_INT", r"[0-9][0-9_]*"),
    _rule(
        "OP",
        r"<=>|===|<<=|>>=|\*\*=|&&=|\|\|=|\+=|-=|\*=|/=|%=|&=|\|=|\^=|<=|>=|==|!=|=~|!~"
        r"|\.\.\.|::|=>|\*\*|<<|>>|&&|\|\||&\.|\.\.",
    ),
    _rule("OP", r"[+\-*/%&|^~!=<>?:.,;()\[\]{}]"),
    _rule(IDENT_OR_KW, r"[A-Za-z_][A-Za-z0-9_]*[!?=]?"),
    _rule("WS", r"\s+", skip=True),
)

_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t"})


def classify(rule_type: str, lexeme: str) -> str:
    """Resolve IDENT_OR_KW into KEYWORD, CONSTANT or IDENTIFIER."""
    if rule_type != IDENT_OR_KW:
        return rule_type
    if lexeme in KEYWORDS:
        return "KEYWORD"
    if lexeme[:1].isupper():
        return "CONSTANT"
    return "IDENTIFIER"


def escape_lexeme(lexeme: str) -> str:
    """Escape newlines, carriage returns and tabs for single-line output."""
    return lexeme.translate(_ESCAPES)


def format_token(token: Token) -> str:
    """Render a token as ``< lexeme , TYPE >``."""
    return f"< {escape_lexeme(token.lexeme)} , {token.type} >"


def _advance(text: str, line: int, column: int) -> Tuple[int, int]:
    newlines = text.count("\n")
    if newlines:
        return line + newlines, len(text) - text.rfind("\n")
    return line, column + len(text)


class RubyLexer:
    """Tokenizes Ruby source with an ordered list of regex rules.

    Example:
        >>> [t.type for t in RubyLexer().tokenize("@@count += 1")]
        ['CLASS_VAR', 'OP', 'NUMBER_INT']
    """

    def __init__(self, rules: Tuple[LexRule, ...] = RULES) -> None:
        self.rules = rules

    def iter_tokens(self, source: str) -> Iterator[Token]:
        """Lazily yield tokens with 1-based line and column positions."""
        pos = 0
        line, column = 1, 1
        end = len(source)

        while pos < end:
            for rule in self.rules:
                match = rule.pattern.match(source, pos)
                if match and match.end() > pos:
                    lexeme = match.group(0)
                    if not rule.skip:
                        yield Token(
                            type=classify(rule.type, lexeme),
                            lexeme=lexeme,
                            line=line,
                            column=column,
                        )
                    break
            else:
                lexeme = source[pos]
                logger.debug(f"No rule matches {lexeme!r} at {line}:{column}")
                yield Token(type=ERROR, lexeme=lexeme, line=line, column=column)

            line, column = _advance(lexeme, line, column)
            pos += len(lexeme)

    def tokenize(self, source: str) -> List[Token]:
        """Tokenize ``source`` into a list."""
        tokens = list(self.iter_tokens(source))
        logger.debug(f"Tokenized {len(source)} characters into {len(tokens)} tokens")
        return tokens
