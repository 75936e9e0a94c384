"""Tokenizer: turns ``.ast`` source text into a flat list of tokens."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum, auto

from .errors import (
    IncompleteEscape,
    NumberFormat,
    UnexpectedCharacter,
    UnknownEscape,
    UnterminatedString,
)

logger = logging.getLogger(__name__)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    '"': '"',
    "\\": "\\",
}


class TokenType(Enum):
    EQUAL = auto()        # =
    OPEN_BRACE = auto()   # {
    CLOSE_BRACE = auto()  # }
    COMMA = auto()        # ,
    IDENTIFIER = auto()   # astver, text, block_00000 ...
    STRING = auto()       # "..."
    INTEGER = auto()
    FLOAT = auto()


_PUNCTUATION = {
    "=": TokenType.EQUAL,
    "{": TokenType.OPEN_BRACE,
    "}": TokenType.CLOSE_BRACE,
    ",": TokenType.COMMA,
}


@dataclass(slots=True)
class Token:
    type: TokenType
    value: str | int | float | None = None
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def describe(self) -> str:
        """Human-readable form used in error messages."""
        text = self.type.name if self.value is None else f"{self.type.name}({self.value!r})"
        if self.line:
            text += f" at line {self.line}, column {self.column}"
        return text


def _is_digit(ch: str | None) -> bool:
    return ch is not None and "0" <= ch <= "9"


def _is_ident_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


class _Scanner:
    """Cursor over the source text that tracks line and column."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1

    def peek(self, offset: int = 0) -> str | None:
        i = self.pos + offset
        return self.text[i] if i < len(self.text) else None

    def advance(self) -> str:
        ch = self.text[self.pos]
        self.pos += 1
        if ch == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return ch

    def at_end(self) -> bool:
        return self.pos >= len(self.text)


def tokenize(text: str) -> list[Token]:
    """Split *text* into tokens.

    Raises a :class:`~artemis_ast.errors.LexError` subclass on malformed
    input.
    """
    sc = _Scanner(text)
    tokens: list[Token] = []

    while not sc.at_end():
        ch = sc.peek()
        line, column = sc.line, sc.column

        if ch in _PUNCTUATION:
            sc.advance()
            tokens.append(Token(_PUNCTUATION[ch], None, line, column))
        elif ch.isspace():
            sc.advance()
        elif ch == '"':
            sc.advance()
            tokens.append(Token(TokenType.STRING, _read_string(sc, line, column), line, column))
        elif _is_digit(ch) or (ch == "-" and _is_digit(sc.peek(1))):
            tokens.append(_read_number(sc, line, column))
        elif _is_ident_char(ch):
            start = sc.pos
            while not sc.at_end() and _is_ident_char(sc.peek()):
                sc.advance()
            tokens.append(Token(TokenType.IDENTIFIER, text[start:sc.pos], line, column))
        else:
            raise UnexpectedCharacter(f"unexpected character {ch!r}", line, column)

    logger.debug("tokenized %d characters into %d tokens", len(text), len(tokens))
    return tokens


def _read_string(sc: _Scanner, line: int, column: int) -> str:
    """Read the body of a string literal; the opening quote is consumed."""
    parts: list[str] = []
    while True:
        if sc.at_end():
            raise UnterminatedString("unterminated string literal", line, column)
        ch = sc.advance()
        if ch == '"':
            return "".join(parts)
        if ch != "\\":
            parts.append(ch)
            continue
        if sc.at_end():
            raise IncompleteEscape("incomplete escape sequence", sc.line, sc.column)
        esc_line, esc_column = sc.line, sc.column
        escaped = sc.advance()
        if escaped not in ESCAPES:
            raise UnknownEscape(f"unknown escape sequence '\\{escaped}'", esc_line, esc_column)
        parts.append(ESCAPES[escaped])


def _read_number(sc: _Scanner, line: int, column: int) -> Token:
    start = sc.pos
    sc.advance()  # digit or leading '-'
    is_float = False
    while not sc.at_end():
        ch = sc.peek()
        if ch == ".":
            is_float = True
        elif not _is_digit(ch):
            break
        sc.advance()

    literal = sc.text[start:sc.pos]
    try:
        number = float(literal) if is_float else int(literal)
    except ValueError:
        raise NumberFormat(f"malformed number {literal!r}", line, column) from None
    if is_float:
        if not math.isfinite(number):
            raise NumberFormat(f"float {literal} out of 64-bit range", line, column)
        return Token(TokenType.FLOAT, number, line, column)
    if not INT64_MIN <= number <= INT64_MAX:
        raise NumberFormat(f"integer {literal} out of 64-bit range", line, column)
    return Token(TokenType.INTEGER, number, line, column)
