"""Reader layer: builds a Document from the tokenizer's output.

Grammar::

    document  := (identifier '=' value)*
    value     := array | string | integer | float | identifier ['=' value]
    array     := '{' (value | ',')* '}'

A bare identifier in value position is either a string (its own name) or,
when followed by ``=``, a one-key dictionary wrapping the next value.
"""

from __future__ import annotations

import logging

from .document import Document
from .errors import ExpectedIdentifier, UnexpectedEndOfInput, UnexpectedToken
from .tokenizer import Token, TokenType, tokenize
from .values import Value, VDict, VFloat, VInteger, VList, VText

logger = logging.getLogger(__name__)


class Reader:
    """Recursive-descent parser over a token list."""

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.pos = 0

    # -- Cursor ---------------------------------------------------------

    def peek(self) -> Token | None:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def next(self, expected: str = "a value") -> Token:
        token = self.peek()
        if token is None:
            raise UnexpectedEndOfInput(expected)
        self.pos += 1
        return token

    # -- Grammar --------------------------------------------------------

    def read_document(self) -> Document:
        entries: dict[str, Value] = {}
        while self.peek() is not None:
            token = self.next()
            if token.type != TokenType.IDENTIFIER:
                raise ExpectedIdentifier(token)
            eq = self.next("'='")
            if eq.type != TokenType.EQUAL:
                raise UnexpectedToken(eq)
            entries[token.value] = self.read_value()
        return Document(entries)

    def read_value(self) -> Value:
        token = self.next()
        kind = token.type

        if kind == TokenType.OPEN_BRACE:
            return self._read_array()
        if kind == TokenType.STRING:
            return VText(token.value)
        if kind == TokenType.INTEGER:
            return VInteger(token.value)
        if kind == TokenType.FLOAT:
            return VFloat(token.value)
        if kind == TokenType.IDENTIFIER:
            following = self.peek()
            if following is None:
                raise UnexpectedEndOfInput("'=', ',' or '}'")
            if following.type == TokenType.EQUAL:
                self.pos += 1
                return VDict({token.value: self.read_value()})
            return VText(token.value)

        raise UnexpectedToken(token)

    def _read_array(self) -> VList:
        """Read array elements; the opening brace is already consumed."""
        items: list[Value] = []
        while True:
            token = self.peek()
            if token is None:
                raise UnexpectedEndOfInput("'}'")
            if token.type == TokenType.CLOSE_BRACE:
                self.pos += 1
                return VList(items)
            if token.type == TokenType.COMMA:
                self.pos += 1
                continue
            items.append(self.read_value())


def parse_tokens(tokens: list[Token]) -> Document:
    """Build a Document from a token list."""
    doc = Reader(tokens).read_document()
    logger.debug("parsed %d top-level entries", len(doc.entries))
    return doc


def parse(text: str) -> Document:
    """Tokenize and parse ``.ast`` source text."""
    return parse_tokens(tokenize(text))
