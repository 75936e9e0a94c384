"""Exception hierarchy for artemis-ast.

Every failure raised by the library derives from :class:`ArtemisAstError`, so
callers that only want to report a problem can catch that one class.
"""

from __future__ import annotations


class ArtemisAstError(Exception):
    """Base class for all artemis-ast errors."""


# ---------------------------------------------------------------------------
# Lexing
# ---------------------------------------------------------------------------

class LexError(ArtemisAstError):
    """Raised by the tokenizer; carries the 1-based source position."""

    def __init__(self, message: str, line: int = 0, column: int = 0) -> None:
        self.line = line
        self.column = column
        if line:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class UnknownEscape(LexError):
    pass


class IncompleteEscape(LexError):
    pass


class UnterminatedString(LexError):
    pass


class UnexpectedCharacter(LexError):
    pass


class NumberFormat(LexError):
    pass


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

class ParseError(ArtemisAstError):
    """Raised by the reader when the token stream does not fit the grammar."""


class ExpectedIdentifier(ParseError):
    def __init__(self, token) -> None:
        self.token = token
        super().__init__(
            f"expected identifier at top level, got {token.describe()}"
        )


class UnexpectedToken(ParseError):
    def __init__(self, token) -> None:
        self.token = token
        super().__init__(f"unexpected token {token.describe()}")


class UnexpectedEndOfInput(ParseError):
    def __init__(self, expected: str = "a value") -> None:
        super().__init__(f"unexpected end of input, expected {expected}")


# ---------------------------------------------------------------------------
# Tree algorithms
# ---------------------------------------------------------------------------

class TreeError(ArtemisAstError):
    """Raised when a document does not have the shape extract/prune/merge need."""


class MissingField(TreeError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"missing field '{field}'")


class TypeMismatch(TreeError):
    def __init__(self, where: str, expected: str, actual: object) -> None:
        self.where = where
        self.expected = expected
        super().__init__(
            f"{where}: expected {expected}, got {type(actual).__name__}"
        )


class ExhaustedInput(TreeError):
    def __init__(self, needed: int, given: int) -> None:
        self.needed = needed
        self.given = given
        super().__init__(
            f"ran out of strings: document has {needed} lines, got {given}"
        )


class UnusedInput(TreeError):
    def __init__(self, needed: int, given: int) -> None:
        self.needed = needed
        self.given = given
        super().__init__(
            f"{given - needed} strings left unused: "
            f"document has {needed} lines, got {given}"
        )


# ---------------------------------------------------------------------------
# Input files
# ---------------------------------------------------------------------------

class StringListError(ArtemisAstError):
    """Raised when a strings file is not a flat list of strings."""


class SourceDecodeError(ArtemisAstError):
    """Raised when an ``.ast`` file cannot be decoded with the chosen encoding."""
