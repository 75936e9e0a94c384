"""artemis-ast — parser, writer and scenario tools for Artemis script AST dumps."""

from .document import Document
from .errors import (
    ArtemisAstError,
    ExhaustedInput,
    ExpectedIdentifier,
    IncompleteEscape,
    LexError,
    MissingField,
    NumberFormat,
    ParseError,
    SourceDecodeError,
    StringListError,
    TreeError,
    TypeMismatch,
    UnexpectedCharacter,
    UnexpectedEndOfInput,
    UnexpectedToken,
    UnknownEscape,
    UnterminatedString,
    UnusedInput,
)
from .reader import parse, parse_tokens
from .scenario import count_scenario_lines, extract, merge, prune
from .strings_file import dump_strings, load_strings
from .tokenizer import Token, TokenType, tokenize
from .values import Value, VDict, VFloat, VInteger, VList, VText, to_python
from .writer import dump_value, dumps

__all__ = [
    "parse",
    "parse_tokens",
    "tokenize",
    "dumps",
    "dump_value",
    "extract",
    "prune",
    "merge",
    "count_scenario_lines",
    "load_strings",
    "dump_strings",
    "Document",
    "Token",
    "TokenType",
    "Value",
    "VDict",
    "VFloat",
    "VInteger",
    "VList",
    "VText",
    "to_python",
    "ArtemisAstError",
    "LexError",
    "UnknownEscape",
    "IncompleteEscape",
    "UnterminatedString",
    "UnexpectedCharacter",
    "NumberFormat",
    "ParseError",
    "ExpectedIdentifier",
    "UnexpectedToken",
    "UnexpectedEndOfInput",
    "TreeError",
    "MissingField",
    "TypeMismatch",
    "ExhaustedInput",
    "UnusedInput",
    "StringListError",
    "SourceDecodeError",
]
