"""Writer: renders Values and Documents back into ``.ast`` source text."""

from __future__ import annotations

import math
from decimal import Decimal

from .document import Document
from .tokenizer import ESCAPES
from .values import Value, VDict, VFloat, VInteger, VList, VText

INDENT = "\t"

# Inverse of the tokenizer's escape table.
_ESCAPE_TABLE = str.maketrans({raw: "\\" + code for code, raw in ESCAPES.items()})


def quote(text: str) -> str:
    return '"' + text.translate(_ESCAPE_TABLE) + '"'


def format_float(value: float) -> str:
    """``2.0`` for integral values, otherwise the shortest exact decimal.

    Exponent notation is expanded since the tokenizer only reads plain
    decimals.
    """
    if not math.isfinite(value):
        raise ValueError(f"cannot write non-finite float {value!r}")
    if value.is_integer():
        return f"{value:.1f}"
    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    return text


def _is_blank(value: Value) -> bool:
    # An empty dictionary has no textual form inside an array.
    return isinstance(value, VDict) and not value.entries


def dump_value(value: Value, level: int = 0) -> str:
    """Render *value* as it appears on a line indented *level* tabs deep."""
    if isinstance(value, VText):
        return quote(value.value)
    if isinstance(value, VFloat):
        return format_float(value.value)
    if isinstance(value, VInteger):
        return str(value.value)
    if isinstance(value, VList):
        parts = [dump_value(v, level + 1) for v in value.items if not _is_blank(v)]
        if not parts:
            return "{}"
        inner = INDENT * (level + 1)
        return "{\n" + inner + f",\n{inner}".join(parts) + "\n" + INDENT * level + "}"
    if isinstance(value, VDict):
        sep = ",\n" + INDENT * level
        return sep.join(f"{k}={dump_value(v, level)}" for k, v in value.entries.items())
    raise TypeError(f"not an artemis-ast value: {type(value).__name__}")


def dumps(document: Document) -> str:
    """Render a whole Document, one ``key = value`` entry per line."""
    return "".join(
        f"{key} = {dump_value(value, 0)}\n" for key, value in document.entries.items()
    )
