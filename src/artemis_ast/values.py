"""Value types for artemis-ast trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class VInteger:
    value: int


@dataclass(slots=True)
class VFloat:
    value: float


@dataclass(slots=True)
class VText:
    value: str


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class VList:
    items: list[Value]


@dataclass(slots=True)
class VDict:
    """Keyed entries; ``dict`` keeps them in source order."""
    entries: dict[str, Value]


Value = Union[VInteger, VFloat, VText, VList, VDict]


def to_python(value: Value):
    """Convert a Value tree into plain ints, floats, strs, lists and dicts."""
    if isinstance(value, VList):
        return [to_python(v) for v in value.items]
    if isinstance(value, VDict):
        return {k: to_python(v) for k, v in value.entries.items()}
    return value.value
