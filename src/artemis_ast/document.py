"""Document — the parsed contents of one ``.ast`` file."""

from __future__ import annotations

from dataclasses import dataclass, field

from .values import Value, VFloat, VInteger, VList


@dataclass
class Document:
    """Top-level ``key = value`` pairs of a script dump, in source order."""

    entries: dict[str, Value] = field(default_factory=dict)

    # -- Mapping access -------------------------------------------------

    def __getitem__(self, key: str) -> Value:
        return self.entries[key]

    def __contains__(self, key: str) -> bool:
        return key in self.entries

    def get(self, key: str, default: Value | None = None) -> Value | None:
        return self.entries.get(key, default)

    def keys(self):
        return self.entries.keys()

    # -- Convenience accessors ------------------------------------------

    @property
    def astver(self) -> float | int | None:
        """The ``astver`` version tag, or ``None`` when absent or malformed."""
        v = self.entries.get("astver")
        if isinstance(v, (VFloat, VInteger)):
            return v.value
        return None

    @property
    def ast(self) -> VList | None:
        v = self.entries.get("ast")
        return v if isinstance(v, VList) else None
