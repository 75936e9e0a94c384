"""Reading and writing the ordered scenario string list.

The list is stored as a YAML sequence of strings; files ending in ``.json``
are read and written as a JSON array instead.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml

from .errors import StringListError

logger = logging.getLogger(__name__)


def _is_json(path: Path) -> bool:
    return path.suffix.lower() == ".json"


def dump_strings(strings: list[str], path: str | Path) -> None:
    path = Path(path)
    if _is_json(path):
        text = json.dumps(strings, ensure_ascii=False, indent=2) + "\n"
    else:
        text = yaml.safe_dump(
            strings,
            allow_unicode=True,
            default_flow_style=False,
            width=float("inf"),
        )
    path.write_text(text, encoding="utf-8")
    logger.debug("wrote %d strings to %s", len(strings), path)


def load_strings(path: str | Path) -> list[str]:
    """Load a strings file; raises StringListError if it is not a list of str."""
    path = Path(path)
    text = path.read_text(encoding="utf-8-sig")
    try:
        data = json.loads(text) if _is_json(path) else yaml.safe_load(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise StringListError(f"{path}: {exc}") from exc

    if data is None:
        return []
    if not isinstance(data, list):
        raise StringListError(f"{path}: expected a list of strings, got {type(data).__name__}")
    for i, item in enumerate(data):
        if not isinstance(item, str):
            raise StringListError(
                f"{path}: entry {i} is {type(item).__name__}, not a string"
            )
    return data
