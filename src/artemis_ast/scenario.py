"""Scenario text operations: extract, prune and merge.

All three walk the same path through a document::

    ast -> block wrapper -> block_* item list -> item["text"]
        -> text block["ja"] -> line list -> string leaves

Extract and merge share :func:`iter_scenario_slots`, so a list produced by
``extract`` lines up one-to-one with the leaves ``merge`` overwrites.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .document import Document
from .errors import ExhaustedInput, MissingField, TypeMismatch, UnusedInput
from .values import VDict, VList, VText

logger = logging.getLogger(__name__)

BLOCK_PREFIX = "block_"
SKELETON_KEYS = frozenset({"linknext", "line"})


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------

def iter_blocks(document: Document) -> Iterator[VList]:
    """Yield each block's item list in document order.

    Raises MissingField when there is no ``ast`` entry and TypeMismatch when
    ``ast`` or one of its wrappers has the wrong shape.
    """
    if "ast" not in document:
        raise MissingField("ast")
    ast = document["ast"]
    if not isinstance(ast, VList):
        raise TypeMismatch("ast", "array", ast)

    for i, wrapper in enumerate(ast.items):
        if not isinstance(wrapper, VDict):
            raise TypeMismatch(f"ast[{i}]", "dictionary", wrapper)
        for key, block in wrapper.entries.items():
            if key.startswith(BLOCK_PREFIX) and isinstance(block, VList):
                yield block


def iter_scenario_slots(document: Document) -> Iterator[tuple[VList, int]]:
    """Yield ``(line, index)`` for every scenario string, in traversal order.

    ``line.items[index]`` is always a VText.
    """
    for block in iter_blocks(document):
        for item in block.items:
            if not isinstance(item, VDict):
                continue
            text = item.entries.get("text")
            if not isinstance(text, VList):
                continue
            for text_block in text.items:
                if not isinstance(text_block, VDict):
                    continue
                ja = text_block.entries.get("ja")
                if not isinstance(ja, VList):
                    continue
                for line in ja.items:
                    if not isinstance(line, VList):
                        continue
                    for index, leaf in enumerate(line.items):
                        if isinstance(leaf, VText):
                            yield line, index


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

def extract(document: Document) -> list[str]:
    """Collect every scenario string in traversal order."""
    strings = [line.items[i].value for line, i in iter_scenario_slots(document)]
    logger.debug("extracted %d scenario lines", len(strings))
    return strings


def count_scenario_lines(document: Document) -> int:
    return sum(1 for _ in iter_scenario_slots(document))


def prune(document: Document) -> Document:
    """Strip every block item down to its ``linknext`` / ``line`` keys.

    Non-dictionary items are removed. The document is modified in place and
    returned.
    """
    blocks = list(iter_blocks(document))
    for block in blocks:
        kept = [item for item in block.items if isinstance(item, VDict)]
        for item in kept:
            for key in [k for k in item.entries if k not in SKELETON_KEYS]:
                del item.entries[key]
        block.items[:] = kept
    logger.debug("pruned %d blocks", len(blocks))
    return document


def merge(document: Document, strings: Iterable[str]) -> Document:
    """Replace every scenario string with the next entry of *strings*.

    The number of strings must equal the number of scenario lines. Counts and
    types are checked before anything is written, so on failure the document
    is left as it was.
    """
    slots = list(iter_scenario_slots(document))
    replacements = list(strings)

    for i, s in enumerate(replacements):
        if not isinstance(s, str):
            raise TypeMismatch(f"strings[{i}]", "string", s)
    if len(replacements) < len(slots):
        raise ExhaustedInput(len(slots), len(replacements))
    if len(replacements) > len(slots):
        raise UnusedInput(len(slots), len(replacements))

    for (line, index), text in zip(slots, replacements):
        line.items[index] = VText(text)
    logger.debug("merged %d scenario lines", len(slots))
    return document
