"""Locate frontmatter blocks at the head of a document and fold them together.

A document carries metadata only when it starts with the ``---`` delimiter on its
own line. Consecutive blocks at the head (separated by whitespace only) are all
consumed; everything after the last closing delimiter is the body.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final, cast

from .errors import TooManySectionsError
from .values import PropertyMap, ValueKind, union_sequences, value_kind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .ports import MetadataCodec

DELIMITER: Final[str] = "---"
MAX_SECTIONS: Final[int] = 100

_OPENING = re.compile(r"---\r?\n")
_CLOSING = re.compile(r"^---(?:\r?\n|\Z)", re.MULTILINE)
_GAP = re.compile(r"\s*")

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SplitDocument:
    """Raw block texts in document order plus the remaining body."""

    blocks: tuple[str, ...]
    body: str


@dataclass(slots=True)
class Extraction:
    """Parsed blocks; empty when the document has no usable metadata."""

    mappings: list[PropertyMap] = field(default_factory=list[PropertyMap])
    body: str = ""


def has_metadata(document: str) -> bool:
    return _OPENING.match(document) is not None


def split_blocks(document: str) -> SplitDocument:
    """Cut the leading delimiter-bounded regions out of ``document``.

    Raises ``TooManySectionsError`` once more than ``MAX_SECTIONS`` blocks are
    found, before any of them is parsed.
    """

    blocks: list[str] = []
    body_start = 0
    cursor = 0
    while (opening := _OPENING.match(document, cursor)) is not None:
        closing = _CLOSING.search(document, opening.end())
        if closing is None:
            break
        blocks.append(document[opening.end() : closing.start()])
        if len(blocks) > MAX_SECTIONS:
            raise TooManySectionsError(count=len(blocks), limit=MAX_SECTIONS)
        body_start = closing.end()
        gap = _GAP.match(document, body_start)
        cursor = gap.end() if gap is not None else body_start

    if not blocks:
        return SplitDocument(blocks=(), body=document)
    return SplitDocument(blocks=tuple(blocks), body=document[body_start:])


def extract_blocks(document: str, codec: MetadataCodec) -> Extraction:
    """Parse every leading block; any unparsable block discards them all."""

    split = split_blocks(document)
    if not split.blocks:
        return Extraction(body=document)

    mappings: list[PropertyMap] = []
    for position, block in enumerate(split.blocks):
        if not block.strip():
            mappings.append({})
            continue
        parsed = codec.parse(block)
        if parsed is None:
            log.warning(
                "Discarding frontmatter: block %s of %s is not a valid mapping",
                position + 1,
                len(split.blocks),
            )
            return Extraction(body=document)
        mappings.append(parsed)

    log.debug("Extracted %s frontmatter block(s)", len(mappings))
    return Extraction(mappings=mappings, body=split.body)


def combine(first: PropertyMap, second: PropertyMap) -> PropertyMap:
    """Fold ``second`` into ``first``; values seen first win on conflict."""

    combined: PropertyMap = {}
    for key in (*first, *(key for key in second if key not in first)):
        if key not in second:
            combined[key] = first[key]
            continue
        if key not in first:
            combined[key] = second[key]
            continue
        combined[key] = _combine_values(first[key], second[key])
    return combined


def combine_all(mappings: Iterable[PropertyMap]) -> PropertyMap:
    combined: PropertyMap | None = None
    for mapping in mappings:
        combined = dict(mapping) if combined is None else combine(combined, mapping)
    return combined if combined is not None else {}


def _combine_values(first: object, second: object) -> object:
    kind = value_kind(first)
    if kind is not value_kind(second):
        return first
    if kind is ValueKind.MAPPING:
        return combine(cast("PropertyMap", first), cast("PropertyMap", second))
    if kind is ValueKind.SEQUENCE:
        return union_sequences(cast("list[object]", first), cast("list[object]", second))
    return first


def render_document(serialized: str, body: str) -> str:
    """Wrap serialized properties in delimiters and prepend them to ``body``."""

    if not serialized:
        return f"{DELIMITER}\n{DELIMITER}\n{body}"
    return f"{DELIMITER}\n{serialized}\n{DELIMITER}\n{body}"
