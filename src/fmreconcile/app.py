"""Public document operations.

Every function accepts an optional ``engine``; without one, a process-wide engine
is created on first use. Tests and embedding applications that need isolated
caches should build their own with ``build_engine``.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from fmreconcile.adapters.yaml_codec import YamlMetadataCodec
from fmreconcile.common.logging import configure_logging
from fmreconcile.config import get_log_level, get_reconcile_options
from fmreconcile.domain.blocks import combine, extract_blocks, render_document
from fmreconcile.domain.blocks import has_metadata as _has_metadata
from fmreconcile.domain.errors import MissingDocumentError
from fmreconcile.domain.reconciliation import ReconciliationEngine
from fmreconcile.domain.standard_order import compare as compare_property_names

if TYPE_CHECKING:
    from fmreconcile.domain.options import MergeStrategy, NamingMode, OrderMode
    from fmreconcile.domain.ports import MetadataCodec
    from fmreconcile.domain.values import PropertyMap

__all__ = [
    "add_metadata",
    "build_engine",
    "compare_property_names",
    "default_engine",
    "extract_all_metadata",
    "extract_body",
    "extract_metadata",
    "has_metadata",
    "reconcile",
    "remove_metadata",
    "replace_metadata",
    "reset_default_engine",
    "serialize_mapping",
]

log = logging.getLogger(__name__)

_default_engine: ReconciliationEngine | None = None


def build_engine(*, codec: MetadataCodec | None = None) -> ReconciliationEngine:
    """Create an engine with fresh caches."""

    return ReconciliationEngine(codec=codec or YamlMetadataCodec())


def default_engine() -> ReconciliationEngine:
    """Return the shared engine; the first call applies ``FMRECONCILE_LOG_LEVEL``."""

    global _default_engine  # noqa: PLW0603
    if _default_engine is None:
        configure_logging(get_log_level())
        _default_engine = build_engine()
    return _default_engine


def reset_default_engine() -> None:
    """Discard the shared engine and its caches."""

    global _default_engine  # noqa: PLW0603
    _default_engine = None


def has_metadata(document: str) -> bool:
    _require_document(document, "has_metadata")
    return _has_metadata(document)


def extract_all_metadata(
    document: str, *, engine: ReconciliationEngine | None = None
) -> list[PropertyMap]:
    """Return every leading block's properties in document order."""

    _require_document(document, "extract_all_metadata")
    return extract_blocks(document, _codec(engine)).mappings


def extract_metadata(
    document: str, *, engine: ReconciliationEngine | None = None
) -> PropertyMap | None:
    """Return the first block's properties, or None when the document has none."""

    _require_document(document, "extract_metadata")
    if not _has_metadata(document):
        return None
    mappings = extract_blocks(document, _codec(engine)).mappings
    return mappings[0] if mappings else None


def extract_body(document: str, *, engine: ReconciliationEngine | None = None) -> str:
    _require_document(document, "extract_body")
    return extract_blocks(document, _codec(engine)).body.strip()


def add_metadata(
    document: str,
    properties: PropertyMap | None,
    *,
    engine: ReconciliationEngine | None = None,
) -> str:
    """Attach ``properties``; existing frontmatter is kept and wins on conflicts."""

    _require_document(document, "add_metadata")
    if not properties:
        return document
    if _has_metadata(document):
        existing = extract_metadata(document, engine=engine) or {}
        return replace_metadata(document, combine(existing, properties), engine=engine)
    codec = _codec(engine)
    return render_document(codec.serialize(properties), f"{document.strip()}\n")


def replace_metadata(
    document: str,
    properties: PropertyMap | None,
    *,
    engine: ReconciliationEngine | None = None,
) -> str:
    """Swap the frontmatter for ``properties``; empty properties remove it."""

    _require_document(document, "replace_metadata")
    if not properties:
        return remove_metadata(document, engine=engine)
    codec = _codec(engine)
    body = extract_blocks(document, codec).body
    return render_document(codec.serialize(properties), f"{body.strip()}\n")


def remove_metadata(document: str, *, engine: ReconciliationEngine | None = None) -> str:
    _require_document(document, "remove_metadata")
    if not _has_metadata(document):
        return document
    body = extract_blocks(document, _codec(engine)).body
    return f"{body.strip()}\n"


def serialize_mapping(
    properties: PropertyMap | None, *, engine: ReconciliationEngine | None = None
) -> str:
    if not properties:
        return ""
    return _codec(engine).serialize(properties)


def reconcile(
    document: str,
    naming: NamingMode | None = None,
    order: OrderMode | None = None,
    merge_strategy: MergeStrategy | None = None,
    *,
    engine: ReconciliationEngine | None = None,
) -> str:
    """Combine, merge, standardize and order a document's frontmatter.

    Options left as None come from ``FMRECONCILE_*`` environment variables, then
    from the defaults (standard naming, sorted order, conservative merging).
    """

    _require_document(document, "reconcile")
    options = get_reconcile_options()
    if naming is not None:
        options = replace(options, naming=naming)
    if order is not None:
        options = replace(options, order=order)
    if merge_strategy is not None:
        options = replace(options, merge_strategy=merge_strategy)
    log.debug("Reconciling document of %s characters with %s", len(document), options)
    return (engine or default_engine()).reconcile(document, options)


def _codec(engine: ReconciliationEngine | None) -> MetadataCodec:
    return (engine or default_engine()).codec


def _require_document(document: str | None, operation: str) -> None:
    if document is None:
        raise MissingDocumentError(operation)
