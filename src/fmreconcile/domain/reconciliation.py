"""End-to-end reconciliation with a result memo keyed by content and options."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import xxhash

from fmreconcile.common.cache import MemoCache

from .blocks import combine_all, extract_blocks, render_document
from .errors import MissingDocumentError
from .merge import PropertyMerger
from .options import MergeStrategy, NamingMode, OrderMode, ReconcileOptions
from .standard_order import sort_properties
from .standardize import NameStandardizer

if TYPE_CHECKING:
    from .ports import MetadataCodec

log = logging.getLogger(__name__)


def content_hash(document: str) -> int:
    """Fast non-cryptographic 32-bit hash of the document text."""

    return xxhash.xxh32_intdigest(document.encode("utf-8"))


def cache_key(document: str, options: ReconcileOptions) -> int:
    combined = content_hash(document).to_bytes(4, "little") + options.packed().to_bytes(
        4, "little"
    )
    return xxhash.xxh32_intdigest(combined)


@dataclass(slots=True)
class ReconciliationCache:
    """Reconciled documents by 32-bit (content, options) key.

    Collisions are accepted: this is a local memo, not a security boundary.
    """

    entries: MemoCache[int, str] = field(default_factory=MemoCache[int, str])

    def lookup(self, document: str, options: ReconcileOptions) -> str | None:
        return self.entries.get(cache_key(document, options))

    def store(self, document: str, options: ReconcileOptions, result: str) -> str:
        return self.entries.store(cache_key(document, options), result)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(slots=True)
class ReconciliationEngine:
    """Extract, combine, merge, standardize, order and serialize frontmatter.

    Every cache lives on an injected stage object, so independent engines never
    share state.
    """

    codec: MetadataCodec
    merger: PropertyMerger = field(default_factory=PropertyMerger)
    standardizer: NameStandardizer = field(default_factory=NameStandardizer)
    results: ReconciliationCache = field(default_factory=ReconciliationCache)

    def reconcile(self, document: str, options: ReconcileOptions | None = None) -> str:
        if document is None:
            raise MissingDocumentError("reconcile")
        effective = options or ReconcileOptions()

        cached = self.results.lookup(document, effective)
        if cached is not None:
            return cached

        extraction = extract_blocks(document, self.codec)
        if not extraction.mappings:
            return self.results.store(document, effective, document)

        properties = combine_all(extraction.mappings)
        if effective.merge_strategy is not MergeStrategy.NONE:
            properties = self.merger.merge(properties, effective.merge_strategy)
        if effective.naming is NamingMode.STANDARD:
            properties = self.standardizer.standardize(properties)
        if effective.order is OrderMode.SORTED:
            properties = sort_properties(properties)

        result = render_document(self.codec.serialize(properties), extraction.body)
        log.debug(
            "Reconciled %s block(s) into %s properties (naming=%s, order=%s, merge=%s)",
            len(extraction.mappings),
            len(properties),
            effective.naming,
            effective.order,
            effective.merge_strategy.name.lower(),
        )
        return self.results.store(document, effective, result)
