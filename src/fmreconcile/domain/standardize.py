"""Rename properties to their standard spelling."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from fmreconcile.common.cache import MemoCache

from .canonical_names import CANONICAL_NAMES, CanonicalNameTable
from .normalization import contains_either, normalize_key
from .standard_order import NORMALIZED_STANDARD_NAMES, is_standard_name
from .values import PropertyMap

log = logging.getLogger(__name__)


@dataclass(slots=True)
class NameStandardizer:
    """Map arbitrary keys onto standard names, remembering every decision.

    Unmatched keys are remembered as mapping to themselves so later lookups
    short-circuit. When two keys standardize to the same name, the value seen
    last wins; merge first when precedence matters.
    """

    table: CanonicalNameTable = CANONICAL_NAMES
    cache: MemoCache[str, str] = field(default_factory=MemoCache[str, str])

    def standardize(self, properties: PropertyMap) -> PropertyMap:
        standardized: PropertyMap = {}
        for key, value in properties.items():
            if is_standard_name(key):
                standardized[key.lower()] = value
                continue
            name = self.cache.get_or_compute(key, lambda key=key: self.standard_name(key))
            if name != key:
                log.debug("Standardized %r as %r", key, name)
            standardized[name] = value
        return standardized

    def standard_name(self, key: str) -> str:
        """Resolve ``key`` without consulting the memo."""

        canonical = self.table.canonical_for(key)
        if canonical is not None:
            return canonical

        normalized = normalize_key(key)
        if not normalized:
            return key
        for name, normalized_name in NORMALIZED_STANDARD_NAMES:
            if normalized_name == normalized:
                return name
        for name, normalized_name in NORMALIZED_STANDARD_NAMES:
            if contains_either(normalized, normalized_name):
                return name
        return key
