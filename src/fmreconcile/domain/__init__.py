"""Reconciliation core: extraction, combination, merging, naming and ordering.

Pipeline per document:
1) split the leading ``---`` blocks from the body and parse each one
2) fold the parsed mappings left to right (first value wins)
3) merge differently-named properties per ``MergeStrategy``
4) standardize property names
5) order properties by the standard table
6) serialize and reattach the body
"""

from __future__ import annotations

from .canonical_names import CANONICAL_NAMES, CanonicalNameTable
from .errors import (
    ConflictingCanonicalNameError,
    FrontmatterError,
    MissingDocumentError,
    TooManySectionsError,
)
from .merge import PropertyMerger
from .options import MergeStrategy, NamingMode, OrderMode, ReconcileOptions
from .reconciliation import ReconciliationCache, ReconciliationEngine
from .standardize import NameStandardizer
from .values import PropertyMap, ValueKind

__all__ = [
    "CANONICAL_NAMES",
    "CanonicalNameTable",
    "ConflictingCanonicalNameError",
    "FrontmatterError",
    "MergeStrategy",
    "MissingDocumentError",
    "NameStandardizer",
    "NamingMode",
    "OrderMode",
    "PropertyMap",
    "PropertyMerger",
    "ReconcileOptions",
    "ReconciliationCache",
    "ReconciliationEngine",
    "TooManySectionsError",
    "ValueKind",
]
