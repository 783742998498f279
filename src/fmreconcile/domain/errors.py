"""Exceptions raised by the reconciliation core."""

from __future__ import annotations


class FrontmatterError(Exception):
    """Base class for reconciliation failures callers are expected to handle."""


class MissingDocumentError(FrontmatterError, ValueError):
    """Raised when ``None`` is passed where a document text is required."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} requires a document, got None")


class TooManySectionsError(FrontmatterError):
    """Raised when a document holds more metadata blocks than the scanner accepts."""

    def __init__(self, *, count: int, limit: int) -> None:
        self.count = count
        self.limit = limit
        super().__init__(
            f"Document contains more than {limit} frontmatter sections (found at least {count}); "
            "this usually indicates a malformed or adversarial document"
        )


class ConflictingCanonicalNameError(FrontmatterError):
    """Raised when one property variant is mapped to two canonical names."""

    def __init__(
        self,
        *,
        variant: str,
        canonical: str,
        category: str,
        existing_canonical: str,
        existing_category: str,
    ) -> None:
        self.variant = variant
        self.canonical = canonical
        self.category = category
        self.existing_canonical = existing_canonical
        self.existing_category = existing_category
        super().__init__(
            f"Property {variant!r} is mapped to {canonical!r} in {category} "
            f"but was already mapped to {existing_canonical!r} in {existing_category}"
        )
