"""Known spellings of common frontmatter properties and their canonical names.

Each category lists the variants that denote one concept. The combined table is
validated when the module is imported: a variant that two categories map to
different canonical names raises ``ConflictingCanonicalNameError``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from .errors import ConflictingCanonicalNameError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


@dataclass(frozen=True, slots=True)
class CanonicalCategory:
    name: str
    canonical: str
    variants: tuple[str, ...]


DEFAULT_CATEGORIES: Final[tuple[CanonicalCategory, ...]] = (
    CanonicalCategory(
        name="title",
        canonical="title",
        variants=(
            "title",
            "name",
            "heading",
            "subject",
            "post-title",
            "pagetitle",
            "page-title",
            "headline",
        ),
    ),
    CanonicalCategory(
        name="author",
        canonical="author",
        variants=(
            "author",
            "authors",
            "creator",
            "contributor",
            "contributors",
            "by",
            "written-by",
            "writer",
        ),
    ),
    CanonicalCategory(
        name="date",
        canonical="date",
        variants=(
            "date",
            "created",
            "creation_date",
            "creation-date",
            "creationdate",
            "published",
            "publish_date",
            "publish-date",
            "publishdate",
            "post-date",
            "posting-date",
            "pubdate",
        ),
    ),
    CanonicalCategory(
        name="tags",
        canonical="tags",
        variants=("tags", "tag", "keywords", "keyword", "topics", "topic"),
    ),
    CanonicalCategory(
        name="categories",
        canonical="categories",
        variants=("categories", "category", "section", "sections", "group", "groups"),
    ),
    CanonicalCategory(
        name="description",
        canonical="description",
        variants=(
            "description",
            "summary",
            "abstract",
            "excerpt",
            "desc",
            "overview",
            "snippet",
        ),
    ),
    CanonicalCategory(
        name="modified",
        canonical="modified",
        variants=(
            "modified",
            "last_modified",
            "last-modified",
            "lastmodified",
            "updated",
            "update_date",
            "update-date",
            "updatedate",
            "revision-date",
            "last-update",
        ),
    ),
    CanonicalCategory(
        name="layout",
        canonical="layout",
        variants=("layout", "template", "page-layout", "type", "page-type"),
    ),
    CanonicalCategory(
        name="permalink",
        canonical="permalink",
        variants=("permalink", "url", "link", "slug", "path"),
    ),
)


@dataclass(frozen=True, slots=True)
class CanonicalNameTable:
    """Case-insensitive lookup from a property variant to its canonical name."""

    _canonical_by_variant: Mapping[str, str] = field(repr=False)
    _category_by_variant: Mapping[str, str] = field(repr=False)

    @classmethod
    def from_categories(cls, categories: Iterable[CanonicalCategory]) -> CanonicalNameTable:
        canonical_by_variant: dict[str, str] = {}
        category_by_variant: dict[str, str] = {}
        for category in categories:
            for variant in category.variants:
                folded = variant.casefold()
                existing = canonical_by_variant.get(folded)
                if existing is not None and existing != category.canonical:
                    raise ConflictingCanonicalNameError(
                        variant=variant,
                        canonical=category.canonical,
                        category=category.name,
                        existing_canonical=existing,
                        existing_category=category_by_variant[folded],
                    )
                canonical_by_variant[folded] = category.canonical
                category_by_variant[folded] = category.name
        return cls(
            _canonical_by_variant=MappingProxyType(canonical_by_variant),
            _category_by_variant=MappingProxyType(category_by_variant),
        )

    def canonical_for(self, key: str) -> str | None:
        return self._canonical_by_variant.get(key.casefold())

    def category_of(self, key: str) -> str | None:
        return self._category_by_variant.get(key.casefold())

    @property
    def canonical_names(self) -> frozenset[str]:
        return frozenset(self._canonical_by_variant.values())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.casefold() in self._canonical_by_variant

    def __len__(self) -> int:
        return len(self._canonical_by_variant)


CANONICAL_NAMES: Final[CanonicalNameTable] = CanonicalNameTable.from_categories(
    DEFAULT_CATEGORIES
)
