"""Conventional ordering of frontmatter properties."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, TypeVar

from .normalization import normalize_key

if TYPE_CHECKING:
    from collections.abc import Mapping

V = TypeVar("V")

STANDARD_PROPERTY_NAMES: Final[tuple[str, ...]] = (
    # core
    "title",
    "subtitle",
    "description",
    "summary",
    "abstract",
    # dates
    "date",
    "created",
    "updated",
    "modified",
    "lastmod",
    "review_date",
    "expiry_date",
    "start_date",
    "end_date",
    "due_date",
    # people
    "author",
    "authors",
    "reviewers",
    "approvers",
    "contributors",
    "editor",
    "editors",
    "owner",
    "maintainer",
    # categorization
    "categories",
    "category",
    "tags",
    "topics",
    "subject",
    "classification",
    "department",
    "team",
    # workflow
    "status",
    "workflow_state",
    "stage",
    "review_status",
    "approval_status",
    "version",
    "revision",
    "maturity",
    "stability",
    "confidence",
    "validity",
    "priority",
    "importance",
    "completeness",
    "progress",
    # publishing
    "draft",
    "published",
    "publish",
    "hidden",
    "unlisted",
    "featured",
    "sticky",
    "archived",
    "outdated",
    "obsolete",
    "searchable",
    "indexable",
    # obsidian
    "aliases",
    "cssclass",
    "type",
    "project",
    "area",
    "resource",
    "moc",
    "obsidian",
    "links",
    "backlinks",
    # academic
    "doi",
    "citation",
    "references",
    "bibliography",
    "journal",
    "volume",
    "issue",
    "conference",
    "institution",
    "grant",
    "funding",
    # layout
    "layout",
    "template",
    "format",
    "style",
    # urls
    "permalink",
    "slug",
    "url",
    # display
    "comments",
    "toc",
    "table_of_contents",
    "image",
    "images",
    "thumbnail",
    "banner",
    "cover",
    "icon",
    "logo",
    "color",
    "theme",
    # media
    "attachments",
    "audio",
    "video",
    "gallery",
    "downloads",
    # seo
    "keywords",
    "description_seo",
    "og_title",
    "og_description",
    "og_image",
    "twitter_card",
    "twitter_title",
    "twitter_description",
    "twitter_image",
    # localization
    "lang",
    "language",
    "locale",
    "region",
    "translations",
    # navigation
    "weight",
    "menu",
    "sidebar",
    "nav_order",
    "breadcrumb",
    "parent",
    "children",
    "next",
    "prev",
    "related",
    # customization
    "css",
    "js",
    "classes",
    "attributes",
    "styles",
    "scripts",
    # linking
    "canonical",
    "redirects",
    "redirectFrom",
    "redirectTo",
    # analytics
    "analytics",
    "tracking",
    "metrics",
    # rights
    "license",
    "copyright",
    "rights",
    "permissions",
)

_INDEX_BY_NAME: Final[dict[str, int]] = {
    name.lower(): index for index, name in enumerate(STANDARD_PROPERTY_NAMES)
}
NORMALIZED_STANDARD_NAMES: Final[tuple[tuple[str, str], ...]] = tuple(
    (name.lower(), normalize_key(name)) for name in STANDARD_PROPERTY_NAMES
)


def standard_index(name: str) -> int | None:
    """Return the position of ``name`` (case-insensitive) in the standard order."""

    return _INDEX_BY_NAME.get(name.lower())


def is_standard_name(name: str) -> bool:
    return name.lower() in _INDEX_BY_NAME


def compare(first: str, second: str) -> int:
    """Three-way comparison of two property names by standard order.

    Listed names sort by table position and ahead of unlisted names; two unlisted
    names fall back to ordinal comparison.
    """

    if first == second:
        return 0
    first_index = standard_index(first)
    second_index = standard_index(second)
    if first_index is None and second_index is None:
        return (first > second) - (first < second)
    if first_index is None:
        return 1
    if second_index is None:
        return -1
    return (first_index > second_index) - (first_index < second_index)


def sort_properties(properties: Mapping[str, V]) -> dict[str, V]:
    """Return a copy with listed keys first in table order, then the rest as given."""

    listed = sorted(
        (index, position, key)
        for position, key in enumerate(properties)
        if (index := standard_index(key)) is not None
    )
    ordered: dict[str, V] = {key: properties[key] for _index, _position, key in listed}
    for key, value in properties.items():
        if key not in ordered:
            ordered[key] = value
    return ordered
