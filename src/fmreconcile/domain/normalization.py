"""Key normalization and word-overlap scoring used by fuzzy name matching."""

from __future__ import annotations

import re
from typing import Final

KEY_PREFIXES: Final[tuple[str, ...]] = ("page_", "post_", "meta_", "custom_", "user_", "site_")
KEY_SUFFIXES: Final[tuple[str, ...]] = ("_value", "_text", "_data", "_info", "_meta", "_field")

_SEPARATORS = re.compile(r"[-\s]+")
_REPEATED_UNDERSCORES = re.compile(r"_{2,}")
_WORD_SPLIT = re.compile(r"[_\s-]+")


def normalize_key(key: str) -> str:
    """Lower-case ``key``, drop one known prefix and suffix, and collapse separators.

    >>> normalize_key("Page_Author-Name_value")
    'author_name'
    """

    normalized = key.lower()
    for prefix in KEY_PREFIXES:
        if normalized.startswith(prefix):
            normalized = normalized[len(prefix) :]
            break
    for suffix in KEY_SUFFIXES:
        if normalized.endswith(suffix):
            normalized = normalized[: -len(suffix)]
            break
    normalized = _SEPARATORS.sub("_", normalized)
    normalized = _REPEATED_UNDERSCORES.sub("_", normalized)
    return normalized.strip("_")


def contains_either(first: str, second: str) -> bool:
    """Return True when one non-empty normalized form contains the other."""

    if not first or not second:
        return False
    return first in second or second in first


def key_words(normalized: str) -> tuple[str, ...]:
    return tuple(word for word in _WORD_SPLIT.split(normalized) if word)


def word_overlap_score(first: tuple[str, ...], second: tuple[str, ...]) -> int:
    """Score two word lists: 2 per identical pair, 1 per pair where one contains the other."""

    score = 0
    for word in first:
        for other in second:
            if word == other:
                score += 2
            elif word in other or other in word:
                score += 1
    return score
