"""Merge properties that name the same concept under different keys.

Every key is resolved to a grouping target according to the merge strategy, keys
with the same target form a group, and each group collapses to one value:

- mixed value kinds: nothing merges, members keep their original keys
- all sequences: union of elements under the group key
- otherwise: the first member's value under the group key
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias, cast

from fmreconcile.common.cache import MemoCache

from .canonical_names import CANONICAL_NAMES, CanonicalNameTable
from .normalization import contains_either, key_words, normalize_key, word_overlap_score
from .options import MergeStrategy
from .values import PropertyMap, ValueKind, same_kind, union_sequences, value_kind

if TYPE_CHECKING:
    from collections.abc import Sequence

ResolutionKey: TypeAlias = tuple[MergeStrategy, str]

log = logging.getLogger(__name__)


@dataclass(slots=True)
class PropertyMerger:
    """Strategy-driven property merging with a memo of resolved grouping targets.

    The memo is keyed by strategy and raw key only. Aggressive and Maximum
    resolution look at the sibling keys of the current call, so the first
    resolution a key receives under a strategy is reused for later calls even
    when their sibling keys differ. Pass a fresh ``MemoCache`` per call for
    resolution scoped to one mapping.
    """

    table: CanonicalNameTable = CANONICAL_NAMES
    cache: MemoCache[ResolutionKey, str] = field(default_factory=MemoCache[ResolutionKey, str])

    def merge(self, properties: PropertyMap, strategy: MergeStrategy) -> PropertyMap:
        if strategy is MergeStrategy.NONE:
            return dict(properties)

        keys = list(properties)
        targets = {
            key: self.cache.get_or_compute(
                (strategy, key), lambda key=key: self.resolve(key, strategy, keys)
            )
            for key in keys
        }

        groups: dict[str, list[str]] = {}
        for key in keys:
            groups.setdefault(_group_name(key, targets, keys), []).append(key)

        merged: PropertyMap = {}
        for group_key, members in groups.items():
            values = [properties[member] for member in members]
            if not same_kind(values):
                log.debug("Not merging %s: mixed value kinds", members)
                for member in members:
                    merged[member] = properties[member]
                continue
            if len(members) > 1:
                log.debug("Merging %s into %r", members, group_key)
            if value_kind(values[0]) is ValueKind.SEQUENCE:
                merged[group_key] = union_sequences(*cast("list[list[object]]", values))
            else:
                merged[group_key] = values[0]
        return merged

    def resolve(self, key: str, strategy: MergeStrategy, keys: Sequence[str]) -> str:
        """Return the grouping target for ``key`` among ``keys`` without memoization."""

        match strategy:
            case MergeStrategy.NONE:
                return key
            case MergeStrategy.CONSERVATIVE:
                return self.table.canonical_for(key) or key
            case MergeStrategy.AGGRESSIVE:
                return self._resolve_by_pattern(key, keys)
            case MergeStrategy.MAXIMUM:
                return self._resolve_by_similarity(key, keys)

    def _target_of(self, key: str) -> str:
        return self.table.canonical_for(key) or key

    def _category_canonical(self, key: str, normalized: str) -> str | None:
        return self.table.canonical_for(key) or self.table.canonical_for(normalized)

    def _resolve_by_pattern(self, key: str, keys: Sequence[str]) -> str:
        canonical = self.table.canonical_for(key)
        if canonical is not None:
            return canonical

        normalized = normalize_key(key)
        if not normalized:
            return key
        siblings = [(other, normalize_key(other)) for other in keys if other != key]
        # e.g. page_title joins title only when another key of the title category is present
        canonical = self.table.canonical_for(normalized)
        if canonical is not None and any(
            self._category_canonical(other, other_normalized) == canonical
            for other, other_normalized in siblings
        ):
            return canonical

        for other, other_normalized in siblings:
            if other_normalized == normalized:
                return self._target_of(other)
        for other, other_normalized in siblings:
            if contains_either(normalized, other_normalized):
                return self._target_of(other)
        return key

    def _resolve_by_similarity(self, key: str, keys: Sequence[str]) -> str:
        basic = self._resolve_by_pattern(key, keys)
        if basic != key:
            return basic

        words = key_words(normalize_key(key))
        best: str | None = None
        best_score = 0
        for other in keys:
            if other == key:
                continue
            score = word_overlap_score(words, key_words(normalize_key(other)))
            if score > best_score:
                best, best_score = other, score
        if best is None:
            return key
        return self._target_of(best)


def _group_name(key: str, targets: dict[str, str], order: list[str]) -> str:
    """Follow targets from ``key`` to a stable group name.

    A chain ends at a self-mapped key or at a name that is not a key of this
    mapping (a canonical name). Heuristic targets can form a cycle; the cycle is
    named after its earliest key so every member lands in the same group.
    """

    visited: list[str] = []
    current = key
    while current in targets and targets[current] != current and current not in visited:
        visited.append(current)
        current = targets[current]
    if current in visited:
        cycle = visited[visited.index(current) :]
        return min(cycle, key=order.index)
    return current
