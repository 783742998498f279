"""Closed set of value kinds found in parsed frontmatter.

Parsed values stay plain Python objects (``str``, ``int``, ``list``, ``dict``...);
``value_kind`` maps each one onto a fixed tag so merge and combine rules can compare
kinds instead of runtime types. This keeps ``True`` and ``1`` apart even though
``bool`` subclasses ``int``, and ``datetime`` apart from ``date``.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import StrEnum
from typing import TypeAlias

PropertyMap: TypeAlias = dict[str, object]


class ValueKind(StrEnum):
    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    DATE = "date"
    DATETIME = "datetime"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    OTHER = "other"


def value_kind(value: object) -> ValueKind:  # noqa: PLR0911
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    # datetime subclasses date
    if isinstance(value, datetime):
        return ValueKind.DATETIME
    if isinstance(value, date):
        return ValueKind.DATE
    if isinstance(value, list):
        return ValueKind.SEQUENCE
    if isinstance(value, dict):
        return ValueKind.MAPPING
    return ValueKind.OTHER


def same_kind(values: list[object]) -> bool:
    """Return True when every value shares the kind of the first one."""

    if not values:
        return True
    first = value_kind(values[0])
    return all(value_kind(value) is first for value in values[1:])


def union_sequences(*sequences: list[object]) -> list[object]:
    """Concatenate sequences keeping only the first occurrence of equal items.

    Items may be unhashable (nested lists or mappings), so membership uses equality.
    """

    merged: list[object] = []
    for sequence in sequences:
        for item in sequence:
            if item not in merged:
                merged.append(item)
    return merged
