from __future__ import annotations

from datetime import UTC, date, datetime

import pytest

from fmreconcile.domain.values import ValueKind, same_kind, union_sequences, value_kind


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        (None, ValueKind.NULL),
        (True, ValueKind.BOOLEAN),
        (1, ValueKind.INTEGER),
        (1.5, ValueKind.FLOAT),
        ("a", ValueKind.STRING),
        (date(2024, 1, 2), ValueKind.DATE),
        (datetime(2024, 1, 2, 3, 4, tzinfo=UTC), ValueKind.DATETIME),
        (["a"], ValueKind.SEQUENCE),
        ({"a": 1}, ValueKind.MAPPING),
        ({"a"}, ValueKind.OTHER),
    ],
)
def test_value_kind(value: object, kind: ValueKind) -> None:
    assert value_kind(value) is kind


def test_same_kind() -> None:
    assert same_kind([])
    assert same_kind(["a", "b"])
    assert not same_kind([True, 1])
    assert not same_kind([date(2024, 1, 1), datetime(2024, 1, 1, tzinfo=UTC)])


def test_union_sequences_handles_unhashable_items() -> None:
    merged = union_sequences([{"a": 1}, ["x"]], [["x"], {"a": 1}, {"b": 2}])

    assert merged == [{"a": 1}, ["x"], {"b": 2}]
