from __future__ import annotations

from datetime import date, datetime

import pytest

from fmreconcile.adapters.yaml_codec import YamlMetadataCodec


def test_parse_reads_scalars_and_sequences(codec: YamlMetadataCodec) -> None:
    parsed = codec.parse("title: A\ntags: [a, b]\ncount: 3\ndraft: false\n")

    assert parsed == {"title": "A", "tags": ["a", "b"], "count": 3, "draft": False}


@pytest.mark.parametrize(
    "text",
    [
        "title: [unclosed\n",
        "title: A\n  broken: indentation\n",
        "- a\n- b\n",
        "just a sentence\n",
    ],
)
def test_parse_rejects_invalid_or_non_mapping(codec: YamlMetadataCodec, text: str) -> None:
    assert codec.parse(text) is None


@pytest.mark.parametrize("text", ["", "# only a comment\n"])
def test_parse_empty_block_gives_empty_mapping(codec: YamlMetadataCodec, text: str) -> None:
    assert codec.parse(text) == {}


def test_parse_keeps_first_duplicate_key(codec: YamlMetadataCodec) -> None:
    assert codec.parse("title: A\nauthor: Jane\ntitle: B\n") == {"title": "A", "author": "Jane"}


def test_parse_keeps_first_duplicate_in_nested_mapping(codec: YamlMetadataCodec) -> None:
    parsed = codec.parse("seo:\n  title: A\n  title: B\n")

    assert parsed == {"seo": {"title": "A"}}


def test_parse_stringifies_keys(codec: YamlMetadataCodec) -> None:
    assert codec.parse("1: one\nitems:\n- 2: two\n") == {"1": "one", "items": [{"2": "two"}]}


def test_parse_reads_dates_and_timestamps(codec: YamlMetadataCodec) -> None:
    parsed = codec.parse("date: 2024-01-02\nupdated: 2024-01-02 10:30:00\n")

    assert parsed == {"date": date(2024, 1, 2), "updated": datetime(2024, 1, 2, 10, 30)}


def test_serialize_empty_mapping(codec: YamlMetadataCodec) -> None:
    assert codec.serialize({}) == ""


def test_serialize_keeps_insertion_order(codec: YamlMetadataCodec) -> None:
    assert codec.serialize({"zeta": 1, "alpha": 2}) == "zeta: 1\nalpha: 2"


def test_serialize_uses_block_style(codec: YamlMetadataCodec) -> None:
    assert codec.serialize({"tags": ["a", "b"], "seo": {"title": "X"}}) == (
        "tags:\n- a\n- b\nseo:\n  title: X"
    )


def test_serialize_keeps_unicode_readable(codec: YamlMetadataCodec) -> None:
    assert codec.serialize({"title": "Café ☕"}) == "title: Café ☕"


def test_supported_values_survive_serialization(codec: YamlMetadataCodec) -> None:
    properties: dict[str, object] = {
        "title": "A",
        "version": "1.0",
        "count": 3,
        "ratio": 0.5,
        "draft": False,
        "date": date(2024, 1, 2),
        "updated": datetime(2024, 1, 2, 10, 30),
        "tags": ["x", "y"],
        "seo": {"description": "d", "keywords": ["k"]},
        "summary": None,
    }

    assert codec.parse(codec.serialize(properties)) == properties
