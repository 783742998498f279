"""PyYAML implementation of the metadata codec port."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, cast

import yaml

if TYPE_CHECKING:
    from collections.abc import Hashable

    from fmreconcile.domain.values import PropertyMap

_MERGE_TAG = "tag:yaml.org,2002:merge"

log = logging.getLogger(__name__)


class FirstKeyWinsLoader(yaml.SafeLoader):
    """Safe loader that keeps the first value when a block repeats a key.

    PyYAML silently keeps the last duplicate; frontmatter semantics are
    first-declared-wins everywhere else, so repeated scalar keys are dropped
    before construction. Merge keys (``<<``) are left to PyYAML.
    """

    def construct_mapping(
        self,
        node: yaml.MappingNode,
        deep: bool = False,  # noqa: FBT001, FBT002
    ) -> dict[Hashable, Any]:
        if isinstance(node, yaml.MappingNode):
            seen: set[tuple[str, str]] = set()
            unique: list[tuple[yaml.Node, yaml.Node]] = []
            for key_node, value_node in node.value:
                if isinstance(key_node, yaml.ScalarNode) and key_node.tag != _MERGE_TAG:
                    identity = (key_node.tag, key_node.value)
                    if identity in seen:
                        continue
                    seen.add(identity)
                unique.append((key_node, value_node))
            node.value = unique
        return super().construct_mapping(node, deep=deep)


@dataclass(frozen=True, slots=True)
class YamlMetadataCodec:
    """Parse and render frontmatter blocks with PyYAML's safe loader and dumper."""

    width: int = 4096

    def parse(self, text: str) -> PropertyMap | None:
        try:
            loaded = yaml.load(text, Loader=FirstKeyWinsLoader)  # noqa: S506
        except yaml.YAMLError as exc:
            log.debug("Rejecting frontmatter block: %s", exc)
            return None
        if loaded is None:
            return {}
        if not isinstance(loaded, dict):
            log.debug("Rejecting frontmatter block: top level is %s", type(loaded).__name__)
            return None
        return _string_keys(loaded)

    def serialize(self, properties: PropertyMap) -> str:
        if not properties:
            return ""
        rendered = yaml.dump(
            properties,
            Dumper=yaml.SafeDumper,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
            width=self.width,
        )
        return rendered.strip()


def _string_keys(mapping: dict[Any, Any]) -> PropertyMap:
    return {str(key): _with_string_keys(value) for key, value in mapping.items()}


def _with_string_keys(value: object) -> object:
    if isinstance(value, dict):
        return _string_keys(cast("dict[Any, Any]", value))
    if isinstance(value, list):
        items = cast("list[object]", value)
        return [_with_string_keys(item) for item in items]
    return value
