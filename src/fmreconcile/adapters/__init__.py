"""Adapters binding the reconciliation core to third-party libraries."""

from __future__ import annotations

from .yaml_codec import FirstKeyWinsLoader, YamlMetadataCodec

__all__ = ["FirstKeyWinsLoader", "YamlMetadataCodec"]
