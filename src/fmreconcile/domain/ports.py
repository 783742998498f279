"""Ports the reconciliation core expects adapters to provide."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .values import PropertyMap


class MetadataCodec(Protocol):
    """Convert metadata block text to a property mapping and back."""

    def parse(self, text: str) -> PropertyMap | None:
        """Return the mapping held by ``text``, or None if it is not a valid mapping."""
        ...

    def serialize(self, properties: PropertyMap) -> str:
        """Render ``properties`` as block text without surrounding delimiters."""
        ...
