"""Option enums controlling how a document is reconciled."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum


class NamingMode(StrEnum):
    AS_IS = "as_is"
    STANDARD = "standard"


class OrderMode(StrEnum):
    AS_IS = "as_is"
    SORTED = "sorted"


class MergeStrategy(IntEnum):
    """Merge tiers, ordered by how eagerly differently-named keys are unified."""

    NONE = 0
    CONSERVATIVE = 1
    AGGRESSIVE = 2
    MAXIMUM = 3


_NAMING_BITS = {mode: position for position, mode in enumerate(NamingMode)}
_ORDER_BITS = {mode: position for position, mode in enumerate(OrderMode)}


@dataclass(frozen=True, slots=True)
class ReconcileOptions:
    """Naming, ordering and merge settings for one reconciliation call."""

    naming: NamingMode = NamingMode.STANDARD
    order: OrderMode = OrderMode.SORTED
    merge_strategy: MergeStrategy = MergeStrategy.CONSERVATIVE

    def packed(self) -> int:
        """Pack the options into one small integer for cache keys."""

        return (
            _NAMING_BITS[self.naming]
            | (_ORDER_BITS[self.order] << 8)
            | (int(self.merge_strategy) << 16)
        )
