"""
Bakery configuration schema.

The human-authored source of a catalog's settings. YAML documents are
parsed into these types by the loader; the catalog service consumes them
through ``Catalog.from_config``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

DEFAULT_BAKERY_NAME = "Eliots Bakery"


@dataclass(frozen=True)
class PriceDef:
    """Opening price for one good type."""

    good_type: str
    amount: Decimal


@dataclass(frozen=True)
class BakeryConfig:
    """Settings for a single catalog."""

    name: str = DEFAULT_BAKERY_NAME
    prices: tuple[PriceDef, ...] = field(default_factory=tuple)

    def price_for(self, good_type: str) -> Decimal | None:
        for price in self.prices:
            if price.good_type == good_type:
                return price.amount
        return None
