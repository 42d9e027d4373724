"""
bakery_services.records -- Read-side value objects produced by the catalog.

SaleRecord is one line of the append-only sales journal; the register is
always the sum of their prices. InventoryPosition is a per-type view over
a production queue, derived by live scan rather than stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True, slots=True)
class SaleRecord:
    """A good sold at a given price and time."""

    good_id: UUID
    good_type: str
    price: Decimal  # price at purchase time, not the live price
    sold_at: datetime
    sequence: int  # position in the sales journal


@dataclass(frozen=True, slots=True)
class InventoryPosition:
    """
    Snapshot of one good type's production queue.

    ``produced`` counts every good ever baked; a good that was both sold
    and consumed is counted in ``sold`` and in ``consumed``.
    """

    good_type: str
    produced: int
    sold: int
    consumed: int
    remaining: int
    unit_price: Decimal

    @property
    def remaining_value(self) -> Decimal:
        return self.unit_price * self.remaining

    @property
    def is_depleted(self) -> bool:
        return self.remaining == 0
