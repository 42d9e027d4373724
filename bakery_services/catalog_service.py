"""
bakery_services.catalog_service -- The bakery: prices, production and sales.

Responsibility:
    Own the price table, the per-type production queues and the cash
    register. Produce goods, answer stock and value questions, and sell
    the oldest available goods first.

Architecture position:
    Services -- stateful orchestration over the kernel domain.
    Composes Good/GoodState, price coercion and an injected Clock.

Invariants enforced:
    - Every good ever produced stays in exactly one queue, forever.
      Queues are append-only; "remaining" is a filter over them.
    - Available means neither sold nor consumed.
    - Retrieval and purchase share one oldest-available selection, so a
      retrieved good and a purchased good can be the same object.
    - Bake times are non-decreasing; ties are ordered by sequence.
    - Purchases are all-or-nothing: validation happens before any good
      is marked sold or the register is credited.
    - register == sum(sale.price for sale in sales()).

Failure modes:
    - InvalidArgumentError from set_price for non-numeric, non-finite or
      negative amounts, and from purchase for bad quantities.
    - UnknownGoodError from purchase for never-produced types.
    - InsufficientStockError from purchase when stock is short.

Usage:
    from bakery_services.catalog_service import Catalog

    bakery = Catalog("Corner Bakery")
    bakery.set_price("cake", 20)
    cake = bakery.produce("cake")
    sold = bakery.purchase("cake")
    assert sold is cake
    assert bakery.inspect_register() == Decimal("20.00")
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from datetime import datetime
from decimal import Decimal
from itertools import islice
from typing import Any

from bakery_config.schema import DEFAULT_BAKERY_NAME, BakeryConfig
from bakery_kernel.domain.clock import Clock, SystemClock
from bakery_kernel.domain.good import Good
from bakery_kernel.domain.values import ZERO_PRICE, to_price, to_quantity
from bakery_kernel.exceptions import (
    InsufficientStockError,
    InvalidArgumentError,
    UnknownGoodError,
)
from bakery_kernel.logging_config import LogContext, get_logger
from bakery_services.records import InventoryPosition, SaleRecord

logger = get_logger("services.catalog")

# Distinguishes purchase("cake") from purchase("cake", 1).
_OMITTED: Any = object()


class Catalog:
    """
    A single-vendor bakery.

    Contract:
        Receives its Clock via constructor injection (SystemClock if none).
        All state is guarded by one re-entrant lock per catalog.
        Prices, values and the register are ``Decimal``, so compare them
        with ``Decimal("20.15")``; a float literal such as ``20.15`` is not equal.
        Operations that log bind ``catalog_name`` and ``good_type`` in LogContext.
    Guarantees:
        - ``retrieve_oldest`` never mutates state.
        - ``purchase*`` sells the oldest available goods, in order.
        - Read-only lookups return neutral defaults for unknown types.
    Non-goals:
        - No persistence and no cross-catalog transfers.
    """

    def __init__(self, name: str = DEFAULT_BAKERY_NAME, clock: Clock | None = None):
        self._name = name
        self._clock = clock or SystemClock()
        self._lock = threading.RLock()
        self._prices: dict[str, Decimal] = {}
        self._queues: dict[str, list[Good]] = {}
        self._register: Decimal = ZERO_PRICE
        self._sales: list[SaleRecord] = []
        self._sequence = 0
        self._last_baked_at: datetime | None = None

    @classmethod
    def from_config(cls, config: BakeryConfig, clock: Clock | None = None) -> Catalog:
        """Build a catalog with the configured name and opening prices."""
        catalog = cls(config.name, clock=clock)
        for price in config.prices:
            catalog.set_price(price.good_type, price.amount)
        return catalog

    @property
    def name(self) -> str:
        return self._name

    # ------------------------------------------------------------------
    # Pricing
    # ------------------------------------------------------------------

    def set_price(self, good_type: str, amount: object) -> Decimal:
        """
        Set the price of a good type, rounded half-up to cents.

        Takes effect immediately for every good of the type, including
        goods already produced, sold or consumed.

        Returns:
            The stored (rounded) price.

        Raises:
            InvalidArgumentError: if ``amount`` is not a finite,
                non-negative number.
        """
        with LogContext.bind(catalog_name=self._name, good_type=good_type):
            try:
                price = to_price(amount)
            except InvalidArgumentError:
                logger.warning("price_rejected", extra={"amount": repr(amount)})
                raise

            with self._lock:
                previous = self._prices.get(good_type)
                self._prices[good_type] = price

            logger.info("price_set", extra={
                "price": price,
                "previous_price": previous,
            })
            return price

    price = set_price

    def ask_price(self, good_type: str) -> Decimal:
        """Current price of a good type; 0.00 if never priced."""
        with self._lock:
            return self._prices.get(good_type, ZERO_PRICE)

    # ------------------------------------------------------------------
    # Production
    # ------------------------------------------------------------------

    def produce(self, good_type: str) -> Good:
        """Bake one good and append it to its type's queue."""
        with LogContext.bind(catalog_name=self._name, good_type=good_type), self._lock:
            baked_at = self._clock.now()
            # A clock that steps backwards must not reorder the queues.
            if self._last_baked_at is not None and baked_at < self._last_baked_at:
                baked_at = self._last_baked_at
            self._last_baked_at = baked_at
            self._sequence += 1

            good = Good(
                good_type=good_type,
                created_at=baked_at,
                sequence=self._sequence,
                price_source=self.ask_price,
            )
            self._queues.setdefault(good_type, []).append(good)

            logger.debug("good_produced", extra={
                "good_id": str(good.good_id),
                "sequence": good.sequence,
                "baked_at": baked_at,
            })
            return good

    bake = produce

    # ------------------------------------------------------------------
    # Stock queries
    # ------------------------------------------------------------------

    def known_types(self) -> tuple[str, ...]:
        """Types with production history, in first-production order."""
        with self._lock:
            return tuple(self._queues)

    def _available(self, good_type: str) -> Iterator[Good]:
        # Queues are append-only and already in bake order.
        return (good for good in self._queues.get(good_type, ()) if good.is_available)

    def quantity_remaining(self, good_type: str | None = None) -> int:
        """Available goods of one type, or of all types when none is given."""
        with self._lock:
            if good_type is None:
                return sum(self.quantity_remaining(t) for t in self._queues)
            return sum(1 for _ in self._available(good_type))

    def retrieve_oldest(self, good_type: str) -> Good | None:
        """
        Peek at the oldest available good of a type.

        Does not mark anything; calling twice with no change in between
        returns the same good. Returns None if nothing is available.
        """
        with self._lock:
            return next(self._available(good_type), None)

    retrieve = retrieve_oldest

    def inventory_value(self, good_type: str | None = None) -> Decimal:
        """Current price times remaining quantity, per type or in total."""
        with self._lock:
            if good_type is None:
                return sum(
                    (self.inventory_value(t) for t in self._queues),
                    ZERO_PRICE,
                )
            return self.ask_price(good_type) * self.quantity_remaining(good_type)

    def inventory_position(self, good_type: str) -> InventoryPosition:
        """Produced/sold/consumed/remaining counts for one type."""
        with self._lock:
            queue = self._queues.get(good_type, [])
            return InventoryPosition(
                good_type=good_type,
                produced=len(queue),
                sold=sum(1 for good in queue if good.sold),
                consumed=sum(1 for good in queue if good.consumed),
                remaining=sum(1 for good in queue if good.is_available),
                unit_price=self.ask_price(good_type),
            )

    def inventory_report(self) -> tuple[InventoryPosition, ...]:
        """One position per known type, in first-production order."""
        with self._lock:
            return tuple(self.inventory_position(t) for t in self._queues)

    # ------------------------------------------------------------------
    # Sales
    # ------------------------------------------------------------------

    def purchase(self, good_type: str, quantity: object = _OMITTED) -> Good | list[Good]:
        """
        Sell the oldest available goods of a type.

        Returns a single Good when ``quantity`` is omitted, and a list
        when it is given, even ``purchase("cake", 1)``.
        """
        if quantity is _OMITTED:
            return self.purchase_one(good_type)
        return self.purchase_many(good_type, quantity)

    def purchase_one(self, good_type: str) -> Good:
        """Sell the single oldest available good of a type."""
        return self._sell(good_type, 1)[0]

    def purchase_many(self, good_type: str, quantity: object) -> list[Good]:
        """Sell ``quantity`` goods of a type, oldest first."""
        return self._sell(good_type, quantity)

    def _sell(self, good_type: str, quantity: object) -> list[Good]:
        with LogContext.bind(catalog_name=self._name, good_type=good_type), self._lock:
            if not self._queues.get(good_type):
                logger.warning("purchase_rejected", extra={
                    "reason": UnknownGoodError.code,
                })
                raise UnknownGoodError(good_type)

            try:
                count = to_quantity(quantity)
            except InvalidArgumentError:
                logger.warning("purchase_rejected", extra={
                    "reason": InvalidArgumentError.code,
                    "quantity": repr(quantity),
                })
                raise

            sold_at = self._clock.now()
            if count > self.quantity_remaining(good_type):
                raise self._insufficient(good_type, count)

            goods = list(islice(self._available(good_type), count))
            # Goods can still be eaten between selection and marking.
            if not Good.mark_sold_together(goods):
                raise self._insufficient(good_type, count)

            total = ZERO_PRICE
            for good in goods:
                price = good.price
                total += price
                self._sales.append(SaleRecord(
                    good_id=good.good_id,
                    good_type=good_type,
                    price=price,
                    sold_at=sold_at,
                    sequence=len(self._sales) + 1,
                ))
            self._register += total

            logger.info("goods_purchased", extra={
                "quantity": count,
                "total": total,
                "register": self._register,
                "remaining": self.quantity_remaining(good_type),
            })
            return goods

    def _insufficient(self, good_type: str, requested: int) -> InsufficientStockError:
        available = self.quantity_remaining(good_type)
        logger.warning("purchase_rejected", extra={
            "reason": InsufficientStockError.code,
            "requested": requested,
            "available": available,
        })
        return InsufficientStockError(good_type, requested, available)

    def inspect_register(self) -> Decimal:
        """Total revenue from every sale so far."""
        with self._lock:
            return self._register

    inspect_cash_register = inspect_register

    def sales(self) -> tuple[SaleRecord, ...]:
        """The sales journal, oldest sale first."""
        with self._lock:
            return tuple(self._sales)

    def __repr__(self) -> str:
        return f"Catalog({self._name!r})"


Bakery = Catalog
