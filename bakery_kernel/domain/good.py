"""
Good -- One produced, trackable unit of a given type.

Responsibility:
    Carries the immutable identity of a baked good (type, bake time,
    sequence) and its lifecycle state. The price is never stored: it is
    read through a price source injected by the owning catalog, so a price
    change is visible on every good of that type, sold or not.

Architecture position:
    Kernel > Domain. A Good holds a non-owning callable back into its
    catalog's price table; it never imports or calls the catalog itself.

Invariants enforced:
    - ``sold`` and ``consumed`` are monotonic: False -> True, never reset.
    - ``consume()`` is an atomic test-and-set: exactly one caller wins.
    - ``good_type``, ``created_at`` and ``sequence`` never change.

Failure modes:
    - GoodStateError from ``mark_sold`` when the good is not available.
    - ``mark_sold_together`` returns False, changing nothing, when any
      good in the batch is no longer available.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Sequence
from contextlib import ExitStack
from datetime import datetime
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4

from bakery_kernel.exceptions import GoodStateError
from bakery_kernel.logging_config import get_logger

logger = get_logger("domain.good")

PriceSource = Callable[[str], Decimal]


class GoodState(str, Enum):
    """Two-bit lifecycle state of a good."""

    AVAILABLE = "available"
    SOLD = "sold"
    CONSUMED = "consumed"
    SOLD_AND_CONSUMED = "sold_and_consumed"

    @property
    def sold(self) -> bool:
        return self in (GoodState.SOLD, GoodState.SOLD_AND_CONSUMED)

    @property
    def consumed(self) -> bool:
        return self in (GoodState.CONSUMED, GoodState.SOLD_AND_CONSUMED)

    @property
    def is_available(self) -> bool:
        return self is GoodState.AVAILABLE

    def after_sale(self) -> GoodState | None:
        """State after a sale, or None if a sale is not allowed."""
        if self is GoodState.AVAILABLE:
            return GoodState.SOLD
        return None

    def after_consumption(self) -> GoodState | None:
        """State after consumption, or None if already consumed."""
        if self is GoodState.AVAILABLE:
            return GoodState.CONSUMED
        if self is GoodState.SOLD:
            return GoodState.SOLD_AND_CONSUMED
        return None


class Good:
    """
    A single baked good.

    Contract:
        Created only by a catalog, which supplies the bake time, the
        production sequence number and its own price lookup.

    Guarantees:
        - ``price`` always reflects the catalog's current price for the type.
        - Only the first ``consume()`` call returns True.
    """

    __slots__ = (
        "_good_id",
        "_good_type",
        "_created_at",
        "_sequence",
        "_price_source",
        "_state",
        "_lock",
    )

    def __init__(
        self,
        good_type: str,
        created_at: datetime,
        sequence: int,
        price_source: PriceSource,
        good_id: UUID | None = None,
    ):
        self._good_id = good_id or uuid4()
        self._good_type = good_type
        self._created_at = created_at
        self._sequence = sequence
        self._price_source = price_source
        self._state = GoodState.AVAILABLE
        self._lock = threading.Lock()

    @property
    def good_id(self) -> UUID:
        return self._good_id

    @property
    def good_type(self) -> str:
        return self._good_type

    @property
    def type(self) -> str:
        """Alias of ``good_type``."""
        return self._good_type

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def sequence(self) -> int:
        """Production order within the owning catalog; breaks bake-time ties."""
        return self._sequence

    @property
    def state(self) -> GoodState:
        return self._state

    @property
    def sold(self) -> bool:
        return self._state.sold

    @property
    def consumed(self) -> bool:
        return self._state.consumed

    @property
    def is_available(self) -> bool:
        return self._state.is_available

    @property
    def price(self) -> Decimal:
        """Current catalog price for this good's type."""
        return self._price_source(self._good_type)

    def baked_on(self) -> datetime:
        """When this good was produced."""
        return self._created_at

    def consume(self) -> bool:
        """
        Eat the good.

        Returns:
            True for the first caller, False for every later call.
        """
        with self._lock:
            next_state = self._state.after_consumption()
            if next_state is None:
                logger.info("good_consume_rejected", extra={
                    "good_id": str(self._good_id),
                    "good_type": self._good_type,
                    "state": self._state.value,
                })
                return False
            self._state = next_state

        logger.info("good_consumed", extra={
            "good_id": str(self._good_id),
            "good_type": self._good_type,
            "state": next_state.value,
        })
        return True

    def mark_sold(self) -> None:
        """
        Flag this one good as sold.

        Raises:
            GoodStateError: if the good is already sold or consumed.
        """
        with self._lock:
            next_state = self._state.after_sale()
            if next_state is None:
                logger.error("good_sale_rejected", extra={
                    "good_id": str(self._good_id),
                    "good_type": self._good_type,
                    "state": self._state.value,
                })
                raise GoodStateError(
                    str(self._good_id), self._state.value, "sell"
                )
            self._state = next_state

    @staticmethod
    def mark_sold_together(goods: Sequence[Good]) -> bool:
        """
        Flag every good as sold, or none of them.

        Locks are taken in production order so two callers selling
        overlapping goods cannot deadlock. A good consumed after it was
        selected makes the whole batch fail. ``goods`` must not repeat a good.

        Returns:
            True if all goods were sold, False if any was unavailable.
        """
        ordered = sorted(goods, key=lambda good: good.sequence)
        with ExitStack() as stack:
            for good in ordered:
                stack.enter_context(good._lock)

            unavailable = [good for good in ordered if not good._state.is_available]
            if unavailable:
                logger.warning("good_batch_sale_rejected", extra={
                    "good_ids": [str(good.good_id) for good in unavailable],
                    "batch_size": len(ordered),
                })
                return False

            for good in ordered:
                good._state = GoodState.SOLD
        return True

    def __repr__(self) -> str:
        return (
            f"Good({self._good_type!r}, sequence={self._sequence}, "
            f"state={self._state.value})"
        )
