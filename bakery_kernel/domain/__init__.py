"""
Pure domain layer.

Goods, their lifecycle state, price/quantity coercion and the clock
abstraction. No dependencies on the catalog service or configuration.
"""

from bakery_kernel.domain.clock import (
    Clock,
    DeterministicClock,
    SequentialClock,
    SystemClock,
)
from bakery_kernel.domain.good import Good, GoodState, PriceSource
from bakery_kernel.domain.values import (
    PRICE_DECIMAL_PLACES,
    ZERO_PRICE,
    round_price,
    to_price,
    to_quantity,
)

__all__ = [
    "Clock",
    "DeterministicClock",
    "SequentialClock",
    "SystemClock",
    "Good",
    "GoodState",
    "PriceSource",
    "PRICE_DECIMAL_PLACES",
    "ZERO_PRICE",
    "round_price",
    "to_price",
    "to_quantity",
]
