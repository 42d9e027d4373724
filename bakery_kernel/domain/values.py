"""
Values -- Price and quantity coercion for the bakery.

Responsibility:
    Turns caller-supplied prices and purchase quantities into the canonical
    types used by the catalog: ``Decimal`` prices rounded to cents and
    positive ``int`` counts.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.

Invariants enforced:
    - Prices are Decimal, never float, once past this boundary.
    - Prices are rounded ROUND_HALF_UP to PRICE_DECIMAL_PLACES on write.
    - Prices are finite and non-negative.
    - Quantities are positive integers.

Failure modes:
    - InvalidArgumentError for strings, bools, None, NaN, infinities,
      negative prices, and non-integral or non-positive quantities.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from numbers import Rational, Real

from bakery_kernel.exceptions import InvalidArgumentError

PRICE_DECIMAL_PLACES = 2

_PRICE_QUANTUM = Decimal(1).scaleb(-PRICE_DECIMAL_PLACES)

ZERO_PRICE = Decimal("0").quantize(_PRICE_QUANTUM)


def round_price(amount: Decimal) -> Decimal:
    """Round a Decimal to cents, half-up (20.145 -> 20.15, -1.005 -> -1.01)."""
    return amount.quantize(_PRICE_QUANTUM, rounding=ROUND_HALF_UP)


def _to_decimal(argument_name: str, number: object) -> Decimal:
    # bool is an int subclass; True is not a number here.
    if isinstance(number, bool) or not isinstance(number, (Real, Decimal)):
        raise InvalidArgumentError(argument_name, number, "must be a number")
    if isinstance(number, Decimal):
        return number

    if isinstance(number, int):
        return Decimal(number)

    try:
        if isinstance(number, Rational):
            return Decimal(number.numerator) / Decimal(number.denominator)
        return Decimal(str(number))
    except (InvalidOperation, ValueError) as e:
        raise InvalidArgumentError(argument_name, number, "must be a number") from e


def to_price(amount: object) -> Decimal:
    """
    Validate and convert a caller-supplied price.

    Floats go through ``str()`` first so that the shortest repr is rounded,
    not the binary expansion: ``20.146`` becomes ``Decimal("20.15")``.
    Fractions are divided out exactly before rounding.

    Raises:
        InvalidArgumentError: if ``amount`` is not a finite, non-negative
            real number.
    """
    value = _to_decimal("price", amount)

    if not value.is_finite():
        raise InvalidArgumentError("price", amount, "must be finite")

    try:
        rounded = round_price(value)
    except InvalidOperation as e:
        # quantize fails once the result needs more digits than the context allows
        raise InvalidArgumentError("price", amount, "is too large") from e
    if rounded < 0:
        raise InvalidArgumentError("price", amount, "must not be negative")
    # quantize(-0.001) yields Decimal("-0.00")
    return abs(rounded)


def to_quantity(quantity: object) -> int:
    """
    Validate a purchase quantity.

    Integral floats and Decimals (``3.0``) are accepted and returned as int.

    Raises:
        InvalidArgumentError: if ``quantity`` is not a positive whole number.
    """
    value = _to_decimal("quantity", quantity)

    if not value.is_finite() or value != value.to_integral_value():
        raise InvalidArgumentError("quantity", quantity, "must be a whole number")
    if value <= 0:
        raise InvalidArgumentError("quantity", quantity, "must be positive")
    return int(value)
