"""
Typed Exception Hierarchy for the Bakery Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

Callers of the catalog must be able to tell "you asked for something that
was never baked" apart from "you asked for more than we have" without
parsing message strings:

  1. Every error has a TYPED exception class (catch by type, not message)
  2. Every exception has a CODE attribute (machine-readable, API-safe)
  3. Exceptions carry structured DATA (not just a message string)

Example - WRONG way to handle errors:
    try:
        bakery.purchase("cake", 5)
    except Exception as e:
        if "in stock" in str(e):  # FRAGILE - message might change
            reorder()

Example - RIGHT way (what this module enables):
    try:
        bakery.purchase("cake", 5)
    except InsufficientStockError as e:
        log.warning(f"Only {e.available} {e.good_type} left")
        api_response(code=e.code, available=e.available)

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    BakeryKernelError (base)
    |
    +-- InvalidArgumentError
    |
    +-- InventoryError
    |   +-- UnknownGoodError
    |   +-- InsufficientStockError
    |
    +-- GoodStateError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                 | When Raised
----------------|----------------------|----------------------------------------
Argument        | INVALID_ARGUMENT     | Price/quantity is not a valid number
----------------|----------------------|----------------------------------------
Inventory       | UNKNOWN_GOOD         | Purchase of a type never produced
                | INSUFFICIENT_STOCK   | Purchase exceeds available quantity
----------------|----------------------|----------------------------------------
Lifecycle       | INVALID_GOOD_STATE   | Selling a good that is not available

Read-only lookups (price, quantity, value, retrieval) never raise for
missing data; they return neutral defaults. Only committing operations
with preconditions raise, and they raise before mutating anything.
"""


class BakeryKernelError(Exception):
    """
    Base exception for all bakery kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "BAKERY_KERNEL_ERROR"


# Argument validation


class InvalidArgumentError(BakeryKernelError):
    """A price or quantity argument is not acceptable."""

    code: str = "INVALID_ARGUMENT"

    def __init__(self, argument_name: str, value: object, reason: str):
        self.argument_name = argument_name
        self.value = repr(value)
        self.reason = reason
        super().__init__(
            f"Invalid {argument_name} {value!r}: {reason}"
        )


# Inventory exceptions


class InventoryError(BakeryKernelError):
    """Base exception for stock-related errors."""

    code: str = "INVENTORY_ERROR"


class UnknownGoodError(InventoryError):
    """The requested good type has no production history."""

    code: str = "UNKNOWN_GOOD"

    def __init__(self, good_type: str):
        self.good_type = good_type
        super().__init__(f"No {good_type!r} has ever been produced")


class InsufficientStockError(InventoryError):
    """
    More units were requested than are currently available.

    Nothing is sold when this is raised: purchases are all-or-nothing.
    """

    code: str = "INSUFFICIENT_STOCK"

    def __init__(self, good_type: str, requested: int, available: int):
        self.good_type = good_type
        self.requested = requested
        self.available = available
        super().__init__(
            f"Cannot sell {requested} {good_type!r}: only {available} available"
        )


# Lifecycle exceptions


class GoodStateError(BakeryKernelError):
    """
    A lifecycle transition is not permitted from the good's current state.

    Sold and consumed flags only ever move from False to True.
    """

    code: str = "INVALID_GOOD_STATE"

    def __init__(self, good_id: str, state: str, transition: str):
        self.good_id = good_id
        self.state = state
        self.transition = transition
        super().__init__(
            f"Cannot {transition} good {good_id} in state {state}"
        )
