"""
Pytest fixtures for the bakery test suite.

Provides:
- Structured logging configured for every test session
- A DeterministicClock so bake times are reproducible
- A fresh bakery per test, plus a stocked one for inventory/sales tests
"""

import json
import logging
from datetime import UTC, datetime
from decimal import Decimal
from io import StringIO

import pytest

from bakery_kernel.domain.clock import DeterministicClock
from bakery_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)
from bakery_services.catalog_service import Catalog

OPENING_TIME = datetime(2024, 3, 1, 5, 30, 0, tzinfo=UTC)

CAKE_PRICE = Decimal("12.00")
DONUT_PRICE = Decimal("3.50")
NUM_CAKES = 7
NUM_DONUTS = 11


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG)
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture bakery_kernel logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs, bakery):
            bakery.set_price("cake", 5)
            logs = captured_logs()
            assert any(r["message"] == "price_set" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("bakery_kernel")
    previous_level = root.level
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)
    root.setLevel(previous_level)


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def clock() -> DeterministicClock:
    return DeterministicClock(OPENING_TIME)


@pytest.fixture
def bakery(clock) -> Catalog:
    """An empty bakery with the default name."""
    return Catalog(clock=clock)


@pytest.fixture
def stocked_bakery(clock) -> Catalog:
    """
    A bakery with priced cakes and donuts, each baked one second apart.

    Cakes come first: NUM_CAKES at CAKE_PRICE, then NUM_DONUTS at DONUT_PRICE.
    """
    catalog = Catalog(clock=clock)
    catalog.set_price("cake", CAKE_PRICE)
    catalog.set_price("donut", DONUT_PRICE)
    for _ in range(NUM_CAKES):
        catalog.produce("cake")
        clock.tick()
    for _ in range(NUM_DONUTS):
        catalog.produce("donut")
        clock.tick()
    return catalog
