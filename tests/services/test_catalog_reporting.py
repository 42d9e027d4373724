"""
Tests for Catalog reporting -- sales journal, inventory positions
and configuration wiring.
"""

from decimal import Decimal

from bakery_config.schema import BakeryConfig, PriceDef
from bakery_services.catalog_service import Catalog
from bakery_services.records import InventoryPosition
from tests.conftest import CAKE_PRICE, DONUT_PRICE, NUM_CAKES, NUM_DONUTS, OPENING_TIME


class TestSalesJournal:

    def test_each_sale_is_recorded(self, stocked_bakery):
        cakes = stocked_bakery.purchase("cake", 2)
        donut = stocked_bakery.purchase("donut")

        sales = stocked_bakery.sales()
        assert [s.good_id for s in sales] == [cakes[0].good_id, cakes[1].good_id, donut.good_id]
        assert [s.sequence for s in sales] == [1, 2, 3]
        assert [s.price for s in sales] == [CAKE_PRICE, CAKE_PRICE, DONUT_PRICE]

    def test_register_equals_journal_total(self, stocked_bakery):
        stocked_bakery.purchase("cake", 3)
        stocked_bakery.set_price("donut", 2.499)
        stocked_bakery.purchase("donut", 4)

        total = sum((s.price for s in stocked_bakery.sales()), Decimal("0"))
        assert stocked_bakery.inspect_register() == total
        assert total == CAKE_PRICE * 3 + Decimal("2.50") * 4

    def test_sale_time_comes_from_clock(self, bakery, clock):
        bakery.produce("cake")
        clock.advance(3600)
        bakery.purchase("cake")
        assert bakery.sales()[0].sold_at == clock.now()

    def test_journal_is_a_snapshot(self, stocked_bakery):
        snapshot = stocked_bakery.sales()
        stocked_bakery.purchase("cake")
        assert snapshot == ()
        assert len(stocked_bakery.sales()) == 1


class TestInventoryPosition:

    def test_fresh_stock(self, stocked_bakery):
        position = stocked_bakery.inventory_position("cake")
        assert position == InventoryPosition(
            good_type="cake",
            produced=NUM_CAKES,
            sold=0,
            consumed=0,
            remaining=NUM_CAKES,
            unit_price=CAKE_PRICE,
        )
        assert position.remaining_value == stocked_bakery.inventory_value("cake")
        assert not position.is_depleted

    def test_sold_and_consumed_counts(self, stocked_bakery):
        sold = stocked_bakery.purchase("cake", 2)
        sold[0].consume()
        stocked_bakery.retrieve("cake").consume()

        position = stocked_bakery.inventory_position("cake")
        assert position.produced == NUM_CAKES
        assert position.sold == 2
        assert position.consumed == 2
        assert position.remaining == NUM_CAKES - 3
        assert position.remaining == stocked_bakery.quantity_remaining("cake")

    def test_unknown_type(self, stocked_bakery):
        position = stocked_bakery.inventory_position("cronut")
        assert position.produced == 0
        assert position.is_depleted
        assert position.remaining_value == 0

    def test_report_agrees_with_totals(self, stocked_bakery):
        stocked_bakery.purchase("donut", 4)
        report = stocked_bakery.inventory_report()

        assert [p.good_type for p in report] == ["cake", "donut"]
        assert sum(p.remaining for p in report) == stocked_bakery.quantity_remaining()
        assert sum(p.remaining_value for p in report) == stocked_bakery.inventory_value()
        assert report[1].remaining == NUM_DONUTS - 4

    def test_queues_are_never_pruned(self, stocked_bakery):
        stocked_bakery.purchase("cake", NUM_CAKES)
        assert stocked_bakery.inventory_position("cake").produced == NUM_CAKES


class TestFromConfig:

    def test_name_and_prices(self, clock):
        config = BakeryConfig(
            name="Corner Bakery",
            prices=(PriceDef("cake", Decimal("20.15")), PriceDef("donut", Decimal("1.50"))),
        )
        catalog = Catalog.from_config(config, clock=clock)

        assert catalog.name == "Corner Bakery"
        assert catalog.ask_price("cake") == Decimal("20.15")
        assert catalog.ask_price("donut") == Decimal("1.50")
        assert catalog.produce("cake").baked_on() == OPENING_TIME

    def test_default_config(self):
        catalog = Catalog.from_config(BakeryConfig())
        assert catalog.name == "Eliots Bakery"
        assert catalog.known_types() == ()
