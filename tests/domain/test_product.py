"""Unit tests for the Product ledger entry."""

from decimal import Decimal

import pytest

from ims.domain.exceptions import InsufficientStockError, ValidationError
from ims.domain.model.product import DEFAULT_DESCRIPTION, Product
from ims.domain.model.value_objects import Money


def _widget(**overrides) -> Product:
    fields = dict(
        name="Widget",
        description="Blue widget",
        price=Money.of("5.00"),
        quantity=10,
    )
    fields.update(overrides)
    return Product(**fields)


class TestAverageCost:

    def test_zero_without_purchases(self):
        assert _widget().average_cost == Money.zero()

    def test_zero_without_purchases_even_with_stock(self):
        p = _widget(quantity=500)
        assert p.average_cost.amount == 0

    def test_total_cost_over_total_units(self):
        p = _widget(total_cost=Money.of("30.00"), total_purchased_qty=12)
        assert p.average_cost == Money.of("2.50")

    def test_new_product_has_empty_history(self):
        p = _widget()
        assert p.total_cost == Money.zero()
        assert p.total_purchased_qty == 0


class TestFromPurchase:

    def test_prices_with_markup(self):
        p = Product.from_purchase("Widget", 10, Money.of("2.00"))
        assert p.price == Money.of("2.20")
        assert p.description == DEFAULT_DESCRIPTION
        assert p.quantity == 10
        assert p.total_cost == Money.of("20.00")
        assert p.total_purchased_qty == 10


class TestReceive:

    def test_adds_stock_and_history(self):
        p = _widget(total_cost=Money.of("20"), total_purchased_qty=10)
        p.receive(5, Money.of("3.00"))
        assert p.quantity == 15
        assert p.total_cost == Money.of("35.00")
        assert p.total_purchased_qty == 15

    def test_cheaper_purchase_keeps_price(self):
        p = _widget()
        p.receive(5, Money.of("4.99"))
        assert p.price == Money.of("5.00")

    def test_equal_purchase_price_keeps_price(self):
        p = _widget()
        p.receive(5, Money.of("5.00"))
        assert p.price == Money.of("5.00")

    def test_dearer_purchase_reprices_with_markup(self):
        p = _widget()
        p.receive(5, Money.of("6.00"))
        assert p.price == Money.of("6.60")

    def test_overflowing_purchase_leaves_product_unchanged(self):
        p = _widget(total_cost=Money.of("20"), total_purchased_qty=10)
        with pytest.raises(ValidationError):
            p.receive(1, Money.of("9.5e999999"))
        assert p.quantity == 10
        assert p.total_cost == Money.of("20")
        assert p.total_purchased_qty == 10
        assert p.price == Money.of("5.00")


class TestSell:

    def test_profit_uses_average_cost(self):
        p = _widget(total_cost=Money.of("20"), total_purchased_qty=10)
        profit = p.sell(4, Money.of("5.00"))
        assert profit == Decimal("12.00")
        assert p.quantity == 6

    def test_profit_can_be_negative(self):
        p = _widget(total_cost=Money.of("40"), total_purchased_qty=10)
        assert p.sell(2, Money.of("1.00")) == Decimal("-6.00")

    def test_sell_entire_stock(self):
        p = _widget()
        p.sell(10, Money.of("5.00"))
        assert p.quantity == 0

    def test_oversell_rejected_without_change(self):
        p = _widget(quantity=2)
        with pytest.raises(InsufficientStockError, match="need 5, have 2"):
            p.sell(5, Money.of("5.00"))
        assert p.quantity == 2

    def test_sale_leaves_cost_history_alone(self):
        p = _widget(total_cost=Money.of("20"), total_purchased_qty=10)
        p.sell(4, Money.of("5.00"))
        assert p.total_cost == Money.of("20")
        assert p.total_purchased_qty == 10


class TestRevise:

    def test_overwrites_editable_fields_only(self):
        p = _widget(total_cost=Money.of("20"), total_purchased_qty=10)
        p.revise("Red widget", Money.of("7.00"), 3)
        assert p.description == "Red widget"
        assert p.price == Money.of("7.00")
        assert p.quantity == 3
        assert p.total_cost == Money.of("20")
        assert p.total_purchased_qty == 10
