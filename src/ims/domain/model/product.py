"""Product ledger entry.

One entry per product name.  Besides the current selling price and
stock level it keeps the cumulative purchase history (total spent and
total units bought) that the average cost is derived from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from ims.domain.exceptions import InsufficientStockError
from ims.domain.model.value_objects import Money

# Selling price applied when a purchase costs more than the current price.
MARKUP = Decimal("1.10")
DEFAULT_DESCRIPTION = "No description"


@dataclass
class Product:
    """A product and its cost history.

    Invariants:
    - ``quantity`` is never negative
    - ``total_cost`` and ``total_purchased_qty`` only grow, and only
      through ``receive()``
    """

    name: str
    description: str
    price: Money
    quantity: int
    total_cost: Money = field(default_factory=Money.zero)
    total_purchased_qty: int = 0

    @property
    def average_cost(self) -> Money:
        if self.total_purchased_qty == 0:
            return Money.zero()
        return self.total_cost / self.total_purchased_qty

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def from_purchase(name: str, quantity: int, unit_cost: Money) -> Product:
        """Create the entry for a product first seen on a purchase."""
        return Product(
            name=name,
            description=DEFAULT_DESCRIPTION,
            price=unit_cost * MARKUP,
            quantity=quantity,
            total_cost=unit_cost * quantity,
            total_purchased_qty=quantity,
        )

    # --- Mutations ------------------------------------------------------------

    def revise(self, description: str, price: Money, quantity: int) -> None:
        """Overwrite the editable fields. Cost history is left alone."""
        self.description = description
        self.price = price
        self.quantity = quantity

    def receive(self, quantity: int, unit_cost: Money) -> None:
        """Book a purchase of *quantity* units at *unit_cost* each.

        If the supplier now charges more than we sell for, the selling
        price is reset to the new cost plus markup.
        """
        total_cost = self.total_cost + unit_cost * quantity
        price = unit_cost * MARKUP if unit_cost > self.price else self.price

        self.quantity += quantity
        self.total_cost = total_cost
        self.total_purchased_qty += quantity
        self.price = price

    def sell(self, quantity: int, unit_price: Money) -> Decimal:
        """Remove *quantity* units from stock and return the profit.

        Profit is measured against the average cost before the stock
        is reduced.
        """
        if quantity > self.quantity:
            raise InsufficientStockError(self.name, quantity, self.quantity)
        profit = (unit_price.amount - self.average_cost.amount) * quantity
        self.quantity -= quantity
        return profit
