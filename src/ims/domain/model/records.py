"""Sale and purchase records.

Both logs are append-only: a record is created once when the
transaction is booked and never changes afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ims.domain.model.value_objects import Money


@dataclass(frozen=True)
class SaleRecord:
    product_name: str
    quantity: int
    sale_price: Money
    profit: Decimal  # may be negative when selling below average cost

    @property
    def revenue(self) -> Money:
        return self.sale_price * self.quantity


@dataclass(frozen=True)
class PurchaseRecord:
    product_name: str
    quantity: int
    purchase_price: Money

    @property
    def cost(self) -> Money:
        return self.purchase_price * self.quantity
