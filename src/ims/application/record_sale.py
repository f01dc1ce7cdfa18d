"""Application service: Record Sale use case."""

from __future__ import annotations

from decimal import Decimal

from ims.application.dto import SaleLineDTO
from ims.domain.model.session import Session
from ims.domain.model.store import InventoryStore
from ims.domain.model.value_objects import Money, Quantity, format_amount


class RecordSaleHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(
        self,
        session: Session,
        product_name: str,
        quantity: int,
        sale_price: str | Decimal,
    ) -> SaleLineDTO:
        """Sell units from stock and report the profit made.

        Nothing is recorded if the product is unknown or there is not
        enough stock.
        """
        self._store.require_access(session)
        price = Money.positive(sale_price)
        qty = Quantity(quantity).value
        name = product_name.strip()

        profit = self._store.record_sale(session, name, qty, price)

        return SaleLineDTO(
            product_name=name,
            quantity=qty,
            sale_price=str(price),
            profit=format_amount(profit),
        )
