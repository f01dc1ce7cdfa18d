"""Application service: Record Purchase use case.

A purchase of an unknown product creates it on the fly, priced at the
purchase price plus markup.
"""

from __future__ import annotations

from decimal import Decimal

from ims.domain.exceptions import ValidationError
from ims.domain.model.product import Product
from ims.domain.model.session import Session
from ims.domain.model.store import InventoryStore
from ims.domain.model.value_objects import Money, Quantity


class RecordPurchaseHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(
        self,
        session: Session,
        product_name: str,
        quantity: int,
        purchase_price: str | Decimal,
    ) -> Product:
        self._store.require_access(session)
        if not product_name or not product_name.strip():
            raise ValidationError("Product name is required")

        return self._store.record_purchase(
            session,
            name=product_name.strip(),
            quantity=Quantity(quantity).value,
            purchase_price=Money.positive(purchase_price),
        )
