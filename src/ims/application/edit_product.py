"""Application service: Edit Product use case."""

from __future__ import annotations

from decimal import Decimal

from ims.domain.model.product import Product
from ims.domain.model.session import Session
from ims.domain.model.store import InventoryStore
from ims.domain.model.value_objects import Money, Quantity


class EditProductHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(
        self,
        session: Session,
        name: str,
        description: str,
        price: str | Decimal,
        quantity: int,
    ) -> Product:
        """Overwrite description, price and stock level of a product.

        This does NOT touch the cost history — average cost stays what
        the recorded purchases say it is.
        """
        self._store.require_access(session)
        return self._store.edit_product(
            session,
            name=name.strip(),
            description=description.strip(),
            price=Money.positive(price),
            quantity=Quantity(quantity).value,
        )
