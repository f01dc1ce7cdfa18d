"""Application service: Add Product use case."""

from __future__ import annotations

from decimal import Decimal

from ims.domain.exceptions import ValidationError
from ims.domain.model.product import Product
from ims.domain.model.session import Session
from ims.domain.model.store import InventoryStore
from ims.domain.model.value_objects import Money, Quantity


class AddProductHandler:

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
        """Add a new product with an empty cost history."""
        self._store.require_access(session)
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        return self._store.add_product(
            session,
            name=name.strip(),
            description=description.strip(),
            price=Money.positive(price),
            quantity=Quantity(quantity).value,
        )
