"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from collections.abc import Iterator

from ims.application.dto import InventoryLineDTO
from ims.domain.model.product import Product
from ims.domain.model.store import InventoryStore


class ShowInventoryHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self) -> Iterator[InventoryLineDTO]:
        """Lazily yield one line per product, ordered by name."""
        for product in self._store.iter_products():
            yield self.to_dto(product)

    @staticmethod
    def to_dto(product: Product) -> InventoryLineDTO:
        return InventoryLineDTO(
            name=product.name,
            description=product.description,
            price=str(product.price),
            quantity=product.quantity,
            average_cost=str(product.average_cost),
        )
