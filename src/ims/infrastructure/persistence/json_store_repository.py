"""JSON-file-backed implementation of StoreRepository.

The store is kept as three separate documents in one directory:

- ``inventory.json`` — object mapping product name to its ledger entry
- ``sales.json`` — array of sale records, oldest first
- ``purchases.json`` — array of purchase records, oldest first

Each document loads on its own.  A missing or unreadable one is treated
as an empty collection so the others still come through.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Callable, TypeVar

from ims.domain.exceptions import DomainException, PersistenceError, ValidationError
from ims.domain.model.product import Product
from ims.domain.model.records import PurchaseRecord, SaleRecord
from ims.domain.model.store import InventoryStore
from ims.domain.model.value_objects import Money, Quantity
from ims.domain.repository.store_repository import StoreRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")

INVENTORY_FILE = "inventory.json"
SALES_FILE = "sales.json"
PURCHASES_FILE = "purchases.json"


class JsonStoreRepository(StoreRepository):

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir

    # --- StoreRepository interface --------------------------------------------

    def load(self) -> InventoryStore:
        return InventoryStore(
            products=self._load_document(INVENTORY_FILE, self._products_from_raw, {}),
            sales=self._load_document(SALES_FILE, self._sales_from_raw, []),
            purchases=self._load_document(
                PURCHASES_FILE, self._purchases_from_raw, []
            ),
        )

    def save(self, store: InventoryStore) -> None:
        documents = {
            INVENTORY_FILE: {
                name: self._product_to_raw(product)
                for name, product in store.products.items()
            },
            SALES_FILE: [self._sale_to_raw(sale) for sale in store.sales],
            PURCHASES_FILE: [self._purchase_to_raw(p) for p in store.purchases],
        }
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            for file_name, document in documents.items():
                self._persist_raw(self._data_dir / file_name, document)
        except OSError as exc:
            logger.exception("Failed to write store to %s", self._data_dir)
            raise PersistenceError(str(exc)) from exc

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _product_to_raw(product: Product) -> dict:
        return {
            "name": product.name,
            "description": product.description,
            "price": str(product.price.amount),
            "quantity": product.quantity,
            "total_cost": str(product.total_cost.amount),
            "total_purchased_qty": product.total_purchased_qty,
        }

    @staticmethod
    def _sale_to_raw(sale: SaleRecord) -> dict:
        return {
            "product_name": sale.product_name,
            "quantity": sale.quantity,
            "sale_price": str(sale.sale_price.amount),
            "profit": str(sale.profit),
        }

    @staticmethod
    def _purchase_to_raw(purchase: PurchaseRecord) -> dict:
        return {
            "product_name": purchase.product_name,
            "quantity": purchase.quantity,
            "purchase_price": str(purchase.purchase_price.amount),
        }

    @staticmethod
    def _products_from_raw(raw: dict) -> dict[str, Product]:
        products: dict[str, Product] = {}
        for key, item in raw.items():
            products[key] = Product(
                name=key,
                description=item["description"],
                price=Money.of(item["price"]),
                quantity=Quantity(item["quantity"]).value,
                total_cost=Money.of(item.get("total_cost", 0)),
                total_purchased_qty=Quantity(item.get("total_purchased_qty", 0)).value,
            )
        return products

    @staticmethod
    def _sales_from_raw(raw: list) -> list[SaleRecord]:
        return [
            SaleRecord(
                product_name=item["product_name"],
                quantity=Quantity(item["quantity"]).value,
                sale_price=Money.of(item["sale_price"]),
                # Signed, so it cannot go through Money.
                profit=_to_decimal(item["profit"]),
            )
            for item in raw
        ]

    @staticmethod
    def _purchases_from_raw(raw: list) -> list[PurchaseRecord]:
        return [
            PurchaseRecord(
                product_name=item["product_name"],
                quantity=Quantity(item["quantity"]).value,
                purchase_price=Money.of(item["purchase_price"]),
            )
            for item in raw
        ]

    # --- File helpers ---------------------------------------------------------

    def _load_document(
        self, file_name: str, convert: Callable[[Any], T], empty: T
    ) -> T:
        path = self._data_dir / file_name
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.debug("%s does not exist; starting empty", path)
            return empty
        except (OSError, ValueError) as exc:
            logger.debug("Could not read %s (%s); starting empty", path, exc)
            return empty

        if not isinstance(raw, type(empty)):
            logger.debug("%s has unexpected shape; starting empty", path)
            return empty
        try:
            return convert(raw)
        except (KeyError, TypeError, AttributeError, DomainException) as exc:
            logger.debug("Malformed record in %s (%s); starting empty", path, exc)
            return empty

    @staticmethod
    def _persist_raw(path: Path, document: dict | list) -> None:
        path.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")


def _to_decimal(value: Any) -> Decimal:
    try:
        amount = Decimal(str(value))
    except InvalidOperation as exc:
        raise ValidationError(f"Invalid amount: {value!r}") from exc
    if not amount.is_finite():
        raise ValidationError(f"Invalid amount: {value!r}")
    return amount
