"""InventoryStore aggregate — the core of the domain.

Owns the product ledger and the sale and purchase logs.  Every rule
about how purchases and sales change a product lives here or on
``Product``; callers pass in values that are already validated.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from decimal import Decimal

from ims.domain.exceptions import (
    AccessDeniedError,
    DuplicateProductError,
    ProductNotFoundError,
)
from ims.domain.model.product import Product
from ims.domain.model.records import PurchaseRecord, SaleRecord
from ims.domain.model.session import Session
from ims.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


@dataclass
class InventoryStore:
    """Aggregate root for the whole store.

    Mutating operations take the operator's ``Session`` and raise
    ``AccessDeniedError`` before touching anything when it is not
    logged in.  Listing and totals are open to everyone.
    """

    products: dict[str, Product] = field(default_factory=dict)
    sales: list[SaleRecord] = field(default_factory=list)
    purchases: list[PurchaseRecord] = field(default_factory=list)

    # --- Product maintenance --------------------------------------------------

    def add_product(
        self,
        session: Session,
        name: str,
        description: str,
        price: Money,
        quantity: int,
    ) -> Product:
        self.require_access(session)
        if name in self.products:
            raise DuplicateProductError(name)

        product = Product(
            name=name, description=description, price=price, quantity=quantity
        )
        self.products[name] = product
        logger.info("Added product %s (price=%s, qty=%d)", name, price, quantity)
        return product

    def edit_product(
        self,
        session: Session,
        name: str,
        description: str,
        price: Money,
        quantity: int,
    ) -> Product:
        self.require_access(session)
        product = self._get(name)
        product.revise(description, price, quantity)
        logger.info("Edited product %s (price=%s, qty=%d)", name, price, quantity)
        return product

    def delete_product(self, session: Session, name: str) -> Product:
        """Remove a product. Its cost history goes with it."""
        self.require_access(session)
        product = self._get(name)
        del self.products[name]
        logger.info("Deleted product %s", name)
        return product

    # --- Transactions ---------------------------------------------------------

    def record_sale(
        self,
        session: Session,
        name: str,
        quantity: int,
        sale_price: Money,
    ) -> Decimal:
        """Sell from stock and return the profit of this sale."""
        self.require_access(session)
        product = self._get(name)

        profit = product.sell(quantity, sale_price)
        self.sales.append(
            SaleRecord(
                product_name=name,
                quantity=quantity,
                sale_price=sale_price,
                profit=profit,
            )
        )
        logger.info(
            "Sold %d x %s at %s (profit=%s)", quantity, name, sale_price, profit
        )
        return profit

    def record_purchase(
        self,
        session: Session,
        name: str,
        quantity: int,
        purchase_price: Money,
    ) -> Product:
        """Book incoming stock, creating the product if it is new."""
        self.require_access(session)

        product = self.products.get(name)
        if product is None:
            product = Product.from_purchase(name, quantity, purchase_price)
            self.products[name] = product
            logger.info("Created product %s from purchase", name)
        else:
            product.receive(quantity, purchase_price)

        self.purchases.append(
            PurchaseRecord(
                product_name=name,
                quantity=quantity,
                purchase_price=purchase_price,
            )
        )
        logger.info("Purchased %d x %s at %s", quantity, name, purchase_price)
        return product

    # --- Queries --------------------------------------------------------------

    def get(self, name: str) -> Product | None:
        return self.products.get(name)

    def iter_products(self) -> Iterator[Product]:
        """Yield every product, ordered by name."""
        for name in sorted(self.products):
            yield self.products[name]

    @property
    def total_revenue(self) -> Money:
        result = Money.zero()
        for sale in self.sales:
            result = result + sale.revenue
        return result

    @property
    def total_profit(self) -> Decimal:
        return sum((sale.profit for sale in self.sales), Decimal("0"))

    @property
    def total_purchase_cost(self) -> Money:
        result = Money.zero()
        for purchase in self.purchases:
            result = result + purchase.cost
        return result

    # --- Internal helpers -----------------------------------------------------

    def _get(self, name: str) -> Product:
        product = self.products.get(name)
        if product is None:
            raise ProductNotFoundError(name)
        return product

    @staticmethod
    def require_access(session: Session) -> None:
        if not session.authenticated:
            logger.warning("Rejected mutation: session is not logged in")
            raise AccessDeniedError()
