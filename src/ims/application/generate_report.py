"""Application service: Generate Report use case (query).

Builds the three report sections — sales, purchases, inventory — in
one pass over the store.  Read-only; no session required.
"""

from __future__ import annotations

from ims.application.dto import PurchaseLineDTO, ReportDTO, SaleLineDTO
from ims.application.show_inventory import ShowInventoryHandler
from ims.domain.model.store import InventoryStore
from ims.domain.model.value_objects import format_amount


class GenerateReportHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self) -> ReportDTO:
        store = self._store
        return ReportDTO(
            sales=[
                SaleLineDTO(
                    product_name=sale.product_name,
                    quantity=sale.quantity,
                    sale_price=str(sale.sale_price),
                    profit=format_amount(sale.profit),
                )
                for sale in store.sales
            ],
            purchases=[
                PurchaseLineDTO(
                    product_name=purchase.product_name,
                    quantity=purchase.quantity,
                    purchase_price=str(purchase.purchase_price),
                )
                for purchase in store.purchases
            ],
            inventory=list(ShowInventoryHandler(store).handle()),
            total_sales=str(store.total_revenue),
            total_profit=format_amount(store.total_profit),
            total_purchase_cost=str(store.total_purchase_cost),
        )
