"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Money is already
formatted for display.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InventoryLineDTO:
    """Output: one product as shown in the inventory listing."""

    name: str
    description: str
    price: str  # formatted, e.g. "$2.20"
    quantity: int
    average_cost: str


@dataclass(frozen=True)
class SaleLineDTO:
    product_name: str
    quantity: int
    sale_price: str
    profit: str


@dataclass(frozen=True)
class PurchaseLineDTO:
    product_name: str
    quantity: int
    purchase_price: str


@dataclass(frozen=True)
class ReportDTO:
    """Output: sales, purchases and inventory sections of the report."""

    sales: list[SaleLineDTO]
    purchases: list[PurchaseLineDTO]
    inventory: list[InventoryLineDTO]
    total_sales: str
    total_profit: str
    total_purchase_cost: str
