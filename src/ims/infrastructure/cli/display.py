"""Shared formatting for inventory listings and reports."""

from __future__ import annotations

from collections.abc import Iterable

import click

from ims.application.dto import InventoryLineDTO, ReportDTO


def echo_inventory(lines: Iterable[InventoryLineDTO]) -> None:
    click.echo("\nInventory:")
    lines = list(lines)
    if not lines:
        click.echo("No products found.")
        return

    click.echo(
        f"  {'Product':<20} {'Description':<24} {'Price':>10} {'Qty':>6} {'Avg Cost':>10}"
    )
    click.echo(f"  {'-'*74}")
    for line in lines:
        click.echo(
            f"  {line.name:<20} {line.description:<24} {line.price:>10} "
            f"{line.quantity:>6} {line.average_cost:>10}"
        )


def echo_report(report: ReportDTO) -> None:
    click.echo("\n----- Sales Report -----")
    if not report.sales:
        click.echo("No sales recorded.")
    else:
        for sale in report.sales:
            click.echo(
                f"Sold {sale.quantity} units of {sale.product_name} "
                f"at {sale.sale_price} each. Profit: {sale.profit}"
            )
        click.echo(f"Total Sales: {report.total_sales}")
        click.echo(f"Total Profit: {report.total_profit}")

    click.echo("\n----- Purchase Report -----")
    if not report.purchases:
        click.echo("No purchases recorded.")
    else:
        for purchase in report.purchases:
            click.echo(
                f"Purchased {purchase.quantity} units of {purchase.product_name} "
                f"at {purchase.purchase_price} each"
            )
        click.echo(f"Total Purchase Cost: {report.total_purchase_cost}")

    click.echo("\n----- Inventory Report -----")
    echo_inventory(report.inventory)
