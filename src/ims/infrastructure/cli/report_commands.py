"""Read-only CLI commands.

These never ask for a password: listing and reports are open to
anyone who can run the tool.
"""

from __future__ import annotations

import click

from ims.application.generate_report import GenerateReportHandler
from ims.application.show_inventory import ShowInventoryHandler
from ims.infrastructure.bootstrap import store_repository
from ims.infrastructure.cli.display import echo_inventory, echo_report


@click.command("inventory")
def inventory_show() -> None:
    """Show every product with price, stock and average cost."""
    store = store_repository().load()
    echo_inventory(ShowInventoryHandler(store).handle())


@click.command("report")
def report_show() -> None:
    """Show sales, purchase and inventory reports."""
    store = store_repository().load()
    echo_report(GenerateReportHandler(store).handle())
