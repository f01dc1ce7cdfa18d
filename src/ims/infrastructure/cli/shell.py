"""Interactive store management shell.

Asks for the password, then loops over a numbered menu until the
operator exits or fails to log back in after a logout.  The whole store
is written back to disk after every command.
"""

from __future__ import annotations

import click

from ims.application.add_product import AddProductHandler
from ims.application.delete_product import DeleteProductHandler
from ims.application.edit_product import EditProductHandler
from ims.application.generate_report import GenerateReportHandler
from ims.application.record_purchase import RecordPurchaseHandler
from ims.application.record_sale import RecordSaleHandler
from ims.application.show_inventory import ShowInventoryHandler
from ims.domain.exceptions import (
    DomainException,
    DuplicateProductError,
    PersistenceError,
    ProductNotFoundError,
)
from ims.domain.model.session import Session
from ims.domain.model.store import InventoryStore
from ims.domain.repository.store_repository import StoreRepository
from ims.domain.service.access_gate import AccessGate
from ims.infrastructure.bootstrap import access_gate, store_repository
from ims.infrastructure.cli.display import echo_inventory, echo_report
from ims.infrastructure.cli.params import NON_EMPTY, POSITIVE_AMOUNT, QUANTITY

LOGOUT = "8"
EXIT = "9"


@click.command("shell")
def shell() -> None:
    """Log in and manage the store interactively."""
    repo = store_repository()
    StoreShell(store=repo.load(), repo=repo, gate=access_gate()).run()


class StoreShell:

    def __init__(
        self,
        store: InventoryStore,
        repo: StoreRepository,
        gate: AccessGate,
        session: Session | None = None,
    ) -> None:
        self._store = store
        self._repo = repo
        self._gate = gate
        self._session = session or Session()
        self._menu = {
            "1": ("Add Product", self.add_product),
            "2": ("Edit Product", self.edit_product),
            "3": ("Delete Product", self.delete_product),
            "4": ("List Inventory", self.list_inventory),
            "5": ("Record Sale", self.record_sale),
            "6": ("Record Purchase", self.record_purchase),
            "7": ("Generate Reports", self.generate_reports),
        }

    def run(self) -> None:
        if not self._login():
            return

        while True:
            self._echo_menu()
            choice = click.prompt(
                "Choose an option", default="", show_default=False
            ).strip()
            keep_running = self._dispatch(choice)
            if self._session.authenticated:
                self._flush()
            if not keep_running:
                break

    # --- Menu commands --------------------------------------------------------

    def add_product(self) -> None:
        click.echo("Adding new product.")
        name = click.prompt("Product name", type=NON_EMPTY)
        if self._store.get(name) is not None:
            raise DuplicateProductError(name)
        description = click.prompt("Description", type=NON_EMPTY)
        price = click.prompt("Selling price", type=POSITIVE_AMOUNT)
        quantity = click.prompt("Quantity", type=QUANTITY)

        AddProductHandler(self._store).handle(
            self._session, name, description, price, quantity
        )
        click.echo("Product added.")

    def edit_product(self) -> None:
        name = click.prompt("Enter product name to edit", type=NON_EMPTY)
        if self._store.get(name) is None:
            raise ProductNotFoundError(name)
        click.echo(f"Editing product: {name}")
        description = click.prompt("New description", type=NON_EMPTY)
        price = click.prompt("New selling price", type=POSITIVE_AMOUNT)
        quantity = click.prompt("New quantity", type=QUANTITY)

        EditProductHandler(self._store).handle(
            self._session, name, description, price, quantity
        )
        click.echo("Product updated.")

    def delete_product(self) -> None:
        name = click.prompt("Enter product name to delete", type=NON_EMPTY)
        DeleteProductHandler(self._store).handle(self._session, name)
        click.echo(f"Product '{name}' deleted.")

    def list_inventory(self) -> None:
        echo_inventory(ShowInventoryHandler(self._store).handle())

    def record_sale(self) -> None:
        name = click.prompt("Product sold", type=NON_EMPTY)
        quantity = click.prompt("Quantity sold", type=QUANTITY)
        price = click.prompt("Sale price per unit", type=POSITIVE_AMOUNT)

        sale = RecordSaleHandler(self._store).handle(
            self._session, name, quantity, price
        )
        click.echo(f"Sale recorded. Profit: {sale.profit}")

    def record_purchase(self) -> None:
        name = click.prompt("Product purchased", type=NON_EMPTY)
        quantity = click.prompt("Quantity purchased", type=QUANTITY)
        price = click.prompt("Purchase price per unit", type=POSITIVE_AMOUNT)

        RecordPurchaseHandler(self._store).handle(
            self._session, name, quantity, price
        )
        click.echo("Purchase recorded.")

    def generate_reports(self) -> None:
        echo_report(GenerateReportHandler(self._store).handle())

    # --- Internal helpers -----------------------------------------------------

    def _dispatch(self, choice: str) -> bool:
        """Run one menu choice. Returns False when the shell should stop."""
        if choice == LOGOUT:
            self._gate.logout(self._session)
            click.echo("Logged out.")
            return self._login()
        if choice == EXIT:
            click.echo("Exiting...")
            return False

        entry = self._menu.get(choice)
        if entry is None:
            click.echo("Invalid option.")
            return True

        _, command = entry
        try:
            command()
        except DomainException as exc:
            click.echo(str(exc))
        return True

    def _login(self) -> bool:
        password = click.prompt(
            "Enter password", hide_input=True, default="", show_default=False
        )
        if self._gate.authenticate(self._session, password):
            click.echo("Authentication successful!")
            return True
        click.echo("Authentication failed.")
        return False

    def _flush(self) -> None:
        try:
            self._repo.save(self._store)
        except PersistenceError as exc:
            click.echo(f"Warning: Failed to save data: {exc}")

    def _echo_menu(self) -> None:
        click.echo("\n--- Store Management Menu ---")
        for key, (label, _) in self._menu.items():
            click.echo(f"{key}. {label}")
        click.echo(f"{LOGOUT}. Logout")
        click.echo(f"{EXIT}. Exit")
