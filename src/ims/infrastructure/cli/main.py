import click

from ims.config import get_settings
from ims.infrastructure.cli.report_commands import inventory_show, report_show
from ims.infrastructure.cli.shell import shell
from ims.infrastructure.logging import setup_logging


@click.group()
def cli() -> None:
    """IMS — Store Inventory Manager"""
    setup_logging(get_settings().LOG_LEVEL)


# Register subcommands
cli.add_command(shell)
cli.add_command(inventory_show)
cli.add_command(report_show)
