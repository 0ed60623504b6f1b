import click

from pims.infrastructure.bootstrap import settings
from pims.infrastructure.cli.overview_commands import alerts, dashboard
from pims.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_remove,
    product_update,
)
from pims.infrastructure.cli.report_commands import report_export, report_show
from pims.infrastructure.cli.transaction_commands import (
    transaction_list,
    transaction_record,
)
from pims.infrastructure.config import configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log at INFO level.")
def cli(verbose: bool) -> None:
    """PIMS — Pharmacy Inventory Management System"""
    configure_logging("INFO" if verbose else settings().log_level)


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def transaction() -> None:
    """Record and list stock movements."""


@cli.group()
def report() -> None:
    """Build and export reports."""


# Register subcommands
cli.add_command(alerts)
cli.add_command(dashboard)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_remove)
product.add_command(product_update)
transaction.add_command(transaction_list)
transaction.add_command(transaction_record)
report.add_command(report_export)
report.add_command(report_show)
