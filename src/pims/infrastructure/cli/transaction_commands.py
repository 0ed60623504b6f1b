"""CLI commands for the transaction ledger."""

from __future__ import annotations

import click

from pims.application.dto import TransactionRequest
from pims.application.list_transactions import ListTransactionsHandler
from pims.application.record_transaction import RecordTransactionHandler
from pims.domain.exceptions import DomainException
from pims.domain.model.value_objects import format_idr
from pims.infrastructure.bootstrap import product_repository, transaction_repository

TYPES = click.Choice(["incoming", "outgoing"])


@click.command("record")
@click.option("--product-id", required=True, help="Product ID.")
@click.option("--type", "type_", required=True, type=TYPES)
@click.option("--quantity", required=True, type=int)
@click.option("--reference", default="", help="PO / invoice number.")
@click.option("--notes", default="")
@click.option("--supplier", default=None, help="Supplier (incoming only).")
@click.option("--customer", default=None, help="Customer (outgoing only).")
def transaction_record(
    product_id: str,
    type_: str,
    quantity: int,
    reference: str,
    notes: str,
    supplier: str | None,
    customer: str | None,
) -> None:
    """Record a stock movement (updates stock automatically)."""
    handler = RecordTransactionHandler(
        product_repo=product_repository(),
        transaction_repo=transaction_repository(),
    )

    try:
        dto = handler.handle(
            TransactionRequest(
                product_id=product_id,
                type=type_,
                quantity=quantity,
                reference=reference,
                notes=notes,
                supplier=supplier,
                customer=customer,
            )
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    stock = product_repository().get_by_id(product_id)
    click.echo(f"{dto.id} recorded  ({dto.type})")
    click.echo(f"  {dto.product_name}: {dto.quantity} {dto.unit} x {format_idr(dto.price)}")
    click.echo(f"  Total: {format_idr(dto.total_amount)}")
    if stock is not None:
        click.echo(f"  Stock now: {stock.quantity} {stock.unit}")


@click.command("list")
@click.option(
    "--type", "type_filter", type=click.Choice(["all", "incoming", "outgoing"]),
    default="all", show_default=True,
)
@click.option("--search", default="", help="Match product name or reference.")
def transaction_list(type_filter: str, search: str) -> None:
    """List transactions, newest first."""
    handler = ListTransactionsHandler(transaction_repo=transaction_repository())
    result = handler.handle(type_filter=type_filter, search=search)

    click.echo(
        f"Incoming: {result.incoming_count} ({format_idr(result.incoming_total)})   "
        f"Outgoing: {result.outgoing_count} ({format_idr(result.outgoing_total)})"
    )
    click.echo()

    if not result.items:
        click.echo("No transactions found.")
        return

    click.echo(
        f"{'ID':<8} {'Date':<11} {'Reference':<14} {'Product':<22} {'Type':<9} "
        f"{'Qty':>6} {'Total':>14} Partner"
    )
    click.echo("-" * 100)
    for t in result.items:
        click.echo(
            f"{t.id:<8} {t.date.isoformat():<11} {t.reference:<14} {t.product_name:<22} "
            f"{t.type:<9} {t.quantity:>6} {format_idr(t.total_amount):>14} {t.partner}"
        )
