"""CLI commands for the product catalog."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

import click

from pims.application.add_product import AddProductHandler
from pims.application.dto import NewProduct
from pims.application.list_products import SORT_KEYS, ListProductsHandler
from pims.application.remove_product import RemoveProductHandler
from pims.application.update_product import UpdateProductHandler
from pims.domain.exceptions import DomainException, NotFoundError
from pims.domain.model.product import Category
from pims.domain.model.value_objects import Money, format_idr
from pims.infrastructure.bootstrap import product_repository

ISO_DATE = click.DateTime(formats=["%Y-%m-%d"])
CATEGORIES = click.Choice([c.value for c in Category])


@click.command("list")
@click.option("--search", default="", help="Match name, supplier or batch number.")
@click.option(
    "--category",
    type=click.Choice(["all"] + [c.value for c in Category]),
    default="all",
    show_default=True,
)
@click.option("--sort", "sort_by", type=click.Choice(SORT_KEYS), default="name", show_default=True)
@click.option("--as-of", type=ISO_DATE, default=None, help="Reference date (default: now).")
def product_list(search: str, category: str, sort_by: str, as_of: datetime | None) -> None:
    """List products in the catalog."""
    handler = ListProductsHandler(product_repo=product_repository())

    try:
        result = handler.handle(
            now=as_of or datetime.now(), search=search, category=category, sort_by=sort_by
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.items:
        click.echo("No products found.")
        return

    click.echo(
        f"{'ID':<6} {'Name':<24} {'Category':<11} {'Stock':>12} "
        f"{'Price':>14} {'Expiry':<12} Flags"
    )
    click.echo("-" * 92)
    for p in result.items:
        flags = []
        if p.low_stock:
            flags.append("LOW")
        if p.expiry_flagged:
            flags.append("EXPIRING")
        stock = f"{p.quantity} {p.unit}"
        click.echo(
            f"{p.id:<6} {p.name:<24} {p.category:<11} {stock:>12} "
            f"{format_idr(p.price):>14} {p.expiry_date.isoformat():<12} {' '.join(flags)}"
        )
    click.echo()
    click.echo(f"Showing {result.shown} of {result.total} products")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--category", required=True, type=CATEGORIES)
@click.option("--type", "type_", required=True, help="Dosage form, e.g. Tablet.")
@click.option("--quantity", required=True, type=int)
@click.option("--unit", required=True, help="Unit label, e.g. tablets.")
@click.option("--min-stock", required=True, type=int, help="Reorder threshold.")
@click.option("--price", required=True, type=int, help="Unit price in Rupiah.")
@click.option("--supplier", required=True)
@click.option("--expiry", required=True, type=ISO_DATE, help="Expiry date (YYYY-MM-DD).")
@click.option("--batch", required=True, help="Batch number.")
@click.option("--storage", required=True, help="Storage type, e.g. Cool Place.")
def product_add(
    name: str,
    category: str,
    type_: str,
    quantity: int,
    unit: str,
    min_stock: int,
    price: int,
    supplier: str,
    expiry: datetime,
    batch: str,
    storage: str,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            NewProduct(
                name=name,
                category=category,
                type=type_,
                quantity=quantity,
                unit=unit,
                min_stock=min_stock,
                price=price,
                supplier=supplier,
                expiry_date=expiry.date(),
                batch_number=batch,
                storage_type=storage,
            )
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None)
@click.option("--quantity", default=None, type=int)
@click.option("--min-stock", default=None, type=int)
@click.option("--price", default=None, type=int, help="New unit price in Rupiah.")
@click.option("--supplier", default=None)
@click.option("--expiry", default=None, type=ISO_DATE)
@click.option("--storage", default=None)
def product_update(
    product_id: str,
    name: str | None,
    quantity: int | None,
    min_stock: int | None,
    price: int | None,
    supplier: str | None,
    expiry: datetime | None,
    storage: str | None,
) -> None:
    """Edit fields of an existing product."""
    repo = product_repository()
    handler = UpdateProductHandler(product_repo=repo)

    try:
        product = repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")

        changes: dict[str, object] = {}
        if name is not None:
            changes["name"] = name
        if quantity is not None:
            changes["quantity"] = quantity
        if min_stock is not None:
            changes["min_stock"] = min_stock
        if price is not None:
            changes["price"] = Money.of(price)
        if supplier is not None:
            changes["supplier"] = supplier
        if expiry is not None:
            changes["expiry_date"] = expiry.date()
        if storage is not None:
            changes["storage_type"] = storage

        updated = handler.handle(replace(product, **changes))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{updated.id} '{updated.name}' updated")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_remove(product_id: str) -> None:
    """Remove a product (its transactions are kept)."""
    RemoveProductHandler(product_repo=product_repository()).handle(product_id)
    click.echo(f"Product #{product_id} removed")
