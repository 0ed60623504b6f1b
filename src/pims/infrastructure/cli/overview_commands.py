"""CLI commands for the dashboard and stock alerts views."""

from __future__ import annotations

from datetime import datetime

import click

from pims.application.show_alerts import ShowAlertsHandler
from pims.application.show_dashboard import ShowDashboardHandler
from pims.domain.model.value_objects import format_idr
from pims.infrastructure.bootstrap import product_repository

ISO_DATE = click.DateTime(formats=["%Y-%m-%d"])


@click.command("dashboard")
@click.option("--as-of", type=ISO_DATE, default=None, help="Reference date (default: now).")
def dashboard(as_of: datetime | None) -> None:
    """Show inventory statistics."""
    dto = ShowDashboardHandler(product_repo=product_repository()).handle(
        as_of or datetime.now()
    )

    click.echo(f"Total products: {dto.total_products}")
    click.echo(f"Total units:    {dto.total_units:,}")
    click.echo(f"Total value:    {format_idr(dto.total_value)}")
    click.echo(
        f"Alerts:         {dto.low_stock_count} low stock, "
        f"{dto.expired_count} expired, {dto.expiring_soon_count} expiring soon"
    )
    click.echo()
    click.echo(f"  {'Category':<12} {'Products':>9} {'Units':>9} {'Value':>16}")
    click.echo(f"  {'-'*49}")
    for c in dto.categories:
        click.echo(f"  {c.category:<12} {c.products:>9} {c.units:>9} {format_idr(c.value):>16}")

    if dto.low_stock_preview:
        click.echo()
        click.echo("Low stock warning:")
        for p in dto.low_stock_preview:
            click.echo(f"  {p.name}  current: {p.quantity} {p.unit} | min: {p.min_stock}")


@click.command("alerts")
@click.option("--as-of", type=ISO_DATE, default=None, help="Reference date (default: now).")
def alerts(as_of: datetime | None) -> None:
    """Show low stock, expired and expiring products."""
    dto = ShowAlertsHandler(product_repo=product_repository()).handle(
        as_of or datetime.now()
    )

    click.echo(
        f"{dto.badge_count} alerts  "
        f"(critical: {dto.critical_count}, warning: {dto.warning_count})"
    )

    click.echo()
    click.echo(f"Low stock ({len(dto.low_stock)})")
    for line in dto.low_stock:
        p = line.product
        pct = "n/a" if line.stock_percentage is None else f"{line.stock_percentage}%"
        click.echo(
            f"  [{line.criticality.upper():<8}] {p.name:<24} {p.quantity}/{p.min_stock} "
            f"{p.unit} ({pct})  short {line.shortage}  reorder {format_idr(line.reorder_cost)}"
        )
        if line.also_expiring_soon:
            click.echo(f"             also expiring soon: {p.expiry_date.isoformat()}")

    click.echo()
    click.echo(f"Expired ({len(dto.expired)})")
    for p in dto.expired:
        click.echo(f"  {p.name:<24} expired {p.expiry_date.isoformat()}  batch {p.batch_number}")

    click.echo()
    click.echo(f"Expiring soon ({len(dto.expiring_soon)})")
    for line in dto.expiring_soon:
        p = line.product
        click.echo(
            f"  {p.name:<24} {p.expiry_date.isoformat()}  "
            f"in {line.days_until_expiry} days  batch {p.batch_number}"
        )
