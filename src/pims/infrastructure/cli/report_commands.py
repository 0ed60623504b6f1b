"""CLI commands for reports and CSV export."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import click

from pims.application.build_report import REPORT_TITLES, BuildReportHandler
from pims.application.dto import ReportDTO
from pims.domain.exceptions import DomainException
from pims.domain.model.value_objects import format_idr
from pims.infrastructure.bootstrap import (
    product_repository,
    settings,
    transaction_repository,
)
from pims.infrastructure.csv_export import DEFAULT_FILENAMES, write_csv

ISO_DATE = click.DateTime(formats=["%Y-%m-%d"])
KINDS = click.Choice(list(REPORT_TITLES))
WINDOWS = click.Choice(["today", "week", "month", "all"])

# Summary keys holding Rupiah amounts
_MONEY_KEYS = {"total_value", "total_reorder_cost", "incoming_total", "outgoing_total"}


def _build(kind: str, window: str, as_of: datetime | None) -> ReportDTO:
    handler = BuildReportHandler(
        product_repo=product_repository(),
        transaction_repo=transaction_repository(),
    )
    try:
        return handler.handle(kind, now=as_of or datetime.now(), window=window)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("show")
@click.option("--kind", required=True, type=KINDS)
@click.option("--window", type=WINDOWS, default="all", show_default=True,
              help="Date window (transactions report only).")
@click.option("--as-of", type=ISO_DATE, default=None, help="Reference date (default: now).")
def report_show(kind: str, window: str, as_of: datetime | None) -> None:
    """Print a report."""
    report = _build(kind, window, as_of)

    click.echo(report.title)
    click.echo(" | ".join(report.headers))
    click.echo("-" * 80)
    if not report.rows:
        click.echo("(no rows)")
    for row in report.rows:
        click.echo(" | ".join(str(cell) for cell in row))

    if report.summary:
        click.echo("-" * 80)
        for key, value in report.summary.items():
            shown = format_idr(value) if key in _MONEY_KEYS else str(value)
            click.echo(f"{key.replace('_', ' ')}: {shown}")


@click.command("export")
@click.option("--kind", required=True, type=KINDS)
@click.option("--window", type=WINDOWS, default="all", show_default=True)
@click.option("--as-of", type=ISO_DATE, default=None)
@click.option("--output", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Target file (default: <export dir>/<kind>_report.csv).")
def report_export(kind: str, window: str, as_of: datetime | None, output: Path | None) -> None:
    """Export a report as CSV."""
    report = _build(kind, window, as_of)
    target = output or settings().export_dir / DEFAULT_FILENAMES[kind]
    write_csv(report, target)
    click.echo(f"{report.title}: {len(report.rows)} rows written to {target}")
