"""Application service: Build Report use case (query).

Produces the exact rows and column headers of one report kind.  Text
fields stay strings and numeric fields stay integers so a CSV writer
can quote the former and leave the latter bare.
"""

from __future__ import annotations

import logging
from datetime import date, datetime

from pims.application.dto import ReportDTO
from pims.domain.exceptions import ValidationError
from pims.domain.model.product import Product
from pims.domain.model.transaction import Transaction
from pims.domain.repository.product_repository import ProductRepository
from pims.domain.repository.transaction_repository import TransactionRepository
from pims.domain.service.aggregator import (
    DateWindow,
    filter_by_window,
    summarize,
    total_shortage_cost,
    total_value,
)
from pims.domain.service.classifier import classify

logger = logging.getLogger(__name__)

STOCK_HEADERS = (
    "Product Name", "Category", "Type", "Quantity", "Unit", "Price",
    "Supplier", "Expiry Date", "Batch Number", "Storage",
)
LOW_STOCK_HEADERS = (
    "Product Name", "Category", "Current Stock", "Minimum Stock", "Shortage", "Supplier",
)
EXPIRY_HEADERS = (
    "Product Name", "Category", "Quantity", "Unit", "Expiry Date", "Supplier", "Batch Number",
)
TRANSACTION_HEADERS = (
    "Date", "Reference", "Product", "Type", "Quantity", "Unit", "Total Amount", "Partner",
)

REPORT_TITLES = {
    "stock": "Stock Report",
    "lowstock": "Low Stock Report",
    "expired": "Expired Products Report",
    "expiring": "Expiring Products Report",
    "transactions": "Transactions Report",
}


class BuildReportHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        transaction_repo: TransactionRepository,
    ) -> None:
        self._product_repo = product_repo
        self._transaction_repo = transaction_repo

    def handle(
        self,
        kind: str,
        now: date | datetime,
        window: str = "all",
    ) -> ReportDTO:
        """Build a report.

        Args:
            kind: One of ``stock``, ``lowstock``, ``expired``, ``expiring``
                or ``transactions``.
            now: Reference instant for the alert sets and the date window.
            window: ``today``, ``week``, ``month`` or ``all``.  Only the
                transactions report is windowed.
        """
        if kind not in REPORT_TITLES:
            raise ValidationError(
                f"Unknown report kind '{kind}' "
                f"(expected one of {', '.join(REPORT_TITLES)})"
            )
        date_window = DateWindow.parse(window)

        products = self._product_repo.list_all()
        alerts = classify(products, now)
        summary: dict[str, int] = {}

        if kind == "stock":
            headers = STOCK_HEADERS
            rows = [self._stock_row(p) for p in products]
            summary["total_value"] = total_value(products).amount
        elif kind == "lowstock":
            headers = LOW_STOCK_HEADERS
            rows = [self._low_stock_row(p) for p in alerts.low_stock]
            summary["total_reorder_cost"] = total_shortage_cost(alerts.low_stock).amount
        elif kind == "expired":
            headers = EXPIRY_HEADERS
            rows = [self._expiry_row(p) for p in alerts.expired]
        elif kind == "expiring":
            headers = EXPIRY_HEADERS
            rows = [self._expiry_row(p) for p in alerts.expiring_soon]
        else:
            headers = TRANSACTION_HEADERS
            ledger = filter_by_window(self._transaction_repo.list_all(), date_window, now)
            rows = [self._transaction_row(t) for t in ledger]
            totals = summarize(ledger)
            summary.update(
                transactions=totals.count,
                incoming_count=totals.incoming.count,
                incoming_total=totals.incoming.amount.amount,
                outgoing_count=totals.outgoing.count,
                outgoing_total=totals.outgoing.amount.amount,
            )

        logger.debug("Built %s report with %d rows", kind, len(rows))
        return ReportDTO(
            kind=kind,
            title=REPORT_TITLES[kind],
            window=date_window.value,
            headers=headers,
            rows=rows,
            summary=summary,
        )

    # --- Row builders ---------------------------------------------------------

    @staticmethod
    def _stock_row(p: Product) -> tuple[str | int, ...]:
        return (
            p.name, p.category.value, p.type, p.quantity, p.unit, p.price.amount,
            p.supplier, p.expiry_date.isoformat(), p.batch_number, p.storage_type,
        )

    @staticmethod
    def _low_stock_row(p: Product) -> tuple[str | int, ...]:
        return (p.name, p.category.value, p.quantity, p.min_stock, p.shortage, p.supplier)

    @staticmethod
    def _expiry_row(p: Product) -> tuple[str | int, ...]:
        return (
            p.name, p.category.value, p.quantity, p.unit,
            p.expiry_date.isoformat(), p.supplier, p.batch_number,
        )

    @staticmethod
    def _transaction_row(t: Transaction) -> tuple[str | int, ...]:
        return (
            t.date.isoformat(), t.reference, t.product_name, t.type.value,
            t.quantity.value, t.unit, t.total_amount.amount, t.partner,
        )
