"""Integration tests for the BuildReport use case."""

from datetime import date

import pytest

from pims.application.build_report import (
    EXPIRY_HEADERS,
    LOW_STOCK_HEADERS,
    STOCK_HEADERS,
    TRANSACTION_HEADERS,
    BuildReportHandler,
)
from pims.domain.exceptions import ValidationError
from pims.domain.model.transaction import Transaction, TransactionType
from pims.domain.model.value_objects import Money, Quantity
from pims.infrastructure.persistence.memory_product_repository import (
    InMemoryProductRepository,
)
from pims.infrastructure.persistence.memory_transaction_repository import (
    InMemoryTransactionRepository,
)
from pims.infrastructure.seed import demo_products, demo_transactions

NOW = date(2025, 6, 15)


def _handler(transactions=None) -> BuildReportHandler:
    return BuildReportHandler(
        InMemoryProductRepository(demo_products()),
        InMemoryTransactionRepository(
            demo_transactions() if transactions is None else transactions
        ),
    )


class TestStockReport:

    def test_headers_and_rows(self):
        report = _handler().handle("stock", NOW)
        assert report.headers == STOCK_HEADERS
        assert len(report.rows) == 9
        assert report.rows[0] == (
            "Paracetamol 500mg", "medicine", "Tablet", 500, "tablets", 5000,
            "PT Kimia Farma", "2025-12-31", "PARA-2024-001", "Room Temperature",
        )

    def test_total_value_summary(self):
        report = _handler().handle("stock", NOW)
        expected = sum(row[3] * row[5] for row in report.rows)
        assert report.summary["total_value"] == expected


class TestLowStockReport:

    def test_rows_carry_shortage(self):
        report = _handler().handle("lowstock", NOW)
        assert report.headers == LOW_STOCK_HEADERS
        rows = {row[0]: row for row in report.rows}
        assert rows["Vitamin C 1000mg"] == (
            "Vitamin C 1000mg", "supplement", 80, 100, 20, "PT Natura",
        )

    def test_reorder_cost_summary(self):
        report = _handler().handle("lowstock", NOW)
        # 20 x 15.000 + 5 x 25.000 + 30 x 35.000 + 5 x 450.000
        assert report.summary["total_reorder_cost"] == 300000 + 125000 + 1050000 + 2250000


class TestExpiryReports:

    def test_expired(self):
        report = _handler().handle("expired", NOW)
        assert report.headers == EXPIRY_HEADERS
        assert [row[0] for row in report.rows] == ["Insulin Glargine"]

    def test_expiring(self):
        report = _handler().handle("expiring", NOW)
        # Omeprazole (2025-09-30) is just past the three-month horizon
        assert [row[0] for row in report.rows] == ["Amoxicillin 500mg"]


class TestTransactionsReport:

    def _ledger(self):
        def txn(id, on, type_):
            return Transaction(
                id=id, product_id="1", product_name="Paracetamol 500mg", type=type_,
                quantity=Quantity(10), unit="tablets", price=Money(5000), date=on,
                reference=f"REF-{id}",
                supplier="PT Kimia Farma" if type_ is TransactionType.INCOMING else None,
                customer=None if type_ is TransactionType.INCOMING else "",
            )
        return [
            txn("TRX-003", date(2025, 6, 15), TransactionType.OUTGOING),
            txn("TRX-002", date(2025, 6, 10), TransactionType.INCOMING),
            txn("TRX-001", date(2025, 1, 10), TransactionType.OUTGOING),
        ]

    def test_all_rows(self):
        report = _handler(self._ledger()).handle("transactions", NOW)
        assert report.headers == TRANSACTION_HEADERS
        assert report.rows[1] == (
            "2025-06-10", "REF-TRX-002", "Paracetamol 500mg", "incoming",
            10, "tablets", 50000, "PT Kimia Farma",
        )
        # empty customer falls back to a dash
        assert report.rows[0][-1] == "-"

    def test_window_applies_to_rows_and_summary(self):
        report = _handler(self._ledger()).handle("transactions", NOW, window="week")
        assert [row[1] for row in report.rows] == ["REF-TRX-003", "REF-TRX-002"]
        assert report.window == "week"
        assert report.summary == {
            "transactions": 2,
            "incoming_count": 1,
            "incoming_total": 50000,
            "outgoing_count": 1,
            "outgoing_total": 50000,
        }

    def test_today_window(self):
        report = _handler(self._ledger()).handle("transactions", NOW, window="today")
        assert len(report.rows) == 1


class TestReportValidation:

    def test_unknown_kind(self):
        with pytest.raises(ValidationError, match="Unknown report kind"):
            _handler().handle("sales", NOW)

    def test_unknown_window(self):
        with pytest.raises(ValidationError, match="Unknown date window"):
            _handler().handle("transactions", NOW, window="decade")
