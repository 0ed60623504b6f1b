"""Unit tests for the reporting aggregator."""

from datetime import date, datetime, timezone

import pytest

from pims.domain.exceptions import ValidationError
from pims.domain.model.product import Category
from pims.domain.model.transaction import Transaction, TransactionType
from pims.domain.model.value_objects import Money, Quantity
from pims.domain.service.aggregator import (
    DateWindow,
    category_value,
    days_until_expiry,
    filter_by_window,
    shortage_cost,
    summarize,
    total_shortage_cost,
    total_units,
    total_value,
)
from tests.fakes import make_product

TODAY = date(2025, 6, 15)


def _txn(id: str, on: date, type_=TransactionType.OUTGOING, qty=1, price=1000) -> Transaction:
    return Transaction(
        id=id,
        product_id="1",
        product_name="Paracetamol 500mg",
        type=type_,
        quantity=Quantity(qty),
        unit="tablets",
        price=Money(price),
        date=on,
    )


# ── Valuation ────────────────────────────────────────────────────────────────


class TestValuation:

    def _catalog(self):
        return [
            make_product(id="1", quantity=500, price=5000),
            make_product(id="2", quantity=80, price=15000, category=Category.SUPPLEMENT),
            make_product(id="3", quantity=0, price=450000),
        ]

    def test_total_value(self):
        assert total_value(self._catalog()) == Money(2500000 + 1200000)

    def test_category_subtotals_add_up(self):
        catalog = self._catalog()
        medicine = category_value(catalog, Category.MEDICINE)
        supplement = category_value(catalog, Category.SUPPLEMENT)
        assert medicine == Money(2500000)
        assert supplement == Money(1200000)
        assert medicine + supplement == total_value(catalog)

    def test_total_units(self):
        assert total_units(self._catalog()) == 580

    def test_empty_catalog_is_zero(self):
        assert total_value([]) == Money(0)


# ── Shortage cost ────────────────────────────────────────────────────────────


class TestShortageCost:

    def test_low_stock_product(self):
        p = make_product(quantity=80, min_stock=100, price=15000)
        assert shortage_cost(p) == Money(300000)

    def test_at_threshold_costs_nothing(self):
        p = make_product(quantity=100, min_stock=100, price=15000)
        assert shortage_cost(p) == Money(0)

    def test_total_only_counts_low_stock(self):
        catalog = [
            make_product(id="1", quantity=80, min_stock=100, price=15000),
            make_product(id="2", quantity=45, min_stock=50, price=25000),
            make_product(id="3", quantity=500, min_stock=100, price=5000),
        ]
        assert total_shortage_cost(catalog) == Money(300000 + 125000)


# ── Transaction windows ──────────────────────────────────────────────────────


class TestDateWindow:

    def _ledger(self):
        return [
            _txn("TRX-006", date(2025, 6, 16)),  # future-dated
            _txn("TRX-005", date(2025, 6, 15)),
            _txn("TRX-004", date(2025, 6, 8)),
            _txn("TRX-003", date(2025, 6, 7)),
            _txn("TRX-002", date(2025, 5, 15)),
            _txn("TRX-001", date(2025, 5, 14)),
        ]

    def _ids(self, window):
        return [t.id for t in filter_by_window(self._ledger(), window, TODAY)]

    def test_today(self):
        assert self._ids(DateWindow.TODAY) == ["TRX-005"]

    def test_week_includes_lower_bound(self):
        assert self._ids(DateWindow.WEEK) == ["TRX-005", "TRX-004"]

    def test_month_is_one_calendar_month(self):
        assert self._ids(DateWindow.MONTH) == ["TRX-005", "TRX-004", "TRX-003", "TRX-002"]

    def test_all_keeps_everything(self):
        assert len(self._ids(DateWindow.ALL)) == 6

    def test_time_of_day_does_not_matter(self):
        late = datetime(2025, 6, 15, 23, 59)
        assert [t.id for t in filter_by_window(self._ledger(), DateWindow.TODAY, late)] == ["TRX-005"]

    def test_parse(self):
        assert DateWindow.parse("Week") is DateWindow.WEEK

    def test_parse_unknown(self):
        with pytest.raises(ValidationError, match="Unknown date window"):
            DateWindow.parse("year")


class TestSummarize:

    def test_partitions_by_type(self):
        ledger = [
            _txn("TRX-003", TODAY, TransactionType.OUTGOING, qty=20, price=15000),
            _txn("TRX-002", TODAY, TransactionType.OUTGOING, qty=50, price=5000),
            _txn("TRX-001", TODAY, TransactionType.INCOMING, qty=200, price=5000),
        ]
        summary = summarize(ledger)
        assert summary.incoming.count == 1
        assert summary.incoming.amount == Money(1000000)
        assert summary.outgoing.count == 2
        assert summary.outgoing.amount == Money(550000)
        assert summary.count == 3

    def test_empty(self):
        summary = summarize([])
        assert summary.count == 0
        assert summary.outgoing.amount == Money(0)


# ── Days until expiry ────────────────────────────────────────────────────────


class TestDaysUntilExpiry:

    def test_plain_date(self):
        assert days_until_expiry(make_product(expiry_date=date(2025, 6, 25)), TODAY) == 10

    def test_partial_day_rounds_up(self):
        now = datetime(2025, 6, 15, 14, 30)
        assert days_until_expiry(make_product(expiry_date=date(2025, 6, 25)), now) == 10

    def test_at_midnight_is_exact(self):
        now = datetime(2025, 6, 15)
        assert days_until_expiry(make_product(expiry_date=date(2025, 6, 16)), now) == 1

    def test_timezone_aware_now(self):
        now = datetime(2025, 6, 15, 6, 0, tzinfo=timezone.utc)
        assert days_until_expiry(make_product(expiry_date=date(2025, 6, 17)), now) == 2
