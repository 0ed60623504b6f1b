"""Domain service: Aggregator.

Read-only rollups over a catalog snapshot and a ledger snapshot.
Nothing here is cached; every call re-derives its result from the
inputs it is given.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Iterable

from dateutil.relativedelta import relativedelta

from pims.domain.exceptions import ValidationError
from pims.domain.model.product import Category, Product
from pims.domain.model.transaction import Transaction, TransactionType
from pims.domain.model.value_objects import Money
from pims.domain.service.classifier import as_date, is_low_stock


class DateWindow(Enum):
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    ALL = "all"

    @staticmethod
    def parse(raw: str | DateWindow) -> DateWindow:
        if isinstance(raw, DateWindow):
            return raw
        try:
            return DateWindow(str(raw).strip().lower())
        except ValueError as exc:
            raise ValidationError(
                f"Unknown date window '{raw}' (expected today, week, month or all)"
            ) from exc

    def lower_bound(self, now: date | datetime) -> date | None:
        """First calendar day inside the window, or None for ALL."""
        today = as_date(now)
        if self is DateWindow.TODAY:
            return today
        if self is DateWindow.WEEK:
            return today - timedelta(days=7)
        if self is DateWindow.MONTH:
            return today - relativedelta(months=1)
        return None


@dataclass(frozen=True)
class TypeTotals:
    count: int
    amount: Money


@dataclass(frozen=True)
class TransactionSummary:
    incoming: TypeTotals
    outgoing: TypeTotals

    @property
    def count(self) -> int:
        return self.incoming.count + self.outgoing.count


# --- Valuation ----------------------------------------------------------------


def total_value(products: Iterable[Product]) -> Money:
    result = Money.zero()
    for product in products:
        result = result + product.stock_value
    return result


def total_units(products: Iterable[Product]) -> int:
    return sum(p.quantity for p in products)


def in_category(products: Iterable[Product], category: Category) -> list[Product]:
    return [p for p in products if p.category is category]


def category_value(products: Iterable[Product], category: Category) -> Money:
    return total_value(in_category(products, category))


# --- Reorder cost -------------------------------------------------------------


def shortage_cost(product: Product) -> Money:
    """Cost of topping a product back up to its minimum stock."""
    return product.reorder_cost


def total_shortage_cost(products: Iterable[Product]) -> Money:
    result = Money.zero()
    for product in products:
        if is_low_stock(product):
            result = result + shortage_cost(product)
    return result


# --- Transactions -------------------------------------------------------------


def filter_by_window(
    transactions: Iterable[Transaction],
    window: DateWindow,
    now: date | datetime,
) -> list[Transaction]:
    """Keep transactions dated inside ``[lower bound, today]``."""
    lower = window.lower_bound(now)
    if lower is None:
        return list(transactions)
    today = as_date(now)
    return [t for t in transactions if lower <= t.date <= today]


def summarize(transactions: Iterable[Transaction]) -> TransactionSummary:
    counts = {TransactionType.INCOMING: 0, TransactionType.OUTGOING: 0}
    amounts = {TransactionType.INCOMING: Money.zero(), TransactionType.OUTGOING: Money.zero()}
    for t in transactions:
        counts[t.type] += 1
        amounts[t.type] = amounts[t.type] + t.total_amount
    return TransactionSummary(
        incoming=TypeTotals(counts[TransactionType.INCOMING], amounts[TransactionType.INCOMING]),
        outgoing=TypeTotals(counts[TransactionType.OUTGOING], amounts[TransactionType.OUTGOING]),
    )


# --- Expiry -------------------------------------------------------------------


def days_until_expiry(product: Product, now: date | datetime) -> int:
    """Whole days until the expiry date, rounding partial days up."""
    if not isinstance(now, datetime):
        return (product.expiry_date - now).days
    expiry = datetime.combine(product.expiry_date, time.min, tzinfo=now.tzinfo)
    return math.ceil((expiry - now).total_seconds() / 86400)
