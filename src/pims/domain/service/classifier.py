"""Domain service: Stock Classifier.

Pure projections of a catalog snapshot as of a reference instant.  The
alert sets are non-exclusive: one product can be low on stock and
expiring soon at the same time.

Two expiry horizons exist and are kept separate on purpose:

- ``EXPIRY_ALERT_MONTHS`` drives the expiring-soon alert set.
- ``EXPIRY_FLAG_MONTHS`` drives the inline badge in catalog listings.

All date comparisons use the calendar date of ``now``; its time of day
never changes the outcome.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Iterable

from dateutil.relativedelta import relativedelta

from pims.domain.model.product import Product

logger = logging.getLogger(__name__)

EXPIRY_ALERT_MONTHS = 3
EXPIRY_FLAG_MONTHS = 6


class CriticalityLevel(Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    NORMAL = "normal"


@dataclass(frozen=True)
class StockAlerts:
    """The three alert sets, each in catalog order."""

    low_stock: list[Product]
    expired: list[Product]
    expiring_soon: list[Product]

    @property
    def total(self) -> int:
        """Badge count: a product in two sets is counted twice."""
        return len(self.low_stock) + len(self.expired) + len(self.expiring_soon)


def as_date(now: date | datetime) -> date:
    if isinstance(now, datetime):
        return now.date()
    return now


# --- Single-product predicates ------------------------------------------------


def is_low_stock(product: Product) -> bool:
    return product.quantity <= product.min_stock


def is_expired(product: Product, now: date | datetime) -> bool:
    return product.expiry_date < as_date(now)


def is_expiring_soon(product: Product, now: date | datetime) -> bool:
    today = as_date(now)
    return today < product.expiry_date <= today + relativedelta(months=EXPIRY_ALERT_MONTHS)


def is_expiry_flagged(product: Product, now: date | datetime) -> bool:
    """Inline listing flag: expires within the next half year.

    Unlike the alert window there is no lower bound, so expired stock
    stays flagged.
    """
    horizon = as_date(now) + relativedelta(months=EXPIRY_FLAG_MONTHS)
    return product.expiry_date <= horizon


def criticality(product: Product) -> CriticalityLevel:
    """Severity tier from the ratio ``quantity / min_stock``.

    A product without a reorder threshold (``min_stock == 0``) is always
    NORMAL.  Ratios are compared in integer arithmetic.
    """
    if product.min_stock == 0:
        return CriticalityLevel.NORMAL
    if product.quantity * 2 <= product.min_stock:
        return CriticalityLevel.CRITICAL
    if product.quantity <= product.min_stock:
        return CriticalityLevel.WARNING
    return CriticalityLevel.NORMAL


def stock_percentage(product: Product) -> int | None:
    """Stock level as a whole percentage of ``min_stock`` (None without one)."""
    if product.min_stock == 0:
        return None
    return round(product.quantity * 100 / product.min_stock)


# --- Catalog-wide projections -------------------------------------------------


def classify(products: Iterable[Product], now: date | datetime) -> StockAlerts:
    """Partition a catalog snapshot into the three alert sets."""
    catalog = list(products)
    alerts = StockAlerts(
        low_stock=[p for p in catalog if is_low_stock(p)],
        expired=[p for p in catalog if is_expired(p, now)],
        expiring_soon=[p for p in catalog if is_expiring_soon(p, now)],
    )
    logger.debug(
        "Classified %d products as of %s: %d low, %d expired, %d expiring",
        len(catalog),
        as_date(now),
        len(alerts.low_stock),
        len(alerts.expired),
        len(alerts.expiring_soon),
    )
    return alerts
