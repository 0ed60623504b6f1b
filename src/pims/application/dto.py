"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Monetary fields hold
the raw integer Rupiah amount; turning them into display text is the
presentation layer's job.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

# --- Inputs -------------------------------------------------------------------


@dataclass(frozen=True)
class NewProduct:
    """Input: a product as entered on the product form (no ID yet)."""

    name: str
    category: str
    type: str
    quantity: int
    unit: str
    min_stock: int
    price: int
    supplier: str
    expiry_date: date
    batch_number: str
    storage_type: str


@dataclass(frozen=True)
class TransactionRequest:
    """Input: a stock movement as entered on the transaction form."""

    product_id: str
    type: str
    quantity: int
    reference: str = ""
    notes: str = ""
    supplier: str | None = None
    customer: str | None = None
    date: date | None = None  # defaults to the recording day


# --- Catalog ------------------------------------------------------------------


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    category: str
    type: str
    quantity: int
    unit: str
    min_stock: int
    price: int
    supplier: str
    expiry_date: date
    batch_number: str
    storage_type: str
    stock_value: int
    low_stock: bool
    expiry_flagged: bool  # expires within the inline half-year horizon


@dataclass(frozen=True)
class ProductListDTO:
    items: list[ProductDTO]
    total: int  # catalog size before filtering

    @property
    def shown(self) -> int:
        return len(self.items)


# --- Ledger -------------------------------------------------------------------


@dataclass(frozen=True)
class TransactionDTO:
    id: str
    date: date
    reference: str
    product_id: str
    product_name: str
    type: str
    quantity: int
    unit: str
    price: int
    total_amount: int
    partner: str
    notes: str
    supplier: str | None
    customer: str | None


@dataclass(frozen=True)
class TransactionListDTO:
    items: list[TransactionDTO]
    incoming_count: int
    incoming_total: int
    outgoing_count: int
    outgoing_total: int


# --- Alerts -------------------------------------------------------------------


@dataclass(frozen=True)
class LowStockLineDTO:
    product: ProductDTO
    criticality: str
    stock_percentage: int | None
    shortage: int
    reorder_cost: int
    also_expiring_soon: bool


@dataclass(frozen=True)
class ExpiryLineDTO:
    product: ProductDTO
    days_until_expiry: int


@dataclass(frozen=True)
class AlertsDTO:
    low_stock: list[LowStockLineDTO]
    expired: list[ProductDTO]
    expiring_soon: list[ExpiryLineDTO]
    critical_count: int
    warning_count: int
    badge_count: int


# --- Dashboard ----------------------------------------------------------------


@dataclass(frozen=True)
class CategoryStatsDTO:
    category: str
    products: int
    units: int
    value: int


@dataclass(frozen=True)
class DashboardDTO:
    total_products: int
    total_units: int
    total_value: int
    low_stock_count: int
    expired_count: int
    expiring_soon_count: int
    categories: list[CategoryStatsDTO]
    low_stock_preview: list[ProductDTO]


# --- Reports ------------------------------------------------------------------


@dataclass(frozen=True)
class ReportDTO:
    """Rows of one report kind, ready for a table or a CSV writer."""

    kind: str
    title: str
    window: str
    headers: tuple[str, ...]
    rows: list[tuple[str | int, ...]]
    summary: dict[str, int] = field(default_factory=dict)
