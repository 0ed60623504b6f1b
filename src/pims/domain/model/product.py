"""Product aggregate.

Products make up the pharmacy catalog. They own their live stock level;
transactions only reference them by id and never own or cascade with them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from pims.domain.exceptions import ValidationError
from pims.domain.model.value_objects import Money


class Category(Enum):
    MEDICINE = "medicine"
    SUPPLEMENT = "supplement"

    @staticmethod
    def parse(raw: str | Category) -> Category:
        if isinstance(raw, Category):
            return raw
        try:
            return Category(str(raw).strip().lower())
        except ValueError as exc:
            raise ValidationError(
                f"Unknown category '{raw}' (expected medicine or supplement)"
            ) from exc


# Free-text fields the product form marks as required.
_REQUIRED_TEXT_FIELDS = (
    ("name", "Product name"),
    ("type", "Product type"),
    ("unit", "Unit"),
    ("supplier", "Supplier"),
    ("batch_number", "Batch number"),
    ("storage_type", "Storage type"),
)


@dataclass
class Product:
    """A medicine or supplement in the catalog.

    Invariants:
    - ``quantity`` is never negative
    - ``min_stock`` is a reorder threshold only; stock may fall below it

    Use ``Product.create()`` for new products.  The ``__init__`` stays
    simple so repositories and seed data can build records directly.
    """

    id: str | None
    name: str
    category: Category
    type: str
    quantity: int
    unit: str
    min_stock: int
    price: Money
    supplier: str
    expiry_date: date
    batch_number: str
    storage_type: str

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: str,
        category: str | Category,
        type: str,
        quantity: int,
        unit: str,
        min_stock: int,
        price: int | str | Money,
        supplier: str,
        expiry_date: date,
        batch_number: str,
        storage_type: str,
    ) -> Product:
        """Build a product without an id, enforcing all invariants."""
        if not isinstance(price, Money):
            price = Money.of(price)
        product = Product(
            id=None,
            name=name,
            category=Category.parse(category),
            type=type,
            quantity=quantity,
            unit=unit,
            min_stock=min_stock,
            price=price,
            supplier=supplier,
            expiry_date=expiry_date,
            batch_number=batch_number,
            storage_type=storage_type,
        )
        product.validate()
        return product

    def validate(self) -> None:
        """Check every field; raises ValidationError on the first problem."""
        for attr, label in _REQUIRED_TEXT_FIELDS:
            value = getattr(self, attr)
            if not isinstance(value, str) or not value.strip():
                raise ValidationError(f"{label} is required")

        if not isinstance(self.category, Category):
            self.category = Category.parse(self.category)

        _require_non_negative_int(self.quantity, "Quantity")
        _require_non_negative_int(self.min_stock, "Minimum stock")

        if not isinstance(self.price, Money):
            raise ValidationError("Price must be a Money amount")

        if isinstance(self.expiry_date, datetime):
            self.expiry_date = self.expiry_date.date()
        elif not isinstance(self.expiry_date, date):
            raise ValidationError("Expiry date is required")

    # --- Stock movements ------------------------------------------------------

    def receive(self, quantity: int) -> None:
        self.quantity += quantity

    def dispense(self, quantity: int) -> int:
        """Deduct *quantity*, flooring stock at zero.

        Returns the number of units that could not be covered by stock
        (zero for a normal sale).
        """
        uncovered = max(0, quantity - self.quantity)
        self.quantity = max(0, self.quantity - quantity)
        return uncovered

    # --- Computed properties --------------------------------------------------

    @property
    def stock_value(self) -> Money:
        return self.price * self.quantity

    @property
    def shortage(self) -> int:
        """Units needed to bring stock back up to ``min_stock``."""
        return max(0, self.min_stock - self.quantity)

    @property
    def reorder_cost(self) -> Money:
        return self.price * self.shortage


def _require_non_negative_int(value: object, label: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{label} must be a whole number")
    if value < 0:
        raise ValidationError(f"{label} cannot be negative, got {value}")
