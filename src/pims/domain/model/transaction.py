"""Transaction entity — one stock movement recorded in the ledger.

A Transaction captures a snapshot of the product (name, unit, price) at
recording time.  Renaming or repricing the product later never changes
a transaction that already exists.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from pims.domain.exceptions import ValidationError
from pims.domain.model.product import Product
from pims.domain.model.value_objects import Money, Quantity


class TransactionType(Enum):
    INCOMING = "incoming"
    OUTGOING = "outgoing"

    @staticmethod
    def parse(raw: str | TransactionType) -> TransactionType:
        if isinstance(raw, TransactionType):
            return raw
        try:
            return TransactionType(str(raw).strip().lower())
        except ValueError as exc:
            raise ValidationError(
                f"Unknown transaction type '{raw}' (expected incoming or outgoing)"
            ) from exc


ID_PREFIX = "TRX-"


def transaction_id_for(position: int) -> str:
    """Ledger position (1-based) -> ``TRX-004`` style identifier."""
    return f"{ID_PREFIX}{position:03d}"


@dataclass(frozen=True)
class Transaction:
    """Immutable ledger entry.

    ``supplier`` is set only on incoming transactions and ``customer``
    only on outgoing ones; the other is always None.  When the matching
    partner is not given it is stored as an empty string, not None.
    """

    id: str
    product_id: str
    product_name: str  # snapshot, not re-synced on rename
    type: TransactionType
    quantity: Quantity
    unit: str
    price: Money  # locked at recording time
    date: date
    reference: str = ""
    notes: str = ""
    supplier: str | None = None
    customer: str | None = None

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def record(
        id: str,
        product: Product,
        type: TransactionType,
        quantity: Quantity,
        on: date,
        reference: str = "",
        notes: str = "",
        supplier: str | None = None,
        customer: str | None = None,
    ) -> Transaction:
        """Snapshot *product* into a new transaction.

        Only the partner matching the transaction type is kept.
        """
        incoming = type is TransactionType.INCOMING
        return Transaction(
            id=id,
            product_id=product.id,  # type: ignore[arg-type]
            product_name=product.name,
            type=type,
            quantity=quantity,
            unit=product.unit,
            price=product.price,
            date=on,
            reference=reference or "",
            notes=notes or "",
            supplier=(supplier or "") if incoming else None,
            customer=None if incoming else (customer or ""),
        )

    # --- Computed properties --------------------------------------------------

    @property
    def total_amount(self) -> Money:
        return self.price * self.quantity.value

    @property
    def partner(self) -> str:
        return self.supplier or self.customer or "-"

    @property
    def is_incoming(self) -> bool:
        return self.type is TransactionType.INCOMING
