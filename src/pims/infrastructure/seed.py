"""Demo catalog and ledger loaded into the in-memory stores at startup."""

from __future__ import annotations

from datetime import date

from pims.domain.model.product import Category, Product
from pims.domain.model.transaction import Transaction, TransactionType
from pims.domain.model.value_objects import Money, Quantity

_M = Category.MEDICINE
_S = Category.SUPPLEMENT

# id, name, category, type, quantity, unit, min stock, price, supplier,
# expiry, batch, storage
_PRODUCTS = [
    ("1", "Paracetamol 500mg", _M, "Tablet", 500, "tablets", 100, 5000,
     "PT Kimia Farma", date(2025, 12, 31), "PARA-2024-001", "Room Temperature"),
    ("2", "Amoxicillin 500mg", _M, "Capsule", 300, "capsules", 150, 8000,
     "PT Kalbe Farma", date(2025, 8, 15), "AMOX-2024-012", "Room Temperature"),
    ("3", "Vitamin C 1000mg", _S, "Tablet", 80, "tablets", 100, 15000,
     "PT Natura", date(2026, 3, 20), "VITC-2024-005", "Room Temperature"),
    ("4", "Ibuprofen 400mg", _M, "Tablet", 250, "tablets", 100, 6500,
     "PT Kimia Farma", date(2025, 10, 10), "IBU-2024-003", "Room Temperature"),
    ("5", "Multivitamin Complex", _S, "Capsule", 45, "capsules", 50, 25000,
     "PT Wellness Indo", date(2026, 1, 15), "MULTI-2024-008", "Cool Place"),
    ("6", "Omeprazole 20mg", _M, "Capsule", 180, "capsules", 80, 12000,
     "PT Kalbe Farma", date(2025, 9, 30), "OMEP-2024-006", "Room Temperature"),
    ("7", "Fish Oil Omega 3", _S, "Softgel", 30, "softgels", 60, 35000,
     "PT Natura", date(2026, 6, 30), "FISH-2024-011", "Cool Place"),
    ("8", "Cetirizine 10mg", _M, "Tablet", 400, "tablets", 120, 4500,
     "PT Dexa Medica", date(2025, 11, 20), "CETI-2024-009", "Room Temperature"),
    ("9", "Insulin Glargine", _M, "Injection", 15, "vials", 20, 450000,
     "PT Sanofi Indonesia", date(2025, 3, 15), "INS-2024-007", "Refrigerated"),
]


def demo_products() -> list[Product]:
    return [
        Product(
            id=pid,
            name=name,
            category=category,
            type=type_,
            quantity=quantity,
            unit=unit,
            min_stock=min_stock,
            price=Money(price),
            supplier=supplier,
            expiry_date=expiry,
            batch_number=batch,
            storage_type=storage,
        )
        for (pid, name, category, type_, quantity, unit, min_stock, price,
             supplier, expiry, batch, storage) in _PRODUCTS
    ]


def demo_transactions() -> list[Transaction]:
    """Historical ledger, newest first.

    These entries predate the demo stock levels, so they are loaded as
    history and are not re-applied to the catalog.
    """
    return [
        Transaction(
            id="TRX-003",
            product_id="3",
            product_name="Vitamin C 1000mg",
            type=TransactionType.OUTGOING,
            quantity=Quantity(20),
            unit="tablets",
            price=Money(15000),
            date=date(2024, 12, 3),
            reference="INV-2024-046",
            notes="Customer purchase",
            customer="Walk-in Customer",
        ),
        Transaction(
            id="TRX-002",
            product_id="1",
            product_name="Paracetamol 500mg",
            type=TransactionType.OUTGOING,
            quantity=Quantity(50),
            unit="tablets",
            price=Money(5000),
            date=date(2024, 12, 2),
            reference="INV-2024-045",
            notes="Customer purchase",
            customer="Walk-in Customer",
        ),
        Transaction(
            id="TRX-001",
            product_id="1",
            product_name="Paracetamol 500mg",
            type=TransactionType.INCOMING,
            quantity=Quantity(200),
            unit="tablets",
            price=Money(5000),
            date=date(2024, 12, 1),
            reference="PO-2024-001",
            notes="Regular stock replenishment",
            supplier="PT Kimia Farma",
        ),
    ]
