"""Domain -> DTO mapping shared by the query handlers."""

from __future__ import annotations

from datetime import date, datetime

from pims.application.dto import ProductDTO, TransactionDTO
from pims.domain.model.product import Product
from pims.domain.model.transaction import Transaction
from pims.domain.service.classifier import is_expiry_flagged, is_low_stock


def to_product_dto(product: Product, now: date | datetime) -> ProductDTO:
    return ProductDTO(
        id=product.id,  # type: ignore[arg-type]
        name=product.name,
        category=product.category.value,
        type=product.type,
        quantity=product.quantity,
        unit=product.unit,
        min_stock=product.min_stock,
        price=product.price.amount,
        supplier=product.supplier,
        expiry_date=product.expiry_date,
        batch_number=product.batch_number,
        storage_type=product.storage_type,
        stock_value=product.stock_value.amount,
        low_stock=is_low_stock(product),
        expiry_flagged=is_expiry_flagged(product, now),
    )


def to_transaction_dto(transaction: Transaction) -> TransactionDTO:
    return TransactionDTO(
        id=transaction.id,
        date=transaction.date,
        reference=transaction.reference,
        product_id=transaction.product_id,
        product_name=transaction.product_name,
        type=transaction.type.value,
        quantity=transaction.quantity.value,
        unit=transaction.unit,
        price=transaction.price.amount,
        total_amount=transaction.total_amount.amount,
        partner=transaction.partner,
        notes=transaction.notes,
        supplier=transaction.supplier,
        customer=transaction.customer,
    )
