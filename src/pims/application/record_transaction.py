"""Application service: Record Transaction use case.

This is the only use case that touches both the catalog and the ledger.
It records the movement and adjusts stock as one unit:

  Phase 1 — validate and build: parse the request, resolve the product,
            snapshot it into a Transaction and compute the new stock
            level on a detached copy.  Nothing is stored yet, so any
            error here leaves both stores untouched.
  Phase 2 — commit: save the product, then append to the ledger.  If
            the append fails the previous product record is put back
            before the error propagates.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date

from pims.application.dto import TransactionDTO, TransactionRequest
from pims.application.mappers import to_transaction_dto
from pims.domain.exceptions import NotFoundError
from pims.domain.model.transaction import (
    Transaction,
    TransactionType,
    transaction_id_for,
)
from pims.domain.model.value_objects import Quantity
from pims.domain.repository.product_repository import ProductRepository
from pims.domain.repository.transaction_repository import TransactionRepository
from pims.domain.service.classifier import as_date
from pims.domain.service.stock_mutator import StockMutator

logger = logging.getLogger(__name__)


class RecordTransactionHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        transaction_repo: TransactionRepository,
        stock_mutator: StockMutator | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._transaction_repo = transaction_repo
        self._stock_mutator = stock_mutator or StockMutator()

    def handle(self, request: TransactionRequest) -> TransactionDTO:
        # Phase 1: validate and build
        quantity = Quantity(request.quantity)
        type_ = TransactionType.parse(request.type)

        product = self._product_repo.get_by_id(request.product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{request.product_id}' not found")
        previous = replace(product)

        transaction = Transaction.record(
            id=transaction_id_for(self._transaction_repo.count() + 1),
            product=product,  # <-- name/unit/price snapshot
            type=type_,
            quantity=quantity,
            on=as_date(request.date) if request.date else date.today(),
            reference=request.reference,
            notes=request.notes,
            supplier=request.supplier,
            customer=request.customer,
        )
        self._stock_mutator.apply(product, type_, quantity)

        # Phase 2: commit both stores
        self._product_repo.save(product)
        try:
            self._transaction_repo.append(transaction)
        except Exception:
            self._product_repo.save(previous)
            raise

        logger.info(
            "Recorded %s %s: %d %s of %s (stock %d -> %d)",
            transaction.type.value,
            transaction.id,
            quantity.value,
            transaction.unit,
            transaction.product_name,
            previous.quantity,
            product.quantity,
        )
        return to_transaction_dto(transaction)
