"""Application service: List Transactions use case (query)."""

from __future__ import annotations

from pims.application.dto import TransactionListDTO
from pims.application.mappers import to_transaction_dto
from pims.domain.model.transaction import Transaction, TransactionType
from pims.domain.repository.transaction_repository import TransactionRepository
from pims.domain.service.aggregator import summarize


class ListTransactionsHandler:

    def __init__(self, transaction_repo: TransactionRepository) -> None:
        self._transaction_repo = transaction_repo

    def handle(self, type_filter: str = "all", search: str = "") -> TransactionListDTO:
        """Return the ledger newest first.

        The type filter and search (product name or reference) narrow
        the listed items only; the per-type totals always cover the
        whole ledger.
        """
        wanted = None if type_filter == "all" else TransactionType.parse(type_filter)

        ledger = self._transaction_repo.list_all()
        items = [
            t
            for t in ledger
            if (wanted is None or t.type is wanted) and self._matches_search(t, search)
        ]
        summary = summarize(ledger)

        return TransactionListDTO(
            items=[to_transaction_dto(t) for t in items],
            incoming_count=summary.incoming.count,
            incoming_total=summary.incoming.amount.amount,
            outgoing_count=summary.outgoing.count,
            outgoing_total=summary.outgoing.amount.amount,
        )

    @staticmethod
    def _matches_search(transaction: Transaction, search: str) -> bool:
        term = search.strip().lower()
        if not term:
            return True
        return (
            term in transaction.product_name.lower()
            or term in transaction.reference.lower()
        )
