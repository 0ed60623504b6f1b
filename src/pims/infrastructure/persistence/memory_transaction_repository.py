"""In-memory implementation of TransactionRepository."""

from __future__ import annotations

from pims.domain.model.transaction import Transaction
from pims.domain.repository.transaction_repository import TransactionRepository


class InMemoryTransactionRepository(TransactionRepository):
    """Ledger kept newest-first.

    ``transactions`` seeds historical entries and is expected newest
    first, the same order ``list_all()`` returns.
    """

    def __init__(self, transactions: list[Transaction] | None = None) -> None:
        self._entries: list[Transaction] = list(transactions or [])

    def count(self) -> int:
        return len(self._entries)

    def list_all(self) -> list[Transaction]:
        return list(self._entries)

    def append(self, transaction: Transaction) -> None:
        self._entries.insert(0, transaction)
