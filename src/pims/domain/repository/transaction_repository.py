"""Abstract repository for the transaction ledger.

The ledger is append-only: there is deliberately no update or delete.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pims.domain.model.transaction import Transaction


class TransactionRepository(ABC):

    @abstractmethod
    def count(self) -> int:
        """Number of transactions ever recorded."""

    @abstractmethod
    def list_all(self) -> list[Transaction]:
        """Return every transaction, newest first."""

    @abstractmethod
    def append(self, transaction: Transaction) -> None:
        """Add a transaction as the newest ledger entry."""

    def list_for_product(self, product_id: str) -> list[Transaction]:
        return [t for t in self.list_all() if t.product_id == product_id]
