"""Abstract repository for the Product aggregate (the catalog store).

Defined in the domain layer so the domain never depends on
infrastructure.  The concrete in-memory implementation lives in
the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pims.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Reserve a product ID that has never been handed out before."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in insertion order."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Insert a new product or replace the one with the same ID."""

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Remove a product; does nothing if the ID is unknown."""
