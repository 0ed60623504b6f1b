"""In-memory implementation of ProductRepository.

Records are copied on the way in and on the way out, so a caller that
mutates a loaded Product changes nothing until it calls ``save()``.
"""

from __future__ import annotations

from dataclasses import replace

from pims.domain.model.product import Product
from pims.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        self._last_id = 0
        for p in products or []:
            self.save(p)

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        self._last_id += 1
        return str(self._last_id)

    def get_by_id(self, product_id: str) -> Product | None:
        product = self._store.get(product_id)
        return replace(product) if product is not None else None

    def list_all(self) -> list[Product]:
        return [replace(p) for p in self._store.values()]

    def save(self, product: Product) -> None:
        if product.id is None:
            product.id = self.next_id()
        # Replacing an existing key keeps its insertion position.
        self._store[product.id] = replace(product)
        self._track_id(product.id)

    def delete(self, product_id: str) -> None:
        self._store.pop(product_id, None)

    # --- Internal helpers -----------------------------------------------------

    def _track_id(self, product_id: str) -> None:
        """Keep ``next_id`` ahead of numeric IDs saved from outside."""
        if product_id.isdigit():
            self._last_id = max(self._last_id, int(product_id))
