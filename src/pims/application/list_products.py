"""Application service: List Products use case (query).

Backs the inventory table: free-text search, category filter and a
choice of sort order.
"""

from __future__ import annotations

from datetime import date, datetime

from pims.application.dto import ProductListDTO
from pims.application.mappers import to_product_dto
from pims.domain.exceptions import ValidationError
from pims.domain.model.product import Category, Product
from pims.domain.repository.product_repository import ProductRepository

SORT_KEYS = ("name", "quantity", "price")


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        now: date | datetime,
        search: str = "",
        category: str = "all",
        sort_by: str = "name",
    ) -> ProductListDTO:
        """List the catalog.

        Args:
            now: Reference instant for the inline expiry flag.
            search: Case-insensitive match on name, supplier or batch number.
            category: ``all``, ``medicine`` or ``supplement``.
            sort_by: ``name`` (A-Z), ``quantity`` or ``price`` (both highest first).
        """
        if sort_by not in SORT_KEYS:
            raise ValidationError(
                f"Unknown sort key '{sort_by}' (expected one of {', '.join(SORT_KEYS)})"
            )
        wanted = None if category == "all" else Category.parse(category)

        products = self._product_repo.list_all()
        matches = [
            p
            for p in products
            if self._matches_search(p, search)
            and (wanted is None or p.category is wanted)
        ]
        matches.sort(key=self._sort_key(sort_by))

        return ProductListDTO(
            items=[to_product_dto(p, now) for p in matches],
            total=len(products),
        )

    @staticmethod
    def _matches_search(product: Product, search: str) -> bool:
        term = search.strip().lower()
        if not term:
            return True
        return (
            term in product.name.lower()
            or term in product.supplier.lower()
            or term in product.batch_number.lower()
        )

    @staticmethod
    def _sort_key(sort_by: str):
        if sort_by == "quantity":
            return lambda p: -p.quantity
        if sort_by == "price":
            return lambda p: -p.price.amount
        return lambda p: p.name.lower()
