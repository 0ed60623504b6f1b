"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from pims.domain.exceptions import NotFoundError, ValidationError
from pims.domain.model.product import Product
from pims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product: Product) -> Product:
        """Replace the stored product that has the same ID.

        This does NOT affect any recorded transactions — they captured
        name, unit and price snapshots at recording time.
        """
        if product.id is None:
            raise ValidationError("Product ID is required for an update")

        if self._product_repo.get_by_id(product.id) is None:
            raise NotFoundError(f"Product with ID '{product.id}' not found")

        product.validate()
        self._product_repo.save(product)

        logger.info("Updated product %s '%s'", product.id, product.name)
        return product
