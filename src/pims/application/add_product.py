"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from pims.application.dto import NewProduct
from pims.domain.model.product import Product
from pims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, new: NewProduct) -> Product:
        """Add a new product to the catalog and return the stored record."""
        product = Product.create(
            name=new.name,
            category=new.category,
            type=new.type,
            quantity=new.quantity,
            unit=new.unit,
            min_stock=new.min_stock,
            price=new.price,
            supplier=new.supplier,
            expiry_date=new.expiry_date,
            batch_number=new.batch_number,
            storage_type=new.storage_type,
        )

        # IDs are only reserved once validation has passed
        product.id = self._product_repo.next_id()
        self._product_repo.save(product)

        logger.info("Added product %s '%s'", product.id, product.name)
        return product
