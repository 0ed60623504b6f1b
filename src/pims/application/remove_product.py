"""Application service: Remove Product use case.

Removing a product never touches the ledger; its past transactions stay
and keep pointing at the old product ID.
"""

from __future__ import annotations

import logging

from pims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class RemoveProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        if self._product_repo.get_by_id(product_id) is None:
            logger.debug("Remove of unknown product %s ignored", product_id)
            return

        self._product_repo.delete(product_id)
        logger.info("Removed product %s", product_id)
