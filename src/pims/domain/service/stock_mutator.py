"""Domain service: Stock Mutator.

Applies one ledger movement to a product's stock level.  Incoming
movements add, outgoing movements subtract, and the result is floored
at zero.

An outgoing movement larger than the stock on hand is accepted, not
rejected: stock drops to zero and the uncovered units are lost.  This
policy is awaiting product-owner review, so every occurrence is logged
at WARNING level.
"""

from __future__ import annotations

import logging

from pims.domain.model.product import Product
from pims.domain.model.transaction import TransactionType
from pims.domain.model.value_objects import Quantity

logger = logging.getLogger(__name__)


class StockMutator:

    def apply(
        self,
        product: Product,
        type: TransactionType,
        quantity: Quantity,
    ) -> Product:
        """Mutate *product* in place and return it."""
        before = product.quantity

        if type is TransactionType.INCOMING:
            product.receive(quantity.value)
        else:
            uncovered = product.dispense(quantity.value)
            if uncovered:
                logger.warning(
                    "Outgoing %d %s of %s exceeds stock on hand (%d); "
                    "stock floored at 0, %d units unaccounted for",
                    quantity.value,
                    product.unit,
                    product.name,
                    before,
                    uncovered,
                )

        logger.debug(
            "Stock of product %s: %d -> %d (%s %d)",
            product.id,
            before,
            product.quantity,
            type.value,
            quantity.value,
        )
        return product
