"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Nothing is persisted, so the stores live for one process: the first
call builds them (seeded with demo data unless disabled) and later
calls return the same instances.
"""

from __future__ import annotations

from functools import lru_cache

from pims.infrastructure.config import Settings
from pims.infrastructure.persistence.memory_product_repository import (
    InMemoryProductRepository,
)
from pims.infrastructure.persistence.memory_transaction_repository import (
    InMemoryTransactionRepository,
)
from pims.infrastructure.seed import demo_products, demo_transactions


@lru_cache(maxsize=None)
def settings() -> Settings:
    return Settings.from_env()


@lru_cache(maxsize=None)
def product_repository() -> InMemoryProductRepository:
    if settings().seed_demo_data:
        return InMemoryProductRepository(demo_products())
    return InMemoryProductRepository()


@lru_cache(maxsize=None)
def transaction_repository() -> InMemoryTransactionRepository:
    if settings().seed_demo_data:
        return InMemoryTransactionRepository(demo_transactions())
    return InMemoryTransactionRepository()


def reset() -> None:
    """Drop the process-wide stores so the next call rebuilds them."""
    settings.cache_clear()
    product_repository.cache_clear()
    transaction_repository.cache_clear()
