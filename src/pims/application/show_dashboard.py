"""Application service: Show Dashboard use case (query)."""

from __future__ import annotations

from datetime import date, datetime

from pims.application.dto import CategoryStatsDTO, DashboardDTO
from pims.application.mappers import to_product_dto
from pims.domain.model.product import Category
from pims.domain.repository.product_repository import ProductRepository
from pims.domain.service.aggregator import (
    category_value,
    in_category,
    total_units,
    total_value,
)
from pims.domain.service.classifier import classify

LOW_STOCK_PREVIEW_SIZE = 5


class ShowDashboardHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, now: date | datetime) -> DashboardDTO:
        products = self._product_repo.list_all()
        alerts = classify(products, now)

        categories = []
        for category in Category:
            members = in_category(products, category)
            categories.append(
                CategoryStatsDTO(
                    category=category.value,
                    products=len(members),
                    units=total_units(members),
                    value=category_value(products, category).amount,
                )
            )

        return DashboardDTO(
            total_products=len(products),
            total_units=total_units(products),
            total_value=total_value(products).amount,
            low_stock_count=len(alerts.low_stock),
            expired_count=len(alerts.expired),
            expiring_soon_count=len(alerts.expiring_soon),
            categories=categories,
            low_stock_preview=[
                to_product_dto(p, now)
                for p in alerts.low_stock[:LOW_STOCK_PREVIEW_SIZE]
            ],
        )
