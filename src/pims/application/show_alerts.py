"""Application service: Show Alerts use case (query)."""

from __future__ import annotations

from datetime import date, datetime

from pims.application.dto import AlertsDTO, ExpiryLineDTO, LowStockLineDTO
from pims.application.mappers import to_product_dto
from pims.domain.repository.product_repository import ProductRepository
from pims.domain.service.aggregator import days_until_expiry, shortage_cost
from pims.domain.service.classifier import (
    CriticalityLevel,
    classify,
    criticality,
    is_expiring_soon,
    stock_percentage,
)


class ShowAlertsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, now: date | datetime) -> AlertsDTO:
        alerts = classify(self._product_repo.list_all(), now)

        low_stock = [
            LowStockLineDTO(
                product=to_product_dto(p, now),
                criticality=criticality(p).value,
                stock_percentage=stock_percentage(p),
                shortage=p.shortage,
                reorder_cost=shortage_cost(p).amount,
                also_expiring_soon=is_expiring_soon(p, now),
            )
            for p in alerts.low_stock
        ]
        expiring = [
            ExpiryLineDTO(
                product=to_product_dto(p, now),
                days_until_expiry=days_until_expiry(p, now),
            )
            for p in alerts.expiring_soon
        ]

        return AlertsDTO(
            low_stock=low_stock,
            expired=[to_product_dto(p, now) for p in alerts.expired],
            expiring_soon=expiring,
            critical_count=self._count(low_stock, CriticalityLevel.CRITICAL),
            warning_count=self._count(low_stock, CriticalityLevel.WARNING),
            badge_count=alerts.total,
        )

    @staticmethod
    def _count(lines: list[LowStockLineDTO], level: CriticalityLevel) -> int:
        return sum(1 for line in lines if line.criticality == level.value)
