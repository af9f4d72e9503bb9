"""Cross-selling KPI endpoint."""

from fastapi import APIRouter, Depends
from pydantic import Field

from salonassist.analytics.metrics import AnalyticsMetrics, calculate_for_repository
from salonassist.api.dependencies import get_repo
from salonassist.logging_context import get_request_logger
from salonassist.schemas.base import CamelModel
from salonassist.schemas.catalog_schema import ItemType
from salonassist.store.repository import SalonRepository

logger = get_request_logger(__name__)

router = APIRouter(prefix="/api/analytics", tags=["Analytics"])


class ComboSummary(CamelModel):
    label: str
    kind: str
    count: int
    revenue: float


class ItemPerformanceSummary(CamelModel):
    item_name: str
    type: ItemType
    shown: int
    accepted: int
    acceptance_rate: float


class AnalyticsSummary(CamelModel):
    completed_visits: int
    total_revenue: float
    service_revenue: float
    product_revenue: float
    avg_ticket: float
    cross_sell_rate: float
    acceptance_rate: float
    top_combos: list[ComboSummary] = Field(default_factory=list)
    recommendation_performance: list[ItemPerformanceSummary] = Field(default_factory=list)

    @classmethod
    def from_metrics(cls, metrics: AnalyticsMetrics) -> "AnalyticsSummary":
        return cls(
            completed_visits=metrics.completed_visits,
            total_revenue=round(metrics.total_revenue, 2),
            service_revenue=round(metrics.service_revenue, 2),
            product_revenue=round(metrics.product_revenue, 2),
            avg_ticket=round(metrics.avg_ticket, 2),
            cross_sell_rate=round(metrics.cross_sell_rate, 4),
            acceptance_rate=round(metrics.acceptance_rate, 4),
            top_combos=[
                ComboSummary(label=c.label, kind=c.kind, count=c.count, revenue=c.revenue)
                for c in metrics.top_combos
            ],
            recommendation_performance=[
                ItemPerformanceSummary(
                    item_name=p.item_name,
                    type=p.item_type,
                    shown=p.shown,
                    accepted=p.accepted,
                    acceptance_rate=round(p.acceptance_rate, 4),
                )
                for p in metrics.recommendation_performance
            ],
        )


@router.get("", response_model=AnalyticsSummary)
def get_analytics(repo: SalonRepository = Depends(get_repo)):
    _, metrics = calculate_for_repository(repo)
    return AnalyticsSummary.from_metrics(metrics)
