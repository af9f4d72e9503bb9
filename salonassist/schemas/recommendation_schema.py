"""Recommendation engine output and tracking counter models."""

from pydantic import Field

from salonassist.schemas.base import CamelModel
from salonassist.schemas.catalog_schema import ItemType


class Recommendation(CamelModel):
    """One ranked cross-sell candidate."""

    name: str
    reason: str
    type: ItemType
    rule_count: int


class RecommendationSet(CamelModel):
    """Engine result: service and product candidates, each ranked."""

    service_recommendations: list[Recommendation] = Field(default_factory=list)
    product_recommendations: list[Recommendation] = Field(default_factory=list)

    def all(self) -> list[Recommendation]:
        return self.service_recommendations + self.product_recommendations


class TrackingCounter(CamelModel):
    """Shown / accepted / dismissed counts for one item."""

    item_name: str
    type: ItemType
    shown: int = 0
    accepted: int = 0
    dismissed: int = 0


class TrackingEvent(CamelModel):
    item_name: str
    type: ItemType
