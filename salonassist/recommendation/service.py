"""
Caller-side recommendation flow.

Loads a snapshot from the repository, runs the pure engine, and records
tracking events as a separate step after the result is computed.
"""

from salonassist.logging_context import get_request_logger
from salonassist.recommendation.engine import recommend
from salonassist.schemas.appointment_schema import Appointment
from salonassist.schemas.catalog_schema import ItemType
from salonassist.schemas.recommendation_schema import RecommendationSet
from salonassist.store.repository import SalonRepository

logger = get_request_logger(__name__)


class RecommendationService:
    """Recommend, accept and dismiss cross-sell items for appointments."""

    def __init__(self, repo: SalonRepository) -> None:
        self.repo = repo

    def compute(self, appointment_id: str) -> RecommendationSet:
        """Run the engine for one appointment without recording anything."""
        appointment = self.repo.appointments.get(appointment_id)
        return recommend(
            appointment,
            self.repo.rules.active_rules(ItemType.SERVICE),
            self.repo.rules.active_rules(ItemType.PRODUCT),
            self.repo.appointments.dismissed(appointment_id),
            self.repo.catalog.is_service_active,
            self.repo.catalog.is_product_active,
        )

    def recommendations_for(self, appointment_id: str, track: bool = True) -> RecommendationSet:
        result = self.compute(appointment_id)
        if track:
            self.record_shown(result)
        return result

    def record_shown(self, result: RecommendationSet) -> None:
        for rec in result.all():
            self.repo.tracking.shown(rec.name, rec.type)

    def accept(self, appointment_id: str, name: str, item_type: ItemType) -> Appointment:
        """Add a recommended item to the appointment and count the acceptance."""
        appointment = self.repo.appointments.add_item(appointment_id, name, item_type)
        self.repo.tracking.accepted(name, item_type)
        logger.info("Recommendation accepted on %s: %s", appointment_id, name)
        return appointment

    def dismiss(self, appointment_id: str, name: str, item_type: ItemType) -> bool:
        """Suppress an item for this appointment. Re-dismissal is a no-op."""
        created = self.repo.appointments.dismiss(appointment_id, name, item_type)
        if created:
            self.repo.tracking.dismissed(name, item_type)
        return created
