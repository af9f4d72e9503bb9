"""Appointment endpoints, including cross-sell recommendations."""

from fastapi import APIRouter, Depends

from salonassist.api.dependencies import get_recommendations, get_repo
from salonassist.logging_context import get_request_logger
from salonassist.recommendation.service import RecommendationService
from salonassist.schemas.appointment_schema import (
    Appointment,
    AppointmentDraft,
    AppointmentUpdate,
    DismissedItems,
    ItemRequest,
)
from salonassist.schemas.catalog_schema import ItemType
from salonassist.schemas.recommendation_schema import RecommendationSet
from salonassist.store.repository import SalonRepository

logger = get_request_logger(__name__)

router = APIRouter(prefix="/api/appointments", tags=["Appointments"])


@router.get("", response_model=list[Appointment])
def list_appointments(repo: SalonRepository = Depends(get_repo)):
    return repo.appointments.list_all()


@router.get("/{appointment_id}", response_model=Appointment)
def get_appointment(appointment_id: str, repo: SalonRepository = Depends(get_repo)):
    return repo.appointments.get(appointment_id)


@router.post("", response_model=Appointment, status_code=201)
def create_appointment(draft: AppointmentDraft, repo: SalonRepository = Depends(get_repo)):
    return repo.appointments.create(draft)


@router.patch("/{appointment_id}", response_model=Appointment)
def update_appointment(
    appointment_id: str, changes: AppointmentUpdate, repo: SalonRepository = Depends(get_repo)
):
    return repo.appointments.update(appointment_id, changes)


@router.post("/{appointment_id}/services", response_model=Appointment)
def add_service(appointment_id: str, body: ItemRequest, repo: SalonRepository = Depends(get_repo)):
    """Book an extra service. Adding one that is already booked changes nothing."""
    return repo.appointments.add_item(appointment_id, body.item_name, ItemType.SERVICE)


@router.post("/{appointment_id}/products", response_model=Appointment)
def add_product(appointment_id: str, body: ItemRequest, repo: SalonRepository = Depends(get_repo)):
    return repo.appointments.add_item(appointment_id, body.item_name, ItemType.PRODUCT)


@router.post("/{appointment_id}/dismiss")
def dismiss_recommendation(
    appointment_id: str,
    body: ItemRequest,
    recommendations: RecommendationService = Depends(get_recommendations),
):
    """Hide a recommended item on this appointment. Repeating it is a no-op."""
    created = recommendations.dismiss(appointment_id, body.item_name, body.item_type)
    return {"success": True, "alreadyDismissed": not created}


@router.get("/{appointment_id}/dismissed", response_model=DismissedItems)
def get_dismissed(appointment_id: str, repo: SalonRepository = Depends(get_repo)):
    return repo.appointments.dismissed(appointment_id)


@router.get("/{appointment_id}/recommendations", response_model=RecommendationSet)
def get_recommendations_for(
    appointment_id: str,
    track: bool = True,
    recommendations: RecommendationService = Depends(get_recommendations),
):
    """Ranked service and product suggestions for an appointment.

    Each returned item is counted as shown unless ``track=false``.
    """
    return recommendations.recommendations_for(appointment_id, track=track)


@router.post("/{appointment_id}/recommendations/accept", response_model=Appointment)
def accept_recommendation(
    appointment_id: str,
    body: ItemRequest,
    recommendations: RecommendationService = Depends(get_recommendations),
):
    return recommendations.accept(appointment_id, body.item_name, body.item_type)
