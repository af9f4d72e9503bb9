"""Recommendation tracking endpoints."""

from fastapi import APIRouter, Depends

from salonassist.api.dependencies import get_repo
from salonassist.logging_context import get_request_logger
from salonassist.schemas.recommendation_schema import TrackingCounter, TrackingEvent
from salonassist.store.repository import SalonRepository

logger = get_request_logger(__name__)

router = APIRouter(prefix="/api/tracking", tags=["Tracking"])


@router.get("", response_model=dict[str, TrackingCounter])
def get_tracking(repo: SalonRepository = Depends(get_repo)):
    return repo.tracking.all_counters()


@router.post("/shown", response_model=TrackingCounter)
def track_shown(event: TrackingEvent, repo: SalonRepository = Depends(get_repo)):
    return repo.tracking.shown(event.item_name, event.type)


@router.post("/accepted", response_model=TrackingCounter)
def track_accepted(event: TrackingEvent, repo: SalonRepository = Depends(get_repo)):
    return repo.tracking.accepted(event.item_name, event.type)


@router.post("/dismissed", response_model=TrackingCounter)
def track_dismissed(event: TrackingEvent, repo: SalonRepository = Depends(get_repo)):
    return repo.tracking.dismissed(event.item_name, event.type)
