"""Client endpoints."""

from fastapi import APIRouter, Depends

from salonassist.api.dependencies import get_repo
from salonassist.logging_context import get_request_logger
from salonassist.recommendation.profile import ProfileSuggestion, suggest_services_for_client
from salonassist.schemas.client_schema import Client, VisitHistory, VisitRecord
from salonassist.store.repository import SalonRepository

logger = get_request_logger(__name__)

router = APIRouter(prefix="/api/clients", tags=["Clients"])


@router.get("", response_model=list[Client])
def list_clients(repo: SalonRepository = Depends(get_repo)):
    return repo.clients.list_all()


@router.get("/{client_id}", response_model=Client)
def get_client(client_id: str, repo: SalonRepository = Depends(get_repo)):
    return repo.clients.get(client_id)


@router.get("/{client_id}/history", response_model=list[VisitRecord])
def get_client_history(client_id: str, repo: SalonRepository = Depends(get_repo)):
    """Past visits, newest first."""
    return repo.clients.visits(client_id)


@router.get("/{client_id}/summary", response_model=VisitHistory)
def get_client_summary(client_id: str, repo: SalonRepository = Depends(get_repo)):
    repo.clients.get(client_id)
    return repo.clients.history(client_id)


@router.get("/{client_id}/suggested-services", response_model=list[ProfileSuggestion])
def get_suggested_services(client_id: str, repo: SalonRepository = Depends(get_repo)):
    return suggest_services_for_client(repo.clients.get(client_id))
