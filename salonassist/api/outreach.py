"""Email outreach suggestion endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends

from salonassist.api.dependencies import get_outreach
from salonassist.logging_context import get_request_logger
from salonassist.outreach.service import OutreachService
from salonassist.schemas.outreach_schema import (
    EmailSuggestion,
    GenerationResponse,
    OutreachSettings,
    OutreachStats,
    SuggestionStatus,
    SuggestionType,
)

logger = get_request_logger(__name__)

router = APIRouter(prefix="/api/outreach", tags=["Outreach"])


@router.get("/suggestions", response_model=list[EmailSuggestion])
def list_suggestions(
    type: Optional[SuggestionType] = None,
    status: Optional[SuggestionStatus] = None,
    outreach: OutreachService = Depends(get_outreach),
):
    return outreach.list_suggestions(type, status)


@router.post("/suggestions/generate", response_model=GenerationResponse)
def generate_suggestions(outreach: OutreachService = Depends(get_outreach)):
    """Run all outreach passes against current client data."""
    return outreach.generate()


@router.get("/suggestions/{suggestion_id}", response_model=EmailSuggestion)
def get_suggestion(suggestion_id: int, outreach: OutreachService = Depends(get_outreach)):
    return outreach.get(suggestion_id)


@router.post("/suggestions/{suggestion_id}/send", response_model=EmailSuggestion)
def send_suggestion(suggestion_id: int, outreach: OutreachService = Depends(get_outreach)):
    """Mark a suggestion as sent. Delivery itself happens outside this service."""
    return outreach.send(suggestion_id)


@router.post("/suggestions/{suggestion_id}/dismiss", response_model=EmailSuggestion)
def dismiss_suggestion(suggestion_id: int, outreach: OutreachService = Depends(get_outreach)):
    return outreach.dismiss(suggestion_id)


@router.get("/stats", response_model=OutreachStats)
def get_stats(outreach: OutreachService = Depends(get_outreach)):
    return outreach.stats()


@router.get("/settings", response_model=OutreachSettings)
def get_settings(outreach: OutreachService = Depends(get_outreach)):
    return outreach.get_settings()


@router.put("/settings", response_model=OutreachSettings)
def update_settings(body: OutreachSettings, outreach: OutreachService = Depends(get_outreach)):
    return outreach.update_settings(body)
