"""Request-scoped access to the repository and services held on ``app.state``."""

from fastapi import Request

from salonassist.outreach.service import OutreachService
from salonassist.recommendation.service import RecommendationService
from salonassist.store.repository import SalonRepository


def get_repo(request: Request) -> SalonRepository:
    return request.app.state.repo


def get_recommendations(request: Request) -> RecommendationService:
    return request.app.state.recommendations


def get_outreach(request: Request) -> OutreachService:
    return request.app.state.outreach
