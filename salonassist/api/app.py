"""
FastAPI application factory.

Each app owns one ``SalonRepository`` and the services built on it, held
on ``app.state``. Store and lifecycle errors are mapped to HTTP status
codes here and nowhere else.
"""

from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from salonassist.api import (
    analytics,
    appointments,
    catalog,
    clients,
    outreach,
    rules,
    stylists,
    tracking,
)
from salonassist.config import settings
from salonassist.logging_context import get_request_logger, new_request_id, set_request_id
from salonassist.outreach.lifecycle import InvalidTransitionError
from salonassist.outreach.service import OutreachService
from salonassist.recommendation.service import RecommendationService
from salonassist.store.errors import DuplicateRecordError, RecordNotFoundError
from salonassist.store.repository import SalonRepository, create_repository

logger = get_request_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def create_app(
    repo: Optional[SalonRepository] = None,
    outreach_service: Optional[OutreachService] = None,
) -> FastAPI:
    """Build the API around ``repo`` (a seeded demo repository by default)."""
    if repo is None:
        repo = create_repository(seed=settings.api.seed_on_startup)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Cross-selling recommendations and email outreach for salons.",
        version="1.0.0",
    )
    app.state.repo = repo
    app.state.recommendations = RecommendationService(repo)
    app.state.outreach = outreach_service or OutreachService(repo)

    @app.middleware("http")
    async def attach_request_id(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        set_request_id(request_id)
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    @app.exception_handler(RecordNotFoundError)
    async def not_found(request: Request, exc: RecordNotFoundError):
        return JSONResponse(status_code=404, content={"error": str(exc)})

    @app.exception_handler(InvalidTransitionError)
    async def invalid_transition(request: Request, exc: InvalidTransitionError):
        logger.warning("Rejected status change: %s", exc)
        return JSONResponse(status_code=409, content={"error": str(exc)})

    @app.exception_handler(DuplicateRecordError)
    async def duplicate(request: Request, exc: DuplicateRecordError):
        return JSONResponse(status_code=409, content={"error": str(exc)})

    @app.exception_handler(ValidationError)
    async def invalid_body(request: Request, exc: ValidationError):
        messages = [error["msg"] for error in exc.errors()]
        return JSONResponse(status_code=400, content={"error": "; ".join(messages)})

    @app.get("/api/health", tags=["Health"])
    def health_check():
        return {
            "status": "ok",
            "service": settings.app_name,
            "timestamp": datetime.now().isoformat(),
        }

    app.include_router(catalog.services_router)
    app.include_router(catalog.products_router)
    app.include_router(clients.router)
    app.include_router(stylists.router)
    app.include_router(rules.router)
    app.include_router(appointments.router)
    app.include_router(tracking.router)
    app.include_router(outreach.router)
    app.include_router(analytics.router)

    logger.info("%s API ready", settings.app_name)
    return app
