"""Shared test fixtures and helpers."""

from datetime import date, datetime, timedelta, timezone
from typing import Optional

import pytest

from salonassist.outreach.generator import OutreachGenerator
from salonassist.outreach.selection import RotatingSelector
from salonassist.schemas.appointment_schema import Appointment, AppointmentStatus
from salonassist.schemas.catalog_schema import ItemType
from salonassist.schemas.client_schema import Client, VisitHistory
from salonassist.schemas.outreach_schema import (
    EmailSuggestion,
    SuggestionStatus,
    SuggestionType,
)
from salonassist.schemas.rule_schema import CrossSellRule
from salonassist.store.repository import SalonRepository, create_repository

# A fixed winter day so seasonal campaigns and "days ago" arithmetic are stable.
TODAY = date(2026, 1, 15)


@pytest.fixture
def repo() -> SalonRepository:
    return create_repository()


@pytest.fixture
def seeded_repo() -> SalonRepository:
    return create_repository(seed=True, today=TODAY)


@pytest.fixture
def generator() -> OutreachGenerator:
    return OutreachGenerator(RotatingSelector(), today=TODAY)


def make_appointment(
    services: Optional[list[str]] = None,
    products: Optional[list[str]] = None,
    appointment_id: str = "apt-test",
    status: AppointmentStatus = AppointmentStatus.SCHEDULED,
) -> Appointment:
    """Helper to create an Appointment with sensible defaults."""
    return Appointment(
        id=appointment_id,
        client_id="client-test",
        client_name="Test Client",
        date=TODAY.isoformat(),
        time="10:00",
        status=status,
        services=services if services is not None else ["Haircut"],
        products=products or [],
    )


_rule_ids = iter(range(1, 10_000))


def make_rule(
    trigger: str,
    suggestions: list[str],
    reason: Optional[str] = None,
    kind: ItemType = ItemType.SERVICE,
    active: bool = True,
    rule_id: Optional[int] = None,
) -> CrossSellRule:
    """Helper to create a stored rule without going through a RuleStore."""
    return CrossSellRule(
        id=rule_id if rule_id is not None else next(_rule_ids),
        kind=kind,
        trigger=trigger,
        suggestions=suggestions,
        reason=reason,
        active=active,
    )


def make_client(
    client_id: str = "client-test",
    name: str = "Test Client",
    days_since_visit: Optional[int] = 5,
    primary_interest: Optional[str] = None,
    tags: Optional[list[str]] = None,
    issues: str = "",
) -> Client:
    """Helper to create a Client whose last visit is ``days_since_visit`` before TODAY."""
    last_visit = None if days_since_visit is None else TODAY - timedelta(days=days_since_visit)
    return Client(
        id=client_id,
        name=name,
        primary_interest=primary_interest,
        last_visit=last_visit,
        tags=tags or [],
        issues=issues,
    )


def make_history(
    client_id: str, service_counts: dict[str, int], visit_count: Optional[int] = None
) -> VisitHistory:
    """Helper to create a VisitHistory; visit_count defaults to the largest service count."""
    return VisitHistory(
        client_id=client_id,
        visit_count=visit_count if visit_count is not None else max(service_counts.values(), default=0),
        service_counts=service_counts,
    )


def make_suggestion(
    client_id: str = "client-test",
    suggestion_type: SuggestionType = SuggestionType.WIN_BACK,
    reason: str = "15% off - last visit 40 days ago",
    status: SuggestionStatus = SuggestionStatus.PENDING,
    suggestion_id: int = 1,
) -> EmailSuggestion:
    """Helper to create a stored EmailSuggestion."""
    return EmailSuggestion(
        id=suggestion_id,
        client_id=client_id,
        client_name="Test Client",
        type=suggestion_type,
        reason=reason,
        subject="Subject",
        content="Body",
        status=status,
        created_at=datetime(2026, 1, 10, 9, 0, tzinfo=timezone.utc),
    )
