"""Client records and visit history."""

from collections import Counter
from datetime import date
from typing import Optional

from pydantic import Field

from salonassist.schemas.base import CamelModel


class Client(CamelModel):
    """Client record from the salon CRM."""

    id: str
    name: str
    primary_interest: Optional[str] = None
    preferences: str = ""
    issues: str = ""
    last_visit: Optional[date] = None
    total_visits: int = 0
    tags: list[str] = Field(default_factory=list)


class VisitRecord(CamelModel):
    """A single past visit."""

    client_id: str
    date: date
    time: str = ""
    status: str = "Completed"
    services: list[str] = Field(default_factory=list)
    products: list[str] = Field(default_factory=list)


class VisitHistory(CamelModel):
    """Per-client aggregate of past visits used by outreach generation."""

    client_id: str
    visit_count: int = 0
    service_counts: dict[str, int] = Field(default_factory=dict)

    @classmethod
    def from_visits(cls, client_id: str, visits: list[VisitRecord]) -> "VisitHistory":
        counts: Counter[str] = Counter()
        for visit in visits:
            counts.update(visit.services)
        return cls(client_id=client_id, visit_count=len(visits), service_counts=dict(counts))

    def most_frequent_service(self) -> Optional[str]:
        """Most booked service; ties go to the alphabetically first name."""
        if not self.service_counts:
            return None
        return min(self.service_counts.items(), key=lambda kv: (-kv[1], kv[0]))[0]
