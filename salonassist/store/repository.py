"""
Repository aggregate injected into the recommendation and outreach services.

There is no module-level shared state: each API app, demo session or
test builds its own ``SalonRepository`` and passes it where needed.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from salonassist.config import settings
from salonassist.schemas.outreach_schema import OutreachSettings
from salonassist.store.appointments import AppointmentStore
from salonassist.store.catalog import CatalogStore
from salonassist.store.clients import ClientStore
from salonassist.store.rules import RuleStore
from salonassist.store.suggestions import SuggestionStore
from salonassist.store.stylists import StylistStore
from salonassist.store.tracking import TrackingStore

logger = logging.getLogger(__name__)


def _default_outreach_settings() -> OutreachSettings:
    return OutreachSettings(
        win_back_threshold_days=settings.outreach.win_back_threshold_days,
        reminder_days_before=settings.outreach.reminder_days_before,
    )


@dataclass
class SalonRepository:
    """All stores the salon back end reads from and writes to."""

    catalog: CatalogStore = field(default_factory=CatalogStore)
    rules: RuleStore = field(default_factory=RuleStore)
    appointments: AppointmentStore = field(default_factory=AppointmentStore)
    clients: ClientStore = field(default_factory=ClientStore)
    stylists: StylistStore = field(default_factory=StylistStore)
    tracking: TrackingStore = field(default_factory=TrackingStore)
    suggestions: SuggestionStore = field(
        default_factory=lambda: SuggestionStore(_default_outreach_settings())
    )

    def reset(self) -> None:
        """Clear every store. Used by test fixtures for isolation."""
        for store in (
            self.catalog, self.rules, self.appointments,
            self.clients, self.stylists, self.tracking, self.suggestions,
        ):
            store.reset()


def create_repository(seed: bool = False, today: Optional[date] = None) -> SalonRepository:
    """Build an empty repository, optionally loaded with demo data."""
    repo = SalonRepository()
    if seed:
        from salonassist.store.seed import seed_repository

        seed_repository(repo, today=today)
    return repo
