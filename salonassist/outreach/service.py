"""
Outreach flow over the repository.

``OutreachService`` builds the snapshot the generator reads, runs it and
saves the batch. Generate-and-persist runs under a lock so concurrent
requests cannot both read the same stale pending set.
"""

import threading
from collections import Counter
from datetime import date, timedelta
from typing import Optional

from salonassist.config import settings
from salonassist.logging_context import get_request_logger
from salonassist.outreach.generator import OutreachGenerator
from salonassist.outreach.lifecycle import SuggestionAction, apply_transition
from salonassist.outreach.selection import RandomSelector
from salonassist.schemas.outreach_schema import (
    EmailSuggestion,
    GenerationResponse,
    OutreachSettings,
    OutreachStats,
    SuggestionStatus,
    SuggestionType,
    SuggestionTypeCounts,
)
from salonassist.store.repository import SalonRepository

logger = get_request_logger(__name__)

# Placeholder until replies are tracked; reported whenever anything was sent.
ESTIMATED_RESPONSE_RATE = 25
MAX_RESPONSE_RATE = 35


def _week_start(today: date) -> date:
    """Sunday on or before ``today``."""
    return today - timedelta(days=(today.weekday() + 1) % 7)


class OutreachService:
    def __init__(
        self, repo: SalonRepository, generator: Optional[OutreachGenerator] = None
    ) -> None:
        self._repo = repo
        self._generator = generator or OutreachGenerator(RandomSelector(settings.random_seed))
        self._lock = threading.Lock()

    def generate(self) -> GenerationResponse:
        """Run the generator against current data and persist the new suggestions."""
        with self._lock:
            result = self._generator.generate(
                clients=self._repo.clients.list_all(),
                pending=self._repo.suggestions.pending(),
                outreach_settings=self._repo.suggestions.get_settings(),
                histories=self._repo.clients.histories(),
            )
            stored = self._repo.suggestions.add_batch(result.suggestions)

        return GenerationResponse(
            generated=len(stored),
            message=f"{len(stored)} new suggestion(s) generated",
            suggestions=stored,
        )

    def list_suggestions(
        self,
        suggestion_type: Optional[SuggestionType] = None,
        status: Optional[SuggestionStatus] = None,
    ) -> list[EmailSuggestion]:
        return self._repo.suggestions.list_all(suggestion_type, status)

    def get(self, suggestion_id: int) -> EmailSuggestion:
        return self._repo.suggestions.get(suggestion_id)

    def send(self, suggestion_id: int) -> EmailSuggestion:
        """Mark a pending suggestion as sent. No email leaves the system."""
        return self._apply(suggestion_id, SuggestionAction.SEND)

    def dismiss(self, suggestion_id: int) -> EmailSuggestion:
        return self._apply(suggestion_id, SuggestionAction.DISMISS)

    def _apply(self, suggestion_id: int, action: SuggestionAction) -> EmailSuggestion:
        with self._lock:
            suggestion = self._repo.suggestions.get(suggestion_id)
            updated = apply_transition(suggestion, action)
            self._repo.suggestions.replace(updated)
        logger.info(
            "Suggestion %d for %s marked %s", updated.id, updated.client_name, updated.status.value
        )
        return updated

    def stats(self, today: Optional[date] = None) -> OutreachStats:
        today = today or date.today()
        all_suggestions = self._repo.suggestions.list_all()
        pending = [s for s in all_suggestions if s.status == SuggestionStatus.PENDING]
        sent_dates = [
            s.sent_at.date() for s in all_suggestions
            if s.status == SuggestionStatus.SENT and s.sent_at is not None
        ]
        week_start = _week_start(today)

        return OutreachStats(
            pending=len(pending),
            sent_this_week=sum(1 for d in sent_dates if d >= week_start),
            sent_this_month=sum(
                1 for d in sent_dates if (d.year, d.month) == (today.year, today.month)
            ),
            response_rate=min(ESTIMATED_RESPONSE_RATE, MAX_RESPONSE_RATE) if sent_dates else 0,
            by_type=SuggestionTypeCounts(**Counter(s.type.value for s in pending)),
        )

    def get_settings(self) -> OutreachSettings:
        return self._repo.suggestions.get_settings()

    def update_settings(self, outreach_settings: OutreachSettings) -> OutreachSettings:
        return self._repo.suggestions.update_settings(outreach_settings)
