"""
In-memory email suggestion store and outreach settings.

Suggestions are appended in batches after a generation run; status
changes go through ``salonassist.outreach.lifecycle`` and are saved back
with ``replace``.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from salonassist.schemas.outreach_schema import (
    EmailSuggestion,
    OutreachSettings,
    SuggestionDraft,
    SuggestionStatus,
    SuggestionType,
)
from salonassist.store.errors import RecordNotFoundError

logger = logging.getLogger(__name__)


class SuggestionStore:
    def __init__(self, settings: Optional[OutreachSettings] = None) -> None:
        self._suggestions: dict[int, EmailSuggestion] = {}
        self._next_id = 1
        self._default_settings = settings or OutreachSettings()
        self._settings = self._default_settings.model_copy()

    def add_batch(
        self, drafts: list[SuggestionDraft], created_at: Optional[datetime] = None
    ) -> list[EmailSuggestion]:
        """Persist a generated batch; all records share one creation timestamp."""
        created_at = created_at or datetime.now(timezone.utc)
        stored: list[EmailSuggestion] = []
        for draft in drafts:
            suggestion = EmailSuggestion(
                id=self._next_id, created_at=created_at, **draft.model_dump()
            )
            self._suggestions[suggestion.id] = suggestion
            self._next_id += 1
            stored.append(suggestion.model_copy())
        if stored:
            logger.info("Stored %d new suggestion(s)", len(stored))
        return stored

    def get(self, suggestion_id: int) -> EmailSuggestion:
        suggestion = self._suggestions.get(suggestion_id)
        if suggestion is None:
            raise RecordNotFoundError("Suggestion", suggestion_id)
        return suggestion.model_copy()

    def replace(self, suggestion: EmailSuggestion) -> EmailSuggestion:
        if suggestion.id not in self._suggestions:
            raise RecordNotFoundError("Suggestion", suggestion.id)
        self._suggestions[suggestion.id] = suggestion.model_copy()
        return suggestion

    def list_all(
        self,
        suggestion_type: Optional[SuggestionType] = None,
        status: Optional[SuggestionStatus] = None,
    ) -> list[EmailSuggestion]:
        """Suggestions matching the filters, newest first."""
        result = [
            s for s in self._suggestions.values()
            if (suggestion_type is None or s.type == suggestion_type)
            and (status is None or s.status == status)
        ]
        result.sort(key=lambda s: (s.created_at, s.id), reverse=True)
        return [s.model_copy() for s in result]

    def pending(self) -> list[EmailSuggestion]:
        return self.list_all(status=SuggestionStatus.PENDING)

    def get_settings(self) -> OutreachSettings:
        return self._settings.model_copy()

    def update_settings(self, settings: OutreachSettings) -> OutreachSettings:
        self._settings = settings.model_copy()
        logger.info(
            "Outreach settings updated: win-back after %d days, reminders %d days before",
            settings.win_back_threshold_days, settings.reminder_days_before,
        )
        return self.get_settings()

    def reset(self) -> None:
        """Clear suggestions and restore default settings. Used by test fixtures."""
        self._suggestions.clear()
        self._next_id = 1
        self._settings = self._default_settings.model_copy()
