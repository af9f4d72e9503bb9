"""Email outreach suggestion models."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from salonassist.schemas.base import CamelModel


class SuggestionType(str, Enum):
    WIN_BACK = "win_back"
    APPOINTMENT_REMINDER = "appointment_reminder"
    PRODUCT_RECOMMENDATION = "product_recommendation"
    PROMOTION = "promotion"


class SuggestionStatus(str, Enum):
    PENDING = "pending"
    SENT = "sent"
    DISMISSED = "dismissed"


class SuggestionDraft(CamelModel):
    """A suggestion produced by the generator, not yet persisted."""

    client_id: str
    client_name: str
    type: SuggestionType
    reason: str
    subject: str
    content: str


class EmailSuggestion(SuggestionDraft):
    """Persisted suggestion record."""

    id: int
    status: SuggestionStatus = SuggestionStatus.PENDING
    created_at: datetime
    sent_at: Optional[datetime] = None


class OutreachSettings(CamelModel):
    """Tunable generator parameters; only the current value is kept."""

    win_back_threshold_days: int = Field(default=30, ge=1)
    reminder_days_before: int = Field(default=2, ge=0)


class GenerationResult(CamelModel):
    """Outcome of one generation run."""

    suggestions: list[SuggestionDraft] = Field(default_factory=list)
    generated: int = 0
    by_type: dict[str, int] = Field(default_factory=dict)


class GenerationResponse(CamelModel):
    success: bool = True
    generated: int
    message: str
    suggestions: list[EmailSuggestion] = Field(default_factory=list)


class SuggestionTypeCounts(CamelModel):
    """Pending suggestions per type; every type is reported, zero if absent."""

    win_back: int = 0
    appointment_reminder: int = 0
    product_recommendation: int = 0
    promotion: int = 0


class OutreachStats(CamelModel):
    pending: int = 0
    sent_this_week: int = 0
    sent_this_month: int = 0
    response_rate: int = 0
    by_type: SuggestionTypeCounts = Field(default_factory=SuggestionTypeCounts)
