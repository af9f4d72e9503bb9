"""
Status lifecycle for email suggestions.

A suggestion starts ``pending`` and moves exactly once, to ``sent`` or
``dismissed``. Both are terminal. Every allowed move is listed in
``TRANSITIONS``; anything else is rejected.

Usage:
    sent = apply_transition(suggestion, SuggestionAction.SEND)
    assert sent.status == SuggestionStatus.SENT and sent.sent_at is not None
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from salonassist.schemas.outreach_schema import EmailSuggestion, SuggestionStatus

logger = logging.getLogger(__name__)


class SuggestionAction(str, Enum):
    """Events that move a suggestion out of pending."""
    SEND = "send"
    DISMISS = "dismiss"


@dataclass(frozen=True)
class Transition:
    """A single valid status transition."""
    from_status: SuggestionStatus
    to_status: SuggestionStatus
    action: SuggestionAction


class InvalidTransitionError(Exception):
    """Raised when an action is not valid from the suggestion's current status."""


TRANSITIONS: list[Transition] = [
    Transition(SuggestionStatus.PENDING, SuggestionStatus.SENT, SuggestionAction.SEND),
    Transition(SuggestionStatus.PENDING, SuggestionStatus.DISMISSED, SuggestionAction.DISMISS),
]


def valid_actions(status: SuggestionStatus) -> list[SuggestionAction]:
    """Return all actions valid from ``status``."""
    return [t.action for t in TRANSITIONS if t.from_status == status]


def is_terminal(status: SuggestionStatus) -> bool:
    return not valid_actions(status)


def apply_transition(
    suggestion: EmailSuggestion,
    action: SuggestionAction,
    now: Optional[datetime] = None,
) -> EmailSuggestion:
    """
    Return a copy of ``suggestion`` moved by ``action``.

    Raises:
        InvalidTransitionError: If no transition exists for the current status.
    """
    for t in TRANSITIONS:
        if t.from_status == suggestion.status and t.action == action:
            update: dict = {"status": t.to_status}
            if t.to_status == SuggestionStatus.SENT:
                update["sent_at"] = now or datetime.now(timezone.utc)
            logger.debug(
                "Suggestion %d: %s -> %s",
                suggestion.id, suggestion.status.value, t.to_status.value,
            )
            return suggestion.model_copy(update=update)

    valid = [a.value for a in valid_actions(suggestion.status)]
    raise InvalidTransitionError(
        f"Cannot {action.value} suggestion {suggestion.id} with status "
        f"'{suggestion.status.value}'. Valid actions: {valid}"
    )
