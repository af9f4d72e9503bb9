from salonassist.outreach.generator import OutreachGenerator, PendingIndex
from salonassist.outreach.lifecycle import InvalidTransitionError, SuggestionAction
from salonassist.outreach.selection import RandomSelector, RotatingSelector
from salonassist.outreach.service import OutreachService

__all__ = [
    "OutreachGenerator",
    "PendingIndex",
    "InvalidTransitionError",
    "SuggestionAction",
    "RandomSelector",
    "RotatingSelector",
    "OutreachService",
]
