"""Service suggestions for a client profile, from issues and tags."""

import logging
from dataclasses import dataclass

from salonassist.schemas.client_schema import Client

logger = logging.getLogger(__name__)

MAX_PROFILE_SUGGESTIONS = 3

# (keywords in issues, suggested service, reason)
ISSUE_KEYWORDS: list[tuple[tuple[str, ...], str, str]] = [
    (("dry scalp",), "Scalp Treatment", "Addresses dry scalp issues"),
    (("dandruff",), "Scalp Treatment", "Helps with dandruff"),
    (("damaged", "bleach"), "Deep Conditioning", "Repairs damaged hair"),
]

DEFAULT_SUGGESTION = ("Deep Conditioning", "Maintains healthy hair")


@dataclass
class ProfileSuggestion:
    name: str
    reason: str


def suggest_services_for_client(
    client: Client, limit: int = MAX_PROFILE_SUGGESTIONS
) -> list[ProfileSuggestion]:
    """Heuristic service ideas for a client's profile card."""
    issues = (client.issues or "").lower()
    tags = set(client.tags)
    suggestions: list[ProfileSuggestion] = []

    for keywords, service, reason in ISSUE_KEYWORDS:
        if any(keyword in issues for keyword in keywords):
            suggestions.append(ProfileSuggestion(service, reason))

    if "Beard Care" in tags and "Skincare" not in tags:
        suggestions.append(
            ProfileSuggestion("Facial Treatment", "Complement beard grooming with skincare")
        )
    if "Hair Color" in tags:
        suggestions.append(ProfileSuggestion("Olaplex Treatment", "Protect color-treated hair"))
    if "Nails" in tags:
        suggestions.append(ProfileSuggestion("Pedicure", "Complete nail care package"))

    if not suggestions:
        suggestions.append(ProfileSuggestion(*DEFAULT_SUGGESTION))

    return suggestions[:limit]
