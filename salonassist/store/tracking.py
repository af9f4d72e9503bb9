"""
Recommendation tracking counters.

Callers increment these after the engine returns candidates; the engine
itself never touches them.
"""

import logging
from typing import Optional

from salonassist.schemas.catalog_schema import ItemType
from salonassist.schemas.recommendation_schema import TrackingCounter

logger = logging.getLogger(__name__)

TRACKED_EVENTS = ("shown", "accepted", "dismissed")


class TrackingStore:
    """Shown / accepted / dismissed counts keyed by item name."""

    def __init__(self) -> None:
        self._counters: dict[str, TrackingCounter] = {}

    def increment(
        self, item_name: str, item_type: ItemType, event: str, amount: int = 1
    ) -> TrackingCounter:
        if event not in TRACKED_EVENTS:
            raise ValueError(f"Unknown tracking event {event!r}. Expected one of {TRACKED_EVENTS}.")
        counter = self._counters.get(item_name)
        if counter is None:
            counter = TrackingCounter(item_name=item_name, type=item_type)
            self._counters[item_name] = counter
        setattr(counter, event, getattr(counter, event) + amount)
        logger.debug("Tracking %s: %s (%s)", event, item_name, item_type.value)
        return counter.model_copy()

    def shown(self, item_name: str, item_type: ItemType) -> TrackingCounter:
        return self.increment(item_name, item_type, "shown")

    def accepted(self, item_name: str, item_type: ItemType) -> TrackingCounter:
        return self.increment(item_name, item_type, "accepted")

    def dismissed(self, item_name: str, item_type: ItemType) -> TrackingCounter:
        return self.increment(item_name, item_type, "dismissed")

    def get(self, item_name: str) -> Optional[TrackingCounter]:
        counter = self._counters.get(item_name)
        return counter.model_copy() if counter else None

    def all_counters(self) -> dict[str, TrackingCounter]:
        return {name: c.model_copy() for name, c in self._counters.items()}

    def reset(self) -> None:
        """Clear all counters. Used by test fixtures for isolation."""
        self._counters.clear()
