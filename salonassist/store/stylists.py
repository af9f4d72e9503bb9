"""In-memory stylist roster."""

import logging

from salonassist.schemas.stylist_schema import Stylist
from salonassist.store.errors import RecordNotFoundError

logger = logging.getLogger(__name__)


class StylistStore:
    def __init__(self) -> None:
        self._stylists: dict[str, Stylist] = {}

    def add(self, stylist: Stylist) -> Stylist:
        self._stylists[stylist.id] = stylist.model_copy(deep=True)
        logger.debug("Stylist stored: %s (%s)", stylist.name, stylist.id)
        return stylist

    def get(self, stylist_id: str) -> Stylist:
        stylist = self._stylists.get(stylist_id)
        if stylist is None:
            raise RecordNotFoundError("Stylist", stylist_id)
        return stylist.model_copy(deep=True)

    def list_all(self, active_only: bool = False) -> list[Stylist]:
        """Stylists ordered by name."""
        stylists = sorted(self._stylists.values(), key=lambda s: s.name)
        return [s.model_copy(deep=True) for s in stylists if s.active or not active_only]

    def reset(self) -> None:
        self._stylists.clear()
