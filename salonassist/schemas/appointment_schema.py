"""Appointment and dismissed-recommendation models."""

from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from salonassist.schemas.base import CamelModel
from salonassist.schemas.catalog_schema import ItemType


class AppointmentStatus(str, Enum):
    SCHEDULED = "Scheduled"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    NO_SHOW = "No-show"


class AppointmentBase(CamelModel):
    """Fields shared by booking requests and stored appointments."""

    client_id: Optional[str] = None
    client_name: str
    stylist_id: Optional[str] = None
    stylist_name: Optional[str] = None
    date: str
    time: str
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    notes: Optional[str] = None
    services: list[str] = Field(default_factory=list)
    products: list[str] = Field(default_factory=list)


class AppointmentDraft(AppointmentBase):
    """Validated appointment booking request."""

    services: list[str]

    @field_validator("services")
    @classmethod
    def _at_least_one_service(cls, value: list[str]) -> list[str]:
        if not [s for s in value if s.strip()]:
            raise ValueError("at least one service is required")
        return value


class Appointment(AppointmentBase):
    """Stored appointment with its booked services and products.

    Unlike a booking request it may hold no services, in which case the
    engine returns no recommendations for it.
    """

    id: str


class AppointmentUpdate(CamelModel):
    status: Optional[AppointmentStatus] = None
    notes: Optional[str] = None


class ItemRequest(CamelModel):
    """Body naming one catalog item, e.g. to add, accept or dismiss it."""

    item_name: str
    item_type: ItemType = ItemType.SERVICE


class DismissedItems(CamelModel):
    """Items rejected on one appointment, split by kind."""

    services: list[str] = Field(default_factory=list)
    products: list[str] = Field(default_factory=list)

    def contains(self, name: str, item_type: ItemType) -> bool:
        if item_type == ItemType.SERVICE:
            return name in self.services
        return name in self.products
