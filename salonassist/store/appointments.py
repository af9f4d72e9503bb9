"""
In-memory appointment store with per-appointment dismissed recommendations.

Booked services and products are append-only; adding an item that is
already on the appointment is a no-op. Dismissals are a write-once set
keyed by (appointment id, item name, item type).
"""

import logging
import uuid

from salonassist.schemas.appointment_schema import (
    Appointment,
    AppointmentDraft,
    AppointmentUpdate,
    DismissedItems,
)
from salonassist.schemas.catalog_schema import ItemType
from salonassist.store.errors import RecordNotFoundError

logger = logging.getLogger(__name__)


class AppointmentStore:
    def __init__(self) -> None:
        self._appointments: dict[str, Appointment] = {}
        self._dismissed: set[tuple[str, str, ItemType]] = set()
        self._dismissed_order: list[tuple[str, str, ItemType]] = []

    def create(self, draft: AppointmentDraft, appointment_id: str = "") -> Appointment:
        apt_id = appointment_id or f"APT-{uuid.uuid4().hex[:8].upper()}"
        data = draft.model_dump()
        data["services"] = _unique(s.strip() for s in draft.services if s.strip())
        data["products"] = _unique(p.strip() for p in draft.products if p.strip())
        appointment = Appointment(id=apt_id, **data)
        self._appointments[apt_id] = appointment
        logger.info(
            "Appointment created: %s for %s on %s at %s",
            apt_id, appointment.client_name, appointment.date, appointment.time,
        )
        return appointment.model_copy(deep=True)

    def get(self, appointment_id: str) -> Appointment:
        return self._require(appointment_id).model_copy(deep=True)

    def exists(self, appointment_id: str) -> bool:
        return appointment_id in self._appointments

    def list_all(self) -> list[Appointment]:
        """All appointments, newest first."""
        ordered = sorted(
            self._appointments.values(), key=lambda a: (a.date, a.time), reverse=True
        )
        return [a.model_copy(deep=True) for a in ordered]

    def update(self, appointment_id: str, changes: AppointmentUpdate) -> Appointment:
        appointment = self._require(appointment_id)
        if changes.status is not None:
            appointment.status = changes.status
            logger.info("Appointment %s status -> %s", appointment_id, changes.status.value)
        if changes.notes is not None:
            appointment.notes = changes.notes
        return appointment.model_copy(deep=True)

    def add_item(self, appointment_id: str, name: str, item_type: ItemType) -> Appointment:
        appointment = self._require(appointment_id)
        booked = appointment.services if item_type == ItemType.SERVICE else appointment.products
        if name not in booked:
            booked.append(name)
            logger.info("Added %s '%s' to appointment %s", item_type.value, name, appointment_id)
        return appointment.model_copy(deep=True)

    def add_service(self, appointment_id: str, name: str) -> Appointment:
        return self.add_item(appointment_id, name, ItemType.SERVICE)

    def add_product(self, appointment_id: str, name: str) -> Appointment:
        return self.add_item(appointment_id, name, ItemType.PRODUCT)

    def dismiss(self, appointment_id: str, name: str, item_type: ItemType) -> bool:
        """Record a dismissal. Returns False if it was already recorded."""
        self._require(appointment_id)
        key = (appointment_id, name, item_type)
        if key in self._dismissed:
            return False
        self._dismissed.add(key)
        self._dismissed_order.append(key)
        logger.info("Dismissed %s '%s' on appointment %s", item_type.value, name, appointment_id)
        return True

    def dismissed(self, appointment_id: str) -> DismissedItems:
        self._require(appointment_id)
        result = DismissedItems()
        for apt_id, name, item_type in self._dismissed_order:
            if apt_id != appointment_id:
                continue
            if item_type == ItemType.SERVICE:
                result.services.append(name)
            else:
                result.products.append(name)
        return result

    def reset(self) -> None:
        """Clear all appointments and dismissals. Used by test fixtures."""
        self._appointments.clear()
        self._dismissed.clear()
        self._dismissed_order.clear()

    def _require(self, appointment_id: str) -> Appointment:
        appointment = self._appointments.get(appointment_id)
        if appointment is None:
            raise RecordNotFoundError("Appointment", appointment_id)
        return appointment


def _unique(names) -> list[str]:
    result: list[str] = []
    for name in names:
        if name not in result:
            result.append(name)
    return result
