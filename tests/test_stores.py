"""Tests for the in-memory stores."""

import pytest
from pydantic import ValidationError

from salonassist.schemas.appointment_schema import (
    Appointment,
    AppointmentDraft,
    AppointmentStatus,
    AppointmentUpdate,
)
from salonassist.schemas.catalog_schema import ItemType, ProductDraft, ServiceDraft
from salonassist.schemas.client_schema import Client, VisitRecord
from salonassist.schemas.rule_schema import RuleDraft
from salonassist.schemas.stylist_schema import Stylist
from salonassist.store.errors import DuplicateRecordError, RecordNotFoundError
from tests.conftest import TODAY


def booking(**overrides) -> AppointmentDraft:
    data = dict(client_name="Mark Ross", date="2026-01-15", time="10:00", services=["Haircut"])
    data.update(overrides)
    return AppointmentDraft(**data)


class TestCatalogStore:
    def test_add_and_find_by_name(self, repo):
        service = repo.catalog.add_service(ServiceDraft(name="Haircut", category="Hair", price=35))
        assert repo.catalog.get_service(service.id).name == "Haircut"
        assert repo.catalog.find_by_name(ItemType.SERVICE, "Haircut").price == 35

    def test_duplicate_name_rejected(self, repo):
        repo.catalog.add_product(ProductDraft(name="Beard Oil", price=18))
        with pytest.raises(DuplicateRecordError):
            repo.catalog.add_product(ProductDraft(name="Beard Oil", price=20))

    def test_same_name_allowed_across_kinds(self, repo):
        repo.catalog.add_service(ServiceDraft(name="Scalp Care", price=30))
        repo.catalog.add_product(ProductDraft(name="Scalp Care", price=15))

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            ServiceDraft(name="  ", price=10)

    def test_toggle_controls_active_lookup(self, repo):
        service = repo.catalog.add_service(ServiceDraft(name="Pedicure", price=45))
        assert repo.catalog.is_service_active("Pedicure")
        repo.catalog.set_active(ItemType.SERVICE, service.id, False)
        assert not repo.catalog.is_service_active("Pedicure")

    def test_unknown_item_is_not_active(self, repo):
        assert not repo.catalog.is_product_active("Nothing")
        assert repo.catalog.price_of(ItemType.PRODUCT, "Nothing") is None

    def test_active_only_listing(self, seeded_repo):
        names = [s.name for s in seeded_repo.catalog.list_services(active_only=True)]
        assert "Keratin Treatment" not in names
        assert "Haircut" in names

    def test_update_unknown_id(self, repo):
        with pytest.raises(RecordNotFoundError):
            repo.catalog.update_service(99, ServiceDraft(name="Haircut", price=35))


class TestRuleStore:
    def test_create_strips_and_dedupes_suggestions(self, repo):
        rule = repo.rules.create(
            ItemType.SERVICE,
            RuleDraft(trigger=" Haircut ", suggestions=["Deep Conditioning", " Deep Conditioning", ""]),
        )
        assert rule.trigger == "Haircut"
        assert rule.suggestions == ["Deep Conditioning"]
        assert rule.kind == ItemType.SERVICE

    def test_empty_suggestions_rejected(self):
        with pytest.raises(ValidationError, match="at least one suggestion"):
            RuleDraft(trigger="Haircut", suggestions=["  "])

    def test_blank_trigger_rejected(self):
        with pytest.raises(ValidationError, match="trigger"):
            RuleDraft(trigger="", suggestions=["Deep Conditioning"])

    def test_blank_reason_becomes_none(self):
        assert RuleDraft(trigger="Haircut", suggestions=["X"], reason="   ").reason is None

    def test_listing_is_ordered_by_trigger(self, repo):
        for trigger in ("Manicure", "Beard Trim", "Haircut"):
            repo.rules.create(ItemType.PRODUCT, RuleDraft(trigger=trigger, suggestions=["X"]))
        assert [r.trigger for r in repo.rules.list_rules(ItemType.PRODUCT)] == [
            "Beard Trim", "Haircut", "Manicure",
        ]

    def test_toggle_and_active_rules(self, repo):
        rule = repo.rules.create(ItemType.SERVICE, RuleDraft(trigger="Haircut", suggestions=["X"]))
        repo.rules.set_active(ItemType.SERVICE, rule.id, False)
        assert repo.rules.active_rules(ItemType.SERVICE) == []
        assert len(repo.rules.list_rules(ItemType.SERVICE)) == 1

    def test_delete(self, repo):
        rule = repo.rules.create(ItemType.SERVICE, RuleDraft(trigger="Haircut", suggestions=["X"]))
        repo.rules.delete(ItemType.SERVICE, rule.id)
        with pytest.raises(RecordNotFoundError):
            repo.rules.get(ItemType.SERVICE, rule.id)

    def test_kinds_are_separate(self, repo):
        rule = repo.rules.create(ItemType.SERVICE, RuleDraft(trigger="Haircut", suggestions=["X"]))
        with pytest.raises(RecordNotFoundError):
            repo.rules.get(ItemType.PRODUCT, rule.id + 100)
        assert repo.rules.list_rules(ItemType.PRODUCT) == []


class TestAppointmentStore:
    def test_create_generates_id(self, repo):
        appointment = repo.appointments.create(booking())
        assert appointment.id.startswith("APT-")
        assert appointment.status == AppointmentStatus.SCHEDULED

    def test_needs_a_service(self):
        with pytest.raises(ValidationError):
            booking(services=[])

    def test_stored_appointment_may_have_no_services(self):
        appointment = Appointment(id="a1", client_name="X", date="2026-01-01", time="10:00")
        assert appointment.services == []
        assert appointment.products == []

    def test_add_item_is_idempotent(self, repo):
        appointment = repo.appointments.create(booking())
        repo.appointments.add_product(appointment.id, "Beard Oil")
        updated = repo.appointments.add_product(appointment.id, "Beard Oil")
        assert updated.products == ["Beard Oil"]

    def test_add_service_keeps_booking_order(self, repo):
        appointment = repo.appointments.create(booking())
        updated = repo.appointments.add_service(appointment.id, "Deep Conditioning")
        assert updated.services == ["Haircut", "Deep Conditioning"]

    def test_dismiss_is_write_once(self, repo):
        appointment = repo.appointments.create(booking())
        assert repo.appointments.dismiss(appointment.id, "Sea Salt Spray", ItemType.PRODUCT)
        assert not repo.appointments.dismiss(appointment.id, "Sea Salt Spray", ItemType.PRODUCT)
        dismissed = repo.appointments.dismissed(appointment.id)
        assert dismissed.products == ["Sea Salt Spray"]
        assert dismissed.services == []

    def test_dismissals_are_per_appointment(self, repo):
        first = repo.appointments.create(booking())
        second = repo.appointments.create(booking())
        repo.appointments.dismiss(first.id, "Scalp Treatment", ItemType.SERVICE)
        assert repo.appointments.dismissed(second.id).services == []

    def test_update_status(self, repo):
        appointment = repo.appointments.create(booking())
        updated = repo.appointments.update(
            appointment.id, AppointmentUpdate(status=AppointmentStatus.COMPLETED)
        )
        assert updated.status == AppointmentStatus.COMPLETED

    def test_status_spelling(self):
        assert [s.value for s in AppointmentStatus] == [
            "Scheduled", "In Progress", "Completed", "No-show",
        ]

    def test_unknown_appointment(self, repo):
        with pytest.raises(RecordNotFoundError, match="Appointment nope not found"):
            repo.appointments.add_service("nope", "Haircut")

    def test_returned_copies_are_detached(self, repo):
        appointment = repo.appointments.create(booking())
        appointment.services.append("Tampered")
        assert repo.appointments.get(appointment.id).services == ["Haircut"]


class TestClientStore:
    def test_visits_update_last_visit_and_total(self, repo):
        repo.clients.add(Client(id="c1", name="Alex"))
        repo.clients.add_visit(VisitRecord(client_id="c1", date=TODAY, services=["Beard Trim"]))
        client = repo.clients.get("c1")
        assert client.last_visit == TODAY
        assert client.total_visits == 1

    def test_history_counts_services(self, repo):
        repo.clients.add(Client(id="c1", name="Alex"))
        for services in (["Beard Trim"], ["Beard Trim", "Haircut"], ["Haircut"], ["Beard Trim"]):
            repo.clients.add_visit(VisitRecord(client_id="c1", date=TODAY, services=services))
        history = repo.clients.history("c1")
        assert history.visit_count == 4
        assert history.service_counts == {"Beard Trim": 3, "Haircut": 2}
        assert history.most_frequent_service() == "Beard Trim"

    def test_client_without_visits(self, seeded_repo):
        history = seeded_repo.clients.history("client-009")
        assert history.visit_count == 0
        assert history.most_frequent_service() is None
        assert seeded_repo.clients.get("client-009").last_visit is None

    def test_visit_for_unknown_client(self, repo):
        with pytest.raises(RecordNotFoundError):
            repo.clients.add_visit(VisitRecord(client_id="ghost", date=TODAY))


class TestStylistStore:
    def test_listing_is_ordered_by_name(self, repo):
        for stylist_id, name in (("s1", "Paolo"), ("s2", "Anna"), ("s3", "Marta")):
            repo.stylists.add(Stylist(id=stylist_id, name=name))
        assert [s.name for s in repo.stylists.list_all()] == ["Anna", "Marta", "Paolo"]

    def test_active_only(self, seeded_repo):
        active = seeded_repo.stylists.list_all(active_only=True)
        assert "Luca" not in [s.name for s in active]
        assert len(seeded_repo.stylists.list_all()) == len(active) + 1

    def test_unknown_stylist(self, repo):
        with pytest.raises(RecordNotFoundError, match="Stylist ghost not found"):
            repo.stylists.get("ghost")

    def test_seeded_appointments_reference_stylists(self, seeded_repo):
        appointment = seeded_repo.appointments.get("apt-001")
        stylist = seeded_repo.stylists.get(appointment.stylist_id)
        assert stylist.name == appointment.stylist_name == "Anna"
        assert stylist.specialties == ["Hair", "Beard"]


class TestTrackingStore:
    def test_increment_creates_counter(self, repo):
        counter = repo.tracking.shown("Beard Oil", ItemType.PRODUCT)
        assert (counter.shown, counter.accepted, counter.dismissed) == (1, 0, 0)

    def test_unknown_event_rejected(self, repo):
        with pytest.raises(ValueError, match="Unknown tracking event"):
            repo.tracking.increment("Beard Oil", ItemType.PRODUCT, "clicked")

    def test_get_missing(self, repo):
        assert repo.tracking.get("Nothing") is None


class TestRepository:
    def test_reset_clears_everything(self, seeded_repo):
        seeded_repo.reset()
        assert seeded_repo.catalog.list_services() == []
        assert seeded_repo.rules.list_rules(ItemType.SERVICE) == []
        assert seeded_repo.appointments.list_all() == []
        assert seeded_repo.clients.list_all() == []
        assert seeded_repo.stylists.list_all() == []
        assert seeded_repo.tracking.all_counters() == {}
        assert seeded_repo.suggestions.list_all() == []

    def test_seeded_counts(self, seeded_repo):
        assert len(seeded_repo.catalog.list_services()) == 12
        assert len(seeded_repo.catalog.list_products()) == 15
        assert len(seeded_repo.clients.list_all()) == 9
        assert seeded_repo.appointments.get("apt-001").services == ["Haircut", "Beard Trim"]
