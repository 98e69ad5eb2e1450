"""Unit tests for the domain models and their validation rules."""

from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from scouts.core.models.domain import Contact, Event, Group, Registration, RegistrationStatus, Scout


class TestGroup:
    def test_defaults(self):
        group = Group(name="Wolf Cubs")
        assert group.id is None
        assert group.version == 0

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            Group(name="")

    def test_negative_version_rejected(self):
        with pytest.raises(ValidationError):
            Group(name="Wolf Cubs", version=-1)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            Group(name="Wolf Cubs", color="blue")


class TestContact:
    def test_valid_contact(self, make_contact):
        contact = make_contact()
        assert contact.email == "anna@example.org"

    @pytest.mark.parametrize("email", ["not-an-email", "anna@", ""])
    def test_invalid_email_rejected(self, make_contact, email):
        with pytest.raises(ValidationError):
            make_contact(email=email)

    @pytest.mark.parametrize("field", ["name", "phone_number"])
    def test_required_text_not_empty(self, make_contact, field):
        with pytest.raises(ValidationError):
            make_contact(**{field: ""})

    def test_relationship_may_be_empty(self, make_contact):
        assert make_contact(relationship="").relationship == ""


class TestScout:
    def test_valid_scout(self, make_scout):
        scout = make_scout()
        assert scout.id is None
        assert len(scout.contacts) == 1

    @pytest.mark.parametrize("field", ["name", "address", "health_insurance"])
    def test_blank_text_rejected(self, make_scout, field):
        with pytest.raises(ValidationError):
            make_scout(**{field: "   "})

    def test_at_least_one_contact(self, make_scout):
        with pytest.raises(ValidationError):
            make_scout(contacts=[])

    def test_contact_order_preserved(self, make_scout, make_contact):
        contacts = [make_contact(name="First"), make_contact(name="Second"), make_contact(name="Third")]
        scout = make_scout(contacts=contacts)
        assert [c.name for c in scout.contacts] == ["First", "Second", "Third"]

    def test_groups_unique_by_id(self, make_scout):
        cubs = Group(id=1, name="Wolf Cubs")
        scout = make_scout(groups=[cubs, Group(id=2, name="Rovers"), Group(id=1, name="Wolf Cubs")])
        assert [g.id for g in scout.groups] == [1, 2]

    def test_optional_texts_may_be_empty(self, make_scout):
        scout = make_scout(phone_number="", allergy_info="", vaccination_info="")
        assert scout.allergy_info == ""


class TestEvent:
    def test_open_to_all_groups_by_default(self, make_event):
        assert make_event().participating_groups == []

    @pytest.mark.parametrize("field", ["name", "location"])
    def test_blank_text_rejected(self, make_event, field):
        with pytest.raises(ValidationError):
            make_event(**{field: ""})

    def test_has_group(self, make_event):
        event = make_event(groups=[Group(id=3, name="Scouts")])
        assert event.has_group(3)
        assert not event.has_group(4)


class TestRegistration:
    def test_default_status_is_pending(self, make_scout, make_event):
        registration = Registration(
            scout=make_scout(id=1),
            event=make_event(id=2),
            registration_date=datetime(2025, 3, 1, tzinfo=timezone.utc),
        )
        assert registration.status is RegistrationStatus.PENDING
        assert registration.note == ""

    def test_status_from_string(self, make_registration, make_scout, make_event):
        registration = make_registration(make_scout(id=1), make_event(id=2), status="CONFIRMED")
        assert registration.status is RegistrationStatus.CONFIRMED

    def test_unknown_status_rejected(self, make_registration, make_scout, make_event):
        with pytest.raises(ValidationError):
            make_registration(make_scout(id=1), make_event(id=2), status="WAITING")


def test_status_values():
    assert [s.value for s in RegistrationStatus] == ["PENDING", "CONFIRMED", "CANCELLED"]


def test_birth_date_is_a_date(make_scout):
    assert make_scout(birth_date="2011-02-03").birth_date == date(2011, 2, 3)


def test_contact_is_value_object():
    a = Contact(name="A", phone_number="1", email="a@example.org")
    b = Contact(name="A", phone_number="1", email="a@example.org")
    assert a == b
