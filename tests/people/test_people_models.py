"""
Tests for person records, request structs, address derivation and seeding
"""

import dataclasses

import pytest
from pydantic import ValidationError

from phonebook.people.address import Address, derive_address
from phonebook.people.models import AddPersonRequest, EditPhoneRequest, PersonRecord
from phonebook.people.seed import SAMPLE_PEOPLE, create_store, sample_people


class TestDeriveAddress:
    def test_joins_street_and_city(self):
        assert derive_address("123 Main St", "Anytown") == Address(
            street="123 Main St",
            city="Anytown",
            complete="123 Main St, Anytown",
        )

    def test_is_immutable(self):
        address = derive_address("1 A St", "Town")

        with pytest.raises(dataclasses.FrozenInstanceError):
            address.complete = "elsewhere"  # type: ignore[misc]


class TestPersonRecord:
    def test_generates_unique_ids(self):
        first = PersonRecord(name="A", street="s", city="c")
        second = PersonRecord(name="A", street="s", city="c")

        assert first.id
        assert second.id
        assert first.id != second.id

    def test_coerces_numeric_id(self):
        record = PersonRecord(name="A", street="s", city="c", id=42)

        assert record.id == "42"

    def test_rejects_empty_name(self):
        with pytest.raises(ValidationError):
            PersonRecord(name="", street="s", city="c")

    def test_has_phone(self):
        assert PersonRecord(name="A", phone="1", street="s", city="c").has_phone()
        assert not PersonRecord(name="A", phone="", street="s", city="c").has_phone()
        assert not PersonRecord(name="A", street="s", city="c").has_phone()


class TestRequests:
    def test_add_person_request_to_record(self):
        request = AddPersonRequest(name="Alice", street="1 A St", city="Town")

        record = request.to_record()

        assert record.name == "Alice"
        assert record.phone is None
        assert record.email is None
        assert record.street == "1 A St"
        assert record.city == "Town"
        assert record.id

    @pytest.mark.parametrize("field", ["name", "street", "city"])
    def test_add_person_request_requires_non_empty(self, field: str):
        values = {"name": "Alice", "street": "1 A St", "city": "Town", field: ""}

        with pytest.raises(ValidationError) as exc_info:
            AddPersonRequest(**values)

        assert exc_info.value.errors()[0]["loc"] == (field,)

    def test_edit_phone_request_requires_name(self):
        with pytest.raises(ValidationError):
            EditPhoneRequest(name="", phone="1")


class TestSeed:
    def test_sample_people(self):
        people = sample_people()

        assert [p.name for p in people] == ["John Doe", "Jane Doe", "John Smith"]
        assert people[2].phone is None
        assert people[2].email == "johnsmith"

    def test_sample_people_are_fresh_instances(self):
        sample_people()[0].phone = "changed"

        assert sample_people()[0].phone == SAMPLE_PEOPLE[0]["phone"]

    def test_create_store_seeded(self):
        assert create_store(seed=True).count() == 3

    def test_create_store_empty(self):
        assert create_store(seed=False).count() == 0
