"""
Person records and per-operation request structs
"""

from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class PhoneFilter(Enum):
    """Selector restricting people by phone presence."""

    YES = "YES"
    NO = "NO"


def generate_person_id() -> str:
    return str(uuid4())


class PersonRecord(BaseModel):
    """One directory entry as held by the record store."""

    # Upstream directories commonly serve numeric ids
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = Field(min_length=1)
    phone: str | None = None
    email: str | None = None
    street: str
    city: str
    id: str = Field(default_factory=generate_person_id, min_length=1)

    def has_phone(self) -> bool:
        return bool(self.phone)


class AddPersonRequest(BaseModel):
    """Arguments of the addPerson mutation."""

    name: str = Field(min_length=1)
    phone: str | None = None
    street: str = Field(min_length=1)
    city: str = Field(min_length=1)

    def to_record(self) -> PersonRecord:
        """Build a new record with a freshly generated id."""
        return PersonRecord(
            name=self.name,
            phone=self.phone,
            street=self.street,
            city=self.city,
        )


class EditPhoneRequest(BaseModel):
    """Arguments of the editPhone mutation."""

    name: str = Field(min_length=1)
    phone: str
