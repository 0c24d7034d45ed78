"""
Person GraphQL type definitions
"""

import strawberry

from ...directory.models import DirectoryPerson
from ...people.models import PersonRecord, PhoneFilter

# Exposed on the wire as `enum YesNo { YES NO }`
YesNo = strawberry.enum(PhoneFilter, name="YesNo", description="Phone presence selector.")


@strawberry.type
class Address:
    """Address derived from a person's street and city."""

    street: str
    city: str
    complete: str


@strawberry.type
class Person:
    """Person type for GraphQL API."""

    name: str
    phone: str | None
    email: str | None
    id: strawberry.ID
    street: strawberry.Private[str]
    city: strawberry.Private[str]

    @strawberry.field
    async def address(self, info: strawberry.Info) -> Address:
        """Get the derived address of this person."""
        from ..resolvers.person import resolve_person_address

        return await resolve_person_address(self, info)

    @classmethod
    def from_record(cls, record: PersonRecord | DirectoryPerson) -> "Person":
        return cls(
            name=record.name,
            phone=record.phone,
            email=record.email,
            id=strawberry.ID(record.id),
            street=record.street,
            city=record.city,
        )
