"""
Root GraphQL mutation definitions
"""

import strawberry
from pydantic import ValidationError

from ...people.models import AddPersonRequest, EditPhoneRequest
from ...people.results import PersonAlreadyExists, PersonNotFound
from ..errors import invalid_input_error, person_error
from ..types.person import Person


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addPerson")
    async def add_person(
        self,
        info: strawberry.Info,
        name: str,
        street: str,
        city: str,
        phone: str | None = None,
    ) -> Person | None:
        """Add a person to the local record store."""
        from ..resolvers.person import add_person

        try:
            request = AddPersonRequest(name=name, phone=phone, street=street, city=city)
        except ValidationError as e:
            raise invalid_input_error(e) from e

        result = await add_person(info, request)
        if isinstance(result, PersonAlreadyExists):
            raise person_error(result)
        return result

    @strawberry.mutation(name="editPhone")
    async def edit_phone(self, info: strawberry.Info, name: str, phone: str) -> Person | None:
        """Change the phone of a person in the local record store."""
        from ..resolvers.person import edit_phone

        try:
            request = EditPhoneRequest(name=name, phone=phone)
        except ValidationError as e:
            raise invalid_input_error(e) from e

        result = await edit_phone(info, request)
        if isinstance(result, PersonNotFound):
            raise person_error(result)
        return result
