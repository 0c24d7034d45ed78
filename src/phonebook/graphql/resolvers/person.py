"""
Person resolvers for GraphQL API
"""

from __future__ import annotations

import strawberry

from ...directory.client import DirectoryClient, UpstreamUnavailableError
from ...logging import get_logger
from ...people.address import derive_address
from ...people.models import AddPersonRequest, EditPhoneRequest, PhoneFilter
from ...people.results import PersonAlreadyExists, PersonNotFound
from ...people.store import PersonStore
from ..types.person import Address, Person

logger = get_logger(__name__)


def get_store(info: strawberry.Info) -> PersonStore:
    return info.context["store"]


def get_directory(info: strawberry.Info) -> DirectoryClient:
    return info.context["directory"]


async def resolve_person_count(info: strawberry.Info) -> int:
    """Count the people held in the record store."""
    return get_store(info).count()


async def resolve_all_people(
    info: strawberry.Info, by_phone: PhoneFilter | None = None
) -> list[Person]:
    """List people from the external directory.

    Args:
        info: GraphQL info context
        by_phone: Optional phone-presence selector

    Returns:
        People as served by the directory, filtered when a selector is given

    Raises:
        UpstreamUnavailableError: If the directory cannot be read
    """
    directory = get_directory(info)

    try:
        people = await directory.list_people(by_phone)
    except UpstreamUnavailableError as e:
        logger.error(
            "Person directory request failed",
            url=e.url,
            error=e.reason,
        )
        raise

    return [Person.from_record(person) for person in people]


async def resolve_person_by_name(info: strawberry.Info, name: str) -> Person | None:
    """Look up a person by exact name; absence is a null result."""
    record = get_store(info).find_by_name(name)
    if record is None:
        return None
    return Person.from_record(record)


async def add_person(
    info: strawberry.Info, request: AddPersonRequest
) -> Person | PersonAlreadyExists:
    """Add a person unless the name is already taken.

    Returns:
        The created person, or PersonAlreadyExists carrying the name
    """
    record = get_store(info).add_if_absent(request.to_record())

    if isinstance(record, PersonAlreadyExists):
        logger.info("Rejected duplicate person", name=request.name)
        return record

    logger.info("Person added", name=record.name, person_id=record.id)
    return Person.from_record(record)


async def edit_phone(info: strawberry.Info, request: EditPhoneRequest) -> Person | PersonNotFound:
    """Update the phone of an existing person.

    Returns:
        The updated person, or PersonNotFound carrying the name
    """
    result = get_store(info).update_phone(request.name, request.phone)

    if isinstance(result, PersonNotFound):
        logger.info("Phone edit for unknown person", name=request.name)
        return result

    logger.info("Person phone updated", name=result.name, person_id=result.id)
    return Person.from_record(result)


async def resolve_person_address(person: Person, info: strawberry.Info) -> Address:
    _ = info  # Unused but required by GraphQL interface

    address = derive_address(person.street, person.city)
    return Address(street=address.street, city=address.city, complete=address.complete)
