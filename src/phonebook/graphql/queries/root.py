"""
Root GraphQL query definitions
"""

import strawberry

from ..errors import upstream_error
from ..types.person import Person, YesNo


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def person_count(self, info: strawberry.Info) -> int:
        """Count the people in the local record store."""
        from ..resolvers.person import resolve_person_count

        return await resolve_person_count(info)

    @strawberry.field
    async def all_people(self, info: strawberry.Info, by_phone: YesNo | None = None) -> list[Person]:
        """List people from the external directory, optionally filtered by phone presence."""
        from ...directory.client import UpstreamUnavailableError
        from ..resolvers.person import resolve_all_people

        try:
            return await resolve_all_people(info, by_phone)
        except UpstreamUnavailableError as e:
            raise upstream_error() from e

    @strawberry.field
    async def get_person_by_name(self, info: strawberry.Info, name: str) -> Person | None:
        """Get a person from the local record store by exact name."""
        from ..resolvers.person import resolve_person_by_name

        return await resolve_person_by_name(info, name)
