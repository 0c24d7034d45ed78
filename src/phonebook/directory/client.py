"""Client for the external person directory.

The directory is a REST service listing people as a JSON array of
person-shaped objects. It is read-only from this service's point of view:
there is no retry policy and no fallback to the local record store.
"""

from typing import Any

import httpx
from pydantic import ValidationError

from ..logging import get_logger
from ..people.models import PhoneFilter
from .models import DirectoryPerson

logger = get_logger(__name__)


class UpstreamUnavailableError(Exception):
    """Raised when the person directory cannot be read."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Person directory at {url} is unavailable: {reason}")
        self.url = url
        self.reason = reason


def filter_by_phone(
    people: list[DirectoryPerson], by_phone: PhoneFilter | None
) -> list[DirectoryPerson]:
    """Restrict people by phone presence.

    Args:
        people: Records to filter, order is preserved
        by_phone: YES keeps records with a non-empty phone, NO keeps the rest,
            None keeps everything

    Returns:
        The filtered records
    """
    if by_phone is None:
        return list(people)
    if by_phone is PhoneFilter.YES:
        return [person for person in people if person.has_phone()]
    return [person for person in people if not person.has_phone()]


class DirectoryClient:
    """Reads the person listing from the external directory service."""

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def _fetch(self) -> Any:
        async with httpx.AsyncClient(transport=self._transport) as client:
            try:
                response = await client.get(self.url, timeout=self.timeout)
                response.raise_for_status()
            except httpx.HTTPError as e:
                raise UpstreamUnavailableError(self.url, str(e) or type(e).__name__) from e

            try:
                return response.json()
            except ValueError as e:
                raise UpstreamUnavailableError(self.url, "response is not valid JSON") from e

    def _parse(self, payload: Any) -> list[DirectoryPerson]:
        """Validate each listed record on its own.

        Records missing an id, street or city, or carrying values of the wrong
        type, are skipped with a warning; the remaining records are returned
        as served.
        """
        if not isinstance(payload, list):
            raise UpstreamUnavailableError(self.url, "expected a JSON array of people")

        people = []
        for index, item in enumerate(payload):
            try:
                people.append(DirectoryPerson.model_validate(item))
            except ValidationError as e:
                logger.warning(
                    "Skipping malformed directory record",
                    url=self.url,
                    index=index,
                    errors=[".".join(str(part) for part in err["loc"]) for err in e.errors()],
                )
        return people

    async def list_people(self, by_phone: PhoneFilter | None = None) -> list[DirectoryPerson]:
        """List people from the directory, optionally filtered by phone presence.

        Args:
            by_phone: Optional phone-presence selector

        Returns:
            Person records in upstream order, malformed records left out

        Raises:
            UpstreamUnavailableError: If the request fails, times out, returns a
                non-2xx status, or the payload is not a JSON array
        """
        people = self._parse(await self._fetch())

        logger.debug(
            "Fetched people from directory",
            url=self.url,
            count=len(people),
            by_phone=by_phone.value if by_phone else None,
        )
        return filter_by_phone(people, by_phone)
