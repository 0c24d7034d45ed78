"""
In-memory record store for person entries.
"""

import threading
from collections.abc import Iterable

from ..logging import get_logger
from .models import PersonRecord
from .results import PersonAlreadyExists, PersonNotFound

logger = get_logger(__name__)


class PersonStore:
    """
    Ordered, append-only collection of person records.

    The only in-place update allowed is a record's phone number. Lookups are
    exact, case-sensitive linear scans returning the first match. Name
    uniqueness is only enforced by ``add_if_absent``; ``append`` accepts duplicates.
    """

    def __init__(self, records: Iterable[PersonRecord] = ()):
        self._records: list[PersonRecord] = list(records)
        self._lock = threading.Lock()

    def count(self) -> int:
        """Return the number of stored records."""
        return len(self._records)

    def all(self) -> list[PersonRecord]:
        """Return a snapshot of the stored records, in insertion order."""
        return list(self._records)

    def find_by_name(self, name: str) -> PersonRecord | None:
        """
        Find the first record whose name equals ``name`` exactly.

        Args:
            name: Name to look up (case-sensitive)

        Returns:
            The matching record or None if no record matches
        """
        for record in self._records:
            if record.name == name:
                return record
        return None

    def append(self, record: PersonRecord) -> PersonRecord:
        """
        Append a record to the store.

        Args:
            record: Record carrying a freshly generated id

        Returns:
            The stored record
        """
        with self._lock:
            self._records.append(record)

        logger.debug("Person record appended", person_id=record.id, total=len(self._records))
        return record

    def add_if_absent(self, record: PersonRecord) -> PersonRecord | PersonAlreadyExists:
        """
        Append a record unless one with the same name is already stored.

        The name check and the append happen under one lock acquisition, so
        concurrent additions of the same name store at most one record.

        Args:
            record: Record carrying a freshly generated id

        Returns:
            The stored record, or PersonAlreadyExists carrying the name
        """
        with self._lock:
            if self.find_by_name(record.name) is not None:
                return PersonAlreadyExists(name=record.name)
            self._records.append(record)

        logger.debug("Person record appended", person_id=record.id, total=len(self._records))
        return record

    def update_phone(self, name: str, phone: str) -> PersonRecord | PersonNotFound:
        """
        Overwrite the phone of the first record named ``name``.

        Args:
            name: Name of the record to update
            phone: New phone number

        Returns:
            The updated record, or PersonNotFound if no record matches
        """
        with self._lock:
            record = self.find_by_name(name)
            if record is None:
                return PersonNotFound(name=name)
            record.phone = phone

        return record
