"""
Sample people loaded into a fresh record store.
"""

from __future__ import annotations

from ..config import settings
from ..logging import get_logger
from .models import PersonRecord
from .store import PersonStore

logger = get_logger(__name__)

SAMPLE_PEOPLE: tuple[dict[str, str], ...] = (
    {
        "name": "John Doe",
        "phone": "555-555-5555",
        "email": "johndoe@example.com",
        "city": "Anytown",
        "street": "123 Main St",
        "id": "3d3d51cc-6d5c-4d10-8d32-2b193d485819",
    },
    {
        "name": "Jane Doe",
        "phone": "555-555-5555",
        "email": "janedoe@example.com",
        "city": "Anytown",
        "street": "123 Main St",
        "id": "3d3d51cc-6d5c-4d10-8d32-2b193d485820",
    },
    {
        "name": "John Smith",
        "email": "johnsmith",
        "city": "Anytown",
        "street": "123 Main St",
        "id": "3d3d51cc-6d5c-4d10-8d32-2b193d485821",
    },
)


def sample_people() -> list[PersonRecord]:
    """Build fresh record instances for the sample people."""
    return [PersonRecord(**person) for person in SAMPLE_PEOPLE]


def create_store(seed: bool | None = None) -> PersonStore:
    """
    Create the process-wide record store.

    Args:
        seed: Load the sample people (defaults to ``settings.seed_sample_people``)

    Returns:
        A new PersonStore
    """
    if seed is None:
        seed = settings.seed_sample_people

    store = PersonStore(sample_people() if seed else ())
    logger.info("Person store created", seeded=seed, count=store.count())
    return store
