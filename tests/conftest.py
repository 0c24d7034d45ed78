"""
Shared pytest fixtures and configuration for all tests.
"""

import os
import sys
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import httpx
import pytest
import strawberry

# Add src directory to path so imports work
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from phonebook.directory.client import DirectoryClient
from phonebook.graphql.schema import build_context
from phonebook.people.seed import sample_people
from phonebook.people.store import PersonStore

DIRECTORY_URL = "http://directory.test/person"

UPSTREAM_PEOPLE: list[dict[str, Any]] = [
    {
        "name": "Ada Lovelace",
        "phone": "555-000-0001",
        "email": "ada@example.com",
        "street": "12 St James Sq",
        "city": "London",
        "id": 1,
    },
    {
        "name": "Grace Hopper",
        "street": "1 Navy Way",
        "city": "Arlington",
        "id": "2",
    },
    {
        "name": "Alan Turing",
        "phone": "",
        "street": "78 High St",
        "city": "Wilmslow",
        "id": "3",
    },
]


def make_directory(
    handler: Callable[[httpx.Request], httpx.Response] | None = None,
    payload: Any = None,
    status_code: int = 200,
) -> DirectoryClient:
    """Build a directory client served by an in-process mock transport."""
    if handler is None:
        body = UPSTREAM_PEOPLE if payload is None else payload

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json=body)

    return DirectoryClient(DIRECTORY_URL, timeout=1.0, transport=httpx.MockTransport(handler))


@pytest.fixture
def store() -> PersonStore:
    """A record store holding the three sample people."""
    return PersonStore(sample_people())


@pytest.fixture
def directory() -> DirectoryClient:
    """A directory client serving UPSTREAM_PEOPLE."""
    return make_directory()


@pytest.fixture
def directory_factory() -> Callable[..., DirectoryClient]:
    """Build directory clients with a custom handler, payload or status."""
    return make_directory


@pytest.fixture
def unreachable_directory() -> DirectoryClient:
    """A directory client whose every request fails to connect."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    return make_directory(handler)


@pytest.fixture
def context(store: PersonStore, directory: DirectoryClient) -> dict[str, Any]:
    """GraphQL context wired to the sample store and mock directory."""
    return build_context(store, directory)


@pytest.fixture
def mock_info(context: dict[str, Any]) -> MagicMock:
    """Create a mock GraphQL info object carrying the resolver context."""
    info = MagicMock(spec=strawberry.Info)
    info.context = context
    return info


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
