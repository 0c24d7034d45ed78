"""
Error kinds returned (not raised) by people operations
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PersonAlreadyExists:
    """A person with this name is already in the store."""

    name: str

    @property
    def message(self) -> str:
        return "Person already exists."


@dataclass(frozen=True)
class PersonNotFound:
    """No person with this name is in the store."""

    name: str

    @property
    def message(self) -> str:
        return "Person does not exist."


PersonError = PersonAlreadyExists | PersonNotFound
