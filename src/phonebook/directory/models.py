"""
Person records as served by the external directory
"""

from pydantic import BaseModel, ConfigDict


class DirectoryPerson(BaseModel):
    """One person from the directory listing, passed through as served.

    Unlike store records, nothing is generated here: the id must come from
    the directory, and names are not required to be non-empty.
    """

    # Directories commonly serve numeric ids
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str
    phone: str | None = None
    email: str | None = None
    street: str
    city: str
    id: str

    def has_phone(self) -> bool:
        return bool(self.phone)
