"""
Person records, the in-memory store and address derivation
"""

from .address import Address, derive_address
from .models import AddPersonRequest, EditPhoneRequest, PersonRecord, PhoneFilter
from .results import PersonAlreadyExists, PersonError, PersonNotFound
from .store import PersonStore

__all__ = [
    "AddPersonRequest",
    "Address",
    "EditPhoneRequest",
    "PersonAlreadyExists",
    "PersonError",
    "PersonNotFound",
    "PersonRecord",
    "PersonStore",
    "PhoneFilter",
    "derive_address",
]
