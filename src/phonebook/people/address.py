"""
Address derivation for person records
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    street: str
    city: str
    complete: str


def derive_address(street: str, city: str) -> Address:
    """Build the display address; recomputed on every read, never stored."""
    return Address(street=street, city=city, complete=f"{street}, {city}")
