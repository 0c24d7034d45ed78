"""
Phonebook backend
GraphQL directory of people with an external person-listing upstream
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
