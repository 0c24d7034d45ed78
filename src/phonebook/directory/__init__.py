"""
External person directory integration
"""

from .client import DirectoryClient, UpstreamUnavailableError, filter_by_phone
from .models import DirectoryPerson

__all__ = ["DirectoryClient", "DirectoryPerson", "UpstreamUnavailableError", "filter_by_phone"]
