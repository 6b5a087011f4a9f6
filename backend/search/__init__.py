"""
Job search provider access.

- gateway: JSearch client and listing normalization
"""

from backend.search.gateway import (
    JobListing,
    JobSearchError,
    JobSearchGateway,
    ProviderNotConfigured,
    ProviderResponseError,
    ProviderTimeout,
    get_gateway,
)

__all__ = [
    "JobListing",
    "JobSearchError",
    "JobSearchGateway",
    "ProviderNotConfigured",
    "ProviderResponseError",
    "ProviderTimeout",
    "get_gateway",
]
