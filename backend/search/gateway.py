"""
JSearch gateway for job discovery.

Forwards a profession/location pair to the JSearch API (RapidAPI) and maps
its listings to the uniform JobListing shape.
"""

import logging
from typing import Any

import httpx
from pydantic import BaseModel

from backend.config import settings

logger = logging.getLogger(__name__)


class JobListing(BaseModel):
    title: str
    company: str
    location: str
    url: str


class JobSearchError(Exception):
    """The provider could not produce a usable result."""


class ProviderNotConfigured(JobSearchError):
    pass


class ProviderTimeout(JobSearchError):
    pass


class ProviderResponseError(JobSearchError):
    """Unreachable provider, HTTP error status or a malformed body."""


def _format_location(hit: dict[str, Any]) -> str:
    parts = [hit.get("job_city"), hit.get("job_state"), hit.get("job_country")]
    location = ", ".join(str(p).strip() for p in parts if p and str(p).strip())
    if location:
        return location
    if hit.get("job_location"):
        return str(hit["job_location"])
    return "Remote" if hit.get("job_is_remote") else ""


def _is_absolute_url(url: str) -> bool:
    return url.startswith("http://") or url.startswith("https://")


def normalize_listing(hit: dict[str, Any]) -> JobListing | None:
    """Map one provider hit to a JobListing; None if it has no usable link."""
    url = str(hit.get("job_apply_link") or hit.get("job_google_link") or "").strip()
    if not _is_absolute_url(url):
        return None
    return JobListing(
        title=str(hit.get("job_title") or "").strip(),
        company=str(hit.get("employer_name") or "").strip(),
        location=_format_location(hit),
        url=url,
    )


class JobSearchGateway:
    """Single-attempt, timeout-bounded client for the JSearch search endpoint."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        host: str | None = None,
        timeout: float | None = None,
        max_results: int | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.api_key = settings.jsearch_api_key if api_key is None else api_key
        self.base_url = (base_url or settings.jsearch_base_url).rstrip("/")
        self.host = host or settings.jsearch_host
        self.timeout = settings.search_timeout if timeout is None else timeout
        self.max_results = settings.max_search_results if max_results is None else max_results
        self._transport = transport

    def search(self, profession: str, location: str) -> list[JobListing]:
        """
        Search the provider for jobs.

        Args:
            profession: Job title or keywords (e.g., "Backend Engineer")
            location: City, region or "Remote"

        Returns:
            Listings in provider order, at most max_results of them

        Raises:
            ProviderNotConfigured: JSEARCH_API_KEY is not set
            ProviderTimeout: the provider did not answer within the timeout
            ProviderResponseError: network failure, error status or malformed body
        """
        if not self.api_key:
            raise ProviderNotConfigured("JSEARCH_API_KEY not set")

        headers = {
            "Accept": "application/json",
            "X-RapidAPI-Key": self.api_key,
            "X-RapidAPI-Host": self.host,
        }
        params = {"query": f"{profession} in {location}", "num_pages": "1"}

        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.get(f"{self.base_url}/search", headers=headers, params=params)
                response.raise_for_status()
                data = response.json()
        except httpx.TimeoutException as e:
            raise ProviderTimeout(f"JSearch timed out after {self.timeout}s") from e
        except httpx.HTTPStatusError as e:
            raise ProviderResponseError(f"JSearch HTTP error: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise ProviderResponseError(f"JSearch request failed: {e}") from e
        except ValueError as e:
            raise ProviderResponseError("JSearch returned invalid JSON") from e

        hits = data.get("data") if isinstance(data, dict) else None
        if not isinstance(hits, list) or not all(isinstance(h, dict) for h in hits):
            raise ProviderResponseError("JSearch response has no listing array")

        jobs: list[JobListing] = []
        for hit in hits:
            listing = normalize_listing(hit)
            if listing is None:
                logger.debug(f"Skipping listing without apply link: {hit.get('job_id')!r}")
                continue
            jobs.append(listing)
            if len(jobs) >= self.max_results:
                break
        return jobs


# Created lazily so settings can be overridden before first use
_gateway: JobSearchGateway | None = None


def get_gateway() -> JobSearchGateway:
    """FastAPI dependency returning the shared gateway."""
    global _gateway
    if _gateway is None:
        _gateway = JobSearchGateway()
    return _gateway
