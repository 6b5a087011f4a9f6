"""Job search endpoint."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from backend.api.schemas import JobSearchRequest, JobSearchResponse
from backend.search import (
    JobSearchError,
    JobSearchGateway,
    ProviderNotConfigured,
    ProviderTimeout,
    get_gateway,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/find", response_model=JobSearchResponse)
def find_jobs(
    data: JobSearchRequest,
    gateway: JobSearchGateway = Depends(get_gateway),
):
    """Search the job provider for a profession in a location."""
    if not data.profession or not data.location:
        raise HTTPException(status_code=400, detail="Please provide both profession and location")

    try:
        jobs = gateway.search(data.profession, data.location)
    except ProviderNotConfigured as e:
        logger.error(f"Job search unavailable: {e}")
        raise HTTPException(status_code=503, detail="Job search is not available right now")
    except ProviderTimeout as e:
        logger.warning(f"Job search timed out for {data.profession!r} in {data.location!r}: {e}")
        raise HTTPException(status_code=504, detail="Job search timed out. Please try again.")
    except JobSearchError as e:
        logger.warning(f"Job search failed for {data.profession!r} in {data.location!r}: {e}")
        raise HTTPException(status_code=502, detail="Failed to fetch jobs. Please try again.")

    logger.info(f"Found {len(jobs)} jobs for {data.profession!r} in {data.location!r}")
    return JobSearchResponse(jobs=jobs)
