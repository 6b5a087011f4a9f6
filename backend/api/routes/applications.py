"""Application history endpoints."""

import logging

from fastapi import APIRouter, Depends, Header, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.api.schemas import (
    ApplicationCreate,
    ApplicationCreatedResponse,
    ApplicationListResponse,
    ApplicationResponse,
    StatusResponse,
)
from backend.config import settings
from backend.db import ApplicationStore, get_db

logger = logging.getLogger(__name__)

router = APIRouter()


def _verify_caller(user_id: str, x_user_id: str | None):
    """Verify the authenticated caller matches the user being acted on.

    Rules:
    - No X-User-ID header: allow, unless REQUIRE_USER_HEADER is set
    - X-User-ID header present: must equal the target user id
    """
    if not x_user_id:
        if settings.require_user_header:
            raise HTTPException(status_code=403, detail="Authentication required")
        return
    if x_user_id != user_id:
        raise HTTPException(status_code=403, detail="Access denied")


@router.post("/apply", response_model=ApplicationCreatedResponse, status_code=201)
def apply(
    data: ApplicationCreate,
    db: Session = Depends(get_db),
    x_user_id: str | None = Header(None, alias="X-User-ID"),
):
    """Record that the user applied to a job."""
    if not data.clerk_user_id:
        raise HTTPException(status_code=400, detail="User ID is required")
    if not data.job_title or not data.job_url:
        raise HTTPException(status_code=400, detail="Job title and job URL are required")
    _verify_caller(data.clerk_user_id, x_user_id)

    try:
        application = ApplicationStore(db).create(
            clerk_user_id=data.clerk_user_id,
            user_email=data.user_email,
            job_title=data.job_title,
            company=data.company,
            location=data.location,
            job_url=data.job_url,
        )
    except SQLAlchemyError as e:
        logger.error(f"Failed to save application for {data.clerk_user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to save application")

    logger.info(f"Saved application {application.id} for user {data.clerk_user_id}")
    return ApplicationCreatedResponse(
        message="Application saved",
        application=ApplicationResponse.model_validate(application),
    )


@router.get("/history/{user_id}", response_model=ApplicationListResponse)
def get_history(
    user_id: str,
    db: Session = Depends(get_db),
    x_user_id: str | None = Header(None, alias="X-User-ID"),
):
    """List all applications of a user, newest first."""
    _verify_caller(user_id, x_user_id)

    try:
        applications = ApplicationStore(db).list_for_user(user_id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to load history for {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to load application history")

    return ApplicationListResponse(
        applications=[ApplicationResponse.model_validate(a) for a in applications]
    )


@router.delete("/history/{user_id}/{application_id}", response_model=StatusResponse)
def delete_history_entry(
    user_id: str,
    application_id: str,
    db: Session = Depends(get_db),
    x_user_id: str | None = Header(None, alias="X-User-ID"),
):
    """Delete one application, only if it belongs to the user."""
    _verify_caller(user_id, x_user_id)

    try:
        deleted = ApplicationStore(db).delete_for_user(user_id, application_id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to delete application {application_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete application")

    if not deleted:
        logger.warning(f"Application {application_id} not found for user {user_id}")
        raise HTTPException(status_code=404, detail="Application not found")

    return StatusResponse(success=True, message="Application removed from history")
