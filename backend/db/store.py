"""Persistence for application records, always scoped to one user."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.db.tables import Application

logger = logging.getLogger(__name__)


class ApplicationStore:
    """Create, list and delete a user's applications within a session."""

    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        clerk_user_id: str,
        job_title: str,
        company: str,
        location: str,
        job_url: str,
        user_email: str | None = None,
    ) -> Application:
        """Persist a new application. Rolls back and re-raises on failure."""
        application = Application(
            clerk_user_id=clerk_user_id,
            user_email=user_email,
            job_title=job_title,
            company=company,
            location=location,
            job_url=job_url,
        )
        try:
            self.db.add(application)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(application)
        return application

    def list_for_user(self, clerk_user_id: str) -> list[Application]:
        """Newest first; id breaks ties so repeated reads return the same order."""
        return (
            self.db.query(Application)
            .filter(Application.clerk_user_id == clerk_user_id)
            .order_by(Application.applied_at.desc(), Application.id)
            .all()
        )

    def get_for_user(self, clerk_user_id: str, application_id: str) -> Application | None:
        return (
            self.db.query(Application)
            .filter(Application.id == application_id, Application.clerk_user_id == clerk_user_id)
            .first()
        )

    def delete_for_user(self, clerk_user_id: str, application_id: str) -> bool:
        """Delete an application owned by the user.

        Returns False when the id does not exist or belongs to someone else;
        nothing is modified in that case.
        """
        application = self.get_for_user(clerk_user_id, application_id)
        if application is None:
            return False
        try:
            self.db.delete(application)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        logger.info(f"Deleted application {application_id} for user {clerk_user_id}")
        return True
