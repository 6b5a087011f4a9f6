"""API request/response schemas."""

from datetime import UTC, datetime

from pydantic import BaseModel, Field, field_validator

from backend.search import JobListing


# Job search schemas
class JobSearchRequest(BaseModel):
    profession: str = ""
    location: str = ""

    @field_validator("profession", "location", mode="before")
    @classmethod
    def strip_whitespace(cls, value):
        return value.strip() if isinstance(value, str) else value


class JobSearchResponse(BaseModel):
    jobs: list[JobListing]


# Application schemas
class ApplicationCreate(BaseModel):
    """Body sent by the client when the user clicks Apply."""

    clerk_user_id: str = Field(default="", alias="clerkUserId")
    user_email: str | None = Field(default=None, alias="userEmail")
    job_title: str = Field(default="", alias="jobTitle")
    company: str = ""
    location: str = ""
    job_url: str = Field(default="", alias="jobUrl")

    @field_validator("clerk_user_id", "job_title", "company", "location", "job_url", mode="before")
    @classmethod
    def strip_whitespace(cls, value):
        return value.strip() if isinstance(value, str) else value

    class Config:
        populate_by_name = True


class ApplicationResponse(BaseModel):
    id: str
    clerk_user_id: str
    user_email: str | None
    job_title: str
    company: str
    location: str
    job_url: str
    applied_at: datetime

    @field_validator("applied_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # SQLite drops the offset on read
        return value.replace(tzinfo=UTC) if value.tzinfo is None else value

    class Config:
        from_attributes = True


class ApplicationCreatedResponse(BaseModel):
    success: bool = True
    message: str
    application: ApplicationResponse


class ApplicationListResponse(BaseModel):
    success: bool = True
    applications: list[ApplicationResponse]


class StatusResponse(BaseModel):
    success: bool
    message: str
