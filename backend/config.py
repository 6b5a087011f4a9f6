"""
Configuration management for Job Finder API.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Job search provider (JSearch on RapidAPI)
    jsearch_api_key: str = ""
    jsearch_base_url: str = "https://jsearch.p.rapidapi.com"
    jsearch_host: str = "jsearch.p.rapidapi.com"

    # Database
    database_url: str = "sqlite:///./job_finder.db"

    # Server
    cors_origins: str = "*"
    port: int = 5000
    log_level: str = "INFO"

    # Reject requests whose X-User-ID header is missing
    require_user_header: bool = False

    # Search settings
    max_search_results: int = 20
    search_timeout: float = 15.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra env vars


settings = Settings()
