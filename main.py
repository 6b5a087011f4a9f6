"""
Job Finder API - Server Entry Point.

Usage:
    python main.py
    uvicorn backend.api.app:app --reload
"""

from dotenv import load_dotenv

load_dotenv()

import uvicorn  # noqa: E402

from backend.config import settings  # noqa: E402


def main():
    """Run the API server."""
    uvicorn.run(
        "backend.api.app:app",
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
