"""Database package."""

from backend.db.base import Base, get_db, init_db
from backend.db.store import ApplicationStore
from backend.db.tables import Application

__all__ = [
    "Base",
    "get_db",
    "init_db",
    "Application",
    "ApplicationStore",
]
