"""Database models package."""
from src.models.database import Base, engine, SessionLocal, with_db, init_db
from src.models.preference import Preference
from src.models.user import Collection, Company, LoadStatus, UserRecord

__all__ = [
    "Base",
    "engine",
    "SessionLocal",
    "with_db",
    "init_db",
    "Preference",
    "Collection",
    "Company",
    "LoadStatus",
    "UserRecord",
]
