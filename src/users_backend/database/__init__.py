"""Database connectivity helpers and configuration objects."""

from users_backend.database.base import BaseSchema
from users_backend.database.dependencies import get_database, get_session
from users_backend.database.repositories import UserRepository
from users_backend.database.schemas import UserSchema
from users_backend.database.service import DatabaseService
from users_backend.settings import BackendSettings, get_settings, settings

__all__ = [
    "BaseSchema",
    "BackendSettings",
    "DatabaseService",
    "UserRepository",
    "UserSchema",
    "get_database",
    "get_session",
    "get_settings",
    "settings",
]
