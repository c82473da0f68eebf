"""SQLAlchemy schemas for persisted entities."""

from users_backend.database.schemas.user import UserSchema

__all__ = ["UserSchema"]
