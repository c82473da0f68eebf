"""Repositories encapsulating database queries."""

from users_backend.database.repositories.user import UserRepository

__all__ = ["UserRepository"]
