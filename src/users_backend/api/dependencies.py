"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from users_backend.api.services import UsersService

_users_service = UsersService()


def get_users_service() -> UsersService:
    """Return the shared :class:`UsersService` instance."""

    return _users_service


__all__ = ["get_users_service"]
