"""Service layer for API-specific business logic."""

from users_backend.api.services.users import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
    UsersService,
    UsersServiceError,
)

__all__ = [
    "InvalidCredentialsError",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UsersService",
    "UsersServiceError",
]
