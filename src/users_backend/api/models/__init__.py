"""Models used for API request and response payloads."""

from users_backend.api.models.users import (
    ErrorResponse,
    MessageResponse,
    UserCreateRequest,
    UserDataResponse,
    UserListResponse,
    UserLoginRequest,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "ErrorResponse",
    "MessageResponse",
    "UserCreateRequest",
    "UserDataResponse",
    "UserListResponse",
    "UserLoginRequest",
    "UserResponse",
    "UserUpdateRequest",
]
