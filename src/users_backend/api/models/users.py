"""Pydantic models for the users endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    field_validator,
    model_validator,
)

USERNAME_PATTERN = r"^[A-Za-z0-9_]{3,32}$"
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 64
PROFILE_MAX_LENGTH = 64
NAME_MAX_LENGTH = 128

EXAMPLE_USER = {
    "username": "andi17x",
    "name": "Andi",
    "email": "andi@gmail.com",
    "password": "adminpassword12",
    "profile": "Editor",
}


def _check_password_strength(value: str) -> str:
    if not any(char.isalpha() for char in value):
        msg = "password must contain at least one letter"
        raise ValueError(msg)
    if not any(char.isdigit() for char in value):
        msg = "password must contain at least one digit"
        raise ValueError(msg)
    return value


class UserResponse(BaseModel):
    """Public representation of a stored user."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "examples": [
                {
                    "id": 1,
                    "username": "andi17x",
                    "name": "Andi",
                    "email": "andi@gmail.com",
                    "profile": "Editor",
                    "created_at": "2024-01-01T00:00:00Z",
                    "updated_at": "2024-01-01T00:00:00Z",
                }
            ]
        },
    )

    id: int
    username: str
    name: str | None = None
    email: str
    profile: str
    created_at: datetime
    updated_at: datetime


class UserCreateRequest(BaseModel):
    """Payload for creating a new user."""

    model_config = ConfigDict(json_schema_extra={"examples": [EXAMPLE_USER]})

    username: str = Field(pattern=USERNAME_PATTERN, description="Unique login name")
    name: str | None = Field(default=None, max_length=NAME_MAX_LENGTH)
    email: EmailStr
    password: str = Field(
        min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH
    )
    profile: str = Field(min_length=1, max_length=PROFILE_MAX_LENGTH)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return _check_password_strength(value)


class UserUpdateRequest(BaseModel):
    """Partial payload for updating an existing user.

    Only the fields present in the request body are applied. ``name`` may be
    set to ``null`` to clear it; the other fields cannot be cleared.
    """

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"email": "andi.new@gmail.com"}]}
    )

    username: str | None = Field(default=None, pattern=USERNAME_PATTERN)
    name: str | None = Field(default=None, max_length=NAME_MAX_LENGTH)
    email: EmailStr | None = None
    password: str | None = Field(
        default=None, min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH
    )
    profile: str | None = Field(
        default=None, min_length=1, max_length=PROFILE_MAX_LENGTH
    )

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return _check_password_strength(value)

    @model_validator(mode="after")
    def reject_null_required_fields(self) -> UserUpdateRequest:
        for field_name in ("username", "email", "password", "profile"):
            if field_name in self.model_fields_set and getattr(self, field_name) is None:
                msg = f"{field_name} must not be null"
                raise ValueError(msg)
        return self

    def changes(self) -> dict[str, str | None]:
        """Return only the fields supplied by the client."""
        return self.model_dump(exclude_unset=True)


class UserLoginRequest(BaseModel):
    """Payload for looking up a user by username and password."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [{"username": "andi17x", "password": "adminpassword12"}]
        }
    )

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class MessageResponse(BaseModel):
    """Envelope carrying only a human-readable description."""

    description: str


class UserDataResponse(MessageResponse):
    """Envelope carrying a single user."""

    data: UserResponse


class UserListResponse(MessageResponse):
    """Envelope carrying a list of users."""

    data: list[UserResponse]


class ErrorResponse(MessageResponse):
    """Envelope returned for failed requests."""

    code: str
    errors: list[dict[str, object]] | None = None
