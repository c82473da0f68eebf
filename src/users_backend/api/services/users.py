"""Users domain logic."""

from __future__ import annotations

import base64
import hashlib
import hmac
import logging
import secrets
from collections.abc import Mapping
from typing import Any

from fastapi import status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from users_backend.database import UserRepository, UserSchema

logger = logging.getLogger(__name__)

PBKDF2_ITERATIONS = 100_000
SALT_BYTES = 16


class UsersServiceError(Exception):
    """Base class for errors the users service reports to clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "USERS_SERVICE_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UserNotFoundError(UsersServiceError):
    """Raised when no user exists with the requested ID."""

    status_code = status.HTTP_404_NOT_FOUND
    code = "USER_NOT_FOUND"

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id


class UserAlreadyExistsError(UsersServiceError):
    """Raised when attempting to store a duplicate username."""

    status_code = status.HTTP_409_CONFLICT
    code = "USER_ALREADY_EXISTS"

    def __init__(self, username: str) -> None:
        super().__init__(f"User already exists: {username}")
        self.username = username


class InvalidCredentialsError(UsersServiceError):
    """Raised when supplied credentials are invalid."""

    status_code = status.HTTP_401_UNAUTHORIZED
    code = "INVALID_CREDENTIALS"

    def __init__(self, username: str) -> None:
        super().__init__("Invalid username or password")
        self.username = username


class UsersService:
    """Handles user persistence, password hashing and credential checks."""

    def __init__(self, *, iterations: int = PBKDF2_ITERATIONS) -> None:
        self._iterations = iterations

    def hash_password(self, password: str) -> str:
        """Hash a password using PBKDF2 with a random salt."""

        salt = secrets.token_bytes(SALT_BYTES)
        digest = hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt, self._iterations
        )
        return f"{base64.b64encode(salt).decode()}:{base64.b64encode(digest).decode()}"

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Validate a password against a stored PBKDF2 hash."""

        try:
            salt_b64, hash_b64 = password_hash.split(":", 1)
        except ValueError:
            return False
        salt = base64.b64decode(salt_b64.encode())
        expected = base64.b64decode(hash_b64.encode())
        actual = hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt, self._iterations
        )
        return hmac.compare_digest(actual, expected)

    def list_users(self, *, session: Session) -> list[UserSchema]:
        return UserRepository(session).list_all()

    def get_user(self, *, session: Session, user_id: int) -> UserSchema:
        user = UserRepository(session).get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def find_user_by_name(
        self, *, session: Session, username: str, password: str
    ) -> UserSchema:
        """Return the user matching both username and password."""

        user = UserRepository(session).get_by_username(username)
        if user is None or not self.verify_password(password, user.password_hash):
            logger.warning("Rejected login for username %r", username)
            raise InvalidCredentialsError(username)
        return user

    def create_user(
        self,
        *,
        session: Session,
        username: str,
        email: str,
        password: str,
        profile: str,
        name: str | None = None,
    ) -> UserSchema:
        repository = UserRepository(session)
        if repository.get_by_username(username) is not None:
            raise UserAlreadyExistsError(username)

        user = UserSchema(
            username=username,
            name=name,
            email=email,
            password_hash=self.hash_password(password),
            profile=profile,
        )
        try:
            user = repository.add(user)
        except IntegrityError as exc:
            raise UserAlreadyExistsError(username) from exc
        logger.info("Created user %s (%s)", user.id, user.username)
        return user

    def update_user(
        self, *, session: Session, user_id: int, changes: Mapping[str, Any]
    ) -> UserSchema:
        """Apply a partial update; fields absent from ``changes`` keep their values."""

        repository = UserRepository(session)
        user = repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        fields = dict(changes)
        username = fields.get("username")
        if username is not None and username != user.username:
            if repository.get_by_username(username) is not None:
                raise UserAlreadyExistsError(username)
        if "password" in fields:
            fields["password_hash"] = self.hash_password(fields.pop("password"))

        if not fields:
            return user
        current_username = user.username
        try:
            user = repository.update(user, fields)
        except IntegrityError as exc:
            raise UserAlreadyExistsError(username or current_username) from exc
        logger.info("Updated user %s: %s", user.id, sorted(changes))
        return user

    def delete_user(self, *, session: Session, user_id: int) -> None:
        repository = UserRepository(session)
        user = repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        repository.delete(user)
        logger.info("Deleted user %s", user_id)
