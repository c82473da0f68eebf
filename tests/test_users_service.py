"""Unit tests for :class:`UsersService`."""

from __future__ import annotations

import pytest
from sqlalchemy.orm import Session

from users_backend.api.services import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
    UsersService,
)


@pytest.fixture
def service() -> UsersService:
    return UsersService(iterations=1_000)


def _create(service: UsersService, session: Session, username: str = "andi17x"):
    return service.create_user(
        session=session,
        username=username,
        email="andi@gmail.com",
        password="adminpassword12",
        profile="Editor",
    )


def test_hash_password_is_salted(service: UsersService) -> None:
    first = service.hash_password("adminpassword12")
    second = service.hash_password("adminpassword12")

    assert first != second
    assert service.verify_password("adminpassword12", first)
    assert service.verify_password("adminpassword12", second)
    assert not service.verify_password("adminpassword13", first)


def test_verify_password_rejects_malformed_hash(service: UsersService) -> None:
    assert not service.verify_password("adminpassword12", "no-separator")


def test_create_user_hashes_password(service: UsersService, session: Session) -> None:
    user = _create(service, session)

    assert user.password_hash != "adminpassword12"
    assert service.verify_password("adminpassword12", user.password_hash)


def test_create_user_duplicate(service: UsersService, session: Session) -> None:
    _create(service, session)

    with pytest.raises(UserAlreadyExistsError):
        _create(service, session)


def test_get_user_missing(service: UsersService, session: Session) -> None:
    with pytest.raises(UserNotFoundError) as exc_info:
        service.get_user(session=session, user_id=5)

    assert exc_info.value.status_code == 404


def test_find_user_by_name(service: UsersService, session: Session) -> None:
    user = _create(service, session)

    found = service.find_user_by_name(
        session=session, username="andi17x", password="adminpassword12"
    )

    assert found.id == user.id
    with pytest.raises(InvalidCredentialsError):
        service.find_user_by_name(
            session=session, username="andi17x", password="wrongpassword1"
        )


def test_update_user_empty_changes(service: UsersService, session: Session) -> None:
    user = _create(service, session)

    updated = service.update_user(session=session, user_id=user.id, changes={})

    assert updated.username == "andi17x"


def test_update_user_same_username_is_allowed(
    service: UsersService, session: Session
) -> None:
    user = _create(service, session)

    updated = service.update_user(
        session=session,
        user_id=user.id,
        changes={"username": "andi17x", "profile": "Admin"},
    )

    assert updated.profile == "Admin"


def test_delete_user(service: UsersService, session: Session) -> None:
    user = _create(service, session)

    service.delete_user(session=session, user_id=user.id)

    assert service.list_users(session=session) == []
    with pytest.raises(UserNotFoundError):
        service.delete_user(session=session, user_id=user.id)
