"""Repository tests against an in-memory SQLite database."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from users_backend.database import UserRepository, UserSchema


def _user(username: str = "andi17x") -> UserSchema:
    return UserSchema(
        username=username,
        email="andi@gmail.com",
        password_hash="salt:digest",
        profile="Editor",
    )


def test_add_assigns_id_and_timestamps(session: Session) -> None:
    user = UserRepository(session).add(_user())

    assert user.id is not None
    assert user.created_at is not None
    assert user.updated_at is not None


def test_list_all_orders_by_id(session: Session) -> None:
    repository = UserRepository(session)
    first = repository.add(_user("zeta"))
    second = repository.add(_user("alpha"))

    assert [user.id for user in repository.list_all()] == [first.id, second.id]


def test_get_by_username(session: Session) -> None:
    repository = UserRepository(session)
    user = repository.add(_user())

    assert repository.get_by_username("andi17x") is user
    assert repository.get_by_username("missing") is None


def test_update_changes_only_given_columns(session: Session) -> None:
    repository = UserRepository(session)
    user = repository.add(_user())

    repository.update(user, {"profile": "Admin"})

    assert user.profile == "Admin"
    assert user.email == "andi@gmail.com"


def test_delete_removes_user(session: Session) -> None:
    repository = UserRepository(session)
    user = repository.add(_user())
    user_id = user.id

    repository.delete(user)

    assert repository.get_by_id(user_id) is None


def test_unique_username_enforced(session: Session) -> None:
    repository = UserRepository(session)
    repository.add(_user())

    with pytest.raises(IntegrityError):
        repository.add(_user())
    session.rollback()
