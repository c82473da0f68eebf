"""Database schema specific tests."""

from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    from sqlalchemy import Table

from users_backend.database.schemas import UserSchema


def test_user_schema_username_is_unique_and_indexed() -> None:
    table = cast("Table", UserSchema.__table__)
    username_column = table.c.username
    assert username_column.unique
    assert username_column.index


def test_user_schema_stores_only_password_hash() -> None:
    table = cast("Table", UserSchema.__table__)
    assert "password_hash" in table.c
    assert "password" not in table.c
    assert table.c.name.nullable
