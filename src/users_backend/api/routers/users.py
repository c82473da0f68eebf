"""Users CRUD endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from users_backend.api.dependencies import get_users_service
from users_backend.api.models import (
    ErrorResponse,
    MessageResponse,
    UserCreateRequest,
    UserDataResponse,
    UserListResponse,
    UserLoginRequest,
    UserResponse,
    UserUpdateRequest,
)
from users_backend.api.services import UsersService
from users_backend.database import get_session

MAX_USER_ID = 2**31 - 1

UserId = Annotated[int, Path(ge=1, le=MAX_USER_ID, description="User id")]

router = APIRouter(prefix="/api/users", tags=["Users"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "User not found"}}
_CONFLICT = {409: {"model": ErrorResponse, "description": "Username already taken"}}
_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid request data"}}


@router.get(
    "",
    response_model=UserListResponse,
    summary="Retrieve a list of users",
    description="Retrieve every user from the users table.",
)
def list_users(
    session: Session = Depends(get_session),
    users_service: UsersService = Depends(get_users_service),
) -> UserListResponse:
    users = users_service.list_users(session=session)
    return UserListResponse(
        description="Successfully fetched all data!",
        data=[UserResponse.model_validate(user) for user in users],
    )


@router.get(
    "/{user_id}",
    response_model=UserDataResponse,
    responses={**_NOT_FOUND, **_BAD_REQUEST},
    summary="Retrieve users data by id",
    description="Retrieve a single user by id from the users table.",
)
def get_user(
    user_id: UserId,
    session: Session = Depends(get_session),
    users_service: UsersService = Depends(get_users_service),
) -> UserDataResponse:
    user = users_service.get_user(session=session, user_id=user_id)
    return UserDataResponse(
        description="Successfully fetched users data by id!",
        data=UserResponse.model_validate(user),
    )


@router.post(
    "/login",
    response_model=UserDataResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
        **_BAD_REQUEST,
    },
    summary="Get users data",
    description="Find a user by username and verify the supplied password.",
)
def login_user(
    payload: UserLoginRequest,
    session: Session = Depends(get_session),
    users_service: UsersService = Depends(get_users_service),
) -> UserDataResponse:
    user = users_service.find_user_by_name(
        session=session, username=payload.username, password=payload.password
    )
    return UserDataResponse(
        description="Successfully found user data!",
        data=UserResponse.model_validate(user),
    )


@router.post(
    "",
    response_model=UserDataResponse,
    responses={**_CONFLICT, **_BAD_REQUEST},
    summary="Create users data",
    description="Create a new user. The password is stored hashed.",
)
def create_user(
    payload: UserCreateRequest,
    session: Session = Depends(get_session),
    users_service: UsersService = Depends(get_users_service),
) -> UserDataResponse:
    user = users_service.create_user(
        session=session,
        username=payload.username,
        name=payload.name,
        email=payload.email,
        password=payload.password,
        profile=payload.profile,
    )
    return UserDataResponse(
        description="Successfully created data!",
        data=UserResponse.model_validate(user),
    )


@router.patch(
    "/{user_id}",
    response_model=UserDataResponse,
    responses={**_NOT_FOUND, **_CONFLICT, **_BAD_REQUEST},
    summary="Update users data",
    description="Update the supplied fields of a user; other fields keep their values.",
)
def update_user(
    user_id: UserId,
    payload: UserUpdateRequest,
    session: Session = Depends(get_session),
    users_service: UsersService = Depends(get_users_service),
) -> UserDataResponse:
    user = users_service.update_user(
        session=session, user_id=user_id, changes=payload.changes()
    )
    return UserDataResponse(
        description="Successfully updated data!",
        data=UserResponse.model_validate(user),
    )


@router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    responses={**_NOT_FOUND, **_BAD_REQUEST},
    summary="Remove users data by id",
    description="Delete a user by id.",
)
def delete_user(
    user_id: UserId,
    session: Session = Depends(get_session),
    users_service: UsersService = Depends(get_users_service),
) -> MessageResponse:
    users_service.delete_user(session=session, user_id=user_id)
    return MessageResponse(description="Successfully deleted data!")
