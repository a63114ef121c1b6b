"""
API endpoints for user registration and listing.

Passwords are validated and hashed here; only the hash is stored. Usernames
are unique, and a duplicate registration surfaces as an ``IntegrityError``
that the exception handlers report as 400 Bad Request.
"""

from __future__ import annotations

from collections import defaultdict

from fastapi import APIRouter, HTTPException, status

from bloglist.core.database.entities.users import USERNAME_MIN_LENGTH, User
from bloglist.core.logging_config import get_logger
from bloglist.core.models.io.users import UserBlogRead, UserCreate, UserRead
from bloglist.server.core.security import PASSWORD_MAX_BYTES, PASSWORD_MIN_LENGTH, hash_password
from bloglist.server.services.deps import BlogRepoDep, UserRepoDep

logger = get_logger(__name__)

router = APIRouter(tags=["users"])


def _bad_request(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


def validate_registration(payload: UserCreate) -> None:
    """
    Check a registration request before anything is written.

    Raises:
        HTTPException: 400 describing the first problem found.
    """
    if not payload.username:
        raise _bad_request("A username is required")
    if len(payload.username) < USERNAME_MIN_LENGTH:
        raise _bad_request(
            f"username `{payload.username}` is shorter than the minimum allowed length ({USERNAME_MIN_LENGTH})"
        )
    if payload.password is None or payload.password == "":
        raise _bad_request("password missing")
    if len(payload.password) < PASSWORD_MIN_LENGTH:
        raise _bad_request("password too short")
    if len(payload.password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise _bad_request("password too long")


@router.get(
    "",
    response_model=list[UserRead],
    summary="List Users",
    description="Retrieve every user together with the blogs they created.",
)
async def list_users(users: UserRepoDep, blogs: BlogRepoDep) -> list[UserRead]:
    blogs_by_user: defaultdict[int, list[UserBlogRead]] = defaultdict(list)
    for blog in await blogs.list():
        if blog.user_id is not None:
            blogs_by_user[blog.user_id].append(UserBlogRead.model_validate(blog))

    return [
        UserRead(id=user.id, username=user.username, name=user.name, blogs=blogs_by_user[user.id])
        for user in await users.list()
    ]


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register User",
    responses={
        201: {"description": "User created"},
        400: {"description": "Invalid or duplicate username, or invalid password"},
    },
)
async def create_user(payload: UserCreate, users: UserRepoDep) -> UserRead:
    """
    Register a new user.

    - **username**: required, at least 3 characters, unique.
    - **name**: optional display name.
    - **password**: required, at least 3 characters.
    """
    validate_registration(payload)

    user = User(
        username=payload.username,
        name=payload.name,
        password_hash=hash_password(payload.password),
    )
    user = await users.create(user)
    logger.info(f"Registered user {user.username!r}")
    return UserRead(id=user.id, username=user.username, name=user.name, blogs=[])
