"""
Shared FastAPI dependencies.

Provides the per-request database session, the repositories built on it,
the bearer token extracted from the ``Authorization`` header, and the user
that token identifies.
"""

from typing import Annotated, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.core.database import get_session, is_valid_id
from bloglist.core.database.entities.users import User
from bloglist.core.database.repositories import BlogRepository, UserRepository
from bloglist.core.logging_config import get_logger
from bloglist.server.core.security import decode_access_token

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False, description="Access token returned by /api/login")

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_blog_repository(session: SessionDep) -> BlogRepository:
    return BlogRepository(session)


def get_user_repository(session: SessionDep) -> UserRepository:
    return UserRepository(session)


BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]
UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]


def get_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
) -> Optional[str]:
    """
    Extract the bearer token from the request.

    Returns None when the ``Authorization`` header is absent or uses another scheme.
    """
    if credentials is None:
        return None
    return credentials.credentials


async def get_current_user(
    token: Annotated[Optional[str], Depends(get_token)],
    users: UserRepoDep,
) -> User:
    """
    Resolve the user identified by the request's access token.

    Invalid or expired tokens raise ``jwt.InvalidTokenError`` from the decoder;
    the exception handlers turn those into 401 responses.

    Raises:
        HTTPException: 401 when the token is missing or carries no usable user id,
            404 when the user no longer exists.
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="token missing",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_access_token(token)
    user_id = payload.get("id")
    if not is_valid_id(user_id):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="token invalid",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = await users.get_by_id(user_id)
    if user is None:
        logger.info(f"Token refers to unknown user id {user_id}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="user not found")
    return user


CurrentUserDep = Annotated[User, Depends(get_current_user)]
