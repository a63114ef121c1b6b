"""
Login endpoint.

Exchanges a username and password for an access token. The same error is
returned for an unknown user and for a wrong password.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from bloglist.core.logging_config import get_logger
from bloglist.core.models.io.login import LoginRequest, LoginResponse
from bloglist.server.core.security import create_access_token, verify_password
from bloglist.server.services.deps import UserRepoDep

logger = get_logger(__name__)

router = APIRouter(tags=["login"])


@router.post(
    "",
    response_model=LoginResponse,
    summary="Log In",
    responses={401: {"description": "Invalid username or password"}},
)
async def login(credentials: LoginRequest, users: UserRepoDep) -> LoginResponse:
    user = await users.get_by_username(credentials.username)
    if user is None or not verify_password(credentials.password, user.password_hash):
        logger.info(f"Failed login for {credentials.username!r}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="invalid username or password",
        )

    token = create_access_token(user.id, user.username)
    return LoginResponse(token=token, username=user.username, name=user.name)
