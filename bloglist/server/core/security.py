"""
Password hashing and access tokens.

Passwords are hashed with bcrypt. Access tokens are JWTs signed with the
configured secret and carry the user's ``id`` and ``username``.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
import jwt

from bloglist.core.logging_config import get_logger
from bloglist.server.core.config import settings

logger = get_logger(__name__)

PASSWORD_MIN_LENGTH = 3
# bcrypt only looks at the first 72 bytes of a password
PASSWORD_MAX_BYTES = 72


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """
    Hash a password with bcrypt.

    Args:
        password: The plain-text password
        rounds: bcrypt cost factor, defaults to ``BCRYPT_ROUNDS``

    Returns:
        The bcrypt hash as text
    """
    salt = bcrypt.gensalt(rounds=rounds or settings.auth.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if ``plain_password`` matches the bcrypt ``hashed_password``."""
    if len(plain_password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        return False
    return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))


def create_access_token(user_id: int, username: str, expires_in: Optional[int] = None) -> str:
    """
    Create a signed access token for a user.

    Args:
        user_id: Primary key of the user
        username: The user's login name
        expires_in: Lifetime in seconds, defaults to ``TOKEN_EXPIRES_IN_SECONDS``

    Returns:
        The encoded JWT
    """
    auth = settings.auth
    now = datetime.now(tz=timezone.utc)
    lifetime = auth.token_expires_in_seconds if expires_in is None else expires_in

    token = jwt.encode(
        {
            "id": user_id,
            "username": username,
            "iat": now,
            "exp": now + timedelta(seconds=lifetime),
        },
        auth.secret,
        algorithm=auth.algorithm,
    )
    logger.debug(f"Created access token for user {username!r}")
    return token


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Verify and decode an access token.

    Raises:
        jwt.ExpiredSignatureError: The token has expired.
        jwt.InvalidTokenError: The token is malformed or its signature is wrong.
    """
    auth = settings.auth
    return jwt.decode(
        token,
        auth.secret,
        algorithms=[auth.algorithm],
        options={"verify_signature": True, "verify_exp": True},
    )
