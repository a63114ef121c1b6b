"""Login I/O models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    """Access token issued on a successful login."""

    token: str
    username: str
    name: Optional[str] = None
