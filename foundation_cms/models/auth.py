"""Pydantic models for login and registration."""

from __future__ import annotations

from pydantic import ConfigDict, Field

from foundation_cms.models.resources import CMSModel


class UserInfo(CMSModel):
    """Authenticated user as returned by the backend."""

    model_config = ConfigDict(extra="allow")

    id: int | str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    role: str | None = None


class LoginRequest(CMSModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(CMSModel):
    success: bool
    message: str | None = None
    token: str | None = None
    user: UserInfo | None = None


class RegisterRequest(CMSModel):
    model_config = ConfigDict(extra="allow")

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    phone: str | None = None


class RegisterResponse(CMSModel):
    success: bool
    message: str | None = None
    user: UserInfo | None = None
