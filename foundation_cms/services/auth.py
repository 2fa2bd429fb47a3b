"""Login and registration against the backend auth routes.

The auth routes answer with a flat body ({success, message, token, user})
rather than the data envelope used by the resource routes.

SECURITY: Never logs passwords or tokens.
"""

from __future__ import annotations

import logging

from foundation_cms.config.endpoints import AuthEndpoints
from foundation_cms.errors import AuthenticationError, CMSError
from foundation_cms.integration.api_client import ApiClient
from foundation_cms.models.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserInfo,
)

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, client: ApiClient, endpoints: AuthEndpoints) -> None:
        self._client = client
        self._endpoints = endpoints

    async def login(self, email: str, password: str) -> LoginResponse:
        """Exchange credentials for a token.

        Raises
        ------
        AuthenticationError
            If the backend rejects the credentials or answers
            ``success: false``.
        """
        payload = LoginRequest(email=email, password=password)
        body = await self._client.request_json(
            "POST",
            self._endpoints.login,
            json=payload.to_payload(),
            fallback="Authentication failed",
            authenticated=False,
        )
        response = LoginResponse.model_validate(body)
        if not response.success or not response.token or response.user is None:
            raise AuthenticationError(response.message or "Unknown error")
        logger.info("Login succeeded for user %s", response.user.id)
        return response

    async def register(self, data: RegisterRequest) -> UserInfo:
        body = await self._client.request_json(
            "POST",
            self._endpoints.register_path,
            json=data.to_payload(),
            fallback="Registration failed",
            authenticated=False,
        )
        response = RegisterResponse.model_validate(body)
        if not response.success or response.user is None:
            raise CMSError(response.message or "Unknown error")
        logger.info("Registered user %s", response.user.id)
        return response.user
