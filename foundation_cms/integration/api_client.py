"""HTTP client for the foundation CMS backend.

Sends JSON requests with default headers and a bounded timeout, attaches
the bearer token of the current session, unwraps the response envelope
and maps failures onto the CMSError hierarchy.

SECURITY: Never logs the bearer token or request bodies.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

import httpx

from foundation_cms.errors import (
    ApiError,
    AuthenticationError,
    CMSError,
    NotFoundError,
    RequestTimeoutError,
    TransportError,
    ValidationError,
)
from foundation_cms.models.responses import ApiResponse

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

_VALIDATION_STATUSES = frozenset({400, 409, 422})
_AUTH_STATUSES = frozenset({401, 403})


def error_for_status(status_code: int, message: str) -> CMSError:
    """Build the CMSError matching an HTTP error status."""
    if status_code == 404:
        return NotFoundError(message)
    if status_code in _VALIDATION_STATUSES:
        return ValidationError(message)
    if status_code in _AUTH_STATUSES:
        return AuthenticationError(message)
    return ApiError(message, status_code=status_code)


class ApiClient:
    """JSON-over-HTTP client for the CMS backend.

    Parameters
    ----------
    base_url:
        Backend root URL (e.g. "http://localhost:8080").
    timeout_seconds:
        Per-request timeout; exceeding it raises RequestTimeoutError.
    token_provider:
        Callable returning the current bearer token, or None when the
        session is anonymous.
    transport:
        Optional httpx transport (ASGI or mock transports in tests).
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        token_provider: Callable[[], str | None] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._token_provider = token_provider
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    def _headers(self, authenticated: bool) -> dict[str, str]:
        headers = dict(DEFAULT_HEADERS)
        if authenticated and self._token_provider is not None:
            token = self._token_provider()
            if token:
                headers["Authorization"] = f"Bearer {token}"
        return headers

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        fallback: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
        authenticated: bool = True,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Raises
        ------
        RequestTimeoutError
            If the backend does not answer within the timeout.
        TransportError
            If the backend is unreachable.
        CMSError
            For any non-2xx status; the body's ``message`` is used when
            present, otherwise *fallback*.
        """
        url = f"{self._base_url}{path}"
        start = time.monotonic()

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.request(
                    method,
                    url,
                    params=params,
                    json=json,
                    headers=self._headers(authenticated),
                    timeout=self._timeout_seconds,
                )
        except httpx.TimeoutException as exc:
            logger.warning(
                "%s %s timed out after %.1fs",
                method,
                path,
                self._timeout_seconds,
                extra={"error_reason": "timeout"},
            )
            raise RequestTimeoutError() from exc
        except httpx.TransportError as exc:
            logger.warning(
                "%s %s failed: backend unreachable",
                method,
                path,
                extra={"error_reason": type(exc).__name__},
            )
            raise TransportError() from exc

        duration_ms = round((time.monotonic() - start) * 1000, 2)
        body = self._decode(response)

        if response.is_error:
            message = self._error_message(body) or fallback
            logger.warning(
                "%s %s returned %d",
                method,
                path,
                response.status_code,
                extra={
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                    "error_reason": message,
                },
            )
            raise error_for_status(response.status_code, message)

        logger.debug(
            "%s %s returned %d",
            method,
            path,
            response.status_code,
            extra={"status_code": response.status_code, "duration_ms": duration_ms},
        )
        return body

    async def request(
        self,
        method: str,
        path: str,
        *,
        fallback: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
        authenticated: bool = True,
    ) -> ApiResponse[Any]:
        """Send a request and unwrap the response envelope.

        Bodies that are not an envelope object are treated as the payload
        itself; empty bodies yield an empty successful envelope.
        """
        body = await self.request_json(
            method,
            path,
            fallback=fallback,
            params=params,
            json=json,
            authenticated=authenticated,
        )
        if body is None:
            return ApiResponse[Any]()
        if isinstance(body, dict) and ("data" in body or "success" in body):
            return ApiResponse[Any].model_validate(body)
        return ApiResponse[Any](data=body)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            if response.is_error:
                return None
            raise ApiError(
                "Invalid response from server", status_code=response.status_code
            ) from None

    @staticmethod
    def _error_message(body: Any) -> str | None:
        if not isinstance(body, dict):
            return None
        for key in ("message", "error"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
        return None
