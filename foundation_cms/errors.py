"""Error hierarchy for CMS API failures.

All client-side errors extend CMSError. Each carries a human-readable
``message`` so that state containers can surface it as a display string
without inspecting the error type.
"""

from __future__ import annotations


class CMSError(Exception):
    """Base error for all CMS client failures."""

    message: str = "Unexpected error"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class TransportError(CMSError):
    """The backend could not be reached."""

    message = "Could not connect to the server"


class RequestTimeoutError(TransportError):
    """The request exceeded the configured timeout."""

    message = "The request took too long"


class NotFoundError(CMSError):
    """The requested record does not exist."""

    message = "Record not found"


class ValidationError(CMSError):
    """The backend rejected the submitted data."""

    message = "Invalid data"


class AuthenticationError(CMSError):
    """Missing, expired or rejected credentials."""

    message = "Authentication failed"


class ApiError(CMSError):
    """Any other non-success response from the backend."""

    message = "Unexpected server error"

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None,
        **kwargs: object,
    ) -> None:
        self.status_code = status_code
        super().__init__(message, **kwargs)


def failure_message(exc: BaseException, fallback: str) -> str:
    """Collapse an exception into a display string.

    Uses the exception's ``message`` attribute when it is a non-empty
    string, then ``str(exc)``, and finally *fallback*.
    """
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    text = str(exc)
    if text:
        return text
    return fallback
