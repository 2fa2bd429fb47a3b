"""Authentication session state.

The session (bearer token plus user) is process-wide state with explicit
lifecycle: ``AuthSession`` reads any persisted session when constructed
and ``logout`` clears both memory and the store. Persistence is injected
as a ``SessionStore`` so the state and its storage can be tested apart.

SECURITY: Never logs the token or the password.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel

from foundation_cms.errors import ValidationError, failure_message
from foundation_cms.models.auth import RegisterRequest, UserInfo
from foundation_cms.services.auth import AuthService

logger = logging.getLogger(__name__)

LOGIN_FIELDS_REQUIRED = "Please fill in all fields"
UNEXPECTED_ERROR = "Unexpected error"


class StoredSession(BaseModel):
    token: str
    user: UserInfo


class SessionStore(Protocol):
    def load(self) -> StoredSession | None: ...

    def save(self, session: StoredSession) -> None: ...

    def clear(self) -> None: ...


class MemorySessionStore:
    """Keeps the session for the lifetime of the process only."""

    def __init__(self, session: StoredSession | None = None) -> None:
        self._session = session

    def load(self) -> StoredSession | None:
        return self._session

    def save(self, session: StoredSession) -> None:
        self._session = session

    def clear(self) -> None:
        self._session = None


class FileSessionStore:
    """Persists the session as a JSON file readable only by its owner.

    A missing, unreadable or corrupt file is treated as no session.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> StoredSession | None:
        if not self._path.exists():
            return None
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            return StoredSession.model_validate(raw)
        except (OSError, ValueError) as exc:
            logger.warning(
                "Ignoring unreadable session file %s: %s",
                self._path,
                type(exc).__name__,
            )
            return None

    def save(self, session: StoredSession) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self._path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        # O_CREAT's mode only applies to new files.
        os.fchmod(fd, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(session.model_dump_json())

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)


class AuthSession:
    """Current user, token, loading flag and last error.

    Parameters
    ----------
    service:
        Backend auth routes.
    store:
        Where the session is persisted between processes.
    """

    def __init__(self, service: AuthService, store: SessionStore) -> None:
        self._service = service
        self._store = store
        self.is_loading = False
        self.error: str | None = None

        stored = store.load()
        self.user: UserInfo | None = stored.user if stored else None
        self.token: str | None = stored.token if stored else None
        if stored is not None:
            logger.info("Restored session for user %s", stored.user.id)

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def get_token(self) -> str | None:
        return self.token

    def clear_error(self) -> None:
        self.error = None

    async def login(self, email: str, password: str) -> UserInfo:
        """Authenticate and persist the session.

        On failure the in-memory session is cleared, ``error`` holds the
        failure message and the exception is re-raised.
        """
        self.is_loading = True
        self.error = None
        try:
            if not email or not password:
                raise ValidationError(LOGIN_FIELDS_REQUIRED)
            response = await self._service.login(email, password)
            self.user = response.user
            self.token = response.token
            self._store.save(StoredSession(token=response.token, user=response.user))
            return response.user
        except Exception as exc:
            self.error = failure_message(exc, UNEXPECTED_ERROR)
            self.user = None
            self.token = None
            raise
        finally:
            self.is_loading = False

    async def register(self, data: RegisterRequest) -> UserInfo:
        """Create an account; does not log in."""
        self.is_loading = True
        self.error = None
        try:
            return await self._service.register(data)
        except Exception as exc:
            self.error = failure_message(exc, UNEXPECTED_ERROR)
            raise
        finally:
            self.is_loading = False

    def logout(self) -> None:
        self.user = None
        self.token = None
        self.error = None
        self._store.clear()
        logger.info("Session cleared")
