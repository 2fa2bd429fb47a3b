"""In-memory state containers driven by a presentation layer."""

from foundation_cms.state.resource_state import ResourceState
from foundation_cms.state.session import (
    AuthSession,
    FileSessionStore,
    MemorySessionStore,
    SessionStore,
    StoredSession,
)

__all__ = [
    "AuthSession",
    "FileSessionStore",
    "MemorySessionStore",
    "ResourceState",
    "SessionStore",
    "StoredSession",
]
