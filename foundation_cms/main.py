"""Composition root for the CMS client.

Builds, from settings: logging, the endpoint catalogue, the session store
and auth session, the HTTP client (carrying the session's token) and the
three resource services. State containers are created per caller through
``events()``, ``projects()`` and ``children()``.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx

from foundation_cms.config.endpoints import EndpointCatalog, load_endpoints
from foundation_cms.config.settings import CMSSettings
from foundation_cms.integration.api_client import ApiClient
from foundation_cms.logging_config import configure_logging
from foundation_cms.models.resources import (
    AdoptionChild,
    AdoptionChildRequest,
    Event,
    EventRequest,
    Project,
    ProjectRequest,
)
from foundation_cms.services.auth import AuthService
from foundation_cms.services.children import ChildService
from foundation_cms.services.events import EventService
from foundation_cms.services.projects import ProjectService
from foundation_cms.state.resource_state import ResourceState
from foundation_cms.state.session import (
    AuthSession,
    FileSessionStore,
    MemorySessionStore,
    SessionStore,
)

logger = logging.getLogger(__name__)


class CMSClient:
    """Wired-up services and session for one backend.

    Parameters
    ----------
    settings:
        Client configuration.
    endpoints:
        Endpoint catalogue; loaded from ``settings.endpoints_path`` when
        omitted.
    store:
        Session store; a file store at ``settings.session_path`` when set,
        otherwise in-memory.
    transport:
        Optional httpx transport passed to the API client.
    """

    def __init__(
        self,
        settings: CMSSettings,
        *,
        endpoints: EndpointCatalog | None = None,
        store: SessionStore | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self.endpoints = endpoints or load_endpoints(settings.endpoints_path)

        if store is None:
            store = (
                FileSessionStore(settings.session_path)
                if settings.session_path
                else MemorySessionStore()
            )

        # The session is created before the authenticated client, so auth
        # calls go through a client without a token provider.
        auth_client = ApiClient(
            settings.api_base_url,
            timeout_seconds=settings.request_timeout_seconds,
            transport=transport,
        )
        self.session = AuthSession(AuthService(auth_client, self.endpoints.auth), store)

        self.api = ApiClient(
            settings.api_base_url,
            timeout_seconds=settings.request_timeout_seconds,
            token_provider=self.session.get_token,
            transport=transport,
        )
        self.event_service = EventService(self.api, self.endpoints.resource("events"))
        self.project_service = ProjectService(self.api, self.endpoints.resource("projects"))
        self.child_service = ChildService(self.api, self.endpoints.resource("children"))

    def events(self) -> ResourceState[Event, EventRequest]:
        return ResourceState(self.event_service, name="events")

    def projects(self) -> ResourceState[Project, ProjectRequest]:
        return ResourceState(self.project_service, name="projects")

    def children(self) -> ResourceState[AdoptionChild, AdoptionChildRequest]:
        return ResourceState(self.child_service, name="children")


@asynccontextmanager
async def open_cms(settings: CMSSettings | None = None) -> AsyncIterator[CMSClient]:
    """Configure logging and yield a ready CMSClient."""
    settings = settings or CMSSettings()
    configure_logging(settings.log_level, json_output=settings.log_json)
    logger.info("Connecting CMS client to %s", settings.api_base_url)

    yield CMSClient(settings)
