"""Event resource service."""

from __future__ import annotations

from foundation_cms.config.endpoints import ResourceEndpoint
from foundation_cms.integration.api_client import ApiClient
from foundation_cms.models.resources import Event, EventRequest
from foundation_cms.services.base import RestResourceService


class EventService(RestResourceService[Event, EventRequest]):
    """CRUD, activation and title search for foundation events."""

    def __init__(self, client: ApiClient, endpoint: ResourceEndpoint) -> None:
        super().__init__(client, endpoint, Event, label="event")
