"""Backend services: one per resource, plus authentication."""

from foundation_cms.services.auth import AuthService
from foundation_cms.services.base import (
    ResourceService,
    RestResourceService,
    filters_to_params,
    search_items,
)
from foundation_cms.services.children import ChildService
from foundation_cms.services.events import EventService
from foundation_cms.services.projects import ProjectService

__all__ = [
    "AuthService",
    "ChildService",
    "EventService",
    "ProjectService",
    "ResourceService",
    "RestResourceService",
    "filters_to_params",
    "search_items",
]
