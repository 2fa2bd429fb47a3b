"""Public models for the CMS client."""

from foundation_cms.models.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserInfo,
)
from foundation_cms.models.resources import (
    AdoptionChild,
    AdoptionChildRequest,
    AdoptionStatus,
    ChildFilters,
    CMSModel,
    Event,
    EventFilters,
    EventRequest,
    Project,
    ProjectFilters,
    ProjectRequest,
    ProjectStatus,
    Resource,
)
from foundation_cms.models.responses import ApiResponse

__all__ = [
    "AdoptionChild",
    "AdoptionChildRequest",
    "AdoptionStatus",
    "ApiResponse",
    "ChildFilters",
    "CMSModel",
    "Event",
    "EventFilters",
    "EventRequest",
    "LoginRequest",
    "LoginResponse",
    "Project",
    "ProjectFilters",
    "ProjectRequest",
    "ProjectStatus",
    "RegisterRequest",
    "RegisterResponse",
    "Resource",
    "UserInfo",
]
