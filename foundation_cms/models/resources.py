"""Pydantic read, write and filter models for the managed resources.

Fields are snake_case in Python and camelCase on the wire. Read models
carry the server-computed fields (id, timestamps, derived flags); write
models carry only what create/update accept.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CMSModel(BaseModel):
    """Base model with camelCase wire aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Serialize for a request body, dropping unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Resource(CMSModel):
    """Fields shared by every stored resource."""

    id: int
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


class Event(Resource):
    title: str
    description: str = ""
    event_date: datetime
    location: str | None = None
    image_url: str | None = None
    max_participants: int | None = None
    current_participants: int = 0
    has_available_spots: bool = False
    is_past_event: bool = False


class EventRequest(CMSModel):
    title: str = Field(..., min_length=1)
    description: str
    event_date: datetime
    location: str | None = None
    image_url: str | None = None
    max_participants: int | None = Field(default=None, ge=1)
    is_active: bool | None = None


class EventFilters(CMSModel):
    filter: Literal["active", "upcoming", "past"] | None = None


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------


class ProjectStatus(str, Enum):
    """Lifecycle of a foundation project."""

    PLANIFICACION = "PLANIFICACION"
    EN_PROGRESO = "EN_PROGRESO"
    PAUSADO = "PAUSADO"
    COMPLETADO = "COMPLETADO"
    CANCELADO = "CANCELADO"


class Project(Resource):
    title: str
    description: str = ""
    category: str | None = None
    status: ProjectStatus
    status_display_name: str = ""
    image_url: str | None = None
    budget: float | None = None
    funds_raised: float = 0
    funding_percentage: float = 0
    start_date: date | None = None
    end_date: date | None = None
    is_funded: bool = False


class ProjectRequest(CMSModel):
    title: str = Field(..., min_length=1)
    description: str
    category: str | None = None
    status: ProjectStatus | None = None
    image_url: str | None = None
    budget: float | None = Field(default=None, ge=0)
    funds_raised: float | None = Field(default=None, ge=0)
    start_date: date | None = None
    end_date: date | None = None
    is_active: bool | None = None


class ProjectFilters(CMSModel):
    filter: Literal["active"] | None = None
    status: ProjectStatus | None = None
    category: str | None = None


# ---------------------------------------------------------------------------
# Sponsorship children
# ---------------------------------------------------------------------------


class AdoptionStatus(str, Enum):
    """Sponsorship state of a child."""

    DISPONIBLE = "DISPONIBLE"
    EN_PROCESO = "EN_PROCESO"
    APADRINADO = "APADRINADO"
    NO_DISPONIBLE = "NO_DISPONIBLE"


class AdoptionChild(Resource):
    first_name: str
    last_name: str
    full_name: str = ""
    birth_date: date
    age: int = 0
    gender: str | None = None
    photo_url: str | None = None
    bio: str | None = None
    special_needs: str | None = None
    current_location: str | None = None
    adoption_status: AdoptionStatus
    adoption_status_display_name: str = ""
    sponsor_id: int | None = None
    sponsor_assigned_at: datetime | None = None
    has_sponsor: bool = False


class AdoptionChildRequest(CMSModel):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    birth_date: date
    gender: str | None = None
    photo_url: str | None = None
    bio: str | None = None
    special_needs: str | None = None
    current_location: str | None = None
    adoption_status: AdoptionStatus | None = None
    sponsor_id: int | None = None
    is_active: bool | None = None


class ChildFilters(CMSModel):
    filter: Literal["active", "available"] | None = None
    status: AdoptionStatus | None = None
