"""Endpoint catalogue models and YAML loader.

Maps each managed resource to its REST path on the backend and parses
the YAML catalogue into typed models. Invalid or missing entries fall
back to the built-in defaults so the client always knows every resource.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class ResourceEndpoint(BaseModel):
    """REST location of one managed resource."""

    path: str = Field(..., min_length=1, pattern=r"^/")
    search_param: str = Field(default="title", min_length=1)

    def item(self, resource_id: int) -> str:
        return f"{self.path}/{resource_id}"

    def action(self, resource_id: int, action: str) -> str:
        return f"{self.path}/{resource_id}/{action}"

    @property
    def search(self) -> str:
        return f"{self.path}/search"


class AuthEndpoints(BaseModel):
    """Authentication routes.

    The registration route is read from the ``register`` key; the attribute
    is ``register_path`` so it does not shadow ``BaseModel.register``.
    """

    model_config = ConfigDict(populate_by_name=True)

    login: str = "/api/auth/login"
    register_path: str = Field(default="/api/auth/register", alias="register")


_DEFAULT_RESOURCES: dict[str, ResourceEndpoint] = {
    "events": ResourceEndpoint(path="/api/cms/events", search_param="title"),
    "projects": ResourceEndpoint(path="/api/cms/projects", search_param="title"),
    "children": ResourceEndpoint(path="/api/cms/children", search_param="name"),
}


class EndpointCatalog(BaseModel):
    """All routes the client talks to."""

    auth: AuthEndpoints = Field(default_factory=AuthEndpoints)
    resources: dict[str, ResourceEndpoint] = Field(
        default_factory=lambda: dict(_DEFAULT_RESOURCES)
    )

    def resource(self, name: str) -> ResourceEndpoint:
        try:
            return self.resources[name]
        except KeyError:
            raise KeyError(f"No endpoint configured for resource '{name}'") from None


def load_endpoints(yaml_path: str) -> EndpointCatalog:
    """Parse an endpoint catalogue YAML file.

    Args:
        yaml_path: Path to the YAML catalogue.

    Returns:
        An EndpointCatalog. If the file is missing or unparsable, the
        built-in defaults are returned; resources absent from the file or
        with invalid entries keep their default endpoint.
    """
    path = Path(yaml_path)

    if not path.exists():
        logger.warning("Endpoint catalogue not found at %s, using built-in defaults", yaml_path)
        return EndpointCatalog()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        logger.error("Failed to parse endpoint catalogue at %s: %s", yaml_path, exc)
        return EndpointCatalog()

    if not isinstance(raw, dict) or not isinstance(raw.get("resources"), dict):
        logger.warning("Endpoint catalogue missing 'resources' key, using built-in defaults")
        return EndpointCatalog()

    resources = dict(_DEFAULT_RESOURCES)
    for name, config in raw["resources"].items():
        try:
            resources[name] = ResourceEndpoint.model_validate(config)
        except Exception as exc:
            logger.error("Invalid endpoint for resource '%s': %s, skipping", name, exc)

    auth = AuthEndpoints()
    if "auth" in raw:
        try:
            auth = AuthEndpoints.model_validate(raw["auth"])
        except Exception as exc:
            logger.error("Invalid auth endpoints: %s, using defaults", exc)

    return EndpointCatalog(auth=auth, resources=resources)
