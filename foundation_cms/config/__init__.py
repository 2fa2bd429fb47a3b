"""Configuration module: settings and endpoint catalogue."""

from foundation_cms.config.endpoints import (
    AuthEndpoints,
    EndpointCatalog,
    ResourceEndpoint,
    load_endpoints,
)
from foundation_cms.config.settings import CMSSettings

__all__ = [
    "AuthEndpoints",
    "CMSSettings",
    "EndpointCatalog",
    "ResourceEndpoint",
    "load_endpoints",
]
