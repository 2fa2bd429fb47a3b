"""Async client and state containers for the foundation CMS backend."""

from foundation_cms.config.settings import CMSSettings
from foundation_cms.main import CMSClient, open_cms
from foundation_cms.state.resource_state import ResourceState

__all__ = ["CMSClient", "CMSSettings", "ResourceState", "open_cms"]
