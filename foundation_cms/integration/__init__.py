"""Backend integration: HTTP client."""

from foundation_cms.integration.api_client import ApiClient, error_for_status

__all__ = ["ApiClient", "error_for_status"]
