"""Project resource service.

Adds fundraising and status transitions on top of the shared REST verbs.
"""

from __future__ import annotations

from foundation_cms.config.endpoints import ResourceEndpoint
from foundation_cms.integration.api_client import ApiClient
from foundation_cms.models.resources import Project, ProjectRequest, ProjectStatus
from foundation_cms.services.base import RestResourceService


class ProjectService(RestResourceService[Project, ProjectRequest]):
    def __init__(self, client: ApiClient, endpoint: ResourceEndpoint) -> None:
        super().__init__(client, endpoint, Project, label="project")

    async def update_funds(self, resource_id: int, amount: float) -> Project:
        """Record *amount* as funds raised for the project."""
        return await self._patch_one(
            self.endpoint.action(resource_id, "funds"),
            {"amount": amount},
            "Failed to update funds",
        )

    async def update_status(self, resource_id: int, status: ProjectStatus) -> Project:
        return await self._patch_one(
            self.endpoint.action(resource_id, "status"),
            {"status": ProjectStatus(status).value},
            "Failed to update status",
        )
