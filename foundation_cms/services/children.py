"""Sponsorship child resource service.

Besides the shared REST verbs, children can have a sponsor assigned or
removed and their sponsorship status changed.
"""

from __future__ import annotations

import logging

from foundation_cms.config.endpoints import ResourceEndpoint
from foundation_cms.integration.api_client import ApiClient
from foundation_cms.models.resources import (
    AdoptionChild,
    AdoptionChildRequest,
    AdoptionStatus,
)
from foundation_cms.services.base import RestResourceService

logger = logging.getLogger(__name__)


class ChildService(RestResourceService[AdoptionChild, AdoptionChildRequest]):
    def __init__(self, client: ApiClient, endpoint: ResourceEndpoint) -> None:
        super().__init__(client, endpoint, AdoptionChild, label="record")

    async def assign_sponsor(self, resource_id: int, sponsor_id: int) -> AdoptionChild:
        fallback = "Failed to assign sponsor"
        envelope = await self._client.request(
            "POST",
            self.endpoint.action(resource_id, "sponsor"),
            json={"sponsorId": sponsor_id},
            fallback=fallback,
        )
        child = self._parse_one(envelope.data, fallback)
        logger.info("Assigned sponsor %d to child %d", sponsor_id, resource_id)
        return child

    async def remove_sponsor(self, resource_id: int) -> AdoptionChild:
        fallback = "Failed to remove sponsor"
        envelope = await self._client.request(
            "DELETE",
            self.endpoint.action(resource_id, "sponsor"),
            fallback=fallback,
        )
        return self._parse_one(envelope.data, fallback)

    async def update_status(
        self, resource_id: int, status: AdoptionStatus
    ) -> AdoptionChild:
        return await self._patch_one(
            self.endpoint.action(resource_id, "status"),
            {"status": AdoptionStatus(status).value},
            "Failed to update status",
        )
