"""Resource service contract and its REST implementation.

A resource service exposes a fixed verb set against one backend resource.
State containers depend only on the ``ResourceService`` protocol;
``activate``/``deactivate`` are optional capabilities that a service may
leave out.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Generic, Protocol, TypeVar

from pydantic import BaseModel, TypeAdapter

from foundation_cms.config.endpoints import ResourceEndpoint
from foundation_cms.errors import ApiError, NotFoundError
from foundation_cms.integration.api_client import ApiClient
from foundation_cms.models.resources import CMSModel

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")
M = TypeVar("M", bound=BaseModel)
W = TypeVar("W", bound=CMSModel)

_PARAMS_ADAPTER = TypeAdapter(dict[str, Any])


class ResourceService(Protocol[T, R]):
    """Capability set required by ResourceState.

    ``activate(id)`` and ``deactivate(id)`` are optional and are looked up
    at call time.
    """

    async def get_all(self, filters: Any = None) -> list[T]: ...

    async def get_by_id(self, resource_id: int) -> T: ...

    async def create(self, data: R) -> T: ...

    async def update(self, resource_id: int, data: R) -> T: ...

    async def delete(self, resource_id: int) -> None: ...


def filters_to_params(filters: Any) -> dict[str, Any] | None:
    """Convert a filter model or mapping into query parameters.

    Unset values are dropped; an empty result yields None so no query
    string is sent.
    """
    if filters is None:
        return None
    if isinstance(filters, BaseModel):
        raw = filters.model_dump(mode="json", by_alias=True, exclude_none=True)
    elif isinstance(filters, Mapping):
        raw = _PARAMS_ADAPTER.dump_python(
            {k: v for k, v in filters.items() if v is not None}, mode="json"
        )
    else:
        raise TypeError(f"Unsupported filters type: {type(filters).__name__}")
    return raw or None


class RestResourceService(Generic[M, W]):
    """Resource service backed by a REST collection.

    Parameters
    ----------
    client:
        Shared API client.
    endpoint:
        Location of the resource collection.
    model:
        Read model used to parse response payloads.
    label:
        Human-readable noun used in fallback error messages.
    """

    def __init__(
        self,
        client: ApiClient,
        endpoint: ResourceEndpoint,
        model: type[M],
        label: str = "record",
    ) -> None:
        self._client = client
        self._endpoint = endpoint
        self._model = model
        self._label = label

    @property
    def endpoint(self) -> ResourceEndpoint:
        return self._endpoint

    def _parse_one(self, data: Any, fallback: str, missing: type[Exception] = ApiError) -> M:
        if data is None:
            raise missing(fallback)
        return self._model.model_validate(data)

    def _parse_many(self, data: Any) -> list[M]:
        if not data:
            return []
        return [self._model.model_validate(item) for item in data]

    async def get_all(self, filters: Any = None) -> list[M]:
        """Fetch the whole collection, optionally filtered server-side."""
        envelope = await self._client.request(
            "GET",
            self._endpoint.path,
            params=filters_to_params(filters),
            fallback=f"Failed to fetch {self._label}s",
        )
        return self._parse_many(envelope.data)

    async def get_by_id(self, resource_id: int) -> M:
        fallback = f"{self._label.capitalize()} not found"
        envelope = await self._client.request(
            "GET", self._endpoint.item(resource_id), fallback=fallback
        )
        return self._parse_one(envelope.data, fallback, missing=NotFoundError)

    async def create(self, data: W) -> M:
        fallback = f"Failed to create {self._label}"
        envelope = await self._client.request(
            "POST", self._endpoint.path, json=data.to_payload(), fallback=fallback
        )
        created = self._parse_one(envelope.data, fallback)
        logger.info("Created %s %s", self._label, getattr(created, "id", None))
        return created

    async def update(self, resource_id: int, data: W) -> M:
        fallback = f"Failed to update {self._label}"
        envelope = await self._client.request(
            "PUT",
            self._endpoint.item(resource_id),
            json=data.to_payload(),
            fallback=fallback,
        )
        return self._parse_one(envelope.data, fallback)

    async def delete(self, resource_id: int) -> None:
        await self._client.request(
            "DELETE",
            self._endpoint.item(resource_id),
            fallback=f"Failed to delete {self._label}",
        )
        logger.info("Deleted %s %d", self._label, resource_id)

    async def activate(self, resource_id: int) -> None:
        await self._client.request(
            "PATCH",
            self._endpoint.action(resource_id, "activate"),
            fallback=f"Failed to activate {self._label}",
        )

    async def deactivate(self, resource_id: int) -> None:
        await self._client.request(
            "PATCH",
            self._endpoint.action(resource_id, "deactivate"),
            fallback=f"Failed to deactivate {self._label}",
        )

    async def search(self, term: str) -> list[M]:
        """Server-side search on the resource's search parameter."""
        envelope = await self._client.request(
            "GET",
            self._endpoint.search,
            params={self._endpoint.search_param: term},
            fallback="Search failed",
        )
        return self._parse_many(envelope.data)

    async def _patch_one(self, path: str, body: dict[str, Any], fallback: str) -> M:
        envelope = await self._client.request("PATCH", path, json=body, fallback=fallback)
        return self._parse_one(envelope.data, fallback)


def search_items(items: list[T], term: str, field: str) -> list[T]:
    """Case-insensitive substring filter over an in-memory collection.

    An empty or blank *term* returns every item.
    """
    needle = term.strip().lower()
    if not needle:
        return list(items)
    return [
        item for item in items
        if needle in str(getattr(item, field, "") or "").lower()
    ]
