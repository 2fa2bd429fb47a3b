"""Generic state container for one managed resource.

ResourceState wraps a resource service and keeps an in-memory view of it:
the collection from the last full fetch (adjusted by later mutations), a
single current item, a loading flag and the message of the last failure.

Every operation follows the same protocol:

1. set ``is_loading`` and clear ``error``;
2. await the service call;
3. on success apply the state change and return the result;
4. on failure store the failure's message (or the operation's fallback)
   in ``error`` and re-raise;
5. always reset ``is_loading``.

Overlapping operations share the single loading flag and error slot: the
first to settle clears the flag while others are still in flight, and a
failure's message stays until the next operation starts.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any, Generic, Protocol, TypeVar

from foundation_cms.errors import failure_message
from foundation_cms.services.base import ResourceService

logger = logging.getLogger(__name__)


class Identified(Protocol):
    @property
    def id(self) -> int: ...


T = TypeVar("T", bound=Identified)
R = TypeVar("R")
V = TypeVar("V")

Listener = Callable[["ResourceState[Any, Any]"], None]

FETCH_ALL_FAILED = "Failed to load data"
FETCH_ONE_FAILED = "Failed to load record"
CREATE_FAILED = "Failed to create record"
UPDATE_FAILED = "Failed to update record"
DELETE_FAILED = "Failed to delete record"
ACTIVATE_FAILED = "Failed to activate record"
DEACTIVATE_FAILED = "Failed to deactivate record"


class ResourceState(Generic[T, R]):
    """Collection, current item, loading and error state over a service.

    Parameters
    ----------
    service:
        Any object implementing the ResourceService verbs. ``activate`` and
        ``deactivate`` are optional.
    name:
        Resource name used in log entries.
    """

    def __init__(self, service: ResourceService[T, R], name: str = "resource") -> None:
        self._service = service
        self._name = name
        self._items: list[T] = []
        self._current_item: T | None = None
        self._is_loading = False
        self._error: str | None = None
        self._listeners: list[Listener] = []

    # ------------------------------------------------------------------
    # Exposed state
    # ------------------------------------------------------------------

    @property
    def service(self) -> ResourceService[T, R]:
        return self._service

    @property
    def items(self) -> list[T]:
        return list(self._items)

    @property
    def current_item(self) -> T | None:
        return self._current_item

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def error(self) -> str | None:
        return self._error

    def clear_error(self) -> None:
        self._error = None
        self._notify()

    def set_current_item(self, item: T | None) -> None:
        self._current_item = item
        self._notify()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call *listener* with this container after every state change.

        Returns a callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("State listener failed for %s", self._name)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def fetch_all(self, filters: Any = None) -> list[T]:
        """Replace the collection with the service's current list."""

        def apply(data: list[T]) -> None:
            self._items = list(data)

        return await self._run(
            "fetch_all", FETCH_ALL_FAILED, lambda: self._service.get_all(filters), apply
        )

    async def fetch_by_id(self, resource_id: int) -> T:
        def apply(item: T) -> None:
            self._current_item = item

        return await self._run(
            "fetch_by_id",
            FETCH_ONE_FAILED,
            lambda: self._service.get_by_id(resource_id),
            apply,
            resource_id=resource_id,
        )

    async def create(self, data: R) -> T:
        """Create a record and prepend it to the collection."""

        def apply(item: T) -> None:
            self._items = [item, *self._items]

        return await self._run(
            "create", CREATE_FAILED, lambda: self._service.create(data), apply
        )

    async def update(self, resource_id: int, data: R) -> T:
        """Update a record; replaces it in place if it is in the collection."""

        def apply(item: T) -> None:
            self._items = [
                item if existing.id == resource_id else existing
                for existing in self._items
            ]
            self._current_item = item

        return await self._run(
            "update",
            UPDATE_FAILED,
            lambda: self._service.update(resource_id, data),
            apply,
            resource_id=resource_id,
        )

    async def remove(self, resource_id: int) -> None:
        """Delete a record and drop it from the collection."""

        def apply(_: None) -> None:
            self._items = [item for item in self._items if item.id != resource_id]

        await self._run(
            "remove",
            DELETE_FAILED,
            lambda: self._service.delete(resource_id),
            apply,
            resource_id=resource_id,
        )

    async def activate(self, resource_id: int) -> None:
        """Activate a record and reload the collection.

        No-op when the service has no activation capability.
        """
        await self._toggle("activate", ACTIVATE_FAILED, resource_id)

    async def deactivate(self, resource_id: int) -> None:
        await self._toggle("deactivate", DEACTIVATE_FAILED, resource_id)

    async def toggle_active(self, item: T) -> None:
        """Deactivate an active record, activate an inactive one."""
        if getattr(item, "is_active", False):
            await self.deactivate(item.id)
        else:
            await self.activate(item.id)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _toggle(self, operation: str, fallback: str, resource_id: int) -> None:
        action = getattr(self._service, operation, None)
        if action is None:
            logger.debug(
                "%s does not support %s, skipping",
                self._name,
                operation,
                extra={"resource": self._name, "operation": operation},
            )
            return

        async def call() -> list[T]:
            await action(resource_id)
            return await self._service.get_all()

        def apply(data: list[T]) -> None:
            self._items = list(data)

        await self._run(operation, fallback, call, apply, resource_id=resource_id)

    async def _run(
        self,
        operation: str,
        fallback: str,
        call: Callable[[], Awaitable[V]],
        apply: Callable[[V], None],
        resource_id: int | None = None,
    ) -> V:
        context: dict[str, Any] = {"resource": self._name, "operation": operation}
        if resource_id is not None:
            context["resource_id"] = resource_id

        self._is_loading = True
        self._error = None
        self._notify()
        start = time.monotonic()
        logger.debug("%s.%s started", self._name, operation, extra=context)

        try:
            result = await call()
        except Exception as exc:
            self._error = failure_message(exc, fallback)
            logger.warning(
                "%s.%s failed: %s",
                self._name,
                operation,
                self._error,
                extra={**context, "error_reason": self._error},
            )
            raise
        else:
            apply(result)
            logger.info(
                "%s.%s completed",
                self._name,
                operation,
                extra={
                    **context,
                    "duration_ms": round((time.monotonic() - start) * 1000, 2),
                },
            )
            return result
        finally:
            self._is_loading = False
            self._notify()
