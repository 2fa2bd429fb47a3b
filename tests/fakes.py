"""In-memory fakes shared by the test suite.

``FakeService`` and ``ToggleableFakeService`` stand in for a resource
service; ``create_fake_backend`` builds a FastAPI app that mimics the CMS
REST API over in-memory tables.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, replace
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


# ---------------------------------------------------------------------------
# In-memory resource service used by state container tests
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Item:
    id: int
    title: str
    is_active: bool = True


@dataclass(frozen=True)
class ItemRequest:
    title: str


class FakeService:
    """Resource service over a list, with scripted failures.

    Set ``failures[verb]`` to an exception to make the next call to that
    verb raise it.
    """

    def __init__(self, items: list[Item] | None = None, next_id: int = 100) -> None:
        self.store: list[Item] = list(items or [])
        self.failures: dict[str, Exception] = {}
        self.calls: list[tuple[str, Any]] = []
        self._ids = itertools.count(next_id)

    def _check(self, verb: str, arg: Any) -> None:
        self.calls.append((verb, arg))
        exc = self.failures.pop(verb, None)
        if exc is not None:
            raise exc

    def _find(self, resource_id: int) -> Item:
        for item in self.store:
            if item.id == resource_id:
                return item
        raise LookupError("Record not found")

    async def get_all(self, filters: Any = None) -> list[Item]:
        self._check("get_all", filters)
        return list(self.store)

    async def get_by_id(self, resource_id: int) -> Item:
        self._check("get_by_id", resource_id)
        return self._find(resource_id)

    async def create(self, data: ItemRequest) -> Item:
        self._check("create", data)
        item = Item(id=next(self._ids), title=data.title)
        self.store.append(item)
        return item

    async def update(self, resource_id: int, data: ItemRequest) -> Item:
        self._check("update", resource_id)
        return Item(id=resource_id, title=data.title)

    async def delete(self, resource_id: int) -> None:
        self._check("delete", resource_id)
        self.store = [item for item in self.store if item.id != resource_id]


class ToggleableFakeService(FakeService):
    """FakeService with the optional activation capability."""

    async def activate(self, resource_id: int) -> None:
        self._check("activate", resource_id)
        self.store = [
            replace(item, is_active=True) if item.id == resource_id else item
            for item in self.store
        ]

    async def deactivate(self, resource_id: int) -> None:
        self._check("deactivate", resource_id)
        self.store = [
            replace(item, is_active=False) if item.id == resource_id else item
            for item in self.store
        ]


# ---------------------------------------------------------------------------
# Fake CMS backend served in-process through httpx.ASGITransport
# ---------------------------------------------------------------------------

FAKE_TOKEN = "tok-123"
FAKE_USER = {"id": 1, "email": "admin@example.org", "firstName": "Ana", "role": "ADMIN"}

_RESOURCE_DEFAULTS: dict[str, dict[str, Any]] = {
    "events": {
        "isActive": True,
        "currentParticipants": 0,
        "hasAvailableSpots": True,
        "isPastEvent": False,
    },
    "projects": {
        "status": "PLANIFICACION",
        "statusDisplayName": "Planificación",
        "fundsRaised": 0,
        "fundingPercentage": 0,
        "isActive": True,
        "isFunded": False,
    },
    "children": {
        "adoptionStatus": "DISPONIBLE",
        "adoptionStatusDisplayName": "Disponible",
        "isActive": True,
        "hasSponsor": False,
        "age": 8,
    },
}


def create_fake_backend() -> tuple[FastAPI, dict[str, dict[int, dict]]]:
    """Build a FastAPI app mimicking the CMS backend over in-memory tables."""
    app = FastAPI()
    db: dict[str, dict[int, dict]] = {name: {} for name in _RESOURCE_DEFAULTS}
    ids = itertools.count(1)
    users: set[str] = {FAKE_USER["email"]}

    def fail(status: int, message: str) -> JSONResponse:
        return JSONResponse(status_code=status, content={"success": False, "message": message})

    def authorized(request: Request) -> bool:
        return request.headers.get("Authorization") == f"Bearer {FAKE_TOKEN}"

    def lookup(resource: str, resource_id: int) -> dict | None:
        return db.get(resource, {}).get(resource_id)

    @app.post("/api/auth/login")
    async def login(body: dict):
        if body.get("email") == FAKE_USER["email"] and body.get("password") == "secret":
            return {"success": True, "token": FAKE_TOKEN, "user": FAKE_USER}
        return fail(401, "Invalid credentials")

    @app.post("/api/auth/register")
    async def register(body: dict):
        if body.get("email") in users:
            return fail(409, "Email already registered")
        users.add(body["email"])
        return {"success": True, "user": {"id": next(ids), "email": body["email"]}}

    @app.get("/api/cms/{resource}/search")
    async def search(resource: str, request: Request):
        if not authorized(request):
            return fail(401, "Unauthorized")
        param, term = next(iter(request.query_params.items()))
        field = "fullName" if resource == "children" else param
        found = [
            row for row in db[resource].values()
            if term.lower() in str(row.get(field, "")).lower()
        ]
        return {"success": True, "data": found}

    @app.get("/api/cms/{resource}")
    async def list_all(resource: str, request: Request):
        if not authorized(request):
            return fail(401, "Unauthorized")
        rows = list(db[resource].values())
        if request.query_params.get("filter") == "active":
            rows = [row for row in rows if row["isActive"]]
        status = request.query_params.get("status")
        if status:
            rows = [
                row for row in rows
                if status in (row.get("status"), row.get("adoptionStatus"))
            ]
        return {"success": True, "data": rows, "total": len(rows)}

    @app.post("/api/cms/{resource}")
    async def create(resource: str, body: dict, request: Request):
        if not authorized(request):
            return fail(401, "Unauthorized")
        if resource != "children" and not body.get("title"):
            return fail(422, "Title is required")
        row = {**_RESOURCE_DEFAULTS[resource], **body, "id": next(ids)}
        if resource == "children":
            row["fullName"] = f"{row['firstName']} {row['lastName']}"
        db[resource][row["id"]] = row
        return JSONResponse(status_code=201, content={"success": True, "data": row})

    @app.get("/api/cms/{resource}/{resource_id}")
    async def get_one(resource: str, resource_id: int, request: Request):
        if not authorized(request):
            return fail(401, "Unauthorized")
        row = lookup(resource, resource_id)
        if row is None:
            return fail(404, "Record not found")
        return {"success": True, "data": row}

    @app.put("/api/cms/{resource}/{resource_id}")
    async def update(resource: str, resource_id: int, body: dict, request: Request):
        if not authorized(request):
            return fail(401, "Unauthorized")
        row = lookup(resource, resource_id)
        if row is None:
            return fail(404, "Record not found")
        row.update(body)
        return {"success": True, "data": row}

    @app.delete("/api/cms/{resource}/{resource_id}")
    async def delete(resource: str, resource_id: int, request: Request):
        if not authorized(request):
            return fail(401, "Unauthorized")
        if db[resource].pop(resource_id, None) is None:
            return fail(404, "Record not found")
        return {"success": True, "message": "Deleted"}

    @app.patch("/api/cms/{resource}/{resource_id}/{action}")
    async def patch(resource: str, resource_id: int, action: str, request: Request):
        if not authorized(request):
            return fail(401, "Unauthorized")
        row = lookup(resource, resource_id)
        if row is None:
            return fail(404, "Record not found")
        body = await request.json() if await request.body() else {}
        if action in ("activate", "deactivate"):
            row["isActive"] = action == "activate"
            return {"success": True}
        if action == "funds":
            row["fundsRaised"] = body["amount"]
        elif action == "status":
            key = "adoptionStatus" if resource == "children" else "status"
            row[key] = body["status"]
        else:
            return fail(404, "Unknown action")
        return {"success": True, "data": row}

    @app.post("/api/cms/{resource}/{resource_id}/sponsor")
    async def assign_sponsor(resource: str, resource_id: int, body: dict, request: Request):
        if not authorized(request):
            return fail(401, "Unauthorized")
        row = lookup(resource, resource_id)
        if row is None:
            return fail(404, "Record not found")
        row.update(sponsorId=body["sponsorId"], hasSponsor=True, adoptionStatus="APADRINADO")
        return {"success": True, "data": row}

    @app.delete("/api/cms/{resource}/{resource_id}/sponsor")
    async def remove_sponsor(resource: str, resource_id: int, request: Request):
        if not authorized(request):
            return fail(401, "Unauthorized")
        row = lookup(resource, resource_id)
        if row is None:
            return fail(404, "Record not found")
        row.update(sponsorId=None, hasSponsor=False, adoptionStatus="DISPONIBLE")
        return {"success": True, "data": row}

    return app, db


