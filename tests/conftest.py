"""Shared test fixtures for the CMS client test suite."""

from __future__ import annotations

import os

import httpx
import pytest
from fastapi import FastAPI

from fakes import FakeService, Item, ToggleableFakeService, create_fake_backend
from foundation_cms.config.endpoints import EndpointCatalog
from foundation_cms.config.settings import CMSSettings
from foundation_cms.main import CMSClient
from foundation_cms.state.session import MemorySessionStore


# ---------------------------------------------------------------------------
# Keep the environment from leaking into CMSSettings
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("CMS_"):
            monkeypatch.delenv(key)


@pytest.fixture
def settings() -> CMSSettings:
    """Test settings with safe defaults."""
    return CMSSettings(
        api_base_url="http://cms.test",
        request_timeout_seconds=2.0,
        log_json=False,
    )


# ---------------------------------------------------------------------------
# Fake services and backend
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_service() -> FakeService:
    return FakeService([Item(1, "Gala"), Item(2, "Marathon"), Item(3, "Concert")])


@pytest.fixture
def toggle_service() -> ToggleableFakeService:
    return ToggleableFakeService(
        [Item(1, "Gala", is_active=True), Item(2, "Marathon", is_active=False)]
    )


@pytest.fixture
def backend() -> tuple[FastAPI, dict[str, dict[int, dict]]]:
    return create_fake_backend()


@pytest.fixture
def cms(settings: CMSSettings, backend) -> CMSClient:
    """CMSClient wired to the fake backend, not yet logged in."""
    app, _ = backend
    return CMSClient(
        settings,
        endpoints=EndpointCatalog(),
        store=MemorySessionStore(),
        transport=httpx.ASGITransport(app=app),
    )


