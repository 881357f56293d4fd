"""Testes dos endpoints de health check."""

import json
from types import SimpleNamespace

import pytest
from starlette.requests import Request

from api.routes.health.router import health_check, readiness_check
from config.settings import get_base_settings


def _build_request(state: SimpleNamespace) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/ready",
        "headers": [],
        "query_string": b"",
        "app": SimpleNamespace(state=state),
    }
    return Request(scope)


@pytest.fixture(autouse=True)
def _clear_base_settings():
    get_base_settings.cache_clear()
    yield
    get_base_settings.cache_clear()


@pytest.mark.asyncio
async def test_health_check(monkeypatch) -> None:
    monkeypatch.delenv("SERVICE_NAME", raising=False)

    response = await health_check()

    assert response.status == "healthy"
    assert response.service == "sms-discord-bridge"


@pytest.mark.asyncio
async def test_health_check_uses_configured_service_name(monkeypatch) -> None:
    monkeypatch.setenv("SERVICE_NAME", "sms-bridge-staging")

    response = await health_check()

    assert response.service == "sms-bridge-staging"


@pytest.mark.asyncio
async def test_ready_when_components_present() -> None:
    state = SimpleNamespace(interaction_verifier=object(), interaction_dispatcher=object())

    response = await readiness_check(_build_request(state))

    assert response.status_code == 200
    payload = json.loads(response.body)
    assert payload["status"] == "ready"
    assert payload["checks"] == {"interaction_verifier": "ok", "interaction_dispatcher": "ok"}


@pytest.mark.asyncio
async def test_not_ready_when_components_missing() -> None:
    response = await readiness_check(_build_request(SimpleNamespace()))

    assert response.status_code == 503
    payload = json.loads(response.body)
    assert payload["status"] == "not_ready"
    assert payload["checks"]["interaction_dispatcher"] == "missing"
