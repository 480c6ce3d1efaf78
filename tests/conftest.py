"""Shared fixtures: settings, a fake upstream and a TestClient wired to both."""

from typing import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from dashboard_proxy.config import Settings, get_settings
from dashboard_proxy.dependencies import get_http_client
from dashboard_proxy.main import app


class FakeUpstream:
    """httpx.MockTransport handler that records every upstream request."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(404)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def make_settings(**overrides) -> Settings:
    values = {
        "nextcloud_username": "alice",
        "nextcloud_password": "s3cret",
        "calendar_url": "https://cloud.test/remote.php/dav/calendars/alice/personal?export",
        "tasks_url": "https://cloud.test/remote.php/dav/calendars/alice/tasks/",
        "grocery_url": "https://cloud.test/remote.php/dav/calendars/alice/grocery/",
        "openweather_api_key": "weather-key",
        "home_assistant_url": "http://ha.test:8123",
        "home_assistant_token": "ha-token",
        "alexa_api_url": "http://alexa.test:3000",
        "stock_api_url": "https://stocks.test/v8/finance/chart",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def client(settings: Settings, upstream: FakeUpstream):
    async def fake_http_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(upstream)) as http_client:
            yield http_client

    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_http_client] = fake_http_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
