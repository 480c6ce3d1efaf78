"""Tests for the /calendar passthrough."""

import base64

import httpx

from dashboard_proxy.config import get_settings
from dashboard_proxy.main import app
from tests.conftest import make_settings

ICS = "BEGIN:VCALENDAR\r\nVERSION:2.0\r\nBEGIN:VEVENT\r\nSUMMARY:Dentist\r\nEND:VEVENT\r\nEND:VCALENDAR\r\n"


def test_calendar_relayed_verbatim(client, upstream, settings):
    upstream.handler = lambda request: httpx.Response(200, text=ICS)

    response = client.get("/calendar")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/calendar")
    assert response.text == ICS
    request = upstream.last
    assert str(request.url) == settings.calendar_url
    expected = base64.b64encode(b"alice:s3cret").decode()
    assert request.headers["Authorization"] == f"Basic {expected}"


def test_calendar_connection_failure(client, upstream):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    upstream.handler = refuse

    response = client.get("/calendar")

    assert response.status_code == 500
    assert response.text == "Error retrieving calendar"


def test_calendar_not_configured(client, upstream):
    app.dependency_overrides[get_settings] = lambda: make_settings(calendar_url="")

    response = client.get("/calendar")

    assert response.status_code == 503
    assert upstream.requests == []
