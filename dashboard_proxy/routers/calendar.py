"""Calendar endpoint - raw Nextcloud calendar feed."""

import logging

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response

from dashboard_proxy.config import Settings, get_settings
from dashboard_proxy.dependencies import get_http_client

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/calendar", response_class=Response)
async def get_calendar(
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """Relay the calendar feed verbatim."""
    if not settings.calendar_url:
        return PlainTextResponse("Calendar not configured", status_code=503)

    try:
        response = await client.get(
            settings.calendar_url,
            auth=httpx.BasicAuth(settings.nextcloud_username, settings.nextcloud_password),
        )
    except httpx.TransportError as exc:
        logger.error("Calendar error: %s", exc)
        return PlainTextResponse("Error retrieving calendar", status_code=500)

    return Response(content=response.content, media_type="text/calendar")
