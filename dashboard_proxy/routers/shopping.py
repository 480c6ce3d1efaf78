"""Shopping list endpoint - Home Assistant or the local alexa-api service."""

import httpx
from fastapi import APIRouter, Depends

from dashboard_proxy.config import Settings, get_settings
from dashboard_proxy.dependencies import get_http_client
from dashboard_proxy.errors import GatewayError
from dashboard_proxy.upstream import ItemsResponse, ListSource, fetch_list, json_items

router = APIRouter()

SHOPPING_LIMIT = 10
HOME_ASSISTANT_PORT = 8123


def _home_assistant_url(base: str) -> str:
    # Home Assistant listens on 8123 unless the URL names a port
    url = httpx.URL(base)
    return str(
        url.copy_with(
            port=url.port or HOME_ASSISTANT_PORT,
            path=url.path.rstrip("/") + "/api/shopping_list",
        )
    )


def _home_assistant(settings: Settings) -> tuple[ListSource, str, str]:
    if not settings.home_assistant_url:
        raise GatewayError(503, "Home Assistant not configured")
    source = ListSource(
        label="Home Assistant API",
        url=_home_assistant_url(settings.home_assistant_url),
        limit=SHOPPING_LIMIT,
        headers={
            "Authorization": f"Bearer {settings.home_assistant_token}",
            "Content-Type": "application/json",
        },
        relay_status=True,
    )
    return source, "complete", "name"


def _alexa_api(settings: Settings) -> tuple[ListSource, str, str]:
    if not settings.alexa_api_url:
        raise GatewayError(503, "Alexa API not configured")
    source = ListSource(
        label="Alexa API",
        url=f"{settings.alexa_api_url.rstrip('/')}/items/all",
        limit=SHOPPING_LIMIT,
        relay_status=True,
    )
    return source, "completed", "value"


_SOURCES = {
    "home_assistant": _home_assistant,
    "alexa_api": _alexa_api,
}


@router.get("/alexa-shopping-list", response_model=ItemsResponse)
async def get_shopping_list(
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """Open shopping list items, at most 10."""
    source, completed_field, display_field = _SOURCES[settings.shopping_list_source](settings)
    return await fetch_list(client, source, json_items(completed_field, display_field))
