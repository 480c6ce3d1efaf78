"""Tasks and grocery endpoints - incomplete VTODOs from Nextcloud CalDAV."""

import httpx
from fastapi import APIRouter, Depends

from dashboard_proxy.caldav import INCOMPLETE_TODOS_QUERY, REPORT_HEADERS, TodoParser
from dashboard_proxy.config import Settings, get_settings
from dashboard_proxy.dependencies import get_http_client, get_todo_parser
from dashboard_proxy.errors import GatewayError
from dashboard_proxy.upstream import ItemsResponse, ListSource, fetch_list

router = APIRouter()

TASKS_LIMIT = 15
GROCERY_LIMIT = 20


def _todo_source(label: str, url: str, limit: int, settings: Settings) -> ListSource:
    if not url:
        raise GatewayError(503, f"{label} not configured")
    return ListSource(
        label=label,
        url=url,
        limit=limit,
        method="REPORT",
        headers=REPORT_HEADERS,
        auth=httpx.BasicAuth(settings.nextcloud_username, settings.nextcloud_password),
        content=INCOMPLETE_TODOS_QUERY,
        success_status=207,
    )


@router.get("/tasks", response_model=ItemsResponse)
async def get_tasks(
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
    parser: TodoParser = Depends(get_todo_parser),
):
    """Incomplete tasks, at most 15."""
    source = _todo_source("CalDAV tasks", settings.tasks_url, TASKS_LIMIT, settings)
    return await fetch_list(client, source, parser.parse)


@router.get("/grocery", response_model=ItemsResponse)
async def get_grocery(
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
    parser: TodoParser = Depends(get_todo_parser),
):
    """Unchecked grocery items, at most 20."""
    source = _todo_source("CalDAV grocery", settings.grocery_url, GROCERY_LIMIT, settings)
    return await fetch_list(client, source, parser.parse)
