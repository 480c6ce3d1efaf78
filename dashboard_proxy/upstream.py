"""Fetch an upstream list, reshape it and cap its length."""

import json
import logging
from dataclasses import dataclass, field
from typing import Callable

import httpx
from pydantic import BaseModel

from dashboard_proxy.errors import GatewayError, parse_upstream_error

logger = logging.getLogger(__name__)


class ItemsResponse(BaseModel):
    items: list[str]


@dataclass(frozen=True)
class ListSource:
    """Where a list lives upstream and how to talk to it."""

    label: str
    url: str
    limit: int
    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    content: str | None = None
    success_status: int = 200
    # relay a non-success upstream status instead of answering 500
    relay_status: bool = False
    auth: httpx.Auth | None = None


def json_items(completed_field: str, display_field: str) -> Callable[[str], list[str]]:
    """Build a parser for a JSON array of item objects.

    Items whose completion flag is truthy are dropped; the rest map to their
    display field. Items without a display field are skipped.
    """

    def parse(body: str) -> list[str]:
        data = json.loads(body)
        if not isinstance(data, list):
            raise ValueError("expected a JSON array of items")
        items = []
        for item in data:
            if not isinstance(item, dict):
                raise ValueError("expected item objects")
            if item.get(completed_field):
                continue
            value = item.get(display_field)
            if value is not None:
                items.append(str(value))
        return items

    return parse


async def fetch_list(
    client: httpx.AsyncClient,
    source: ListSource,
    parse: Callable[[str], list[str]],
) -> ItemsResponse:
    """Fetch ``source``, parse its body with ``parse`` and cap to ``source.limit``."""
    try:
        response = await client.request(
            source.method,
            source.url,
            headers=source.headers,
            content=source.content,
            auth=source.auth,
        )
    except httpx.TransportError as exc:
        logger.error("%s connection error: %s", source.label, exc)
        raise GatewayError(500, f"{source.label} connection error")

    if response.status_code != source.success_status:
        logger.error(
            "%s error: %s %s",
            source.label,
            response.status_code,
            parse_upstream_error(response.text),
        )
        status = response.status_code if source.relay_status else 500
        raise GatewayError(status, f"{source.label} error")

    try:
        items = parse(response.text)
    except ValueError as exc:
        logger.error("Error parsing %s response: %s", source.label, exc)
        raise GatewayError(500, f"Error parsing {source.label} response")

    return ItemsResponse(items=items[: source.limit])
