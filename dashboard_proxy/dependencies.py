"""Shared FastAPI dependencies."""

from typing import AsyncIterator

import httpx

from dashboard_proxy.caldav import RegexTodoParser, TodoParser


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """One upstream client per request, closed when the request ends."""
    async with httpx.AsyncClient() as client:
        yield client


def get_todo_parser() -> TodoParser:
    return RegexTodoParser()
