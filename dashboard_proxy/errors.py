"""Gateway error type and shared error-parsing utilities for upstream APIs."""

import json

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class GatewayError(Exception):
    """A request failure surfaced to the caller as ``{"error": message}``."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def parse_upstream_error(response_text: str) -> str:
    """Extract a readable message from an upstream error response.

    Home Assistant answers {"message": "..."}; other services use
    {"error": "..."} or {"error": {"message": "..."}}.
    Returns the message when parseable, raw text otherwise.
    """
    try:
        body = json.loads(response_text)
        err = body.get("error") or body.get("message") or ""
        if isinstance(err, dict):
            err = err.get("message", "")
        if err:
            return str(err)
    except (ValueError, AttributeError):
        pass
    return response_text


async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # Unknown paths and wrong methods both read as "Not found".
    if exc.status_code in (404, 405):
        return PlainTextResponse("Not found", status_code=404)
    return JSONResponse({"error": exc.detail}, status_code=exc.status_code)
