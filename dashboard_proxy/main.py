"""Dashboard Proxy - FastAPI application entry point."""

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from dashboard_proxy import __version__
from dashboard_proxy.config import get_settings
from dashboard_proxy.errors import GatewayError, gateway_error_handler, http_error_handler
from dashboard_proxy.routers import app_config, calendar, shopping, stocks, todos

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

app = FastAPI(
    title="Dashboard Proxy",
    description="Aggregates calendar, lists, stocks and weather config for the home dashboard",
    version=__version__,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

app.add_exception_handler(GatewayError, gateway_error_handler)
app.add_exception_handler(StarletteHTTPException, http_error_handler)


# CORS: headers on every response, OPTIONS answered here as a preflight
@app.middleware("http")
async def cors(request: Request, call_next):
    if request.method == "OPTIONS":
        response = Response(status_code=200)
    elif request.method != "GET":
        response = PlainTextResponse("Not found", status_code=404)
    else:
        response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


app.include_router(calendar.router, tags=["calendar"])
app.include_router(todos.router, tags=["caldav"])
app.include_router(shopping.router, tags=["shopping"])
app.include_router(stocks.router, tags=["stocks"])
app.include_router(app_config.router, tags=["config"])


def run() -> None:
    """Console entry point: serve the proxy with uvicorn."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    base = f"http://localhost:{settings.port}"
    logger.info("Proxy server running on %s", base)
    logger.info("Calendar endpoint: %s/calendar", base)
    logger.info("Shopping list endpoint: %s/alexa-shopping-list", base)

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
