"""Stock quote endpoint - Yahoo Finance chart API."""

import logging

import httpx
from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ConfigDict, Field

from dashboard_proxy.config import Settings, get_settings
from dashboard_proxy.dependencies import get_http_client
from dashboard_proxy.errors import GatewayError

logger = logging.getLogger(__name__)
router = APIRouter()

# Google Finance exchange suffix -> Yahoo Finance suffix
EXCHANGE_SUFFIXES = [
    (":EPA", ".PA"),  # Euronext Paris
    (":MIL", ".MI"),  # Borsa Italiana
]

REQUEST_HEADERS = {
    "User-Agent": "Mozilla/5.0",
    "Accept": "application/json",
}


class QuoteResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    price: float
    change_percent: float = Field(alias="changePercent")


def to_yahoo_symbol(symbol: str) -> str:
    """MC:EPA -> MC.PA, CPR:MIL -> CPR.MI; anything else is returned unchanged."""
    for google_suffix, yahoo_suffix in EXCHANGE_SUFFIXES:
        if google_suffix in symbol:
            return symbol.replace(google_suffix, yahoo_suffix, 1)
    return symbol


def change_percent(price: float, previous_close: float) -> float:
    return (price - previous_close) / previous_close * 100


def parse_quote(data: dict, ticker: str) -> QuoteResult:
    """Reshape a chart API payload into a quote.

    Raises GatewayError when the payload has no result or no prices,
    and ValueError/TypeError/AttributeError/LookupError when it is not
    shaped like a chart.
    """
    results = (data.get("chart") or {}).get("result")
    if results and not isinstance(results, list):
        raise ValueError("chart.result is not an array")
    if not results:
        logger.error("No data from Yahoo Finance API for %s", ticker)
        raise GatewayError(500, "No stock data available")

    meta = results[0].get("meta") or {}
    price = meta.get("regularMarketPrice")
    previous_close = meta.get("chartPreviousClose") or meta.get("previousClose")

    if not price or not previous_close:
        logger.error("Missing price data for %s", ticker)
        raise GatewayError(500, "Missing price data")

    return QuoteResult(price=price, change_percent=change_percent(price, previous_close))


@router.get("/stocks", response_model=QuoteResult)
async def get_stock(
    symbol: str | None = Query(default=None),
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """Current price and daily change for ``symbol``."""
    if not symbol:
        raise GatewayError(400, "Missing symbol parameter")

    ticker = to_yahoo_symbol(symbol)

    try:
        response = await client.get(
            f"{settings.stock_api_url.rstrip('/')}/{ticker}",
            params={"interval": "1d", "range": "1d"},
            headers=REQUEST_HEADERS,
        )
    except httpx.TransportError as exc:
        logger.error("Yahoo Finance API error: %s", exc)
        raise GatewayError(500, "Error retrieving stock data")

    try:
        return parse_quote(response.json(), ticker)
    except (ValueError, TypeError, AttributeError, LookupError) as exc:
        logger.error("Error parsing Yahoo Finance API: %s", exc)
        raise GatewayError(500, "Error parsing stock data")
