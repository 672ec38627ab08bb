"""CWA (Central Weather Administration) open data forecast client.

Fetches the 36-hour general forecast (dataset F-C0032-001) for a single
city and reshapes it into the service's WeatherData.  Nothing is cached:
every call is one outbound GET.

CWA open data docs: https://opendata.cwa.gov.tw/dist/opendata-swagger.html
"""

import logging
from typing import Any

import httpx

from ..config import Settings
from ..errors import (
    GENERIC_ERROR_MESSAGE,
    ConfigurationError,
    ForecastAlignmentError,
    LocationNotFoundError,
    UpstreamDataError,
    UpstreamError,
    UpstreamUnavailableError,
)
from ..schemas.forecast import WeatherData
from .normalizer import normalize_forecast

logger = logging.getLogger(__name__)

CWA_USER_AGENT = "cwa-weather-proxy"

DEFAULT_UPSTREAM_MESSAGE = "無法取得天氣資料"


def _error_body(resp: httpx.Response) -> Any:
    """Best-effort decode of an upstream error body (JSON, else text)."""
    try:
        return resp.json()
    except ValueError:
        return resp.text or None


async def fetch_cwa_forecast(city: str, settings: Settings) -> dict:
    """Fetch the raw F-C0032-001 payload for one city.

    Raises:
        ConfigurationError: no API key configured.
        UpstreamError: CWA answered with a non-2xx status.
        UpstreamUnavailableError: network failure, timeout or non-JSON body.
    """
    if not settings.has_api_key:
        raise ConfigurationError("請在 .env 檔案中設定 CWA_API_KEY")

    params = {"Authorization": settings.cwa_api_key, "locationName": city}
    headers = {"User-Agent": CWA_USER_AGENT, "Accept": "application/json"}

    try:
        async with httpx.AsyncClient(
            headers=headers,
            timeout=settings.request_timeout,
        ) as client:
            resp = await client.get(settings.forecast_url, params=params)
    except httpx.TimeoutException as exc:
        logger.warning("CWA forecast request timed out for %s: %s", city, exc)
        raise UpstreamUnavailableError(GENERIC_ERROR_MESSAGE) from exc
    except httpx.HTTPError as exc:
        logger.warning("CWA forecast request failed for %s: %s", city, exc)
        raise UpstreamUnavailableError(GENERIC_ERROR_MESSAGE) from exc

    if resp.is_error:
        body = _error_body(resp)
        message = DEFAULT_UPSTREAM_MESSAGE
        if isinstance(body, dict) and body.get("message"):
            message = str(body["message"])
        logger.warning(
            "CWA API returned HTTP %d for %s: %s", resp.status_code, city, message,
        )
        raise UpstreamError(message, status_code=resp.status_code, details=body)

    try:
        data = resp.json()
    except ValueError as exc:
        logger.warning("CWA response for %s is not JSON: %s", city, exc)
        raise UpstreamUnavailableError(GENERIC_ERROR_MESSAGE) from exc

    if not isinstance(data, dict):
        logger.warning("CWA response for %s is not an object", city)
        raise UpstreamUnavailableError(GENERIC_ERROR_MESSAGE)

    return data


def extract_location(payload: dict, city: str) -> dict:
    """Return the location entry CWA matched for ``city``.

    CWA filters by ``locationName`` itself, so the first entry of
    ``records.location`` is the answer; an empty list means the name was
    unknown or misspelled.
    """
    records = payload.get("records")
    locations = records.get("location") if isinstance(records, dict) else None
    if not isinstance(locations, list) or not locations or not isinstance(locations[0], dict):
        raise LocationNotFoundError(city)
    return locations[0]


async def get_city_forecast(city: str, settings: Settings) -> WeatherData:
    """Fetch, validate and normalize the forecast for one city."""
    payload = await fetch_cwa_forecast(city, settings)
    location = extract_location(payload, city)

    try:
        forecasts = normalize_forecast(location.get("weatherElement") or [])
    except ForecastAlignmentError as exc:
        logger.warning("CWA forecast for %s is misaligned: %s", city, exc)
        raise UpstreamDataError(str(exc)) from exc

    records = payload.get("records") or {}
    weather = WeatherData(
        city=str(location.get("locationName") or city),
        updateTimeDescription=str(records.get("datasetDescription") or ""),
        forecasts=forecasts,
    )
    logger.info(
        "CWA forecast fetched for %s: %d periods", weather.city, len(forecasts),
    )
    return weather
