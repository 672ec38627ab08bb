"""GET /api/weather/{city} - CWA 36-hour forecast for one city."""

import logging

from fastapi import APIRouter, Depends

from ..config import Settings
from ..errors import MissingParameterError
from ..schemas.forecast import WeatherResponse
from ..services.forecast_cwa import get_city_forecast
from .dependencies import get_app_settings

logger = logging.getLogger(__name__)
router = APIRouter()

MISSING_CITY_MESSAGE = "請提供城市名稱參數"


@router.get("/weather")
async def get_weather_without_city():
    """Bare /api/weather has no city to look up."""
    raise MissingParameterError(MISSING_CITY_MESSAGE)


@router.get("/weather/{city}", response_model=WeatherResponse)
async def get_weather(city: str, settings: Settings = Depends(get_app_settings)):
    """Return the normalized forecast for ``city``.

    Error responses are produced by the WeatherAPIError handler in main.py.
    """
    city = city.strip()
    if not city:
        raise MissingParameterError(MISSING_CITY_MESSAGE)

    data = await get_city_forecast(city, settings)
    return WeatherResponse(data=data)
