"""Pydantic schemas for the weather forecast API."""

from pydantic import BaseModel


class ForecastPeriod(BaseModel):
    """One normalized forecast window; empty string when an element is absent."""
    startTime: str = ""
    endTime: str = ""
    weather: str = ""
    rain: str = ""
    minTemp: str = ""
    maxTemp: str = ""
    comfort: str = ""
    windSpeed: str = ""


class WeatherData(BaseModel):
    city: str
    updateTimeDescription: str = ""
    forecasts: list[ForecastPeriod]


class WeatherResponse(BaseModel):
    success: bool = True
    data: WeatherData


class CitiesResponse(BaseModel):
    success: bool = True
    data: list[str]


class HealthResponse(BaseModel):
    status: str = "OK"
    timestamp: str
