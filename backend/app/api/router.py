"""Top-level API router aggregation."""

from fastapi import APIRouter

from . import cities, health, weather

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(cities.router)
api_router.include_router(weather.router)
