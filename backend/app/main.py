"""FastAPI application factory and lifespan for the CWA weather proxy."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from .config import Settings, get_settings
from .errors import GENERIC_ERROR_MESSAGE, WeatherAPIError
from .api.router import api_router
from .api import discovery

# Configure logging for our app (uvicorn only configures its own loggers)
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:     %(name)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: report configuration on startup."""
    settings: Settings = app.state.settings
    logger.info("Server running on http://%s:%d", settings.host, settings.port)
    logger.info("Environment: %s", settings.environment)
    if settings.has_api_key:
        logger.info("CWA API key configured, upstream %s", settings.forecast_url)
    else:
        logger.warning("CWA_API_KEY is not set, /api/weather requests will fail")

    yield

    logger.info("Application shutdown complete")


async def _weather_error_handler(request: Request, exc: WeatherAPIError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def _http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        content = {"error": "not found"}
    else:
        content = {"error": str(exc.detail)}
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


async def _validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": "參數錯誤", "message": str(exc.errors())},
    )


async def _unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s: %s", request.url.path, exc, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": "伺服器錯誤", "message": GENERIC_ERROR_MESSAGE},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Configuration to serve with; defaults to the process-wide
            Settings loaded from the environment.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="CWA Weather Proxy",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Error envelopes
    app.add_exception_handler(WeatherAPIError, _weather_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    # Routes
    app.include_router(discovery.router)
    app.include_router(api_router)

    return app


# Application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(app, host=_settings.host, port=_settings.port)
