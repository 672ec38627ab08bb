"""Request-scoped access to the application's Settings.

create_app() stores the Settings it was built with on ``app.state``;
handlers receive them through ``Depends(get_app_settings)`` instead of
reading process-wide globals.
"""

from fastapi import Request

from ..config import Settings


def get_app_settings(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        raise RuntimeError("Settings not initialised: was the app built by create_app()?")
    return settings
