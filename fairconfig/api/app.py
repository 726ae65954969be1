"""FastAPI application factory.

Creates a FastAPI application with logging configured, the configuration
fairing attached and the status route registered.
"""

from typing import Any

from fastapi import FastAPI

from fairconfig.api.fairing import ConfigurationFairing, Declared
from fairconfig.api.routes.status import create_status_router
from fairconfig.config import get_settings
from fairconfig.config.settings import FairConfigSettings
from fairconfig.observability.logging import get_logger, setup_logging

logger = get_logger(__name__)


def create_app(
    *configurations: Declared,
    settings: FairConfigSettings | None = None,
    status_route: bool = True,
    **fastapi_kwargs: Any,
) -> FastAPI:
    """Create a FastAPI application that loads configurations at startup.

    Args:
        configurations: Declared configuration types or plain names
        settings: Plugin settings (defaults to get_settings())
        status_route: Whether to serve GET /configurations
        **fastapi_kwargs: Passed through to FastAPI()

    Returns:
        Configured FastAPI application; the fairing is on ``app.state.fairing``
    """
    settings = settings or get_settings()
    setup_logging(
        level=settings.log_level,
        format=settings.log_format,
        redact_secrets=settings.redact_secrets,
    )

    app = FastAPI(**fastapi_kwargs)
    fairing = ConfigurationFairing(*configurations, settings=settings)
    fairing.attach(app)
    app.state.fairing = fairing

    if status_route:
        app.include_router(create_status_router(), tags=["Configuration"])

    logger.info(
        "app_created",
        environment=settings.environment,
        config_dir=str(settings.config_dir),
        configurations=list(fairing.declarations),
    )
    return app
