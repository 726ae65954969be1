"""Exception handlers translating extraction failures into responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fairconfig.api.exceptions import FairConfigAPIError
from fairconfig.api.models.errors import ErrorBody, ErrorResponse
from fairconfig.observability.logging import get_logger

logger = get_logger(__name__)


async def fairconfig_api_error_handler(
    request: Request, exc: FairConfigAPIError
) -> JSONResponse:
    """Handle FairConfigAPIError and its subclasses."""
    logger.warning(
        "configuration_extraction_failed",
        error_code=exc.error_code.value,
        message=exc.message,
        configuration=exc.configuration,
        path=request.url.path,
    )

    response = ErrorResponse(
        error=ErrorBody(
            code=exc.error_code,
            message=exc.message,
            configuration=exc.configuration,
        )
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=response.model_dump(mode="json"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register the configuration error handler on an application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(FairConfigAPIError, fairconfig_api_error_handler)
    logger.debug("exception_handlers_registered")
