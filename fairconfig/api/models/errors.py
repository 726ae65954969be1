"""Error response models for consistent API error handling."""

from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Standardized error codes for API responses."""

    CONFIGURATION_UNAVAILABLE = "CONFIGURATION_UNAVAILABLE"
    """A configuration required by the handler is missing or failed to parse."""

    CONFIGURATION_NOT_ATTACHED = "CONFIGURATION_NOT_ATTACHED"
    """No configuration fairing was attached to the application."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    """An unexpected internal error occurred."""


class ErrorBody(BaseModel):
    """Error body content for API error responses."""

    code: ErrorCode
    """Machine-readable error code."""

    message: str
    """Human-readable error message."""

    configuration: str | None = None
    """Name of the configuration that could not be supplied, if applicable."""


class ErrorResponse(BaseModel):
    """Standard error response format.

    Example:
        {
            "error": {
                "code": "CONFIGURATION_UNAVAILABLE",
                "message": "Configuration 'diesel' is unavailable (not_found)",
                "configuration": "diesel"
            }
        }
    """

    error: ErrorBody
