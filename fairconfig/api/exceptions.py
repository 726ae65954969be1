"""API exception hierarchy for request-time configuration failures.

All API exceptions inherit from FairConfigAPIError, which provides
status_code and error_code attributes used by the exception handler
installed by the fairing to generate consistent error responses.
"""

from fairconfig.api.models.errors import ErrorCode
from fairconfig.errors import ConfigurationUnavailableError, FairConfigError


class FairConfigAPIError(FairConfigError):
    """Base exception for errors surfaced through a request.

    Subclasses set status_code and error_code to define the HTTP response.
    """

    status_code: int = 500
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR
    configuration: str | None = None


class ConfigurationExtractionError(FairConfigAPIError):
    """Raised when a handler's configuration dependency cannot be satisfied."""

    error_code = ErrorCode.CONFIGURATION_UNAVAILABLE

    def __init__(self, cause: ConfigurationUnavailableError) -> None:
        super().__init__(cause.message)
        self.configuration = cause.name
        self.status = cause.status
        self.detail = cause.detail


class FairingNotAttachedError(FairConfigAPIError):
    """Raised when a handler asks for configuration but no fairing loaded any."""

    error_code = ErrorCode.CONFIGURATION_NOT_ATTACHED

    def __init__(self, name: str | None = None) -> None:
        super().__init__("No configuration fairing is attached to this application")
        self.configuration = name
