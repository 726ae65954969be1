"""Exception hierarchy for configuration resolution and lookup.

Startup-phase failures (missing file, malformed content) are captured by the
registry as per-name outcomes. Only request-phase lookups and integrator
programming errors are raised to callers.
"""

from collections.abc import Sequence
from pathlib import Path


class FairConfigError(Exception):
    """Base exception for all fairconfig errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidConfigurationNameError(FairConfigError, ValueError):
    """Raised when a configuration name cannot be used as a file stem."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Invalid configuration name {name!r}: {reason}")
        self.name = name
        self.reason = reason


class ConfigurationNotFoundError(FairConfigError):
    """Raised when no candidate file exists for a configuration name."""

    def __init__(
        self,
        name: str,
        attempted: Sequence[Path],
        detail: str | None = None,
    ) -> None:
        tried = ", ".join(str(path) for path in attempted)
        message = f"No configuration file found for {name!r} (tried: {tried})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.name = name
        self.attempted = tuple(attempted)
        self.detail = detail


class DeserializeError(FairConfigError):
    """Raised when file content is malformed for its detected format."""

    def __init__(self, name: str, format: str, cause: str) -> None:
        super().__init__(f"Failed to parse {format} configuration {name!r}: {cause}")
        self.name = name
        self.format = format
        self.cause = cause


class RegistryFrozenError(FairConfigError):
    """Raised when registering into a registry that finished startup."""


class ConfigurationLoadError(FairConfigError):
    """Raised at startup when the integrator treats any failure as fatal."""

    def __init__(self, failures: dict[str, str]) -> None:
        summary = "; ".join(f"{name}: {detail}" for name, detail in failures.items())
        super().__init__(f"{len(failures)} configuration(s) failed to load: {summary}")
        self.failures = dict(failures)


class ConfigurationUnavailableError(FairConfigError):
    """Raised when a configuration has no usable value at lookup time.

    ``status`` is ``unregistered``, ``not_found`` or ``parse_error``.
    """

    def __init__(self, name: str, status: str, detail: str | None = None) -> None:
        message = f"Configuration {name!r} is unavailable ({status})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.name = name
        self.status = status
        self.detail = detail
