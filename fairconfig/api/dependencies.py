"""Dependency injection for request handlers.

The fairing stores its registry on ``app.state``; request-scoped
dependencies read it from there rather than from a module global.
"""

from typing import Annotated

from fastapi import Depends, Request

from fairconfig.api.exceptions import FairingNotAttachedError
from fairconfig.registry import ConfigurationRegistry

REGISTRY_STATE_KEY = "configurations"


def get_registry(request: Request) -> ConfigurationRegistry:
    """Get the configuration registry loaded at startup.

    Args:
        request: Incoming request

    Returns:
        The application's ConfigurationRegistry

    Raises:
        FairingNotAttachedError: If no fairing ran for this application
    """
    registry = getattr(request.app.state, REGISTRY_STATE_KEY, None)
    if registry is None:
        raise FairingNotAttachedError()
    return registry


# Type alias for dependency injection
RegistryDep = Annotated[ConfigurationRegistry, Depends(get_registry)]
