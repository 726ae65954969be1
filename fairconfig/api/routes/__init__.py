"""API routes."""

from fairconfig.api.routes.status import create_status_router

__all__ = ["create_status_router"]
