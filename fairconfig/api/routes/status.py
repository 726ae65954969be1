"""Read-only view of which configurations loaded and why others failed.

Only outcomes are exposed, never configuration values.
"""

from datetime import datetime

from fastapi import APIRouter
from pydantic import BaseModel

from fairconfig.api.dependencies import RegistryDep
from fairconfig.models import CacheEntry, EntryStatus


class ConfigurationStatus(BaseModel):
    """Outcome of one registered configuration."""

    name: str
    status: EntryStatus
    format: str | None = None
    path: str | None = None
    error: str | None = None
    loaded_at: datetime

    @classmethod
    def from_entry(cls, entry: CacheEntry) -> "ConfigurationStatus":
        return cls(
            name=entry.name,
            status=entry.status,
            format=entry.format.value if entry.format else None,
            path=str(entry.path) if entry.path else None,
            error=entry.error,
            loaded_at=entry.loaded_at,
        )


class ConfigurationStatusResponse(BaseModel):
    """All registered configurations."""

    healthy: bool
    configurations: list[ConfigurationStatus]


def create_status_router(prefix: str = "") -> APIRouter:
    """Create the router serving ``GET {prefix}/configurations``."""
    router = APIRouter(prefix=prefix)

    @router.get("/configurations", response_model=ConfigurationStatusResponse)
    def list_configurations(registry: RegistryDep) -> ConfigurationStatusResponse:
        statuses = [
            ConfigurationStatus.from_entry(entry)
            for entry in registry.entries().values()
        ]
        return ConfigurationStatusResponse(
            healthy=all(status.status is EntryStatus.PRESENT for status in statuses),
            configurations=statuses,
        )

    return router
