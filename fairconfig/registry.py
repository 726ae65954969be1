"""Process-wide cache of parsed configurations.

The registry has two phases:

1. Startup: ``register`` (or ``initialize``) resolves, reads and parses each
   declared name exactly once and records a terminal outcome. Failures are
   captured per name so one bad file never prevents others from loading.
2. Serving: after ``freeze``, ``get`` is a pure read of an immutable mapping.

Writers serialize on a lock and publish by swapping in a new read-only
mapping, so readers never take the lock and never observe a partial entry.
"""

import threading
import time
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ValidationError

from fairconfig.errors import (
    ConfigurationNotFoundError,
    ConfigurationUnavailableError,
    DeserializeError,
    RegistryFrozenError,
)
from fairconfig.formats import ConfigFormat
from fairconfig.models import CacheEntry, Configuration, EntryStatus
from fairconfig.observability.logging import get_logger
from fairconfig.observability.metrics import (
    CONFIGURATION_LOAD_LATENCY,
    CONFIGURATION_LOADS,
    CONFIGURATION_LOOKUPS,
    CONFIGURATIONS_REGISTERED,
)
from fairconfig.resolver import ConfigSourceResolver, validate_name

logger = get_logger(__name__)

Declarations = Mapping[str, type[BaseModel] | None] | Iterable[str]


class ConfigurationRegistry:
    """Loads configurations once and serves them for the process lifetime."""

    def __init__(self, resolver: ConfigSourceResolver) -> None:
        self._resolver = resolver
        self._entries: Mapping[str, CacheEntry] = MappingProxyType({})
        self._lock = threading.Lock()
        self._frozen = False

    @property
    def resolver(self) -> ConfigSourceResolver:
        return self._resolver

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    @property
    def names(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def register(self, name: str, schema: type[BaseModel] | None = None) -> CacheEntry:
        """Resolve and parse a configuration, recording its outcome.

        Registering a name that already has an entry returns that entry
        without touching the file system again.

        Args:
            name: Configuration name (file stem and cache key)
            schema: Optional pydantic model the document is validated into

        Returns:
            The stored CacheEntry

        Raises:
            InvalidConfigurationNameError: If the name is not a valid stem
            RegistryFrozenError: If startup already completed
        """
        validate_name(name)

        with self._lock:
            if self._frozen:
                raise RegistryFrozenError(
                    f"Cannot register {name!r}: configuration registry is frozen"
                )

            existing = self._entries.get(name)
            if existing is not None:
                logger.debug("configuration_already_registered", configuration=name)
                return existing

            entry = self._load(name, schema)
            entries = dict(self._entries)
            entries[name] = entry
            self._entries = MappingProxyType(entries)
            self._update_gauge()

        return entry

    def initialize(self, declarations: Declarations) -> dict[str, CacheEntry]:
        """Register every declared configuration, then freeze the registry.

        Args:
            declarations: Names, or a mapping of name to optional schema

        Returns:
            Mapping of name to outcome, in declaration order

        Raises:
            RegistryFrozenError: If the registry was already initialized
        """
        if self._frozen:
            raise RegistryFrozenError("Configuration registry is already initialized")

        if isinstance(declarations, Mapping):
            items = list(declarations.items())
        else:
            items = [(name, None) for name in declarations]

        results = {name: self.register(name, schema) for name, schema in items}
        self.freeze()
        return results

    def freeze(self) -> None:
        """Reject any further registration."""
        with self._lock:
            if self._frozen:
                return
            self._frozen = True

        failures = self.failures()
        logger.info(
            "configuration_registry_frozen",
            registered=len(self._entries),
            failed=sorted(failures),
        )

    def get(self, name: str) -> Any:
        """Return the cached value for a configuration.

        Args:
            name: Configuration name

        Returns:
            The Configuration, or the schema instance if one was declared

        Raises:
            ConfigurationUnavailableError: If the name was never registered,
                or its file was missing or malformed
        """
        entry = self._entries.get(name)
        if entry is None:
            CONFIGURATION_LOOKUPS.labels(name=name, status="unregistered").inc()
            raise ConfigurationUnavailableError(name, "unregistered")

        CONFIGURATION_LOOKUPS.labels(name=name, status=entry.status.value).inc()
        if entry.status is not EntryStatus.PRESENT:
            raise ConfigurationUnavailableError(name, entry.status.value, entry.error)
        return entry.value

    def entry(self, name: str) -> CacheEntry | None:
        """Return the recorded outcome for a name, if registered."""
        return self._entries.get(name)

    def entries(self) -> dict[str, CacheEntry]:
        """Return a snapshot of every recorded outcome."""
        return dict(self._entries)

    def failures(self) -> dict[str, str]:
        """Return name to error detail for every unusable configuration."""
        return {
            name: entry.error or entry.status.value
            for name, entry in self._entries.items()
            if not entry.is_present
        }

    def _load(self, name: str, schema: type[BaseModel] | None) -> CacheEntry:
        started = time.perf_counter()

        try:
            resolved = self._resolver.resolve(name)
        except ConfigurationNotFoundError as e:
            logger.warning(
                "configuration_not_found",
                configuration=name,
                attempted=[str(path) for path in e.attempted],
                detail=e.detail,
            )
            CONFIGURATION_LOADS.labels(format="none", status=EntryStatus.NOT_FOUND.value).inc()
            return CacheEntry(
                name=name,
                status=EntryStatus.NOT_FOUND,
                error=e.message,
                attempted=e.attempted,
            )

        config_format = resolved.format
        try:
            data = config_format.deserialize(name, resolved.content)
            value: Any = Configuration(name, data, config_format, resolved.path)
            if schema is not None:
                value = _validate(name, config_format, schema, data)
        except DeserializeError as e:
            return self._parse_failure(name, resolved.path, config_format, e.message)
        finally:
            CONFIGURATION_LOAD_LATENCY.labels(format=config_format.value).observe(
                time.perf_counter() - started
            )

        logger.info(
            "configuration_loaded",
            configuration=name,
            path=str(resolved.path),
            format=config_format.value,
            schema=schema.__name__ if schema is not None else None,
        )
        CONFIGURATION_LOADS.labels(
            format=config_format.value, status=EntryStatus.PRESENT.value
        ).inc()
        return CacheEntry(
            name=name,
            status=EntryStatus.PRESENT,
            value=value,
            format=config_format,
            path=resolved.path,
        )

    def _parse_failure(
        self, name: str, path: Path, config_format: ConfigFormat, detail: str
    ) -> CacheEntry:
        logger.error(
            "configuration_parse_failed",
            configuration=name,
            path=str(path),
            format=config_format.value,
            error=detail,
        )
        CONFIGURATION_LOADS.labels(
            format=config_format.value, status=EntryStatus.PARSE_ERROR.value
        ).inc()
        return CacheEntry(
            name=name,
            status=EntryStatus.PARSE_ERROR,
            error=detail,
            format=config_format,
            path=path,
        )

    def _update_gauge(self) -> None:
        counts = {status: 0 for status in EntryStatus}
        for entry in self._entries.values():
            counts[entry.status] += 1
        for status, count in counts.items():
            CONFIGURATIONS_REGISTERED.labels(status=status.value).set(count)


def _validate(
    name: str, config_format: ConfigFormat, schema: type[BaseModel], data: dict[str, Any]
) -> BaseModel:
    """Validate a document against its schema, reporting any failure as DeserializeError."""
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise DeserializeError(
            name, config_format.value, f"does not match {schema.__name__}: {e}"
        ) from e
    except Exception as e:
        # Validators may raise errors pydantic does not wrap, such as TypeError
        raise DeserializeError(
            name, config_format.value, f"{schema.__name__} validation raised {e!r}"
        ) from e
