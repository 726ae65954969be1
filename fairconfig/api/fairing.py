"""Startup hook loading declared configurations into an application.

The fairing runs once, inside the application's lifespan and before any
request is served. It builds a ConfigurationRegistry, registers every
declared name, freezes the registry and publishes it on ``app.state``.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from pydantic import BaseModel

from fairconfig.api.declarations import DeclaredConfiguration, declare_configuration
from fairconfig.api.dependencies import REGISTRY_STATE_KEY
from fairconfig.api.handlers import register_exception_handlers
from fairconfig.config import get_settings
from fairconfig.config.settings import FairConfigSettings
from fairconfig.errors import ConfigurationLoadError, RegistryFrozenError
from fairconfig.observability.logging import get_logger
from fairconfig.registry import ConfigurationRegistry
from fairconfig.resolver import ConfigSourceResolver, validate_name
from fairconfig.source import FileSource

logger = get_logger(__name__)

Declared = type[DeclaredConfiguration] | str


class ConfigurationFairing:
    """Loads configuration files at application startup.

    Usage:
        DieselConfiguration = declare_configuration("diesel")

        app = FastAPI()
        ConfigurationFairing(DieselConfiguration).attach(app)
    """

    name = "Configuration factory"

    def __init__(
        self,
        *configurations: Declared,
        settings: FairConfigSettings | None = None,
        source: FileSource | None = None,
        fail_on_error: bool | None = None,
    ) -> None:
        """Create a fairing.

        Args:
            configurations: Declared configuration types or plain names
            settings: Plugin settings (defaults to get_settings())
            source: File access implementation used by the resolver
            fail_on_error: Abort startup on any failed configuration
                (defaults to settings.fail_on_error)
        """
        self._settings = settings
        self._source = source
        self._fail_on_error = fail_on_error
        self._declarations: dict[str, type[BaseModel] | None] = {}
        self.registry: ConfigurationRegistry | None = None

        for configuration in configurations:
            self.add(configuration)

    @property
    def settings(self) -> FairConfigSettings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def declarations(self) -> dict[str, type[BaseModel] | None]:
        return dict(self._declarations)

    def add(self, configuration: Declared) -> None:
        """Add a declared configuration type or a plain name.

        Raises:
            RegistryFrozenError: If the fairing already loaded
            ValueError: If the name was declared with a different schema
        """
        if self.registry is not None:
            raise RegistryFrozenError("Cannot declare configurations after startup")

        if isinstance(configuration, str):
            name, schema = validate_name(configuration), None
        else:
            name, schema = configuration.configuration_name, configuration.schema

        if name in self._declarations and self._declarations[name] is not schema:
            raise ValueError(f"Configuration {name!r} is already declared with another schema")
        self._declarations[name] = schema

    def declare(
        self,
        name: str,
        schema: type[BaseModel] | None = None,
    ) -> type[DeclaredConfiguration]:
        """Declare a configuration and return its request-injectable type."""
        declared = declare_configuration(name, schema)
        self.add(declared)
        return declared

    def load(self) -> ConfigurationRegistry:
        """Build and initialize the registry.

        Returns:
            The frozen ConfigurationRegistry

        Raises:
            RegistryFrozenError: If this fairing already loaded
            ConfigurationLoadError: If fail_on_error is set and any
                configuration failed
        """
        if self.registry is not None:
            raise RegistryFrozenError("Configuration fairing already loaded")

        settings = self.settings
        resolver = ConfigSourceResolver(settings.search_paths, source=self._source)

        declarations = dict(self._declarations)
        if settings.auto_discover:
            for discovered in resolver.discover():
                declarations.setdefault(discovered, None)

        logger.info(
            "configuration_fairing_loading",
            configurations=list(declarations),
            search_paths=[str(path) for path in resolver.search_paths],
        )

        registry = ConfigurationRegistry(resolver)
        registry.initialize(declarations)
        self.registry = registry

        failures = registry.failures()
        fail_on_error = (
            settings.fail_on_error if self._fail_on_error is None else self._fail_on_error
        )
        if failures and fail_on_error:
            logger.error("configuration_fairing_failed", failures=failures)
            raise ConfigurationLoadError(failures)

        return registry

    def on_startup(self, app: FastAPI) -> ConfigurationRegistry:
        """Load configurations and publish the registry on the application."""
        registry = self.load()
        setattr(app.state, REGISTRY_STATE_KEY, registry)
        return registry

    @asynccontextmanager
    async def lifespan(self, app: FastAPI) -> AsyncIterator[None]:
        """Lifespan usable as ``FastAPI(lifespan=fairing.lifespan)``.

        Exception handlers must then be installed separately with
        ``register_exception_handlers``; ``attach`` does both.
        """
        self.on_startup(app)
        yield

    def attach(self, app: FastAPI) -> FastAPI:
        """Run this fairing ahead of the application's existing lifespan.

        Args:
            app: FastAPI application

        Returns:
            The same application, for chaining
        """
        register_exception_handlers(app)
        inner = app.router.lifespan_context

        @asynccontextmanager
        async def lifespan(app_: Any) -> AsyncIterator[Any]:
            self.on_startup(app_)
            async with inner(app_) as state:
                yield state

        app.router.lifespan_context = lifespan
        logger.debug("configuration_fairing_attached", fairing=self.name)
        return app
