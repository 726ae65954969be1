"""fairconfig: configuration files for FastAPI applications.

Configuration files named ``<name>.json``, ``<name>.yml`` or ``<name>.yaml``
are located and parsed once at application startup, then injected into
request handlers through a type generated per configuration name.

Usage:
    from fastapi import FastAPI
    from fairconfig import ConfigurationFairing, declare_configuration

    DieselConfiguration = declare_configuration("diesel")

    app = FastAPI()
    ConfigurationFairing(DieselConfiguration).attach(app)

    @app.get("/driver")
    def driver(configuration: DieselConfiguration.Dep) -> str:
        return configuration.get("diesel.dbal.driver")
"""

from fairconfig.api.app import create_app
from fairconfig.api.declarations import DeclaredConfiguration, declare_configuration
from fairconfig.api.exceptions import (
    ConfigurationExtractionError,
    FairConfigAPIError,
    FairingNotAttachedError,
)
from fairconfig.api.fairing import ConfigurationFairing
from fairconfig.errors import (
    ConfigurationLoadError,
    ConfigurationNotFoundError,
    ConfigurationUnavailableError,
    DeserializeError,
    FairConfigError,
    InvalidConfigurationNameError,
    RegistryFrozenError,
)
from fairconfig.formats import CANDIDATES, ConfigFormat
from fairconfig.models import CacheEntry, Configuration, EntryStatus, ResolvedFile
from fairconfig.registry import ConfigurationRegistry
from fairconfig.resolver import ConfigSourceResolver, validate_name
from fairconfig.source import FileSource, LocalFileSource

__all__ = [
    "CANDIDATES",
    "CacheEntry",
    "ConfigFormat",
    "ConfigSourceResolver",
    "Configuration",
    "ConfigurationExtractionError",
    "ConfigurationFairing",
    "ConfigurationLoadError",
    "ConfigurationNotFoundError",
    "ConfigurationRegistry",
    "ConfigurationUnavailableError",
    "DeclaredConfiguration",
    "DeserializeError",
    "EntryStatus",
    "FairConfigAPIError",
    "FairConfigError",
    "FairingNotAttachedError",
    "FileSource",
    "InvalidConfigurationNameError",
    "LocalFileSource",
    "RegistryFrozenError",
    "ResolvedFile",
    "create_app",
    "declare_configuration",
    "validate_name",
]
