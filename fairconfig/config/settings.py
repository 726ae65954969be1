"""Settings controlling how the fairing finds and loads configurations."""

from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fairconfig.config.loader import get_config_dir

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["json", "console"]


class FairConfigSettings(BaseSettings):
    """Plugin settings.

    Values come from constructor arguments first, then FAIRCONFIG_*
    environment variables, then the defaults below.
    """

    model_config = SettingsConfigDict(
        env_prefix="FAIRCONFIG_",
        case_sensitive=False,
        extra="ignore",
    )

    config_dir: Path = Field(
        default_factory=get_config_dir,
        description="Directory holding <name>.json/.yml/.yaml files",
    )
    environment: str = Field(
        default="development",
        description="Deployment environment name (FAIRCONFIG_ENVIRONMENT)",
    )
    dev_dir: str = Field(
        default="dev",
        description="Sub-directory of config_dir searched first in development",
    )
    use_dev_overlay: bool | None = Field(
        default=None,
        description="Search dev_dir before config_dir (defaults to on in development)",
    )
    auto_discover: bool = Field(
        default=False,
        description="Register every handled file found in the search paths",
    )
    fail_on_error: bool = Field(
        default=False,
        description="Abort startup if any configuration fails to load",
    )

    log_level: LogLevel = Field(default="INFO", description="Logging level")
    log_format: LogFormat = Field(default="json", description="Log renderer")
    redact_secrets: bool = Field(default=True, description="Mask secrets in log events")

    @model_validator(mode="after")
    def _default_dev_overlay(self) -> "FairConfigSettings":
        if self.use_dev_overlay is None:
            self.use_dev_overlay = self.environment == "development"
        return self

    @property
    def search_paths(self) -> list[Path]:
        """Directories searched for configuration files, highest priority first."""
        if self.use_dev_overlay:
            return [self.config_dir / self.dev_dir, self.config_dir]
        return [self.config_dir]
