"""Shared test fixtures for the fairconfig test suite."""

import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest

from fairconfig.config.settings import FairConfigSettings


class CountingFileSource:
    """FileSource recording every existence check and read."""

    def __init__(self) -> None:
        self.reads: list[Path] = []
        self.checks: list[Path] = []

    def is_file(self, path: Path) -> bool:
        self.checks.append(path)
        return path.is_file()

    def read_bytes(self, path: Path) -> bytes:
        self.reads.append(path)
        return path.read_bytes()

    def read_count(self, path: Path) -> int:
        return sum(1 for read in self.reads if read == path)


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def config_files(test_config_dir: Path) -> Callable[[dict[str, str | bytes]], None]:
    """Factory fixture to create configuration files in the test config directory.

    Usage:
        def test_something(config_files):
            config_files({
                "diesel.json": '{"driver": "mysql"}',
                "dev/diesel.yml": "driver: sqlite",
            })
    """

    def _create_files(files: dict[str, str | bytes]) -> None:
        for filename, content in files.items():
            path = test_config_dir / filename
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")

    return _create_files


@pytest.fixture
def counting_source() -> CountingFileSource:
    """File source that counts reads."""
    return CountingFileSource()


@pytest.fixture
def settings(test_config_dir: Path) -> FairConfigSettings:
    """Production-like settings pointing at the test config directory."""
    return FairConfigSettings(
        config_dir=test_config_dir,
        environment="production",
        log_format="console",
    )


class EnvOverrideContext:
    """Context manager for temporarily setting environment variables."""

    def __init__(self, overrides: dict[str, str]) -> None:
        self.overrides = overrides
        self.original_env: dict[str, str | None] = {}

    def __enter__(self) -> None:
        for key, value in self.overrides.items():
            self.original_env[key] = os.environ.get(key)
            os.environ[key] = value

    def __exit__(self, *args: Any) -> None:
        for key in self.overrides:
            if self.original_env[key] is None:
                os.environ.pop(key, None)
            else:
                os.environ[key] = self.original_env[key]


@pytest.fixture
def env_override() -> Generator[Callable[[dict[str, str]], EnvOverrideContext], None, None]:
    """Context manager for temporarily setting environment variables.

    Usage:
        def test_something(env_override):
            with env_override({"FAIRCONFIG_FAIL_ON_ERROR": "true"}):
                # test code here
    """

    def _env_override(overrides: dict[str, str]) -> EnvOverrideContext:
        return EnvOverrideContext(overrides)

    yield _env_override


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache before and after each test.

    This ensures test isolation for configuration tests.
    """
    from fairconfig.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
