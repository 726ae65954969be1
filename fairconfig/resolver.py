"""Configuration file resolution.

Given a configuration name, the resolver walks its search directories in
order and, inside each directory, tries every candidate extension in
priority order (``json``, ``yml``, ``yaml``). The first existing file wins;
files for the same name in other formats or later directories are ignored.
"""

from collections.abc import Iterable
from pathlib import Path

from fairconfig.errors import ConfigurationNotFoundError, InvalidConfigurationNameError
from fairconfig.formats import CANDIDATES, format_for_path
from fairconfig.models import ResolvedFile
from fairconfig.observability.logging import get_logger
from fairconfig.source import FileSource, LocalFileSource

logger = get_logger(__name__)


def validate_name(name: str) -> str:
    """Check that a configuration name is usable as a file stem.

    Args:
        name: Integrator-chosen configuration name

    Returns:
        The name, unchanged

    Raises:
        InvalidConfigurationNameError: If the name is empty, contains a path
            separator or starts with a dot
    """
    if not isinstance(name, str) or not name:
        raise InvalidConfigurationNameError(str(name), "name must be a non-empty string")
    if "/" in name or "\\" in name:
        raise InvalidConfigurationNameError(name, "name must not contain path separators")
    if name.startswith("."):
        raise InvalidConfigurationNameError(name, "name must not start with a dot")
    if name != name.strip():
        raise InvalidConfigurationNameError(name, "name must not have surrounding whitespace")
    return name


class ConfigSourceResolver:
    """Locates and reads configuration files by name."""

    def __init__(
        self,
        search_paths: Iterable[Path | str],
        source: FileSource | None = None,
    ) -> None:
        """Create a resolver.

        Args:
            search_paths: Directories to search, highest priority first
            source: File access implementation (defaults to the local disk)
        """
        self.search_paths: tuple[Path, ...] = tuple(Path(p) for p in search_paths)
        if not self.search_paths:
            raise ValueError("At least one search path is required")
        self._source: FileSource = source or LocalFileSource()

    def candidate_paths(self, name: str) -> list[Path]:
        """Return every path tried for a name, in resolution order."""
        validate_name(name)
        return [
            directory / f"{name}.{extension}"
            for directory in self.search_paths
            for extension, _ in CANDIDATES
        ]

    def resolve(self, name: str) -> ResolvedFile:
        """Find the highest priority file for a name and read it.

        Args:
            name: Configuration name (file stem)

        Returns:
            ResolvedFile with the detected format and full content

        Raises:
            InvalidConfigurationNameError: If the name is not a valid stem
            ConfigurationNotFoundError: If no candidate exists or the matched
                file cannot be read
        """
        validate_name(name)
        attempted: list[Path] = []

        for directory in self.search_paths:
            for extension, config_format in CANDIDATES:
                path = directory / f"{name}.{extension}"
                attempted.append(path)
                if not self._source.is_file(path):
                    continue

                try:
                    content = self._source.read_bytes(path)
                except OSError as e:
                    raise ConfigurationNotFoundError(name, attempted, detail=str(e)) from e

                logger.debug(
                    "configuration_file_resolved",
                    configuration=name,
                    path=str(path),
                    format=config_format.value,
                    size=len(content),
                )
                return ResolvedFile(
                    name=name,
                    format=config_format,
                    path=path,
                    content=content,
                )

        raise ConfigurationNotFoundError(name, attempted)

    def discover(self) -> list[str]:
        """List the names of all handled files in the search paths.

        Files without an extension or with an unhandled one are skipped, as
        are names that would not pass ``validate_name``.

        Returns:
            Sorted, de-duplicated configuration names
        """
        names: set[str] = set()
        for directory in self.search_paths:
            if not directory.is_dir():
                logger.debug("configuration_directory_missing", path=str(directory))
                continue
            for path in directory.iterdir():
                if format_for_path(path) is None or not self._source.is_file(path):
                    continue
                try:
                    names.add(validate_name(path.stem))
                except InvalidConfigurationNameError:
                    logger.debug("configuration_file_skipped", path=str(path))
        return sorted(names)
