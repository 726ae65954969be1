"""Candidate configuration formats and their deserialization strategies.

The search order is fixed: ``json``, then ``yml``, then ``yaml``. Adding a
format means adding an enum member, a branch in ``_parse`` and a candidate.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from fairconfig.errors import DeserializeError


class ConfigFormat(str, Enum):
    """Serialization formats a configuration file may use."""

    JSON = "json"
    YAML = "yaml"

    def deserialize(self, name: str, content: bytes) -> dict[str, Any]:
        """Parse raw file content into a mapping.

        Args:
            name: Configuration name, used for error reporting
            content: Full file content

        Returns:
            Parsed top-level mapping (empty YAML documents yield ``{}``)

        Raises:
            DeserializeError: If the content is not valid UTF-8, is malformed
                for this format, or its top-level value is not a mapping
        """
        try:
            text = content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise DeserializeError(name, self.value, f"invalid UTF-8: {e}") from e

        try:
            data = self._parse(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise DeserializeError(name, self.value, str(e)) from e
        except RecursionError as e:
            raise DeserializeError(name, self.value, "document is nested too deeply") from e

        if data is None and self is ConfigFormat.YAML:
            return {}
        if not isinstance(data, dict):
            raise DeserializeError(
                name,
                self.value,
                f"top-level value must be a mapping, got {type(data).__name__}",
            )
        return data

    def _parse(self, text: str) -> Any:
        if self is ConfigFormat.JSON:
            return json.loads(text)
        return yaml.safe_load(text)


# Priority order, first match wins
CANDIDATES: tuple[tuple[str, ConfigFormat], ...] = (
    ("json", ConfigFormat.JSON),
    ("yml", ConfigFormat.YAML),
    ("yaml", ConfigFormat.YAML),
)

_FORMATS_BY_EXTENSION: dict[str, ConfigFormat] = dict(CANDIDATES)


def format_for_path(path: Path) -> ConfigFormat | None:
    """Return the format handling a file's extension, if any."""
    extension = path.suffix.lstrip(".")
    if not extension:
        return None
    return _FORMATS_BY_EXTENSION.get(extension)
