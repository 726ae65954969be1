"""File access used by the resolver."""

from pathlib import Path
from typing import Protocol


class FileSource(Protocol):
    """Read-only access to configuration files."""

    def is_file(self, path: Path) -> bool:
        """Return True if a regular file exists at path."""
        ...

    def read_bytes(self, path: Path) -> bytes:
        """Return the full content of the file at path."""
        ...


class LocalFileSource:
    """FileSource backed by the local file system."""

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def read_bytes(self, path: Path) -> bytes:
        return path.read_bytes()
