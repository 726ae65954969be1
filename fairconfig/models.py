"""Value types shared by the resolver and the registry."""

import copy
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path
from typing import Any

from fairconfig.formats import ConfigFormat

Index = str | int | Sequence[str | int]

MISSING = object()


@dataclass(frozen=True, slots=True)
class ResolvedFile:
    """A located configuration file and its raw content."""

    name: str
    format: ConfigFormat
    path: Path
    content: bytes = field(repr=False)


class EntryStatus(str, Enum):
    """Terminal outcome of registering a configuration name."""

    PRESENT = "present"
    NOT_FOUND = "not_found"
    PARSE_ERROR = "parse_error"


class Configuration:
    """A parsed configuration document.

    Values are looked up with ``get``, which accepts a key, a list index, a
    sequence of those, or a dotted path::

        configuration.get("diesel.dbal.driver")
        configuration.get(["servers", 0, "host"])

    The underlying data is never handed out directly; ``as_dict`` returns a
    deep copy so request handlers cannot mutate the shared cache.
    """

    __slots__ = ("_data", "format", "name", "path")

    def __init__(
        self,
        name: str,
        data: Mapping[str, Any],
        format: ConfigFormat,
        path: Path,
    ) -> None:
        self.name = name
        self.format = format
        self.path = path
        self._data = data

    def get(self, index: Index, default: Any = None) -> Any:
        """Look up a value, returning default if any segment is missing."""
        node: Any = self._data
        for segment in index_segments(index):
            node = step(node, segment)
            if node is MISSING:
                return default
        return copy.deepcopy(node)

    def __getitem__(self, key: str) -> Any:
        value = self.get([key], MISSING)
        if value is MISSING:
            raise KeyError(key)
        return value

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def keys(self) -> list[str]:
        return list(self._data.keys())

    def as_dict(self) -> dict[str, Any]:
        return copy.deepcopy(dict(self._data))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Configuration):
            return self.name == other.name and self._data == other._data
        if isinstance(other, Mapping):
            return self._data == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Configuration(name={self.name!r}, format={self.format.value!r}, path={str(self.path)!r})"


def index_segments(index: Index) -> list[str | int]:
    """Split an index into path segments.

    Dotted-path parts stay strings; ``step`` turns a decimal part into a list
    index only when the node it walks into is a list.
    """
    if isinstance(index, str):
        return index.split(".")
    if isinstance(index, int):
        return [index]
    return list(index)


def step(node: Any, segment: str | int) -> Any:
    """Walk one segment into a mapping or list, returning MISSING if absent."""
    if isinstance(node, Mapping):
        # Keys such as "env(DATABASE_URL)" or "007" are looked up verbatim first
        if segment in node:
            return node[segment]
        alternate = str(segment) if isinstance(segment, int) else _as_int(segment)
        if alternate is not None and alternate in node:
            return node[alternate]
        return MISSING
    if isinstance(node, list):
        position = _as_int(segment)
        if position is not None and -len(node) <= position < len(node):
            return node[position]
    return MISSING


def _as_int(segment: str | int) -> int | None:
    if isinstance(segment, int):
        return segment
    if segment.isascii() and segment.isdecimal():
        return int(segment)
    return None


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """Outcome of registering one configuration name.

    Written exactly once at startup, read many times afterwards.
    """

    name: str
    status: EntryStatus
    value: Any = field(default=None, repr=False)
    error: str | None = None
    format: ConfigFormat | None = None
    path: Path | None = None
    attempted: tuple[Path, ...] = ()
    loaded_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def is_present(self) -> bool:
        return self.status is EntryStatus.PRESENT
