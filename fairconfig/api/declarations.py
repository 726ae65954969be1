"""Per-name configuration types for request handlers.

``declare_configuration("diesel")`` produces a distinct ``DieselConfiguration``
class. Handlers depend on it through its ``Dep`` alias::

    DieselConfiguration = declare_configuration("diesel")

    @app.get("/hello")
    def hello(configuration: DieselConfiguration.Dep) -> dict:
        return {"driver": configuration.get("diesel.dbal.driver")}

Each request resolves the dependency from the registry the fairing loaded at
startup. A missing or malformed configuration fails the extraction with
``ConfigurationExtractionError``, answered with HTTP 500.
"""

import re
from typing import Annotated, Any, ClassVar

from fastapi import Depends, Request
from pydantic import BaseModel

from fairconfig.api.dependencies import get_registry
from fairconfig.api.exceptions import ConfigurationExtractionError
from fairconfig.errors import ConfigurationUnavailableError
from fairconfig.models import MISSING, Configuration, Index, index_segments, step
from fairconfig.resolver import validate_name

_WORD_BOUNDARY = re.compile(r"[^0-9a-zA-Z]+")


class DeclaredConfiguration:
    """Base class of generated per-name configuration types."""

    configuration_name: ClassVar[str]
    schema: ClassVar[type[BaseModel] | None] = None
    Dep: ClassVar[Any]

    __slots__ = ("_value",)

    def __init__(self, value: Any) -> None:
        self._value = value

    @property
    def value(self) -> Any:
        """The cached Configuration, or the schema instance if declared with one."""
        return self._value

    def get(self, index: Index, default: Any = None) -> Any:
        """Look up a value by key, list index or dotted path."""
        if isinstance(self._value, Configuration):
            return self._value.get(index, default)

        node: Any = self._value
        for segment in index_segments(index):
            if isinstance(node, BaseModel) and isinstance(segment, str):
                if segment not in type(node).model_fields:
                    return default
                node = getattr(node, segment)
            else:
                node = step(node, segment)
                if node is MISSING:
                    return default
        return node

    @classmethod
    def from_request(cls, request: Request) -> "DeclaredConfiguration":
        """FastAPI dependency returning this configuration for a request."""
        registry = get_registry(request)
        try:
            return cls(registry.get(cls.configuration_name))
        except ConfigurationUnavailableError as e:
            raise ConfigurationExtractionError(e) from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


def type_name_for(name: str) -> str:
    """Return the generated class name for a configuration name.

    ``diesel`` gives ``DieselConfiguration`` and ``app-settings`` gives
    ``AppSettingsConfiguration``.
    """
    words = [word for word in _WORD_BOUNDARY.split(name) if word]
    stem = "".join(word[0].upper() + word[1:] for word in words)
    if not stem or stem[0].isdigit():
        stem = f"_{stem}"
    return f"{stem}Configuration"


def declare_configuration(
    name: str,
    schema: type[BaseModel] | None = None,
) -> type[DeclaredConfiguration]:
    """Generate the request-injectable type for a configuration name.

    Args:
        name: Configuration name (file stem and cache key)
        schema: Optional pydantic model the document is validated into

    Returns:
        A new DeclaredConfiguration subclass bound to the name
    """
    validate_name(name)
    type_name = type_name_for(name)

    cls = type(
        type_name,
        (DeclaredConfiguration,),
        {
            "__slots__": (),
            "__doc__": f"Request-injectable {name!r} configuration.",
            "configuration_name": name,
            "schema": schema,
        },
    )
    cls.Dep = Annotated[cls, Depends(cls.from_request)]
    return cls
