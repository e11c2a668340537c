"""Schema graph entities."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


class _NoExample(Enum):
    TOKEN = "no-example"

    def __repr__(self) -> str:
        return "NO_EXAMPLE"


NO_EXAMPLE = _NoExample.TOKEN
"""Marks a fragment without an authored example (authored falsy values stay examples)."""


def has_example(value: Any) -> bool:
    """Return True when the value is an authored example."""
    return value is not NO_EXAMPLE


@dataclass(frozen=True)
class PrimitiveSchema:
    """Scalar fragment such as ``{"type": "integer", "format": "int64"}``."""

    kind: str | None
    format: str | None = None
    example: Any = NO_EXAMPLE


@dataclass(frozen=True)
class EnumSchema:
    """Scalar fragment restricted to enumerated values."""

    allowed_values: tuple[str, ...]
    kind: str | None = "string"
    format: str | None = None
    example: Any = NO_EXAMPLE


@dataclass(frozen=True)
class ArraySchema:
    """Array fragment; ``properties`` holds model-level inline properties when declared."""

    items: SchemaFragment | None
    collection_format: str | None = None
    properties: Mapping[str, SchemaFragment] | None = None
    example: Any = NO_EXAMPLE


@dataclass(frozen=True)
class MapSchema:
    """``additionalProperties`` fragment."""

    values: SchemaFragment
    example: Any = NO_EXAMPLE


@dataclass(frozen=True)
class ObjectSchema:
    """Object fragment with declared properties."""

    properties: Mapping[str, SchemaFragment] = field(default_factory=dict)
    discriminator: str | None = None
    title: str | None = None
    example: Any = NO_EXAMPLE


@dataclass(frozen=True)
class ComposedSchema:
    """``allOf`` fragment merging a parent with a child."""

    parent: SchemaFragment | None
    child: SchemaFragment | None
    discriminator: str | None = None
    title: str | None = None
    example: Any = NO_EXAMPLE


@dataclass(frozen=True)
class RefSchema:
    """Indirection to a named definition."""

    target: str
    example: Any = NO_EXAMPLE


SchemaFragment = (
    PrimitiveSchema
    | EnumSchema
    | ArraySchema
    | MapSchema
    | ObjectSchema
    | ComposedSchema
    | RefSchema
)


class SchemaGraph(Mapping[str, SchemaFragment]):
    """Read-only mapping from definition name to schema fragment."""

    def __init__(self, definitions: Mapping[str, SchemaFragment] | None = None) -> None:
        self._definitions: Mapping[str, SchemaFragment] = MappingProxyType(
            dict(definitions or {})
        )

    def __getitem__(self, name: str) -> SchemaFragment:
        return self._definitions[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"SchemaGraph({list(self._definitions)!r})"
