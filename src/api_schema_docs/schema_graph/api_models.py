"""API operation entities consumed by type projection and example synthesis."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .schema_models import NO_EXAMPLE, SchemaFragment, SchemaGraph

SERIALIZABLE_LOCATIONS: tuple[str, ...] = ("header", "query", "path", "formData")


@dataclass(frozen=True)
class BodyParameter:
    """Request body parameter described by a schema fragment."""

    name: str
    schema: SchemaFragment | None
    examples: Any = NO_EXAMPLE
    required: bool = False
    description: str | None = None

    @property
    def location(self) -> str:
        return "body"


@dataclass(frozen=True)
class SerializableParameter:  # pylint: disable=too-many-instance-attributes
    """Header, query, path or formData parameter."""

    name: str
    location: str
    kind: str | None
    format: str | None = None
    items: SchemaFragment | None = None
    collection_format: str | None = None
    allowed_values: tuple[str, ...] = ()
    default: Any = NO_EXAMPLE
    example: Any = NO_EXAMPLE
    required: bool = False
    description: str | None = None


@dataclass(frozen=True)
class RefParameter:
    """Parameter left as a reference to a named definition."""

    target: str
    location: str = "body"

    @property
    def name(self) -> str:
        return self.target


Parameter = BodyParameter | SerializableParameter | RefParameter


@dataclass(frozen=True)
class ApiResponse:
    """One declared response of an operation."""

    description: str | None = None
    schema: SchemaFragment | None = None
    examples: Any = NO_EXAMPLE


@dataclass(frozen=True)
class ApiOperation:
    """Read view over one API operation."""

    path: str
    method: str
    parameters: tuple[Parameter, ...] = ()
    responses: Mapping[str, ApiResponse] = field(default_factory=dict)
    operation_id: str | None = None
    summary: str | None = None
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class ApiSpecification:
    """Loaded API description."""

    title: str
    version: str
    graph: SchemaGraph
    operations: tuple[ApiOperation, ...]
