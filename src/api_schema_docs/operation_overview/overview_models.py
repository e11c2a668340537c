"""Operation and definition overview entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ParameterRow:
    """One request parameter with its display signature."""

    location: str
    name: str
    type_signature: str
    required: bool
    default: Any = None
    description: str | None = None


@dataclass(frozen=True)
class ResponseRow:
    """One declared response with its display signature."""

    status: str
    description: str | None
    type_signature: str | None


@dataclass(frozen=True)
class OperationOverview:  # pylint: disable=too-many-instance-attributes
    """Types and examples of one operation, ready for document assembly."""

    method: str
    path: str
    summary: str | None
    parameters: tuple[ParameterRow, ...]
    responses: tuple[ResponseRow, ...]
    request_example: dict[str, Any]
    response_examples: dict[str, Any]
    extensions: tuple[Any, ...] = ()


@dataclass(frozen=True)
class PropertyRow:
    """One definition property with its display signature."""

    name: str
    type_signature: str


@dataclass(frozen=True)
class DefinitionOverview:
    """Type signature, properties and example of one named definition."""

    name: str
    type_signature: str
    properties: tuple[PropertyRow, ...]
    example: Any = None
    extensions: tuple[Any, ...] = ()


@dataclass(frozen=True)
class DocumentOverview:
    """All operation and definition overviews of a specification."""

    title: str
    version: str
    operations: tuple[OperationOverview, ...]
    definitions: tuple[DefinitionOverview, ...]
    leading_extensions: tuple[Any, ...] = ()
    trailing_extensions: tuple[Any, ...] = ()
