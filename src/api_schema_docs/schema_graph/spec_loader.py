"""Swagger 2.0 specification loading service."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .api_models import (
    ApiOperation,
    ApiResponse,
    ApiSpecification,
    BodyParameter,
    Parameter,
    RefParameter,
    SerializableParameter,
)
from .schema_models import (
    NO_EXAMPLE,
    ArraySchema,
    ComposedSchema,
    EnumSchema,
    MapSchema,
    ObjectSchema,
    PrimitiveSchema,
    RefSchema,
    SchemaFragment,
    SchemaGraph,
)

logger = logging.getLogger(__name__)

HTTP_METHODS: tuple[str, ...] = ("get", "put", "post", "delete", "options", "head", "patch")


class SpecificationError(Exception):
    """Raised when an API specification cannot be read."""


def load_specification(spec_path: Path | str) -> ApiSpecification:
    """Read a Swagger 2.0 JSON or YAML file into the API model."""
    path = Path(spec_path)
    if not path.exists():
        raise SpecificationError(f"Specification file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SpecificationError(f"Failed to parse specification file: {exc}") from exc

    if not isinstance(parsed, Mapping):
        raise SpecificationError("Specification root must be a mapping.")
    return build_specification(parsed)


def build_specification(document: Mapping[str, Any]) -> ApiSpecification:
    """Build the API model from an already parsed Swagger document."""
    info = document.get("info")
    info = info if isinstance(info, Mapping) else {}

    definitions = _mapping(document.get("definitions"))
    graph = SchemaGraph(
        {str(name): parse_schema_fragment(node) for name, node in definitions.items()}
    )
    shared_parameters = _mapping(document.get("parameters"))
    shared_responses = _mapping(document.get("responses"))

    operations: list[ApiOperation] = []
    for raw_path, path_item in _mapping(document.get("paths")).items():
        if not isinstance(path_item, Mapping):
            continue
        path_parameters = _as_sequence(path_item.get("parameters"))
        for method in HTTP_METHODS:
            node = path_item.get(method)
            if not isinstance(node, Mapping):
                continue
            operations.append(
                _parse_operation(
                    str(raw_path),
                    method,
                    node,
                    path_parameters=path_parameters,
                    shared_parameters=shared_parameters,
                    shared_responses=shared_responses,
                )
            )

    logger.debug("Loaded %d definitions and %d operations", len(graph), len(operations))
    return ApiSpecification(
        title=str(info.get("title") or ""),
        version=str(info.get("version") or ""),
        graph=graph,
        operations=tuple(operations),
    )


def parse_schema_fragment(node: Any) -> SchemaFragment:
    """Convert a raw schema node into its fragment variant."""
    if not isinstance(node, Mapping):
        return PrimitiveSchema(kind=None)

    example = node.get("example", NO_EXAMPLE)
    if isinstance(node.get("$ref"), str):
        return RefSchema(target=simple_ref(node["$ref"]), example=example)

    declared_type = node.get("type") if isinstance(node.get("type"), str) else None
    all_of = node.get("allOf")
    if isinstance(all_of, Sequence) and not isinstance(all_of, str) and all_of:
        parts = [parse_schema_fragment(entry) for entry in all_of]
        parent: SchemaFragment | None = parts[0]
        for middle in parts[1:-1]:
            parent = ComposedSchema(parent=parent, child=middle)
        return ComposedSchema(
            parent=parent,
            child=parts[-1] if len(parts) > 1 else None,
            discriminator=_optional_str(node.get("discriminator")),
            title=_optional_str(node.get("title")),
            example=example,
        )

    if declared_type == "array" or "items" in node:
        items = node.get("items")
        properties = node.get("properties")
        return ArraySchema(
            items=parse_schema_fragment(items) if isinstance(items, Mapping) else None,
            collection_format=_optional_str(node.get("collectionFormat")),
            properties=_parse_properties(properties) if isinstance(properties, Mapping) else None,
            example=example,
        )

    additional = node.get("additionalProperties")
    if isinstance(additional, Mapping) and "properties" not in node:
        return MapSchema(values=parse_schema_fragment(additional), example=example)

    if "properties" in node or declared_type == "object":
        return ObjectSchema(
            properties=_parse_properties(_mapping(node.get("properties"))),
            discriminator=_optional_str(node.get("discriminator")),
            title=_optional_str(node.get("title")),
            example=example,
        )

    enum_values = node.get("enum")
    if isinstance(enum_values, Sequence) and not isinstance(enum_values, str) and enum_values:
        return EnumSchema(
            allowed_values=tuple(_enum_text(value) for value in enum_values),
            kind=declared_type or "string",
            format=_optional_str(node.get("format")),
            example=example,
        )

    return PrimitiveSchema(
        kind=declared_type,
        format=_optional_str(node.get("format")),
        example=example,
    )


def simple_ref(reference: str) -> str:
    """Return the definition name of ``#/definitions/Name`` style references."""
    return reference.rsplit("/", 1)[-1]


def _parse_properties(properties: Mapping[str, Any]) -> dict[str, SchemaFragment]:
    return {str(name): parse_schema_fragment(value) for name, value in properties.items()}


def _parse_operation(  # pylint: disable=too-many-arguments
    raw_path: str,
    method: str,
    node: Mapping[str, Any],
    *,
    path_parameters: Sequence[Any],
    shared_parameters: Mapping[str, Any],
    shared_responses: Mapping[str, Any],
) -> ApiOperation:
    parameters: dict[tuple[str, str], Parameter] = {}
    for raw_parameter in [*path_parameters, *_as_sequence(node.get("parameters"))]:
        parameter = _parse_parameter(raw_parameter, shared_parameters)
        if parameter is not None:
            parameters[(parameter.location, parameter.name)] = parameter

    responses: dict[str, ApiResponse] = {}
    for status, raw_response in _mapping(node.get("responses")).items():
        response_node = _inline_shared(raw_response, shared_responses, "#/responses/")
        if isinstance(response_node, Mapping):
            responses[str(status)] = _parse_response(response_node)

    tags = tuple(str(tag) for tag in _as_sequence(node.get("tags")))
    return ApiOperation(
        path=raw_path,
        method=method.upper(),
        parameters=tuple(parameters.values()),
        responses=responses,
        operation_id=_optional_str(node.get("operationId")),
        summary=_optional_str(node.get("summary")),
        tags=tags,
    )


def _parse_parameter(raw: Any, shared_parameters: Mapping[str, Any]) -> Parameter | None:
    if not isinstance(raw, Mapping):
        return None
    reference = raw.get("$ref")
    if isinstance(reference, str):
        name = simple_ref(reference)
        shared = shared_parameters.get(name)
        if reference.startswith("#/parameters/") and isinstance(shared, Mapping):
            raw = shared
        else:
            return RefParameter(target=name)

    name = str(raw.get("name") or "")
    location = str(raw.get("in") or "")
    required = bool(raw.get("required", False))
    description = _optional_str(raw.get("description"))
    if location == "body":
        schema = raw.get("schema")
        return BodyParameter(
            name=name,
            schema=parse_schema_fragment(schema) if isinstance(schema, Mapping) else None,
            examples=raw.get("x-examples", NO_EXAMPLE),
            required=required,
            description=description,
        )

    items = raw.get("items")
    enum_values = raw.get("enum")
    allowed_values: tuple[str, ...] = ()
    if isinstance(enum_values, Sequence) and not isinstance(enum_values, str):
        allowed_values = tuple(_enum_text(value) for value in enum_values)
    return SerializableParameter(
        name=name,
        location=location,
        kind=_optional_str(raw.get("type")),
        format=_optional_str(raw.get("format")),
        items=parse_schema_fragment(items) if isinstance(items, Mapping) else None,
        collection_format=_optional_str(raw.get("collectionFormat")),
        allowed_values=allowed_values,
        default=raw.get("default", NO_EXAMPLE),
        example=raw.get("x-example", NO_EXAMPLE),
        required=required,
        description=description,
    )


def _parse_response(node: Mapping[str, Any]) -> ApiResponse:
    schema = node.get("schema")
    return ApiResponse(
        description=_optional_str(node.get("description")),
        schema=parse_schema_fragment(schema) if isinstance(schema, Mapping) else None,
        examples=node.get("examples", NO_EXAMPLE),
    )


def _inline_shared(raw: Any, shared: Mapping[str, Any], prefix: str) -> Any:
    if isinstance(raw, Mapping) and isinstance(raw.get("$ref"), str):
        reference = raw["$ref"]
        if reference.startswith(prefix):
            return shared.get(simple_ref(reference))
    return raw


def _enum_text(value: Any) -> str:
    if isinstance(value, bool) or value is None:
        return json.dumps(value)
    return str(value)


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _as_sequence(value: Any) -> Sequence[Any]:
    if isinstance(value, Sequence) and not isinstance(value, str):
        return value
    return ()


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
