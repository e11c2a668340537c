"""Example payload synthesis for requests, responses and schema fragments."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from api_schema_docs.composition.composition_merger import CompositionMerger
from api_schema_docs.reference_resolution.reference_resolver import ReferenceResolver
from api_schema_docs.schema_graph.api_models import (
    ApiOperation,
    BodyParameter,
    RefParameter,
    SerializableParameter,
)
from api_schema_docs.schema_graph.schema_models import (
    ArraySchema,
    ComposedSchema,
    EnumSchema,
    MapSchema,
    ObjectSchema,
    PrimitiveSchema,
    RefSchema,
    SchemaFragment,
    has_example,
)

from .scalar_defaults import synthesize_scalar

logger = logging.getLogger(__name__)

PATH_KEY = "path"
QUERY_KEY = "query"
MAP_EXAMPLE_KEY = "string"


class _Absent(Enum):
    TOKEN = "absent"

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _Absent.TOKEN
"""Returned when no example exists and none may be synthesized."""


def _authored(value: Any) -> Any:
    return value if has_example(value) else ABSENT


class ExampleSynthesizer:
    """Builds example value trees, preferring authored examples over synthesis.

    With ``generate_missing_examples`` disabled only authored examples are
    returned. Expansion tracks the definitions on the active call path, so a
    definition that refers back to itself is omitted at the point of
    re-entry instead of recursing forever.
    """

    def __init__(
        self,
        resolver: ReferenceResolver,
        merger: CompositionMerger | None = None,
        *,
        generate_missing_examples: bool = True,
    ):
        self._resolver = resolver
        self._merger = merger or CompositionMerger(resolver)
        self._generate = generate_missing_examples

    @property
    def generate_missing_examples(self) -> bool:
        return self._generate

    def example_for_responses(self, operation: ApiOperation) -> dict[str, Any]:
        """Return examples keyed by response status."""
        examples: dict[str, Any] = {}
        for status, response in operation.responses.items():
            example = _authored(response.examples)
            if example is ABSENT and response.schema is not None:
                example = self.example_for_schema(response.schema)
            if example is not ABSENT:
                examples[status] = example
        return examples

    def example_for_request(self, operation: ApiOperation) -> dict[str, Any]:
        """Return examples keyed by parameter location.

        ``path`` holds the path template with path parameters substituted and
        ``query`` collects every query parameter into one mapping.
        """
        examples: dict[str, Any] = {}
        if self._generate:
            examples[PATH_KEY] = operation.path

        for parameter in operation.parameters:
            example: Any = ABSENT
            if isinstance(parameter, BodyParameter):
                example = _authored(parameter.examples)
                if example is ABSENT and parameter.schema is not None:
                    example = self.example_for_schema(parameter.schema)
            elif isinstance(parameter, SerializableParameter):
                if not self._generate:
                    continue
                value = self._serializable_example(parameter)
                if parameter.location == PATH_KEY:
                    template = examples.get(PATH_KEY, operation.path)
                    example = template.replace(f"{{{parameter.name}}}", _path_segment(value))
                elif parameter.location == QUERY_KEY:
                    query = examples.get(QUERY_KEY)
                    if not isinstance(query, dict):
                        query = {}
                    query[parameter.name] = value
                    example = query
                else:
                    example = value
            elif isinstance(parameter, RefParameter):
                example = self.example_for_schema(RefSchema(target=parameter.target))
            else:
                logger.debug("Unrecognized parameter: %r", parameter)

            if example is not ABSENT:
                examples[parameter.location] = example
        return examples

    def example_for_schema(self, fragment: SchemaFragment) -> Any:
        """Return the example for a fragment, or ABSENT."""
        return self._example(fragment, frozenset())

    def _example(self, fragment: SchemaFragment | None, expanding: frozenset[str]) -> Any:
        if fragment is None:
            return ABSENT
        example = _authored(getattr(fragment, "example", ABSENT))
        if example is not ABSENT:
            return example

        if isinstance(fragment, RefSchema):
            if fragment.target in expanding:
                logger.debug("Skipping recursive reference to %s", fragment.target)
                return ABSENT
            resolved = self._resolver.resolve(fragment.target)
            if resolved is None:
                return ABSENT
            return self._example(resolved, expanding | {fragment.target})

        if not self._generate:
            return ABSENT

        if isinstance(fragment, ComposedSchema):
            merged = self._merger.merge_properties(fragment, expanding=expanding)
            if merged is None:
                return ABSENT
            return self._example_map(merged, expanding)
        if isinstance(fragment, ArraySchema):
            if fragment.properties is not None:
                return [self._example_map(fragment.properties, expanding)]
            item = self._example(fragment.items, expanding)
            return ABSENT if item is ABSENT else [item]
        if isinstance(fragment, MapSchema):
            value = self._example(fragment.values, expanding)
            return ABSENT if value is ABSENT else {MAP_EXAMPLE_KEY: value}
        if isinstance(fragment, ObjectSchema):
            return self._example_map(fragment.properties, expanding)
        if isinstance(fragment, (EnumSchema, PrimitiveSchema)):
            return synthesize_scalar(fragment.kind)

        logger.debug("Unrecognized schema fragment: %r", fragment)
        return ABSENT

    def _example_map(
        self, properties: Mapping[str, SchemaFragment], expanding: frozenset[str]
    ) -> dict[str, Any]:
        examples: dict[str, Any] = {}
        for name, property_fragment in properties.items():
            example = self._example(property_fragment, expanding)
            if example is not ABSENT:
                examples[name] = example
        return examples

    def _serializable_example(self, parameter: SerializableParameter) -> Any:
        example = _authored(parameter.example)
        if example is ABSENT and parameter.items is not None:
            example = self.example_for_schema(parameter.items)
        if example is ABSENT:
            example = synthesize_scalar(parameter.kind)
        return example


def _path_segment(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
