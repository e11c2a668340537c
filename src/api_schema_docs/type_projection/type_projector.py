"""Projection of schema fragments and parameters onto display types."""

from __future__ import annotations

from api_schema_docs.composition.composition_merger import CompositionMerger
from api_schema_docs.reference_resolution.reference_resolver import ReferenceResolver
from api_schema_docs.schema_graph.api_models import (
    BodyParameter,
    Parameter,
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
)

from .type_models import (
    ArrayType,
    BasicType,
    EnumType,
    MapType,
    ObjectType,
    ObjectTypePolymorphism,
    PolymorphismNature,
    RefType,
    SchemaType,
)

ANONYMOUS_OBJECT_NAME = "object"
UNTYPED_KIND = "untyped"


class TypeProjectionError(Exception):
    """Raised when a value outside the fragment union reaches the projector."""


class TypeProjector:
    """Converts raw fragments into display types without expanding references."""

    def __init__(self, resolver: ReferenceResolver, merger: CompositionMerger | None = None):
        self._resolver = resolver
        self._merger = merger or CompositionMerger(resolver)

    def project(self, fragment: SchemaFragment, name: str | None = None) -> SchemaType:
        """Project a fragment; ``name`` names object shapes such as definitions."""
        if isinstance(fragment, RefSchema):
            return RefType(
                target_name=fragment.target,
                document_location=self._resolver.locate(fragment.target),
            )
        if isinstance(fragment, EnumSchema):
            return EnumType(allowed_values=fragment.allowed_values)
        if isinstance(fragment, PrimitiveSchema):
            return BasicType(primitive_kind=fragment.kind or UNTYPED_KIND, format=fragment.format)
        if isinstance(fragment, ArraySchema):
            return ArrayType(
                element_type=self._project_items(fragment.items),
                collection_format=fragment.collection_format,
            )
        if isinstance(fragment, MapSchema):
            return MapType(value_type=self.project(fragment.values))
        if isinstance(fragment, ComposedSchema):
            discriminator = self._merger.discriminator_of(fragment)
            nature = (
                PolymorphismNature.INHERITANCE
                if discriminator
                else PolymorphismNature.COMPOSITION
            )
            return ObjectType(
                name=name or fragment.title or ANONYMOUS_OBJECT_NAME,
                polymorphism=ObjectTypePolymorphism(nature=nature, discriminator=discriminator),
            )
        if isinstance(fragment, ObjectSchema):
            return ObjectType(name=name or fragment.title or ANONYMOUS_OBJECT_NAME)
        raise TypeProjectionError(f"Unsupported schema fragment: {type(fragment).__name__}")

    def project_definition(self, name: str) -> SchemaType | None:
        """Project the named definition, or None when it does not exist."""
        fragment = self._resolver.resolve(name)
        if fragment is None:
            return None
        return self.project(fragment, name=name)

    def project_parameter(self, parameter: Parameter) -> SchemaType:
        """Project a request parameter onto its display type."""
        if isinstance(parameter, BodyParameter):
            if parameter.schema is None:
                return BasicType(primitive_kind="string")
            return self.project(parameter.schema)
        if isinstance(parameter, SerializableParameter):
            if parameter.kind == "array":
                return ArrayType(
                    element_type=self._project_items(parameter.items),
                    collection_format=parameter.collection_format,
                )
            if parameter.allowed_values:
                return EnumType(allowed_values=parameter.allowed_values)
            return BasicType(primitive_kind=parameter.kind or UNTYPED_KIND, format=parameter.format)
        if isinstance(parameter, RefParameter):
            return RefType(
                target_name=parameter.target,
                document_location=self._resolver.locate(parameter.target),
            )
        raise TypeProjectionError(f"Unsupported parameter: {type(parameter).__name__}")

    def _project_items(self, items: SchemaFragment | None) -> SchemaType:
        if items is None:
            return BasicType(primitive_kind="string")
        return self.project(items)
