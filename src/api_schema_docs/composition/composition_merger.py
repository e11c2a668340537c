"""Property merging for composed (``allOf``) schemas."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from api_schema_docs.reference_resolution.reference_resolver import ReferenceResolver
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

logger = logging.getLogger(__name__)

PropertyMap = dict[str, SchemaFragment]


class CompositionMerger:
    """Computes the effective property set of composed schemas."""

    def __init__(self, resolver: ReferenceResolver):
        self._resolver = resolver

    def merge_properties(
        self, composed: ComposedSchema, *, expanding: frozenset[str] = frozenset()
    ) -> PropertyMap | None:
        """Overlay child properties onto the parent's.

        Returns None when the parent cannot be resolved or declares no
        properties. Parent properties keep their order, the child wins on
        name collisions and its new properties are appended.
        ``expanding`` holds the definition names already being expanded.
        """
        parent_properties = self.properties_of(composed.parent, expanding=expanding)
        if not parent_properties:
            logger.debug("Composed schema has no usable parent properties")
            return None

        merged: PropertyMap = dict(parent_properties)
        child_properties = self.properties_of(composed.child, expanding=expanding)
        if child_properties:
            merged.update(child_properties)
        return merged

    def properties_of(
        self, fragment: SchemaFragment | None, *, expanding: frozenset[str] = frozenset()
    ) -> Mapping[str, SchemaFragment] | None:
        """Return the declared properties of a fragment, following references."""
        if fragment is None:
            return None
        if isinstance(fragment, RefSchema):
            if fragment.target in expanding:
                logger.debug("Skipping recursive composition through %s", fragment.target)
                return None
            resolved = self._resolver.resolve(fragment.target)
            return self.properties_of(resolved, expanding=expanding | {fragment.target})
        if isinstance(fragment, ObjectSchema):
            return fragment.properties
        if isinstance(fragment, ArraySchema):
            return fragment.properties
        if isinstance(fragment, ComposedSchema):
            return self.merge_properties(fragment, expanding=expanding)
        if isinstance(fragment, (PrimitiveSchema, EnumSchema, MapSchema)):
            return None
        logger.debug("Unrecognized schema fragment: %r", fragment)
        return None

    def discriminator_of(
        self, composed: ComposedSchema, *, expanding: frozenset[str] = frozenset()
    ) -> str | None:
        """Return the discriminator declared on the composed shape or its parts."""
        if composed.discriminator:
            return composed.discriminator
        for part in (composed.parent, composed.child):
            discriminator = self._declared_discriminator(part, expanding)
            if discriminator:
                return discriminator
        return None

    def _declared_discriminator(
        self, fragment: SchemaFragment | None, expanding: frozenset[str]
    ) -> str | None:
        if isinstance(fragment, RefSchema):
            if fragment.target in expanding:
                return None
            resolved = self._resolver.resolve(fragment.target)
            return self._declared_discriminator(resolved, expanding | {fragment.target})
        if isinstance(fragment, ObjectSchema):
            return fragment.discriminator
        if isinstance(fragment, ComposedSchema):
            return self.discriminator_of(fragment, expanding=expanding)
        return None
