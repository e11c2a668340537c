"""Display signature rendering for projected types."""

from __future__ import annotations

from collections.abc import Callable

from .type_models import ArrayType, BasicType, EnumType, MapType, ObjectType, RefType, SchemaType

CrossReference = Callable[[str, str, str], str]
"""Builds a hyperlink from ``(document_location, anchor, label)``."""


def markdown_cross_reference(document_location: str, anchor: str, label: str) -> str:
    """Render a Markdown link to an anchor, optionally inside another document."""
    return f"[{label}]({document_location}#{anchor.lower()})"


def plain_cross_reference(_document_location: str, _anchor: str, label: str) -> str:
    return label


def render_type(
    schema_type: SchemaType, cross_reference: CrossReference = markdown_cross_reference
) -> str:
    """Return the display signature of a type.

    References are rendered as links and never expanded, so repeated
    rendering of the same type always yields the same text.
    """
    if isinstance(schema_type, BasicType):
        if schema_type.format:
            return f"{schema_type.primitive_kind} ({schema_type.format})"
        return schema_type.primitive_kind
    if isinstance(schema_type, EnumType):
        return f"enum ({', '.join(schema_type.allowed_values)})"
    if isinstance(schema_type, ArrayType):
        inner = render_type(schema_type.element_type, cross_reference)
        if schema_type.collection_format:
            return f"< {inner} > array({schema_type.collection_format})"
        return f"< {inner} > array"
    if isinstance(schema_type, MapType):
        return f"< {render_type(schema_type.value_type, cross_reference)} > map"
    if isinstance(schema_type, RefType):
        return cross_reference(
            schema_type.document_location, schema_type.unique_name, schema_type.name
        )
    if isinstance(schema_type, ObjectType):
        return schema_type.name
    raise TypeError(f"Unsupported type: {type(schema_type).__name__}")
