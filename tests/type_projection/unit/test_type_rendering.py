"""Type signature rendering tests."""

from __future__ import annotations

import pytest
from api_schema_docs.reference_resolution.reference_resolver import ReferenceResolver
from api_schema_docs.schema_graph.schema_models import (
    ArraySchema,
    MapSchema,
    PrimitiveSchema,
    RefSchema,
    SchemaGraph,
)
from api_schema_docs.type_projection.type_models import (
    ArrayType,
    BasicType,
    EnumType,
    MapType,
    ObjectType,
    RefType,
)
from api_schema_docs.type_projection.type_projector import TypeProjector
from api_schema_docs.type_projection.type_rendering import plain_cross_reference, render_type


@pytest.mark.parametrize(
    ("kind", "value_format", "expected"),
    [
        ("string", None, "string"),
        ("integer", "int64", "integer (int64)"),
        ("number", "double", "number (double)"),
        ("boolean", None, "boolean"),
    ],
)
def test_basic_type_renders_kind_and_format(
    kind: str, value_format: str | None, expected: str
) -> None:
    projector = TypeProjector(ReferenceResolver(SchemaGraph()))

    rendered = render_type(projector.project(PrimitiveSchema(kind=kind, format=value_format)))

    assert rendered == expected


def test_enum_renders_allowed_values_in_order() -> None:
    assert render_type(EnumType(allowed_values=("sold", "available"))) == "enum (sold, available)"


def test_array_wraps_inner_signature() -> None:
    array_type = ArrayType(element_type=BasicType(primitive_kind="integer", format="int32"))

    assert render_type(array_type) == "< integer (int32) > array"


def test_array_appends_collection_format_only_when_present() -> None:
    with_format = ArrayType(element_type=BasicType(primitive_kind="string"), collection_format="csv")
    without_format = ArrayType(element_type=BasicType(primitive_kind="string"))

    assert render_type(with_format) == "< string > array(csv)"
    assert render_type(without_format) == "< string > array"


def test_nested_collections_render_recursively() -> None:
    projector = TypeProjector(ReferenceResolver(SchemaGraph()))
    fragment = ArraySchema(items=MapSchema(values=ArraySchema(items=PrimitiveSchema("boolean"))))

    assert render_type(projector.project(fragment)) == "< < < boolean > array > map > array"


def test_map_renders_value_signature() -> None:
    map_type = MapType(value_type=BasicType(primitive_kind="string"))

    assert render_type(map_type) == "< string > map"


def test_object_renders_its_name() -> None:
    assert render_type(ObjectType(name="Order")) == "Order"


def test_reference_renders_link_without_expansion() -> None:
    resolver = ReferenceResolver(SchemaGraph(), lambda _name: "definitions.md")
    ref_type = TypeProjector(resolver).project(RefSchema(target="Pet"))

    first = render_type(ref_type)
    second = render_type(ref_type)

    assert first == "[Pet](definitions.md#pet)"
    assert first == second


def test_reference_in_same_document_links_to_anchor() -> None:
    ref_type = RefType(target_name="Pet", document_location="")

    assert render_type(ArrayType(element_type=ref_type)) == "< [Pet](#pet) > array"


def test_cross_reference_formatter_is_pluggable() -> None:
    ref_type = RefType(target_name="Pet", document_location="definitions.md")

    assert render_type(ref_type, plain_cross_reference) == "Pet"
    assert (
        render_type(ref_type, lambda location, anchor, label: f"<<{location}#{anchor},{label}>>")
        == "<<definitions.md#Pet,Pet>>"
    )
