"""Reference resolution tests."""

from __future__ import annotations

import logging

import pytest
from api_schema_docs.configuration.runtime_settings import ReferenceSettings
from api_schema_docs.reference_resolution.document_locations import build_definition_locator
from api_schema_docs.reference_resolution.reference_resolver import ReferenceResolver
from api_schema_docs.schema_graph.schema_models import ObjectSchema, SchemaGraph


def test_resolve_returns_named_definition() -> None:
    pet = ObjectSchema()
    resolver = ReferenceResolver(SchemaGraph({"Pet": pet}))

    assert resolver.resolve("Pet") is pet


def test_resolve_missing_definition_returns_none_and_logs(
    caplog: pytest.LogCaptureFixture,
) -> None:
    resolver = ReferenceResolver(SchemaGraph())

    with caplog.at_level(logging.DEBUG, logger="api_schema_docs"):
        assert resolver.resolve("Ghost") is None

    assert "Ghost" in caplog.text


def test_locate_uses_injected_function_even_for_unknown_names() -> None:
    resolver = ReferenceResolver(SchemaGraph(), lambda name: f"models/{name.lower()}.adoc")

    assert resolver.locate("Ghost") == "models/ghost.adoc"


def test_default_locator_points_to_current_document() -> None:
    assert ReferenceResolver(SchemaGraph()).locate("Pet") == ""


@pytest.mark.parametrize(
    ("settings", "expected"),
    [
        (ReferenceSettings(), ""),
        (ReferenceSettings(inter_document_cross_references=True), "definitions.md"),
        (
            ReferenceSettings(separated_definitions=True, document_extension=".adoc"),
            "definitions/Pet.adoc",
        ),
        (
            ReferenceSettings(separated_definitions=True, definitions_document="models"),
            "models/Pet.md",
        ),
    ],
)
def test_definition_locator_follows_reference_settings(
    settings: ReferenceSettings, expected: str
) -> None:
    assert build_definition_locator(settings)("Pet") == expected


def test_separated_locator_sanitizes_file_names() -> None:
    locator = build_definition_locator(ReferenceSettings(separated_definitions=True))

    assert locator("Map<String,Pet>") == "definitions/Map_String_Pet_.md"
