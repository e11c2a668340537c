"""Example synthesis over the bundled petstore specification."""

from __future__ import annotations

from pathlib import Path

from api_schema_docs.example_synthesis.example_synthesizer import ExampleSynthesizer
from api_schema_docs.reference_resolution.reference_resolver import ReferenceResolver
from api_schema_docs.schema_graph.schema_models import RefSchema
from api_schema_docs.schema_graph.spec_loader import load_specification

SAMPLE_PATH = Path(__file__).resolve().parents[3] / "samples" / "petstore.yaml"


def _load():
    specification = load_specification(SAMPLE_PATH)
    synthesizer = ExampleSynthesizer(ReferenceResolver(specification.graph))
    operations = {
        (operation.method, operation.path): operation for operation in specification.operations
    }
    return synthesizer, operations


def test_list_pets_examples() -> None:
    synthesizer, operations = _load()
    list_pets = operations[("GET", "/pets")]

    assert synthesizer.example_for_request(list_pets) == {
        "path": "/pets",
        "query": {"limit": 0, "status": "string"},
    }
    assert synthesizer.example_for_responses(list_pets) == {
        "200": [
            {
                "id": 0,
                "name": "string",
                "petType": "string",
                "tags": [{"id": 0, "label": "friendly"}],
            }
        ],
        "default": {"code": 0, "message": "string"},
    }


def test_show_pet_examples_merge_composed_definition() -> None:
    synthesizer, operations = _load()
    show_pet = operations[("GET", "/pets/{petId}")]

    assert synthesizer.example_for_request(show_pet) == {
        "path": "/pets/0",
        "header": "string",
    }
    responses = synthesizer.example_for_responses(show_pet)
    assert responses["200"] == {
        "id": 0,
        "name": "string",
        "petType": "string",
        "tags": [{"id": 0, "label": "friendly"}],
        "huntingSkill": "string",
        "attributes": {"string": 0},
    }
    assert responses["404"] == {"application/json": {"code": 404, "message": "Pet not found"}}


def test_create_pet_body_example() -> None:
    synthesizer, operations = _load()

    assert synthesizer.example_for_request(operations[("POST", "/pets")])["body"] == {
        "id": 0,
        "name": "string",
        "petType": "string",
        "tags": [{"id": 0, "label": "friendly"}],
    }


def test_self_referencing_definition_terminates() -> None:
    synthesizer, _operations = _load()

    assert synthesizer.example_for_schema(RefSchema(target="TreeNode")) == {"value": "string"}
