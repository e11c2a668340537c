"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from api_schema_docs.configuration.loader import ConfigurationError, load_configuration
from api_schema_docs.configuration.runtime_settings import Configuration, DefinitionOrdering


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_missing_path_yields_defaults() -> None:
    configuration = load_configuration(None)

    assert configuration == Configuration()
    assert configuration.examples.generate_missing is True
    assert configuration.references.separated_definitions is False
    assert configuration.references.document_extension == ".md"
    assert configuration.ordering.definitions is DefinitionOrdering.NATURAL


def test_loads_yaml_configuration(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml",
        """
examples:
  generate_missing: false
references:
  separated_definitions: true
  definitions_document: "models"
  document_extension: "adoc"
ordering:
  definitions: "AS-IS"
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.examples.generate_missing is False
    assert configuration.references.separated_definitions is True
    assert configuration.references.inter_document_cross_references is False
    assert configuration.references.definitions_document == "models"
    assert configuration.references.document_extension == ".adoc"
    assert configuration.ordering.definitions is DefinitionOrdering.AS_IS


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "")

    configuration = load_configuration(config_path)

    assert configuration.examples == Configuration().examples
    assert configuration.references == Configuration().references


def test_loads_json_configuration(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.json",
        json.dumps({"references": {"inter_document_cross_references": True}}),
    )

    configuration = load_configuration(config_path)

    assert configuration.references.inter_document_cross_references is True


def test_errors_when_file_is_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "absent.yaml")


def test_errors_when_configuration_root_is_not_mapping(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "[]")

    with pytest.raises(ConfigurationError, match="Configuration root must be a mapping"):
        load_configuration(config_path)


@pytest.mark.parametrize(
    ("config", "message"),
    [
        ({"examples": "yes"}, "Configuration section 'examples' must be a mapping"),
        ({"examples": {"generate_missing": "yes"}}, "examples.generate_missing must be a boolean"),
        (
            {"references": {"separated_definitions": 1}},
            "references.separated_definitions must be a boolean",
        ),
        ({"references": {"definitions_document": 3}}, "must be a string"),
        ({"references": {"document_extension": " "}}, "must not be empty"),
        ({"ordering": {"definitions": "random"}}, "must be one of: natural, as-is"),
    ],
)
def test_errors_when_values_are_invalid(tmp_path: Path, config: dict, message: str) -> None:
    config_path = _write_file(tmp_path / "config.yaml", json.dumps(config))

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)
