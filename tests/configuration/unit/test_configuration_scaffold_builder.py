"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from api_schema_docs.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from api_schema_docs.configuration.loader import load_configuration
from api_schema_docs.configuration.runtime_settings import Configuration


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Configuration template for api-schema-docs" in scaffold
    assert "examples:" in scaffold
    assert "generate_missing:" in scaffold
    assert "references:" in scaffold
    assert "separated_definitions:" in scaffold
    assert "ordering:" in scaffold


def test_written_scaffold_loads_as_defaults(tmp_path: Path) -> None:
    output_path = tmp_path / "config.yaml"

    written_path = write_placeholder_configuration(output_path)
    configuration = load_configuration(written_path)

    assert written_path == output_path.resolve()
    assert configuration.examples == Configuration().examples
    assert configuration.references == Configuration().references
    assert configuration.ordering == Configuration().ordering


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "config.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
