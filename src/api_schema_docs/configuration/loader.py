"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    Configuration,
    DefinitionOrdering,
    ExampleSettings,
    OrderingSettings,
    ReferenceSettings,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str | None) -> Configuration:
    """Load and validate the configuration file; ``None`` yields the defaults."""
    if config_path is None:
        return Configuration()

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return Configuration(
        path=path,
        examples=_parse_examples_section(parsed.get("examples")),
        references=_parse_references_section(parsed.get("references")),
        ordering=_parse_ordering_section(parsed.get("ordering")),
    )


def _parse_examples_section(value: Any) -> ExampleSettings:
    section = _optional_mapping(value, "examples")
    generate_missing = _require_bool(
        section.get("generate_missing", True), "examples.generate_missing"
    )
    return ExampleSettings(generate_missing=generate_missing)


def _parse_references_section(value: Any) -> ReferenceSettings:
    section = _optional_mapping(value, "references")
    separated = _require_bool(
        section.get("separated_definitions", False), "references.separated_definitions"
    )
    inter_document = _require_bool(
        section.get("inter_document_cross_references", False),
        "references.inter_document_cross_references",
    )
    definitions_document = _require_non_empty_string(
        section.get("definitions_document", "definitions"), "references.definitions_document"
    )
    extension = _require_non_empty_string(
        section.get("document_extension", ".md"), "references.document_extension"
    )
    if not extension.startswith("."):
        extension = f".{extension}"
    return ReferenceSettings(
        separated_definitions=separated,
        inter_document_cross_references=inter_document,
        definitions_document=definitions_document,
        document_extension=extension,
    )


def _parse_ordering_section(value: Any) -> OrderingSettings:
    section = _optional_mapping(value, "ordering")
    raw = _require_non_empty_string(
        section.get("definitions", DefinitionOrdering.NATURAL.value), "ordering.definitions"
    ).lower()
    try:
        ordering = DefinitionOrdering(raw)
    except ValueError as exc:
        allowed = ", ".join(item.value for item in DefinitionOrdering)
        raise ConfigurationError(f"ordering.definitions must be one of: {allowed}.") from exc
    return OrderingSettings(definitions=ordering)


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
