"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "api-schema-docs.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for api-schema-docs.
# Every section is optional; the values below are the defaults.

examples:
  # Synthesize placeholder examples when the specification has none.
  # When false only authored examples are shown.
  generate_missing: true

references:
  # Render each definition into its own document (definitions/<Name>.md).
  separated_definitions: false
  # Link definitions across documents instead of within the same document.
  inter_document_cross_references: false
  definitions_document: "definitions"
  document_extension: ".md"

ordering:
  # Either "natural" (sorted by name) or "as-is" (declaration order).
  definitions: "natural"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
