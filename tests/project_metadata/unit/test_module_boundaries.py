"""Tests for import boundaries between the core packages and the outer surfaces."""

from __future__ import annotations

import ast
from pathlib import Path

import pytest

CORE_PACKAGES = (
    "schema_graph",
    "reference_resolution",
    "type_projection",
    "composition",
    "example_synthesis",
    "document_hooks",
    "operation_overview",
)
FORBIDDEN_PREFIXES = (
    "api_schema_docs.cli",
    "api_schema_docs.catalog_export",
    "click",
    "openpyxl",
)


def _package_root() -> Path:
    return Path(__file__).resolve().parents[3] / "src" / "api_schema_docs"


def _imported_modules(path: Path) -> set[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"))
    modules: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            modules.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
            modules.add(node.module)
    return modules


@pytest.mark.parametrize("package", CORE_PACKAGES)
def test_core_packages_do_not_import_outer_surfaces(package: str) -> None:
    for path in sorted((_package_root() / package).glob("*.py")):
        for module in _imported_modules(path):
            assert not module.startswith(FORBIDDEN_PREFIXES), f"{path.name} imports {module}"
