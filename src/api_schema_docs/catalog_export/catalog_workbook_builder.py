"""Excel catalog export of definition types and operation examples."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from api_schema_docs.operation_overview.overview_models import (
    DefinitionOverview,
    DocumentOverview,
    OperationOverview,
)

from .constants import (
    DEFINITION_COLUMNS,
    DEFINITIONS_SHEET_NAME,
    INFO_SHEET_NAME,
    OPERATION_COLUMNS,
    OPERATIONS_SHEET_NAME,
)


def export_catalog_workbook(document: DocumentOverview, output_path: Path | str) -> Path:
    """Write definitions and operations of a document overview into a workbook."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = DEFINITIONS_SHEET_NAME

    _write_header(sheet, DEFINITION_COLUMNS)
    _write_definition_rows(sheet, document.definitions)

    operations_sheet = workbook.create_sheet(OPERATIONS_SHEET_NAME)
    _write_header(operations_sheet, OPERATION_COLUMNS)
    _write_operation_rows(operations_sheet, document.operations)

    _write_info_sheet(workbook, document)

    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(destination)
    return destination.resolve()


def _write_header(sheet: Worksheet, columns: Sequence[str]) -> None:
    for column_index, name in enumerate(columns, start=1):
        cell = sheet.cell(row=1, column=column_index, value=name)
        cell.style = "Headline 3"
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            14, min(len(name) + 10, 48)
        )
    sheet.freeze_panes = "A2"


def _write_definition_rows(sheet: Worksheet, definitions: Sequence[DefinitionOverview]) -> None:
    row = 2
    for definition in definitions:
        sheet.cell(row=row, column=1, value=definition.name)
        sheet.cell(row=row, column=3, value=definition.type_signature)
        sheet.cell(row=row, column=4, value=_json_text(definition.example))
        row += 1
        for property_row in definition.properties:
            sheet.cell(row=row, column=1, value=definition.name)
            sheet.cell(row=row, column=2, value=property_row.name)
            sheet.cell(row=row, column=3, value=property_row.type_signature)
            row += 1


def _write_operation_rows(sheet: Worksheet, operations: Sequence[OperationOverview]) -> None:
    for row_index, operation in enumerate(operations, start=2):
        parameters = ", ".join(
            f"{parameter.name} ({parameter.location}): {parameter.type_signature}"
            for parameter in operation.parameters
        )
        values = (
            operation.method,
            operation.path,
            parameters,
            _json_text(operation.request_example),
            _json_text(operation.response_examples),
        )
        for column_index, value in enumerate(values, start=1):
            sheet.cell(row=row_index, column=column_index, value=value)


def _write_info_sheet(workbook: Workbook, document: DocumentOverview) -> None:
    sheet = workbook.create_sheet(INFO_SHEET_NAME)
    entries = [
        ("title", document.title),
        ("version", document.version),
        ("operations", len(document.operations)),
        ("definitions", len(document.definitions)),
    ]
    for row_index, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row_index, column=1, value=key)
        sheet.cell(row=row_index, column=2, value=value)


def _json_text(value: Any) -> str | None:
    if value is None:
        return None
    return json.dumps(value, ensure_ascii=False, default=str)
