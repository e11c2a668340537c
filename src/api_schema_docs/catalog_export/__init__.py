"""Catalog export exports."""

from .catalog_workbook_builder import export_catalog_workbook
from .constants import (
    DEFINITION_COLUMNS,
    DEFINITIONS_SHEET_NAME,
    INFO_SHEET_NAME,
    OPERATION_COLUMNS,
    OPERATIONS_SHEET_NAME,
)

__all__ = [
    "DEFINITION_COLUMNS",
    "DEFINITIONS_SHEET_NAME",
    "INFO_SHEET_NAME",
    "OPERATION_COLUMNS",
    "OPERATIONS_SHEET_NAME",
    "export_catalog_workbook",
]
