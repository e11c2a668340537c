"""Shared catalog export constants."""

from __future__ import annotations

DEFINITIONS_SHEET_NAME = "Definitions"
OPERATIONS_SHEET_NAME = "Operations"
INFO_SHEET_NAME = "Info"

DEFINITION_COLUMNS: tuple[str, ...] = ("Definition", "Property", "Type", "Example")
OPERATION_COLUMNS: tuple[str, ...] = (
    "Method",
    "Path",
    "Parameters",
    "Request example",
    "Response example",
)
