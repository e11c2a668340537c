"""Definition document location policies."""

from __future__ import annotations

from api_schema_docs.configuration.runtime_settings import ReferenceSettings

from .reference_resolver import DefinitionLocator, same_document_locator


def build_definition_locator(settings: ReferenceSettings) -> DefinitionLocator:
    """Return the name-to-document function matching the reference settings."""
    extension = settings.document_extension
    if settings.separated_definitions:
        folder = settings.definitions_document

        def separated_locator(name: str) -> str:
            return f"{folder}/{_file_safe(name)}{extension}"

        return separated_locator

    if settings.inter_document_cross_references:
        document = f"{settings.definitions_document}{extension}"

        def shared_locator(_name: str) -> str:
            return document

        return shared_locator

    return same_document_locator


def _file_safe(name: str) -> str:
    return "".join(char if char.isalnum() or char in "-_." else "_" for char in name)
