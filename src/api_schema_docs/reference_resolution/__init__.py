"""Reference resolution exports."""

from .document_locations import build_definition_locator
from .reference_resolver import DefinitionLocator, ReferenceResolver, same_document_locator

__all__ = [
    "DefinitionLocator",
    "ReferenceResolver",
    "build_definition_locator",
    "same_document_locator",
]
