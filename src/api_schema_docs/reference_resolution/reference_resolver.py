"""Reference resolution service."""

from __future__ import annotations

import logging
from collections.abc import Callable

from api_schema_docs.schema_graph.schema_models import SchemaFragment, SchemaGraph

logger = logging.getLogger(__name__)

DefinitionLocator = Callable[[str], str]


def same_document_locator(_name: str) -> str:
    """Locate every definition inside the current document."""
    return ""


class ReferenceResolver:
    """Resolves definition names against a schema graph and locates their documents."""

    def __init__(self, graph: SchemaGraph, locator: DefinitionLocator = same_document_locator):
        self._graph = graph
        self._locator = locator

    @property
    def graph(self) -> SchemaGraph:
        return self._graph

    def resolve(self, name: str) -> SchemaFragment | None:
        """Return the named definition, or None when the graph does not declare it."""
        fragment = self._graph.get(name)
        if fragment is None:
            logger.debug("Unresolved definition reference: %s", name)
        return fragment

    def locate(self, name: str) -> str:
        """Return the document location the named definition is rendered under."""
        return self._locator(name)
