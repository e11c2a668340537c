"""Ordered extension callbacks invoked at named document positions."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from api_schema_docs.schema_graph.api_models import ApiOperation

if TYPE_CHECKING:
    from api_schema_docs.operation_overview.overview_models import (
        DefinitionOverview,
        OperationOverview,
    )


class HookPosition(str, Enum):
    """Positions at which extensions may contribute content."""

    DOCUMENT_BEFORE = "document_before"
    DOCUMENT_BEGIN = "document_begin"
    OPERATION_BEFORE = "operation_before"
    OPERATION_AFTER = "operation_after"
    DEFINITION_BEFORE = "definition_before"
    DEFINITION_AFTER = "definition_after"
    DOCUMENT_END = "document_end"
    DOCUMENT_AFTER = "document_after"


@dataclass(frozen=True)
class HookContext:
    """Data handed to every callback registered for a position."""

    position: HookPosition
    operation: ApiOperation | None = None
    definition_name: str | None = None
    overview: OperationOverview | DefinitionOverview | None = None


HookCallback = Callable[[HookContext], Any]


class HookRegistry:
    """Callbacks grouped by position, invoked in registration order."""

    def __init__(self) -> None:
        self._callbacks: dict[HookPosition, list[HookCallback]] = {}

    def register(self, position: HookPosition, callback: HookCallback) -> None:
        self._callbacks.setdefault(position, []).append(callback)

    def callbacks_for(self, position: HookPosition) -> tuple[HookCallback, ...]:
        return tuple(self._callbacks.get(position, ()))

    def apply(self, context: HookContext) -> list[Any]:
        """Invoke the callbacks of the context's position and collect their results.

        Callbacks returning None contribute nothing.
        """
        contributions = []
        for callback in self.callbacks_for(context.position):
            result = callback(context)
            if result is not None:
                contributions.append(result)
        return contributions
