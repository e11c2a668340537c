"""Operation overview exports."""

from .overview_builder import OverviewBuilder, create_overview_builder, order_definitions
from .overview_models import (
    DefinitionOverview,
    DocumentOverview,
    OperationOverview,
    ParameterRow,
    PropertyRow,
    ResponseRow,
)

__all__ = [
    "DefinitionOverview",
    "DocumentOverview",
    "OperationOverview",
    "ParameterRow",
    "PropertyRow",
    "ResponseRow",
    "OverviewBuilder",
    "create_overview_builder",
    "order_definitions",
]
