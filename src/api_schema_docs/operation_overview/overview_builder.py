"""Assembly of operation and definition overviews from projected types and examples."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from typing import Any

from api_schema_docs.composition.composition_merger import CompositionMerger
from api_schema_docs.configuration.runtime_settings import Configuration, DefinitionOrdering
from api_schema_docs.document_hooks.hook_registry import HookContext, HookPosition, HookRegistry
from api_schema_docs.example_synthesis.example_synthesizer import ABSENT, ExampleSynthesizer
from api_schema_docs.reference_resolution.document_locations import build_definition_locator
from api_schema_docs.reference_resolution.reference_resolver import ReferenceResolver
from api_schema_docs.schema_graph.api_models import (
    ApiOperation,
    ApiSpecification,
    Parameter,
    RefParameter,
    SerializableParameter,
)
from api_schema_docs.schema_graph.schema_models import RefSchema, SchemaGraph, has_example
from api_schema_docs.type_projection.type_models import SchemaType
from api_schema_docs.type_projection.type_projector import TypeProjector
from api_schema_docs.type_projection.type_rendering import (
    CrossReference,
    markdown_cross_reference,
    render_type,
)

from .overview_models import (
    DefinitionOverview,
    DocumentOverview,
    OperationOverview,
    ParameterRow,
    PropertyRow,
    ResponseRow,
)


def order_definitions(names: Iterable[str], ordering: DefinitionOrdering) -> list[str]:
    """Return definition names in the configured order."""
    if ordering is DefinitionOrdering.NATURAL:
        return sorted(names)
    return list(names)


class OverviewBuilder:
    """Combines type signatures and examples per operation and definition."""

    def __init__(
        self,
        merger: CompositionMerger,
        projector: TypeProjector,
        synthesizer: ExampleSynthesizer,
        *,
        hooks: HookRegistry | None = None,
        cross_reference: CrossReference = markdown_cross_reference,
    ):
        self._merger = merger
        self._projector = projector
        self._synthesizer = synthesizer
        self._hooks = hooks or HookRegistry()
        self._cross_reference = cross_reference

    def operation_overview(self, operation: ApiOperation) -> OperationOverview:
        before = self._hooks.apply(
            HookContext(position=HookPosition.OPERATION_BEFORE, operation=operation)
        )
        overview = OperationOverview(
            method=operation.method,
            path=operation.path,
            summary=operation.summary,
            parameters=tuple(self._parameter_row(parameter) for parameter in operation.parameters),
            responses=tuple(
                ResponseRow(
                    status=status,
                    description=response.description,
                    type_signature=(
                        self._render(self._projector.project(response.schema))
                        if response.schema is not None
                        else None
                    ),
                )
                for status, response in operation.responses.items()
            ),
            request_example=self._synthesizer.example_for_request(operation),
            response_examples=self._synthesizer.example_for_responses(operation),
        )
        after = self._hooks.apply(
            HookContext(
                position=HookPosition.OPERATION_AFTER, operation=operation, overview=overview
            )
        )
        return replace(overview, extensions=tuple(before + after))

    def definition_overview(self, name: str) -> DefinitionOverview | None:
        """Return the overview of a named definition, or None when it is missing."""
        definition_type = self._projector.project_definition(name)
        if definition_type is None:
            return None
        before = self._hooks.apply(
            HookContext(position=HookPosition.DEFINITION_BEFORE, definition_name=name)
        )
        properties = self._merger.properties_of(RefSchema(target=name)) or {}
        example = self._synthesizer.example_for_schema(RefSchema(target=name))
        overview = DefinitionOverview(
            name=name,
            type_signature=self._render(definition_type),
            properties=tuple(
                PropertyRow(
                    name=property_name,
                    type_signature=self._render(self._projector.project(fragment)),
                )
                for property_name, fragment in properties.items()
            ),
            example=None if example is ABSENT else example,
        )
        after = self._hooks.apply(
            HookContext(
                position=HookPosition.DEFINITION_AFTER, definition_name=name, overview=overview
            )
        )
        return replace(overview, extensions=tuple(before + after))

    def document_overview(
        self, specification: ApiSpecification, ordering: DefinitionOrdering
    ) -> DocumentOverview:
        leading = self._apply_positions(HookPosition.DOCUMENT_BEFORE, HookPosition.DOCUMENT_BEGIN)
        operations = tuple(
            self.operation_overview(operation) for operation in specification.operations
        )
        definitions = []
        for name in order_definitions(specification.graph, ordering):
            overview = self.definition_overview(name)
            if overview is not None:
                definitions.append(overview)
        trailing = self._apply_positions(HookPosition.DOCUMENT_END, HookPosition.DOCUMENT_AFTER)
        return DocumentOverview(
            title=specification.title,
            version=specification.version,
            operations=operations,
            definitions=tuple(definitions),
            leading_extensions=tuple(leading),
            trailing_extensions=tuple(trailing),
        )

    def _parameter_row(self, parameter: Parameter) -> ParameterRow:
        default: Any = None
        required = False
        description = None
        if isinstance(parameter, SerializableParameter):
            default = parameter.default if has_example(parameter.default) else None
        if not isinstance(parameter, RefParameter):
            required = parameter.required
            description = parameter.description
        return ParameterRow(
            location=parameter.location,
            name=parameter.name,
            type_signature=self._render(self._projector.project_parameter(parameter)),
            required=required,
            default=default,
            description=description,
        )

    def _apply_positions(self, *positions: HookPosition) -> list[Any]:
        contributions: list[Any] = []
        for position in positions:
            contributions.extend(self._hooks.apply(HookContext(position=position)))
        return contributions

    def _render(self, schema_type: SchemaType) -> str:
        return render_type(schema_type, self._cross_reference)


def create_overview_builder(
    graph: SchemaGraph,
    configuration: Configuration,
    *,
    hooks: HookRegistry | None = None,
    cross_reference: CrossReference = markdown_cross_reference,
) -> OverviewBuilder:
    """Wire resolver, merger, projector and synthesizer for one specification."""
    resolver = ReferenceResolver(graph, build_definition_locator(configuration.references))
    merger = CompositionMerger(resolver)
    return OverviewBuilder(
        merger,
        TypeProjector(resolver, merger),
        ExampleSynthesizer(
            resolver,
            merger,
            generate_missing_examples=configuration.examples.generate_missing,
        ),
        hooks=hooks,
        cross_reference=cross_reference,
    )
