"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class DefinitionOrdering(str, Enum):
    """Order in which definitions are listed."""

    NATURAL = "natural"
    AS_IS = "as-is"


@dataclass(frozen=True)
class ExampleSettings:
    """Example synthesis settings."""

    generate_missing: bool = True


@dataclass(frozen=True)
class ReferenceSettings:
    """Where referenced definitions are rendered."""

    separated_definitions: bool = False
    inter_document_cross_references: bool = False
    definitions_document: str = "definitions"
    document_extension: str = ".md"


@dataclass(frozen=True)
class OrderingSettings:
    """Listing order configuration."""

    definitions: DefinitionOrdering = DefinitionOrdering.NATURAL


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None = None
    examples: ExampleSettings = field(default_factory=ExampleSettings)
    references: ReferenceSettings = field(default_factory=ReferenceSettings)
    ordering: OrderingSettings = field(default_factory=OrderingSettings)
