"""Display type entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PolymorphismNature(str, Enum):
    """How an object type relates to other definitions."""

    NONE = "none"
    COMPOSITION = "composition"
    INHERITANCE = "inheritance"


@dataclass(frozen=True)
class ObjectTypePolymorphism:
    """Polymorphism attached to an object type."""

    nature: PolymorphismNature = PolymorphismNature.NONE
    discriminator: str | None = None


@dataclass(frozen=True, kw_only=True)
class _NamedType:
    name: str = ""
    unique_name: str = ""

    def __post_init__(self) -> None:
        if not self.unique_name:
            object.__setattr__(self, "unique_name", self.name)


@dataclass(frozen=True, kw_only=True)
class BasicType(_NamedType):
    """Scalar type with an optional format qualifier."""

    primitive_kind: str
    format: str | None = None


@dataclass(frozen=True, kw_only=True)
class EnumType(_NamedType):
    """Enumerated string values."""

    allowed_values: tuple[str, ...]


@dataclass(frozen=True, kw_only=True)
class ArrayType(_NamedType):
    """Array of an element type; ``collection_format`` applies to parameters."""

    element_type: SchemaType
    collection_format: str | None = None


@dataclass(frozen=True, kw_only=True)
class MapType(_NamedType):
    """String-keyed map of a value type."""

    value_type: SchemaType


@dataclass(frozen=True, kw_only=True)
class ObjectType(_NamedType):
    """Named object shape."""

    polymorphism: ObjectTypePolymorphism = field(default_factory=ObjectTypePolymorphism)


@dataclass(frozen=True, kw_only=True)
class RefType(_NamedType):
    """Reference to a named definition rendered under ``document_location``."""

    target_name: str
    document_location: str

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", self.target_name)
        super().__post_init__()


SchemaType = BasicType | EnumType | ArrayType | MapType | ObjectType | RefType
