"""Type projection exports."""

from .type_models import (
    ArrayType,
    BasicType,
    EnumType,
    MapType,
    ObjectType,
    ObjectTypePolymorphism,
    PolymorphismNature,
    RefType,
    SchemaType,
)
from .type_projector import TypeProjectionError, TypeProjector
from .type_rendering import (
    CrossReference,
    markdown_cross_reference,
    plain_cross_reference,
    render_type,
)

__all__ = [
    "ArrayType",
    "BasicType",
    "EnumType",
    "MapType",
    "ObjectType",
    "ObjectTypePolymorphism",
    "PolymorphismNature",
    "RefType",
    "SchemaType",
    "TypeProjectionError",
    "TypeProjector",
    "CrossReference",
    "markdown_cross_reference",
    "plain_cross_reference",
    "render_type",
]
