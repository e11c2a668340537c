"""Schema graph exports."""

from .api_models import (
    SERIALIZABLE_LOCATIONS,
    ApiOperation,
    ApiResponse,
    ApiSpecification,
    BodyParameter,
    Parameter,
    RefParameter,
    SerializableParameter,
)
from .schema_models import (
    NO_EXAMPLE,
    ArraySchema,
    ComposedSchema,
    EnumSchema,
    MapSchema,
    ObjectSchema,
    PrimitiveSchema,
    RefSchema,
    SchemaFragment,
    SchemaGraph,
    has_example,
)
from .spec_loader import (
    SpecificationError,
    build_specification,
    load_specification,
    parse_schema_fragment,
)

__all__ = [
    "SERIALIZABLE_LOCATIONS",
    "ApiOperation",
    "ApiResponse",
    "ApiSpecification",
    "BodyParameter",
    "Parameter",
    "RefParameter",
    "SerializableParameter",
    "NO_EXAMPLE",
    "ArraySchema",
    "ComposedSchema",
    "EnumSchema",
    "MapSchema",
    "ObjectSchema",
    "PrimitiveSchema",
    "RefSchema",
    "SchemaFragment",
    "SchemaGraph",
    "has_example",
    "SpecificationError",
    "build_specification",
    "load_specification",
    "parse_schema_fragment",
]
