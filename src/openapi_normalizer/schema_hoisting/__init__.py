"""Schema hoisting exports."""

from .schema_hoister import (
    SchemaHoister,
    extract_inline_schemas,
    hoist_inline_schemas,
    is_object_like,
)
from .schema_naming import build_name, to_pascal
from .schema_registry import SCHEMA_REF_PREFIX, SchemaRegistry, content_signature, reference_to

__all__ = [
    "SCHEMA_REF_PREFIX",
    "SchemaHoister",
    "SchemaRegistry",
    "build_name",
    "content_signature",
    "extract_inline_schemas",
    "hoist_inline_schemas",
    "is_object_like",
    "reference_to",
    "to_pascal",
]
