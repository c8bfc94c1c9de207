from .collect import ModelRegistry, collect_models
from .duplicates import (
    DUPLICATE_POLICIES,
    DuplicateSchemaNameError,
    fail_on_duplicate_schema,
    handle_duplicate_schemas,
    ignore_duplicate_schemas,
)
from .models import (
    AnyKey,
    InvalidSchemaError,
    OptionalKey,
    RequiredKey,
    Schema,
    SchemaRef,
    required_keys,
    schema,
    strict_schema,
)
from .naming import full_name, name_schemas, peek_schema, with_named_sub_schemas
from .walk import Entry, postwalk, prewalk, walk

__all__ = [
    "AnyKey",
    "DUPLICATE_POLICIES",
    "DuplicateSchemaNameError",
    "Entry",
    "InvalidSchemaError",
    "ModelRegistry",
    "OptionalKey",
    "RequiredKey",
    "Schema",
    "SchemaRef",
    "collect_models",
    "fail_on_duplicate_schema",
    "full_name",
    "handle_duplicate_schemas",
    "ignore_duplicate_schemas",
    "name_schemas",
    "peek_schema",
    "postwalk",
    "prewalk",
    "required_keys",
    "schema",
    "strict_schema",
    "walk",
    "with_named_sub_schemas",
]
