from __future__ import annotations

import logging
from typing import Callable, Dict, List, Sequence, Tuple

from .models import Schema

log = logging.getLogger("schemadoc.duplicates")

DuplicatePolicy = Callable[[str, Sequence[Schema]], Tuple[str, Schema]]


class DuplicateSchemaNameError(ValueError):
    def __init__(self, schema_name: str, values: Sequence[Schema]):
        self.schema_name = schema_name
        self.values = list(values)
        super().__init__(
            f"Looks like you're trying to define two models with the same name ({schema_name}), "
            "but different values:\n\n"
            + "\n\n".join(repr(v) for v in self.values)
            + "\n\nThere is no way to create valid api docs with this setup. You may have "
            "several modules defining the same schema names, or copies of a schema "
            "built with different fields under one name."
        )


def ignore_duplicate_schemas(schema_name: str, values: Sequence[Schema]) -> Tuple[str, Schema]:
    if len(values) > 1:
        log.debug("ignoring %d duplicate definitions of %s", len(values) - 1, schema_name)
    return schema_name, values[0]


def fail_on_duplicate_schema(schema_name: str, values: Sequence[Schema]) -> Tuple[str, Schema]:
    if len(values) > 1:
        raise DuplicateSchemaNameError(schema_name, values)
    return schema_name, values[0]


DUPLICATE_POLICIES: Dict[str, DuplicatePolicy] = {
    "ignore": ignore_duplicate_schemas,
    "fail": fail_on_duplicate_schema,
}


def handle_duplicate_schemas(policy: DuplicatePolicy, schemas: Dict[str, List[Schema]]) -> Dict[str, Schema]:
    """Collapse each name's values to a single schema using `policy`."""
    out: Dict[str, Schema] = {}
    for name, values in schemas.items():
        k, v = policy(name, values)
        out[k] = v
    return out
