from __future__ import annotations

import itertools
import logging
from typing import Any, Callable, Iterable, List, Optional, Set

from .models import InvalidSchemaError, Schema
from .predicates import explicit_key_of, is_composite, is_named_composite, is_specific_key, name_of
from .walk import Entry, walk

log = logging.getLogger("schemadoc.naming")

_gensym_counter = itertools.count()


def gensym(prefix: str = "G__") -> str:
    """Process-unique symbol, `prefix` followed by a counter value."""
    return f"{prefix}{next(_gensym_counter)}"


def _capitalized(segment: str) -> str:
    return segment[:1].upper() + segment[1:]


def full_name(path: Iterable[Any]) -> str:
    return "".join(_capitalized(str(p)) for p in path)


def _wildcard_segment(key: Any, counter: Callable[[], int], reserved: Set[str]) -> str:
    kind = getattr(key, "kind", None)
    label = _capitalized(getattr(kind, "__name__", None) or type(key).__name__)
    while True:
        segment = f"{label}{counter()}"
        # must not spell the same as a specific key of the same schema
        if segment not in reserved:
            return segment


def _reserved_segments(form: Any) -> Set[str]:
    if not is_composite(form):
        return set()
    return {_capitalized(explicit_key_of(k)) for k in form.fields if is_specific_key(k)}


def _name_schemas(names: List[str], form: Any, counter: Callable[[], int]) -> Any:
    reserved = _reserved_segments(form)

    def inner(x: Any) -> Any:
        if isinstance(x, Entry):
            if is_specific_key(x.key):
                segment = explicit_key_of(x.key)
            else:
                segment = _wildcard_segment(x.key, counter, reserved)
            return Entry(x.key, _name_schemas(names + [segment], x.value, counter))
        return _name_schemas(names, x, counter)

    def outer(x: Any) -> Any:
        if is_composite(x) and not name_of(x):
            name = full_name(names)
            log.debug("naming anonymous schema %s", name)
            return x.with_name(name)
        return x

    return walk(form, inner, outer)


def name_schemas(names: List[str], form: Any) -> Any:
    """
    Name every anonymous schema under `form` after the path of field names
    leading to it, starting from `names`.

    Wildcard keys have no identifier; each one gets a placeholder segment
    that is unique within this call and differs from the sibling field names.
    """
    return _name_schemas(list(names), form, itertools.count().__next__)


def with_named_sub_schemas(s: Schema, prefix: str = "schema") -> Schema:
    """
    Traverses a schema tree of Schemas, sets and sequences and names all
    anonymous schemas in it. Names are the root schema name (or a generated
    one) followed by all keys in the path, CamelCased:

      User{address: {street: str}} -> address value named "UserAddress"

    Schemas that already have a name keep it.
    """
    if not is_composite(s):
        raise InvalidSchemaError(f"with_named_sub_schemas expects a Schema, got {type(s).__name__}")
    root = name_of(s) or gensym(prefix)
    return name_schemas([root], s)


def peek_schema(form: Any) -> Optional[Schema]:
    """
    Recursively seeks the named schema inside `form`. Walks over sets and
    sequences but does not descend into named schemas.
    """
    found: List[Schema] = []

    def seek(x: Any) -> Any:
        def inner(y: Any) -> Any:
            if is_named_composite(y):
                found.append(y)
                return y
            return seek(y)

        return walk(x, inner, lambda y: y)

    seek([form])
    return found[-1] if found else None
