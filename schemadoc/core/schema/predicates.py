from __future__ import annotations

from typing import Any, Optional

from .models import AnyKey, OptionalKey, RequiredKey, Schema, SchemaRef


def is_composite(x: Any) -> bool:
    return isinstance(x, Schema)


def name_of(x: Any) -> Optional[str]:
    if isinstance(x, (Schema, SchemaRef)):
        return x.name
    return None


def is_named_composite(x: Any) -> bool:
    return isinstance(x, Schema) and bool(x.name)


def is_specific_key(k: Any) -> bool:
    return isinstance(k, (RequiredKey, OptionalKey))


def explicit_key_of(k: Any) -> str:
    if not is_specific_key(k):
        raise TypeError(f"Not a specific key: {k!r}")
    return k.name


def is_wildcard_key(k: Any) -> bool:
    return isinstance(k, AnyKey)


def is_reference(x: Any) -> bool:
    return isinstance(x, SchemaRef)


def dereference(x: Any) -> Any:
    if isinstance(x, SchemaRef):
        return x.deref()
    return x
