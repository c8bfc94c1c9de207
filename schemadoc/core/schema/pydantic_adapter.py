"""
Schemas from pydantic models.

FastAPI apps declare request and response bodies as pydantic models; this
turns such a model class into a named Schema so it can go through naming,
collection and rendering like any hand written schema.
"""
from __future__ import annotations

import functools
import sys
from typing import Annotated, Any, Literal, Tuple, Type, Union, get_args, get_origin

from pydantic import BaseModel

from .models import AnyKey, InvalidSchemaError, OptionalKey, RequiredKey, Schema, SchemaRef

if sys.version_info >= (3, 10):
    from types import UnionType
else:
    UnionType = None


def is_model(tp: Any) -> bool:
    return isinstance(tp, type) and issubclass(tp, BaseModel)


def _is_union(origin: Any) -> bool:
    return origin is Union or (UnionType is not None and origin is UnionType)


def _convert(tp: Any, stack: Tuple[type, ...]) -> Any:
    if is_model(tp):
        if tp in stack:
            return SchemaRef(tp.__name__, lambda: from_pydantic(tp))
        return _convert_model(tp, stack)

    origin = get_origin(tp)
    args = get_args(tp)

    if origin is Annotated:
        return _convert(args[0], stack)
    if _is_union(origin):
        options = [a for a in args if a is not type(None)]
        if len(options) == 1:
            return _convert(options[0], stack)
        return object
    if origin is Literal:
        return type(args[0]) if args else object
    if origin is list:
        return [_convert(args[0], stack) if args else object]
    if origin in (set, frozenset):
        return {_convert(args[0], stack) if args else object}
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return [_convert(args[0], stack)]
        return tuple(_convert(a, stack) for a in args)
    if origin is dict:
        key_type = args[0] if args and isinstance(args[0], type) else str
        value = _convert(args[1], stack) if len(args) > 1 else object
        return Schema({AnyKey(key_type): value})
    return tp


def _convert_model(model: Type[BaseModel], stack: Tuple[type, ...]) -> Schema:
    stack = stack + (model,)
    fields = {}
    for field_name, info in model.model_fields.items():
        key_name = info.alias or field_name
        key = RequiredKey(key_name) if info.is_required() else OptionalKey(key_name)
        fields[key] = _convert(info.annotation, stack)
    return Schema(fields, name=model.__name__)


@functools.lru_cache(maxsize=None)
def from_pydantic(model: Type[BaseModel]) -> Schema:
    """Named Schema for a pydantic model class (name is the class name)."""
    if not is_model(model):
        raise InvalidSchemaError(f"from_pydantic expects a pydantic BaseModel subclass, got {model!r}")
    return _convert_model(model, ())
