from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, List, Optional, Union


class InvalidSchemaError(TypeError):
    pass


@dataclass(frozen=True)
class RequiredKey:
    name: str
    required: bool = field(default=True, init=False)


@dataclass(frozen=True)
class OptionalKey:
    name: str
    required: bool = field(default=False, init=False)


@dataclass(frozen=True)
class AnyKey:
    """Wildcard key of an open schema: matches any remaining field of type `kind`."""
    kind: type = str


FieldKey = Union[RequiredKey, OptionalKey, AnyKey]


def _freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return frozenset((_freeze(k), _freeze(v)) for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_freeze(v) for v in value)
    return value


@dataclass(frozen=True, eq=False)
class Schema:
    """
    A composite data shape: a mapping of field keys to value schemas,
    optionally carrying a name.

    The name is annotation only. Two schemas with the same fields are equal
    (and hash alike) whatever their names, so one shape can show up named
    in one place and anonymous in another.
    """
    fields: Dict[FieldKey, Any]
    name: Optional[str] = None

    def with_name(self, name: Optional[str]) -> "Schema":
        return replace(self, name=name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Schema):
            return NotImplemented
        return self.fields == other.fields

    def __hash__(self) -> int:
        return hash(_freeze(self.fields))

    def __repr__(self) -> str:
        body = ", ".join(f"{_key_repr(k)}: {v!r}" for k, v in self.fields.items())
        if self.name:
            return f"{self.name}{{{body}}}"
        return f"{{{body}}}"


@dataclass(frozen=True)
class SchemaRef:
    """Reference to a named schema, resolved lazily (used for recursive models)."""
    name: str
    resolver: Callable[[], Schema] = field(compare=False, repr=False)

    def deref(self) -> Schema:
        return self.resolver()


def _key_repr(key: FieldKey) -> str:
    if isinstance(key, RequiredKey):
        return key.name
    if isinstance(key, OptionalKey):
        return f"{key.name}?"
    return f"<{key.kind.__name__}>"


def _coerce_key(key: Any) -> FieldKey:
    if isinstance(key, (RequiredKey, OptionalKey, AnyKey)):
        return key
    if isinstance(key, str):
        return RequiredKey(key)
    if isinstance(key, type):
        return AnyKey(key)
    raise InvalidSchemaError(f"Unsupported schema key: {key!r}")


def _coerce_value(value: Any) -> Any:
    if isinstance(value, (Schema, SchemaRef)):
        return value
    if isinstance(value, dict):
        return Schema({_coerce_key(k): _coerce_value(v) for k, v in value.items()})
    if isinstance(value, list):
        return [_coerce_value(v) for v in value]
    if isinstance(value, tuple):
        return tuple(_coerce_value(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return type(value)(_coerce_value(v) for v in value)
    return value


def schema(name_or_fields: Union[str, Dict[Any, Any]], fields: Optional[Dict[Any, Any]] = None) -> Schema:
    """
    Build a Schema from plain python data.

      schema("User", {"name": str, "address": {"street": str}})
      schema({str: int})  # open, anonymous

    String keys become RequiredKey, type keys become AnyKey, nested dicts
    become anonymous schemas.
    """
    if isinstance(name_or_fields, str):
        name: Optional[str] = name_or_fields
        raw = fields if fields is not None else {}
    else:
        name = None
        raw = name_or_fields
    if not isinstance(raw, dict):
        raise InvalidSchemaError(f"Schema fields must be a dict, got {type(raw).__name__}")
    return _coerce_value(raw).with_name(name)


def required_keys(s: Schema) -> List[RequiredKey]:
    return [k for k in s.fields if isinstance(k, RequiredKey)]


def strict_schema(s: Schema) -> Schema:
    """Removes open (wildcard) keys from schema."""
    if not isinstance(s, Schema):
        raise InvalidSchemaError(f"strict_schema expects a Schema, got {type(s).__name__}")
    return replace(s, fields={k: v for k, v in s.fields.items() if not isinstance(k, AnyKey)})
