"""
Swagger 2.0 document rendering for a table of routes.

Route schemas are named (anonymous ones after the operation and their
field path), every named schema is collected into `definitions`, and
operations refer to them with `$ref`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional
from uuid import UUID

from .paths import join_paths, path_params, swagger_path
from .schema.collect import collect_models
from .schema.duplicates import DuplicatePolicy, handle_duplicate_schemas, ignore_duplicate_schemas
from .schema.models import Schema, SchemaRef
from .schema.naming import full_name, name_schemas
from .schema.predicates import explicit_key_of, is_specific_key, is_wildcard_key, name_of
from .schema.pydantic_adapter import from_pydantic, is_model
from .schema.walk import prewalk

log = logging.getLogger("schemadoc.swagger")

_SCALARS: Dict[Any, Dict[str, str]] = {
    str: {"type": "string"},
    int: {"type": "integer", "format": "int64"},
    float: {"type": "number", "format": "double"},
    bool: {"type": "boolean"},
    datetime: {"type": "string", "format": "date-time"},
    date: {"type": "string", "format": "date"},
    UUID: {"type": "string", "format": "uuid"},
    bytes: {"type": "string", "format": "byte"},
}


@dataclass
class Route:
    method: str
    uri: str
    summary: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    path_params: Optional[Schema] = None
    query_params: Optional[Schema] = None
    body: Any = None
    # status code -> response schema (None for an empty body)
    responses: Dict[int, Any] = field(default_factory=dict)

    def operation_id(self) -> str:
        segments = [s.lstrip(":") for s in self.uri.split("/") if s]
        return self.method.lower() + full_name(segments)


def _ref(name: str) -> Dict[str, str]:
    return {"$ref": f"#/definitions/{name}"}


def json_schema(value: Any) -> Dict[str, Any]:
    if isinstance(value, Schema):
        return _ref(value.name) if value.name else definition(value)
    if isinstance(value, SchemaRef):
        return _ref(value.name)
    if is_model(value):
        return _ref(value.__name__)
    if isinstance(value, (list, tuple)):
        return {"type": "array", "items": json_schema(value[0]) if value else {}}
    if isinstance(value, (set, frozenset)):
        items = json_schema(next(iter(value))) if value else {}
        return {"type": "array", "uniqueItems": True, "items": items}
    if isinstance(value, type) and issubclass(value, Enum):
        return {"type": "string", "enum": [m.value for m in value]}
    if isinstance(value, type) and value in _SCALARS:
        return dict(_SCALARS[value])
    return {}


def definition(s: Schema) -> Dict[str, Any]:
    properties: Dict[str, Any] = {}
    required: List[str] = []
    out: Dict[str, Any] = {"type": "object", "properties": properties}
    for k, v in s.fields.items():
        if is_specific_key(k):
            properties[explicit_key_of(k)] = json_schema(v)
            if k.required:
                required.append(explicit_key_of(k))
        elif is_wildcard_key(k):
            out["additionalProperties"] = json_schema(v)
    if required:
        out["required"] = required
    return out


def _as_schema(value: Any) -> Any:
    """Replace pydantic model classes anywhere in `value` with their schemas."""
    return prewalk(value, lambda x: from_pydantic(x) if is_model(x) else x)


def _named(value: Any, root: str) -> Any:
    value = _as_schema(value)
    if value is None:
        return None
    return name_schemas([name_of(value) or root], value)


def _parameters(route: Route, location: str, s: Optional[Schema]) -> List[Dict[str, Any]]:
    if s is None:
        if location != "path":
            return []
        return [{"in": "path", "name": p, "required": True, "type": "string"} for p in path_params(route.uri)]
    params = []
    for k, v in s.fields.items():
        if not is_specific_key(k):
            continue
        params.append({
            "in": location,
            "name": explicit_key_of(k),
            "required": True if location == "path" else k.required,
            **(json_schema(v) or {"type": "string"}),
        })
    return params


def _operation(route: Route) -> Dict[str, Any]:
    op: Dict[str, Any] = {"operationId": route.operation_id()}
    if route.summary:
        op["summary"] = route.summary
    if route.tags:
        op["tags"] = list(route.tags)

    params = _parameters(route, "path", route.path_params) + _parameters(route, "query", route.query_params)
    if route.body is not None:
        params.append({"in": "body", "name": "body", "required": True, "schema": json_schema(route.body)})
    if params:
        op["parameters"] = params

    responses: Dict[str, Any] = {}
    for status, body in route.responses.items():
        r: Dict[str, Any] = {"description": ""}
        if body is not None:
            r["schema"] = json_schema(body)
        responses[str(status)] = r
    op["responses"] = responses or {"default": {"description": ""}}
    return op


def _name_route(route: Route) -> Route:
    root = full_name([route.operation_id()])
    return Route(
        method=route.method,
        uri=route.uri,
        summary=route.summary,
        tags=route.tags,
        path_params=_as_schema(route.path_params),
        query_params=_as_schema(route.query_params),
        body=_named(route.body, f"{root}Body"),
        responses={status: _named(v, f"{root}Response{status}") for status, v in route.responses.items()},
    )


def swagger_json(
    routes: List[Route],
    *,
    title: str = "API",
    version: str = "0.0.1",
    base_path: str = "/",
    host: Optional[str] = None,
    schemes: Optional[List[str]] = None,
    policy: DuplicatePolicy = ignore_duplicate_schemas,
) -> Dict[str, Any]:
    """
    Swagger 2.0 document for `routes`.

    Raises DuplicateSchemaNameError when `policy` is fail_on_duplicate_schema
    and two different schemas end up with the same name.
    """
    named = [_name_route(r) for r in routes]
    models = collect_models(
        [[r.path_params, r.query_params, r.body, list(r.responses.values())] for r in named]
    )
    definitions = handle_duplicate_schemas(policy, models)
    log.debug("rendering %d routes, %d definitions", len(named), len(definitions))

    paths: Dict[str, Dict[str, Any]] = {}
    for r in named:
        key = swagger_path(join_paths(r.uri)) or "/"
        if not key.startswith("/"):
            key = "/" + key
        paths.setdefault(key, {})[r.method.lower()] = _operation(r)

    doc: Dict[str, Any] = {
        "swagger": "2.0",
        "info": {"title": title, "version": version},
        "basePath": base_path or "/",
        "paths": paths,
        "definitions": {name: definition(s) for name, s in definitions.items()},
    }
    if host:
        doc["host"] = host
    if schemes:
        doc["schemes"] = list(schemes)
    return doc
