"""
Generic one-level walker over schema trees.

`walk(form, inner, outer)` applies `inner` to each direct child of `form`,
rebuilds a node of the same kind and returns `outer(rebuilt)`. Deeper
recursion is up to `inner`, which lets a caller carry context (a path of
field names, say) down the tree. `prewalk`/`postwalk` are full-depth
traversals built on top.

Node kinds:
  Schema          children are Entry(key, value); name is kept
  Entry           children are key and value
  dict            children are Entry(key, value)
  list / tuple    children are elements, order kept
  set / frozenset children are elements
  anything else   leaf (including SchemaRef)
"""
from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, NamedTuple

from .models import Schema

Fn = Callable[[Any], Any]


class Entry(NamedTuple):
    key: Any
    value: Any


def _entries(inner: Fn, mapping: dict) -> dict:
    out = {}
    for k, v in mapping.items():
        e = inner(Entry(k, v))
        out[e[0]] = e[1]
    return out


def walk(form: Any, inner: Fn, outer: Fn) -> Any:
    if isinstance(form, Schema):
        return outer(replace(form, fields=_entries(inner, form.fields)))
    if isinstance(form, Entry):
        return outer(Entry(inner(form.key), inner(form.value)))
    if isinstance(form, dict):
        return outer(type(form)(_entries(inner, form)))
    if isinstance(form, list):
        return outer([inner(x) for x in form])
    if isinstance(form, tuple):
        return outer(tuple(inner(x) for x in form))
    if isinstance(form, (set, frozenset)):
        return outer(type(form)(inner(x) for x in form))
    return outer(form)


def _identity(x: Any) -> Any:
    return x


def prewalk(form: Any, fn: Fn) -> Any:
    return walk(fn(form), lambda x: prewalk(x, fn), _identity)


def postwalk(form: Any, fn: Fn) -> Any:
    return walk(form, lambda x: postwalk(x, fn), fn)
