from __future__ import annotations

import logging
from typing import Any, Dict, List

from .models import Schema
from .predicates import dereference, is_named_composite, is_reference, name_of
from .walk import prewalk

log = logging.getLogger("schemadoc.collect")


class ModelRegistry:
    """
    Schema name -> distinct schema instances, in first-seen order.

    Instances are compared structurally (see Schema.__eq__), so the same
    shape seen twice is kept once while two different shapes sharing a name
    are both kept until duplicates are handled.
    """

    def __init__(self):
        self._models: Dict[str, List[Schema]] = {}

    def add(self, s: Schema) -> bool:
        values = self._models.setdefault(s.name, [])
        if s in values:
            return False
        values.append(s)
        return True

    def __contains__(self, s: object) -> bool:
        return isinstance(s, Schema) and s in self._models.get(s.name, [])

    def __len__(self) -> int:
        return len(self._models)

    def as_dict(self) -> Dict[str, List[Schema]]:
        return {k: list(v) for k, v in self._models.items()}


def collect_models(x: Any) -> Dict[str, List[Schema]]:
    """
    Walks through the data structure and collects all named Schemas into a
    dict of schema-name -> [values]. One name can link to several values.
    Non-schema values and anonymous schemas are walked through but not
    collected.
    """
    registry = ModelRegistry()

    def visit(node: Any) -> Any:
        if is_reference(node):
            target = dereference(node)
            if target in registry:
                # already collected (and walked); stops recursive references
                return node
            node = target
        if is_named_composite(node):
            if registry.add(node):
                log.debug("collected model %s", name_of(node))
        return node

    prewalk(x, visit)
    return registry.as_dict()
