from __future__ import annotations

import re
from typing import List, Optional

_PATH_PARAM = re.compile(r":(.[^:|(/]*)[/]?")
_COLON_SEGMENT = re.compile(r":([^/]+)")


def path_params(uri: str) -> List[str]:
    """
    Names of the `:param` segments of a route template, in order.

      path_params("/users/:id/orders/:orderId") -> ["id", "orderId"]
    """
    return [m.group(1) for m in _PATH_PARAM.finditer(uri)]


def swagger_path(uri: str) -> str:
    """`/users/:id` -> `/users/{id}`"""
    return _COLON_SEGMENT.sub(r"{\1}", uri)


def join_paths(*paths: Optional[str]) -> str:
    """
    Join several paths together with "/". Repeated slashes collapse to one
    and a trailing slash is dropped. None and empty segments are skipped.
    """
    joined = "/".join(p for p in paths if p)
    return re.sub(r"/$", "", re.sub(r"/+", "/", joined))
