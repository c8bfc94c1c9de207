from __future__ import annotations

from typing import Iterable

from prometheus_client import Counter, Histogram

OTHER_PATH = "/:other"


def normalize_path(path: str, known_paths: Iterable[str]) -> str:
    """
    Metrics label for a request path. The docs app serves a handful of
    fixed paths; everything else (scanners, typos) shares one label.
    A mount prefix in front of a known path is ignored.
    """
    p = (path or "/").rstrip("/") or "/"
    for known in known_paths:
        if p == known or p.endswith(known):
            return known
    return OTHER_PATH


HTTP_REQUESTS_TOTAL = Counter(
    "schemadoc_http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)

HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "schemadoc_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "path"],
)

SWAGGER_RENDERS_TOTAL = Counter(
    "schemadoc_swagger_renders_total",
    "Swagger documents rendered",
    ["outcome"],
)
