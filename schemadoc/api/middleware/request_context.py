from __future__ import annotations

import logging
import time
import uuid
from typing import Callable, Iterable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from schemadoc.api.observability.metrics import (
    HTTP_REQUESTS_TOTAL,
    HTTP_REQUEST_DURATION_SECONDS,
    normalize_path,
)

log = logging.getLogger("schemadoc.request")


def _json_log(event: str, **fields):
    msg = {"event": event, **fields}
    log.info("%s", msg)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Request ID + request metrics.

    Adds:
      request.state.request_id
      response header: X-Request-Id

    `known_paths` are the paths used as metrics labels; any other path is
    counted under a single label.
    """

    def __init__(self, app, known_paths: Iterable[str] = ()):
        super().__init__(app)
        self.known_paths = tuple(known_paths)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        rid = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = rid

        start = time.time()
        resp = await call_next(request)
        dur_ms = int((time.time() - start) * 1000)

        resp.headers["X-Request-Id"] = rid

        p = normalize_path(request.url.path, self.known_paths)
        m = request.method.upper()
        HTTP_REQUESTS_TOTAL.labels(method=m, path=p, status=str(resp.status_code)).inc()
        HTTP_REQUEST_DURATION_SECONDS.labels(method=m, path=p).observe(dur_ms / 1000.0)

        _json_log(
            "request",
            request_id=rid,
            method=request.method,
            path=request.url.path,
            status_code=resp.status_code,
            duration_ms=dur_ms,
        )
        return resp
