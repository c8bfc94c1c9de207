from __future__ import annotations

import logging
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from schemadoc.core.schema.duplicates import DuplicateSchemaNameError

log = logging.getLogger("schemadoc.errors")


def _request_id(request: Request):
    return getattr(request.state, "request_id", None) or request.headers.get("x-request-id")


class SafeErrorMiddleware(BaseHTTPMiddleware):
    """
    Turns any error escaping the docs app into a bare 500 JSON body.
    The traceback is logged, never sent; the request id is echoed back.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception:
            rid = _request_id(request)
            log.exception("Unhandled error rid=%s path=%s", rid, request.url.path)
            payload = {"detail": "Internal Server Error"}
            if rid:
                payload["request_id"] = rid
            return JSONResponse(status_code=500, content=payload)


async def duplicate_schema_handler(request: Request, exc: DuplicateSchemaNameError) -> JSONResponse:
    rid = _request_id(request)
    log.error("Duplicate schema name %s rid=%s path=%s: %s", exc.schema_name, rid, request.url.path, exc)
    payload = {"detail": "Duplicate schema name", "schema_name": exc.schema_name}
    if rid:
        payload["request_id"] = rid
    return JSONResponse(status_code=500, content=payload)
