from __future__ import annotations

from typing import List
from urllib.parse import urlsplit

from fastapi import APIRouter, Request

from schemadoc.api.observability.metrics import SWAGGER_RENDERS_TOTAL
from schemadoc.core.config import SchemaDocConfig
from schemadoc.core.request import basepath
from schemadoc.core.schema.duplicates import DuplicateSchemaNameError
from schemadoc.core.swagger import Route, swagger_json


def docs_router(routes: List[Route], *, title: str, version: str, config: SchemaDocConfig) -> APIRouter:
    router = APIRouter()

    @router.get(config.docs_path, include_in_schema=False)
    def get_swagger(request: Request):
        base = urlsplit(basepath(request, trust_forwarded_proto=config.trust_forwarded_proto))
        try:
            doc = swagger_json(
                routes,
                title=title,
                version=version,
                base_path=base.path or "/",
                host=base.netloc,
                schemes=[base.scheme],
                policy=config.duplicate_policy_fn(),
            )
        except DuplicateSchemaNameError:
            SWAGGER_RENDERS_TOTAL.labels(outcome="duplicate").inc()
            raise
        SWAGGER_RENDERS_TOTAL.labels(outcome="ok").inc()
        return doc

    return router
