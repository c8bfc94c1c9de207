from __future__ import annotations

from typing import List, Optional

from fastapi import FastAPI

from schemadoc.api.docs import docs_router
from schemadoc.api.middleware.error_shaping import SafeErrorMiddleware, duplicate_schema_handler
from schemadoc.api.middleware.request_context import RequestContextMiddleware
from schemadoc.core.config import SchemaDocConfig, load_config
from schemadoc.core.schema.duplicates import DuplicateSchemaNameError
from schemadoc.core.swagger import Route


def create_app(
    routes: List[Route],
    *,
    title: str = "API",
    version: str = "0.0.1",
    config: Optional[SchemaDocConfig] = None,
) -> FastAPI:
    """
    FastAPI app serving the Swagger 2.0 document of `routes`.

    Config defaults to the environment (see load_config).
    """
    cfg = config or load_config()
    app = FastAPI(title=title, version=version)

    # Starlette reverses add_middleware order: the LAST call is the OUTERMOST wrapper.
    app.add_middleware(RequestContextMiddleware, known_paths=(cfg.docs_path,))
    app.add_middleware(SafeErrorMiddleware)

    app.add_exception_handler(DuplicateSchemaNameError, duplicate_schema_handler)
    app.include_router(docs_router(routes, title=title, version=version, config=cfg))
    return app
