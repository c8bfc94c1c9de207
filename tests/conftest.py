import os

import pytest

from schemadoc.core.schema.models import OptionalKey, schema
from schemadoc.core.swagger import Route


@pytest.fixture(autouse=True)
def _clean_schemadoc_env(monkeypatch):
    # Make config deterministic: tests opt in to SCHEMADOC_* explicitly
    for key in list(os.environ):
        if key.startswith("SCHEMADOC_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def user_schema():
    return schema("User", {"name": str, "address": {"street": str, "city": str}})


@pytest.fixture()
def user_routes(user_schema):
    return [
        Route("GET", "/users/:id", summary="Get user", responses={200: user_schema}),
        Route(
            "POST",
            "/users",
            body=schema({"name": str, OptionalKey("age"): int}),
            responses={201: user_schema, 204: None},
        ),
    ]
