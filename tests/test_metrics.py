from fastapi.testclient import TestClient
from prometheus_client import REGISTRY

from schemadoc.api.main import create_app
from schemadoc.api.observability.metrics import OTHER_PATH, normalize_path
from schemadoc.core.config import SchemaDocConfig


def test_normalize_path_keeps_known_paths():
    known = ("/swagger.json",)
    assert normalize_path("/swagger.json", known) == "/swagger.json"
    assert normalize_path("/swagger.json/", known) == "/swagger.json"
    assert normalize_path("/mounted/swagger.json", known) == "/swagger.json"


def test_normalize_path_groups_unknown_paths():
    known = ("/swagger.json",)
    assert normalize_path("/wp-admin/123", known) == OTHER_PATH
    assert normalize_path("", known) == OTHER_PATH


def _count(path, status):
    labels = {"method": "GET", "path": path, "status": status}
    return REGISTRY.get_sample_value("schemadoc_http_requests_total", labels) or 0.0


def test_requests_are_counted_per_known_path(user_routes):
    c = TestClient(create_app(user_routes, config=SchemaDocConfig()))
    other_before = _count(OTHER_PATH, "404")
    docs_before = _count("/swagger.json", "200")

    c.get("/nope/42")
    c.get("/nope/43")
    c.get("/swagger.json")

    assert _count(OTHER_PATH, "404") == other_before + 2
    assert _count("/swagger.json", "200") == docs_before + 1
