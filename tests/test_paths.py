from schemadoc.core.paths import join_paths, path_params, swagger_path


def test_path_params_in_order():
    assert path_params("/users/:id/orders/:orderId") == ["id", "orderId"]


def test_path_params_stop_at_separators():
    assert path_params("/files/:name(.*)") == ["name"]
    assert path_params("/a/:x|:y") == ["x", "y"]
    assert path_params("/static/index.html") == []


def test_swagger_path_uses_braces():
    assert swagger_path("/users/:id/orders/:orderId") == "/users/{id}/orders/{orderId}"
    assert swagger_path("/health") == "/health"


def test_join_paths():
    assert join_paths("", "api/", "/v1", None, "users/") == "api/v1/users"
    assert join_paths("/api", "/users/") == "/api/users"
    assert join_paths("/", "/users/:id") == "/users/:id"
    assert join_paths("/") == ""
