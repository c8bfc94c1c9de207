from __future__ import annotations

from starlette.requests import Request

_DEFAULT_PORTS = (80, 443)


def context(request: Request) -> str:
    """
    Mount prefix of the application. Defaults to "", but holds the ASGI
    root_path when the app is mounted under a sub path or behind a proxy
    that sets one.
    """
    return (request.scope.get("root_path") or "").rstrip("/")


def basepath(request: Request, *, trust_forwarded_proto: bool = True) -> str:
    """
    Base url of a request: scheme://host[:port][context].

    Default ports are left out. The "x-forwarded-proto" header is honoured
    only when it says "https" (app behind a TLS terminating proxy).
    """
    forwarded = request.headers.get("x-forwarded-proto")
    if trust_forwarded_proto and forwarded == "https":
        scheme = "https"
    else:
        scheme = request.url.scheme
    port = request.url.port
    port_part = "" if port is None or port in _DEFAULT_PORTS else f":{port}"
    host = request.url.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    return f"{scheme}://{host}{port_part}{context(request)}"
