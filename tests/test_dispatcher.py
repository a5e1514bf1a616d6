import json

import pytest

from echo_service.dispatcher import ROUTES, dispatch, resolve
from echo_service.echo import echo
from echo_service.errors import MalformedBody, MethodNotAllowed, NotFound, UnsupportedMediaType
from echo_service.health import health
from echo_service.models import Request

JSON_HEADERS = {"Content-Type": "application/json"}


def test_routes_table():
    assert ROUTES == {"/": {"POST": echo}, "/health": {"GET": health}}


def test_resolve_known_routes():
    assert resolve("POST", "/") is echo
    assert resolve("GET", "/health") is health


def test_resolve_method_is_case_insensitive():
    assert resolve("post", "/") is echo


@pytest.mark.parametrize("method, path, allow", [
    ("GET", "/", "POST"),
    ("PUT", "/", "POST"),
    ("PATCH", "/", "POST"),
    ("DELETE", "/", "POST"),
    ("POST", "/health", "GET"),
    ("DELETE", "/health", "GET"),
])
def test_resolve_method_not_allowed(method, path, allow):
    with pytest.raises(MethodNotAllowed) as exc:
        resolve(method, path)
    assert exc.value.status_code == 405
    assert exc.value.headers == {"Allow": allow}


@pytest.mark.parametrize("path", ["/echo", "/health/", "/healthz", "//", "/unknown/path"])
def test_resolve_not_found(path):
    with pytest.raises(NotFound) as exc:
        resolve("GET", path)
    assert exc.value.status_code == 404


def test_dispatch_echo():
    response = dispatch(Request(method="POST", path="/", headers=JSON_HEADERS, body=b'{"msg":"hi"}'))
    assert response.status_code == 200
    assert response.headers == {"Content-Type": "application/json"}
    assert json.loads(response.body) == {"msg": "hi"}


def test_dispatch_echo_preserves_unicode():
    response = dispatch(Request(method="POST", path="/", headers=JSON_HEADERS, body='{"msg":"héllo"}'.encode("utf-8")))
    assert response.body == '{"msg":"héllo"}'.encode("utf-8")


def test_dispatch_health():
    response = dispatch(Request(method="GET", path="/health"))
    assert response.status_code == 200
    assert response.body == b'{"status":"ok"}'
    assert response.headers["Content-Type"] == "application/json"


def test_dispatch_propagates_parser_errors():
    with pytest.raises(MalformedBody):
        dispatch(Request(method="POST", path="/", headers=JSON_HEADERS, body=b"not json"))
    with pytest.raises(UnsupportedMediaType):
        dispatch(Request(method="POST", path="/", headers={"Content-Type": "text/plain"}, body=b"hello"))


def test_dispatch_logs_requests(caplog):
    with caplog.at_level("INFO", logger="echo_service.dispatcher"):
        dispatch(Request(method="GET", path="/health"))
    assert "Received request: GET /health" in caplog.text
