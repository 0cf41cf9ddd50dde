import logging
from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from bookmarker_api.context import request_id_var
from bookmarker_api.error_handlers import register_error_handlers
from bookmarker_api.middleware import REQUEST_ID_HEADER, RequestContextMiddleware


class _RequestIdCapture(logging.Handler):
    """Records each message together with the request id bound when it was emitted."""

    def __init__(self) -> None:
        super().__init__()
        self.seen: list[tuple[str, str | None, bool]] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.seen.append((record.getMessage(), request_id_var.get(), record.exc_info is not None))


@pytest.fixture
def request_log() -> Iterator[_RequestIdCapture]:
    request_logger = logging.getLogger("bookmarker_api.request")
    handler = _RequestIdCapture()
    previous_level = request_logger.level
    request_logger.addHandler(handler)
    request_logger.setLevel(logging.INFO)
    yield handler
    request_logger.removeHandler(handler)
    request_logger.setLevel(previous_level)


def _app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestContextMiddleware)
    register_error_handlers(app)

    @app.get("/")
    def read_root() -> dict:
        return {"request_id": request_id_var.get()}

    @app.get("/boom")
    def boom() -> dict:
        raise RuntimeError("database password is hunter2")

    return app


def test_request_context_middleware_uses_incoming_request_id() -> None:
    client = TestClient(_app())

    response = client.get("/", headers={REQUEST_ID_HEADER: "req-456"})

    assert response.status_code == 200
    assert response.json() == {"request_id": "req-456"}
    assert response.headers[REQUEST_ID_HEADER] == "req-456"


def test_request_context_middleware_generates_request_id() -> None:
    client = TestClient(_app())

    response = client.get("/")

    request_id = response.json()["request_id"]
    assert request_id.startswith("req-")
    assert response.headers[REQUEST_ID_HEADER] == request_id
    assert request_id_var.get() is None


def test_unexpected_error_keeps_request_id(request_log: _RequestIdCapture) -> None:
    client = TestClient(_app(), raise_server_exceptions=False)

    response = client.get("/boom", headers={REQUEST_ID_HEADER: "req-abc"})

    assert response.status_code == 500
    assert response.json() == {"error": {"message": "Internal server error", "status": 500}}
    assert response.headers[REQUEST_ID_HEADER] == "req-abc"
    assert ("Unexpected error: RuntimeError", "req-abc", True) in request_log.seen
    assert ("http_request_complete", "req-abc", False) in request_log.seen
