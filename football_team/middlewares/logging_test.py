import json
import logging

import pytest
from fastapi import FastAPI
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.testclient import TestClient

from football_team.middlewares.logging import LoggingMiddleware


class LogCaptureHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def app():
    app = FastAPI()
    app.add_middleware(LoggingMiddleware)

    @app.get("/test")
    async def test_endpoint():
        return JSONResponse({"hello": "world"})

    @app.post("/echo")
    async def echo_endpoint():
        return PlainTextResponse("ok")

    return app


@pytest.fixture
def log_handler():
    handler = LogCaptureHandler()
    logger = logging.getLogger("football_team_service")
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    yield handler
    logger.removeHandler(handler)


def test_middleware_adds_request_id(app, log_handler):
    client = TestClient(app)
    response = client.get("/test")

    assert "X-Request-ID" in response.headers
    request_id = response.headers["X-Request-ID"]
    assert len(request_id) == 36  # UUID

    assert len(log_handler.records) == 1
    log_json = json.loads(log_handler.records[0].getMessage())

    assert log_json["request_id"] == request_id
    assert log_json["method"] == "GET"
    assert log_json["path"] == "/test"
    assert log_json["status_code"] == 200
    assert "duration_ms" in log_json
    assert log_json["request_body"] is None
    assert log_json["response_body"] == {"hello": "world"}


def test_middleware_logs_request_body_and_text_response(app, log_handler):
    client = TestClient(app)
    response = client.post("/echo", json={"teamName": "Patriots"})

    assert response.text == "ok"
    log_json = json.loads(log_handler.records[0].getMessage())
    assert json.loads(log_json["request_body"]) == {"teamName": "Patriots"}
    assert log_json["response_body"] == "ok"
