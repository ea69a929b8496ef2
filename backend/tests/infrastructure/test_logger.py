"""Unit tests for the logging formatters and request binding."""

import json
import logging

import pytest

from infrastructure.config import bind_request, current_request, get_logger, reset_request
from infrastructure.config.logger import JSONFormatter, TextFormatter


def make_record(message: str = "View all created", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="apim.ViewService",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )
    record.__dict__.update(extra)
    return record


@pytest.fixture
def bound_request():
    token = bind_request("POST", "/portal/environments/DEFAULT/applications", "user-1")
    yield
    reset_request(token)


class TestJSONFormatter:
    """Test the structured formatter."""

    def test_without_request(self):
        data = json.loads(JSONFormatter().format(make_record()))
        assert data["message"] == "View all created"
        assert data["logger"] == "apim.ViewService"
        assert "request" not in data
        assert "technicalCode" not in data

    def test_request_fields(self, bound_request):
        data = json.loads(JSONFormatter().format(make_record()))
        assert data["request"] == {
            "method": "POST",
            "path": "/portal/environments/DEFAULT/applications",
            "user": "user-1",
        }

    def test_technical_code(self):
        record = make_record("Request failed", technical_code="role.exists")
        data = json.loads(JSONFormatter().format(record))
        assert data["technicalCode"] == "role.exists"


class TestTextFormatter:
    """Test the colored formatter."""

    def test_request_prefix(self, bound_request):
        line = TextFormatter().format(make_record())
        assert "[POST /portal/environments/DEFAULT/applications]" in line
        assert line.endswith("- View all created")

    def test_without_request(self):
        line = TextFormatter().format(make_record())
        assert "[POST" not in line
        assert "apim.ViewService - View all created" in line


class TestRequestBinding:
    """Test binding a request to the logging context."""

    def test_reset_restores_previous(self):
        assert current_request() is None
        token = bind_request("GET", "/health")
        assert current_request().path == "/health"
        assert current_request().user is None
        reset_request(token)
        assert current_request() is None


class TestGetLogger:
    """Test logger naming."""

    def test_nested_under_application_logger(self):
        assert get_logger("ViewService").name == "apim.ViewService"

    def test_application_logger_names_kept(self):
        assert get_logger("apim").name == "apim"
        assert get_logger("apim.health").name == "apim.health"
