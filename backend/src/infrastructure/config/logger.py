"""Logging configuration for the application.

Records emitted while a request is served carry its method, path and
authenticated user, bound by the request middleware through ``bind_request``.
"""

import logging
import sys
import json
from contextvars import ContextVar, Token
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Optional

ROOT_LOGGER = "apim"


@dataclass(frozen=True)
class RequestContext:
    """The request a log record was emitted for."""

    method: str
    path: str
    user: Optional[str] = None


_request_context: ContextVar[Optional[RequestContext]] = ContextVar("request_context", default=None)


def bind_request(method: str, path: str, user: Optional[str] = None) -> Token:
    """Attach a request to the records logged from the current context."""
    return _request_context.set(RequestContext(method, path, user))


def reset_request(token: Token) -> None:
    _request_context.reset(token)


def current_request() -> Optional[RequestContext]:
    return _request_context.get()


class JSONFormatter(logging.Formatter):
    """Structured formatter: one JSON document per record."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        request = current_request()
        if request is not None:
            log_data["request"] = asdict(request)

        # Set through ``extra=`` by the error handler.
        technical_code = getattr(record, "technical_code", None)
        if technical_code:
            log_data["technicalCode"] = technical_code

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class TextFormatter(logging.Formatter):
    """Colored single-line formatter for local runs."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
        "RESET": "\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]

        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        log_message = f"{color}[{timestamp}] {record.levelname:8s}{reset} - {record.name}"

        request = current_request()
        if request is not None:
            log_message += f" [{request.method} {request.path}]"

        log_message += f" - {record.getMessage()}"

        if record.exc_info:
            log_message += f"\n{self.formatException(record.exc_info)}"

        return log_message


def setup_logger(
    name: str = ROOT_LOGGER,
    level: str = "INFO",
    log_format: str = "text"
) -> logging.Logger:
    """
    Setup and configure logger.

    Loggers obtained through ``get_logger`` are children of this one and
    share its handler.

    Args:
        name: Logger name
        level: Log level
        log_format: Format type (json or text)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, level.upper()))
    handler.setFormatter(JSONFormatter() if log_format.lower() == "json" else TextFormatter())

    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Get a logger nested under the application logger."""
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
