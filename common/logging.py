"""Logging helpers with request correlation."""

from __future__ import annotations

import logging
import os
import time
import uuid
from typing import Any

from flask import Flask, g, request

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
ROOT_LOGGER = "travel_pace_server"
LEVEL_ENV = "TRAVEL_PACE_LOG_LEVEL"


def _configure_root() -> logging.Logger:
    logger = logging.getLogger(ROOT_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logger.addHandler(handler)
        level = os.environ.get(LEVEL_ENV, "INFO").upper()
        logger.setLevel(getattr(logging, level, logging.INFO))
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the server logger or a child of it for ``name``.

    Only the root server logger owns a handler; children propagate to it.
    """

    root = _configure_root()
    if not name or name == ROOT_LOGGER:
        return root
    return root.getChild(name)


def _request_context() -> dict[str, Any]:
    return {
        "request_id": getattr(g, "request_id", "-"),
        "path": request.path,
        "method": request.method,
    }


def install_request_logging(app: Flask) -> None:
    logger = get_logger("http")

    @app.before_request
    def _begin_request() -> None:  # pragma: no cover - flask hooks
        g.request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        g.request_started = time.perf_counter()

    @app.after_request
    def _after_request(response):  # pragma: no cover - flask hooks
        duration_ms = 0.0
        if hasattr(g, "request_started"):
            duration_ms = (time.perf_counter() - g.request_started) * 1000
        context = _request_context()
        logger.info(
            "%s %s -> %s (%.2f ms)",
            context["method"],
            context["path"],
            response.status_code,
            duration_ms,
            extra={**context, "status": response.status_code},
        )
        response.headers.setdefault("X-Request-ID", getattr(g, "request_id", ""))
        return response

    @app.teardown_request
    def _teardown_request(exc):  # pragma: no cover - flask hooks
        if exc is not None:
            logger.error("request error", exc_info=exc, extra=_request_context())


__all__ = ["get_logger", "install_request_logging"]
