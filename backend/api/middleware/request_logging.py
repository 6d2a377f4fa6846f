"""
Request middleware - request correlation and lightweight usage logging.

Request IDs:
    Every request gets g.request_id (from the X-Request-ID header, or a new
    UUID) and the same value is echoed back as a response header.

Request logging env vars:
    REQUEST_LOG_ENABLED      (default: true)
    REQUEST_LOG_SAMPLE_RATE  (default: 0.0)
    REQUEST_LOG_ENDPOINTS    (comma-separated path prefixes to always log)
"""

import logging
import os
import random
import time
import uuid
from typing import List

from flask import Flask, g, request


logger = logging.getLogger("api.request")

# Longer client-supplied IDs are replaced, they end up in every log line
MAX_REQUEST_ID_LENGTH = 128


def setup_request_id_middleware(app: Flask) -> None:
    """Inject g.request_id before each request and echo it in X-Request-ID."""

    @app.before_request
    def inject_request_id():
        request_id = request.headers.get('X-Request-ID')
        if not request_id or len(request_id) > MAX_REQUEST_ID_LENGTH:
            request_id = str(uuid.uuid4())
        g.request_id = request_id

    @app.after_request
    def add_request_id_header(response):
        if hasattr(g, 'request_id'):
            response.headers['X-Request-ID'] = g.request_id
        return response


def _parse_watchlist(raw: str) -> List[str]:
    if not raw:
        return []
    return [p.strip() for p in raw.split(",") if p.strip()]


def _should_log(path: str, watchlist: List[str], sample_rate: float) -> bool:
    if watchlist:
        return any(path.startswith(prefix) for prefix in watchlist)
    if sample_rate <= 0:
        return False
    if sample_rate >= 1:
        return True
    return random.random() <= sample_rate


def setup_request_logging_middleware(app: Flask) -> None:
    """Log sampled /api requests with status and duration."""
    enabled = os.environ.get("REQUEST_LOG_ENABLED", "true").lower() == "true"
    try:
        sample_rate = float(os.environ.get("REQUEST_LOG_SAMPLE_RATE", "0.0"))
    except ValueError:
        sample_rate = 0.0
    watchlist = _parse_watchlist(os.environ.get("REQUEST_LOG_ENDPOINTS", ""))

    if not enabled:
        return

    @app.before_request
    def _start_timer():
        g.request_start = time.perf_counter()

    @app.after_request
    def _log_request(response):
        path = request.path
        if not path.startswith("/api"):
            return response

        if not _should_log(path, watchlist, sample_rate):
            return response

        duration_ms = None
        if hasattr(g, "request_start"):
            duration_ms = round((time.perf_counter() - g.request_start) * 1000, 2)

        logger.info(
            "api_request path=%s method=%s status=%s duration_ms=%s request_id=%s user_id=%s",
            path,
            request.method,
            response.status_code,
            duration_ms,
            getattr(g, "request_id", None),
            getattr(g, "user_id", None),
        )
        return response
