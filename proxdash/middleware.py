"""WSGI middlewares applied around the dashboard application."""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Any, Callable, Iterable
from urllib.parse import quote

log = logging.getLogger(__name__)

WSGIApp = Callable[[dict, Callable[..., Any]], Iterable[bytes]]


def _request_uri(environ: dict) -> str:
    path = quote(environ.get("SCRIPT_NAME", "") + environ.get("PATH_INFO", ""))
    query = environ.get("QUERY_STRING", "")
    return f"{path}?{query}" if query else path


def _remote_addr(environ: dict) -> str:
    addr = environ.get("REMOTE_ADDR", "")
    port = environ.get("REMOTE_PORT")
    return f"{addr}:{port}" if port else addr


def _format_duration(seconds: float) -> str:
    if seconds < 1e-3:
        return f"{seconds * 1e6:.3f}µs"
    if seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds:.3f}s"


def with_logging(app: WSGIApp) -> WSGIApp:
    """Log method, URI, client address and duration of every request."""

    @wraps(app)
    def wrapper(environ: dict, start_response: Callable[..., Any]) -> Iterable[bytes]:
        start = time.perf_counter()
        result = app(environ, start_response)
        log.info(
            "%s %s %s %s",
            environ.get("REQUEST_METHOD", ""),
            _request_uri(environ),
            _remote_addr(environ),
            _format_duration(time.perf_counter() - start),
        )
        return result

    return wrapper


def with_auth(app: WSGIApp) -> WSGIApp:
    """Authentication hook; every request is currently accepted."""

    @wraps(app)
    def wrapper(environ: dict, start_response: Callable[..., Any]) -> Iterable[bytes]:
        return app(environ, start_response)

    return wrapper


def with_metrics(app: WSGIApp) -> WSGIApp:
    """Metrics hook around each request; no metrics are recorded yet."""

    @wraps(app)
    def wrapper(environ: dict, start_response: Callable[..., Any]) -> Iterable[bytes]:
        return app(environ, start_response)

    return wrapper