"""HTTP server exposing the dashboard pages, fragments and static files."""

from __future__ import annotations

import html
import logging
import mimetypes
import posixpath
import signal
import socket
import threading
from pathlib import Path
from socketserver import ThreadingMixIn
from typing import Any, Callable, Iterable
from urllib.parse import quote
from wsgiref.simple_server import WSGIRequestHandler, WSGIServer, make_server

from .config import Config
from .handlers import Handlers
from .middleware import with_logging, with_metrics
from .service import Service

log = logging.getLogger(__name__)

DEFAULT_STATIC_DIR = Path(__file__).with_name("static")
STATIC_PREFIX = "/static/"
REQUEST_TIMEOUT = 15.0
SHUTDOWN_TIMEOUT = 10.0

_PAGE_METHODS = ("GET", "HEAD")


class _ThreadingWSGIServer(ThreadingMixIn, WSGIServer):
    daemon_threads = True


class _ThreadingWSGIServer6(_ThreadingWSGIServer):
    address_family = socket.AF_INET6


class _RequestHandler(WSGIRequestHandler):
    timeout = REQUEST_TIMEOUT

    def log_message(self, format: str, *args: Any) -> None:
        # The logging middleware reports each request at INFO; the raw
        # access line goes to the debug log instead of stderr.
        log.debug("%s - %s", self.address_string(), format % args)


def _split_address(address: str) -> tuple[str, int]:
    """Split ``host:port`` (host optional, port empty meaning 80)."""
    if ":" not in address and address:
        raise ValueError(f"address {address!r}: missing port in address")
    host, _, port = address.rpartition(":")
    host = host.strip("[]")
    if not port:
        return host, 80
    if port.isdigit():
        return host, int(port)
    try:
        return host, socket.getservbyname(port, "tcp")
    except OSError as exc:
        raise ValueError(f"address {address!r}: unknown port {port!r}") from exc


def _respond(
    start_response: Callable[..., Any],
    status: str,
    content_type: str,
    body: bytes,
    method: str,
    extra_headers: Iterable[tuple[str, str]] = (),
) -> list[bytes]:
    headers = [("Content-Type", content_type), ("Content-Length", str(len(body)))]
    headers.extend(extra_headers)
    start_response(status, headers)
    return [b""] if method == "HEAD" else [body]


def _plain(
    start_response: Callable[..., Any],
    status: str,
    text: str,
    method: str,
    extra_headers: Iterable[tuple[str, str]] = (),
) -> list[bytes]:
    return _respond(
        start_response,
        status,
        "text/plain; charset=utf-8",
        text.encode("utf-8"),
        method,
        extra_headers,
    )


def _redirect(
    start_response: Callable[..., Any], location: str, method: str
) -> list[bytes]:
    return _respond(
        start_response,
        "301 Moved Permanently",
        "text/html; charset=utf-8",
        f'<a href="{html.escape(location)}">Moved Permanently</a>.\n'.encode("utf-8"),
        method,
        [("Location", location)],
    )


class Server:
    """WSGI application routing requests to the dashboard handlers."""

    def __init__(
        self,
        config: Config,
        service: Service,
        static_dir: str | Path | None = None,
    ) -> None:
        self.config = config
        self.service = service
        self.static_dir = Path(static_dir) if static_dir is not None else DEFAULT_STATIC_DIR
        handlers = Handlers(service)
        self._routes: dict[str, Callable[[], str]] = {
            "/": handlers.index,
            "/nodes": handlers.clusters_status_card,
            "/nodes/lxc": handlers.dashboard_node_lxc_list,
            "/nodes/vm": handlers.dashboard_node_vm_list,
            "/clusters/dashboard-count": handlers.dashboard_count,
        }
        self.wsgi_app = with_metrics(with_logging(self.__call__))
        self.ready = threading.Event()
        self.address: tuple[str, int] | None = None
        self._stop = threading.Event()

    def __call__(
        self, environ: dict, start_response: Callable[..., Any]
    ) -> Iterable[bytes]:
        path = environ.get("PATH_INFO") or "/"
        method = environ.get("REQUEST_METHOD", "GET").upper()

        if path == STATIC_PREFIX.rstrip("/"):
            return _redirect(start_response, STATIC_PREFIX, method)
        if path.startswith(STATIC_PREFIX):
            return self._serve_static(path, method, start_response)

        route = self._routes.get(path)
        if route is None:
            return _plain(start_response, "404 Not Found", "404 page not found\n", method)
        if method not in _PAGE_METHODS:
            return _plain(
                start_response,
                "405 Method Not Allowed",
                "Method Not Allowed\n",
                method,
                [("Allow", ", ".join(_PAGE_METHODS))],
            )
        try:
            body = route().encode("utf-8")
        except ValueError:
            log.exception("failed to render %s", path)
            return _plain(
                start_response, "500 Internal Server Error", "Internal Server Error\n", method
            )
        return _respond(start_response, "200 OK", "text/html; charset=utf-8", body, method)

    def _serve_static(
        self, path: str, method: str, start_response: Callable[..., Any]
    ) -> list[bytes]:
        relative = posixpath.normpath("/" + path[len(STATIC_PREFIX):]).lstrip("/")
        root = self.static_dir.resolve()
        target = (root / relative).resolve() if relative else root
        if target != root and root not in target.parents:
            return _plain(start_response, "404 Not Found", "404 page not found\n", method)

        if target.is_dir():
            if not path.endswith("/"):
                return _redirect(start_response, path + "/", method)
            index = target / "index.html"
            if not index.is_file():
                return _respond(
                    start_response,
                    "200 OK",
                    "text/html; charset=utf-8",
                    self._listing(target).encode("utf-8"),
                    method,
                )
            target = index

        if not target.is_file():
            return _plain(start_response, "404 Not Found", "404 page not found\n", method)
        content_type = mimetypes.guess_type(target.name)[0] or "application/octet-stream"
        if content_type.startswith("text/"):
            content_type += "; charset=utf-8"
        return _respond(start_response, "200 OK", content_type, target.read_bytes(), method)

    @staticmethod
    def _listing(directory: Path) -> str:
        lines = [
            "<!doctype html>",
            '<meta name="viewport" content="width=device-width">',
            "<pre>",
        ]
        for entry in sorted(directory.iterdir(), key=lambda p: p.name):
            name = entry.name + ("/" if entry.is_dir() else "")
            lines.append(f'<a href="{quote(name)}">{html.escape(name)}</a>')
        lines.append("</pre>")
        return "\n".join(lines) + "\n"

    def _install_signal_handlers(self) -> Callable[[], None]:
        if threading.current_thread() is not threading.main_thread():
            return lambda: None

        def on_signal(signum: int, frame: Any) -> None:
            self.shutdown()

        previous = {
            sig: signal.signal(sig, on_signal) for sig in (signal.SIGINT, signal.SIGTERM)
        }

        def restore() -> None:
            for sig, handler in previous.items():
                signal.signal(sig, handler)

        return restore

    def start(self) -> None:
        """Serve until :meth:`shutdown` is called or SIGINT/SIGTERM arrives.

        Raises ValueError for a malformed address, OSError when the socket
        cannot be bound and TimeoutError when shutdown does not complete.
        """
        host, port = _split_address(self.config.server.address)
        server_class = _ThreadingWSGIServer6 if ":" in host else _ThreadingWSGIServer
        httpd = make_server(
            host, port, self.wsgi_app, server_class=server_class, handler_class=_RequestHandler
        )
        self.address = tuple(httpd.server_address[:2])
        serving = threading.Thread(target=httpd.serve_forever, name="http-server", daemon=True)
        serving.start()
        restore = self._install_signal_handlers()
        self.ready.set()
        try:
            self._stop.wait()
        finally:
            restore()
            httpd.shutdown()
            serving.join(SHUTDOWN_TIMEOUT)
            httpd.server_close()
            self.ready.clear()
            self._stop.clear()
        if serving.is_alive():
            log.error("Error when shutting down server: timed out")
            raise TimeoutError("server did not shut down in time")

    def shutdown(self) -> None:
        """Ask a running :meth:`start` to stop serving and return."""
        self._stop.set()