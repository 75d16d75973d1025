import threading
import urllib.request
from wsgiref.util import setup_testing_defaults

import pytest

from proxdash.config import Config, ServerConfig
from proxdash.models import ClusterResource, ResourceType
from proxdash.server import Server
from proxdash.service import Service


def _call(app, path, method="GET"):
    environ = {}
    setup_testing_defaults(environ)
    environ["PATH_INFO"] = path
    environ["REQUEST_METHOD"] = method
    captured = {}

    def start_response(status, headers):
        captured["status"] = status
        captured["headers"] = dict(headers)

    body = b"".join(app(environ, start_response))
    return captured["status"], captured["headers"], body


@pytest.fixture
def server(tmp_path):
    static = tmp_path / "static"
    (static / "css").mkdir(parents=True)
    (static / "css" / "style.css").write_text("body{}", encoding="utf-8")
    (static / "site").mkdir()
    (static / "site" / "index.html").write_text("<p>home</p>", encoding="utf-8")
    (tmp_path / "outside.txt").write_text("hidden", encoding="utf-8")
    config = Config()
    return Server(config, Service(config), static)


def test_index_page(server):
    status, headers, body = _call(server, "/")
    assert status == "200 OK"
    assert headers["Content-Type"] == "text/html; charset=utf-8"
    assert b"Tableau de bord Proxmox" in body


def test_fragment_routes(server):
    for path in ("/nodes", "/nodes/lxc", "/nodes/vm", "/clusters/dashboard-count"):
        status, _, body = _call(server, path)
        assert status == "200 OK"
        assert body.startswith(b"<div")


def test_unknown_path_is_404(server):
    status, _, body = _call(server, "/missing")
    assert status == "404 Not Found"
    assert body == b"404 page not found\n"


def test_wrong_method_is_405(server):
    status, headers, body = _call(server, "/nodes", method="POST")
    assert status == "405 Method Not Allowed"
    assert headers["Allow"] == "GET, HEAD"
    assert body == b"Method Not Allowed\n"


def test_head_has_no_body(server):
    status, headers, body = _call(server, "/", method="HEAD")
    assert status == "200 OK"
    assert body == b""
    assert int(headers["Content-Length"]) > 0


def test_render_error_is_500(server):
    server.service.store_cluster_resources(
        [ClusterResource(name="broken", type=ResourceType.LXC)]
    )
    status, _, _ = _call(server, "/nodes/lxc")
    assert status == "500 Internal Server Error"


def test_static_file_served(server):
    status, headers, body = _call(server, "/static/css/style.css")
    assert status == "200 OK"
    assert headers["Content-Type"].startswith("text/css")
    assert body == b"body{}"


def test_static_traversal_is_blocked(server):
    status, _, body = _call(server, "/static/../outside.txt")
    assert status == "404 Not Found"
    assert b"hidden" not in body


def test_static_missing_file(server):
    status, _, _ = _call(server, "/static/nope.js")
    assert status == "404 Not Found"


def test_static_directory_redirects_and_serves_index(server):
    status, headers, _ = _call(server, "/static/site")
    assert status == "301 Moved Permanently"
    assert headers["Location"] == "/static/site/"
    status, _, body = _call(server, "/static/site/")
    assert status == "200 OK"
    assert body == b"<p>home</p>"


def test_static_directory_listing(server):
    status, _, body = _call(server, "/static/")
    assert status == "200 OK"
    assert b'<a href="css/">css/</a>' in body
    assert b'<a href="site/">site/</a>' in body


def test_wsgi_app_wraps_routes(server):
    status, _, body = _call(server.wsgi_app, "/nodes")
    assert status == "200 OK"
    assert b">Nodes</h2>" in body


def test_start_rejects_address_without_port(tmp_path):
    config = Config(server=ServerConfig(address="nohost"))
    with pytest.raises(ValueError):
        Server(config, Service(config), tmp_path).start()


def test_start_serves_until_shutdown(tmp_path):
    config = Config(server=ServerConfig(address="127.0.0.1:0"))
    srv = Server(config, Service(config), tmp_path)
    thread = threading.Thread(target=srv.start)
    thread.start()
    try:
        assert srv.ready.wait(5)
        host, port = srv.address
        with urllib.request.urlopen(f"http://{host}:{port}/nodes", timeout=5) as resp:
            body = resp.read()
            status = resp.status
    finally:
        srv.shutdown()
        thread.join(5)
    assert status == 200
    assert b">Nodes</h2>" in body
    assert not thread.is_alive()