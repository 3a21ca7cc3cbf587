import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from sitecrawler.robots import is_allowed


def _make_server(robots_body):
    requested = []

    class Handler(BaseHTTPRequestHandler):
        def do_GET(self):
            requested.append(self.path)
            if self.path == "/robots.txt" and robots_body is not None:
                body = robots_body
                self.send_response(200)
                self.send_header("Content-Length", str(len(body)))
                self.end_headers()
                self.wfile.write(body)
                return
            self.send_error(404)

        def log_message(self, *args):
            pass

    httpd = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
    return httpd, requested


@pytest.fixture
def serve():
    servers = []

    def start(robots_body):
        httpd, requested = _make_server(robots_body)
        thread = threading.Thread(target=httpd.serve_forever, daemon=True)
        thread.start()
        servers.append(httpd)
        return f"http://127.0.0.1:{httpd.server_address[1]}", requested

    yield start
    for httpd in servers:
        httpd.shutdown()
        httpd.server_close()


def test_permissive_robots_allows(serve):
    url, requested = serve(b"User-agent: *\nAllow: /")
    assert is_allowed(url, "WebsiteCrawler") is True
    assert requested == ["/robots.txt"]


def test_rules_are_not_enforced(serve):
    url, requested = serve(b"User-agent: *\nDisallow: /")
    assert is_allowed(url, "WebsiteCrawler") is True
    assert requested == ["/robots.txt"]


def test_trailing_slash_is_trimmed(serve):
    url, requested = serve(b"User-agent: *\nAllow: /")
    assert is_allowed(url + "/", "WebsiteCrawler") is True
    assert requested == ["/robots.txt"]


def test_missing_robots_allows(serve):
    url, requested = serve(None)
    assert is_allowed(url, "WebsiteCrawler") is True
    assert requested == ["/robots.txt"]


def test_unreachable_site_allows():
    assert is_allowed("http://nonexistent.invalid", "WebsiteCrawler") is True