import base64
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import parse_qs, unquote, urlsplit

import pytest
from hypothesis import given
from hypothesis import strategies as st

from revide.dump import build_dump_request, dump


def test_empty_title_path():
    request = build_dump_request("", "")
    assert request.path == "/llvm?type=module&title="
    assert request.body == b""


def test_content_type_is_plain_text():
    assert build_dump_request("x", "t").content_type == "text/plain"


def test_body_is_base64_of_text():
    request = build_dump_request("abc", "")
    assert request.body == b"YWJj"


def test_title_with_special_characters_is_escaped():
    request = build_dump_request("m", "a b+c;d,e\n")
    query = request.path.split("?", 1)[1]
    assert " " not in query
    assert "\n" not in query
    assert parse_qs(query)["title"] == ["a b+c;d,e\n"]
    assert parse_qs(query)["type"] == ["module"]


@given(st.text())
def test_body_round_trip(text):
    request = build_dump_request(text, "")
    assert base64.b64decode(request.body).decode("utf-8") == text


@given(st.text())
def test_title_round_trip(title):
    request = build_dump_request("", title)
    prefix = "/llvm?type=module&title="
    assert request.path.startswith(prefix)
    encoded = request.path[len(prefix):]
    assert "&" not in encoded
    assert unquote(encoded) == title


@pytest.fixture
def server():
    received = {}

    class Handler(BaseHTTPRequestHandler):
        def do_POST(self):
            length = int(self.headers["Content-Length"])
            received["path"] = self.path
            received["content_type"] = self.headers["Content-Type"]
            received["body"] = self.rfile.read(length)
            self.send_response(200)
            self.send_header("Content-Length", "0")
            self.end_headers()

        def log_message(self, *args):
            pass

    httpd = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    try:
        yield httpd.server_address[1], received
    finally:
        httpd.shutdown()
        httpd.server_close()


def test_dump_posts_request(server):
    port, received = server
    text = "define void @f() {\n  ret void\n}\n"
    status = dump(text, "my module", "127.0.0.1", port)
    assert status == 200
    expected = build_dump_request(text, "my module")
    assert received["path"] == expected.path
    assert received["content_type"] == "text/plain"
    assert base64.b64decode(received["body"]).decode("utf-8") == text
    assert parse_qs(urlsplit(received["path"]).query)["title"] == ["my module"]


def test_dump_without_server_raises():
    probe = ThreadingHTTPServer(("127.0.0.1", 0), BaseHTTPRequestHandler)
    port = probe.server_address[1]
    probe.server_close()
    with pytest.raises(OSError):
        dump("text", "title", "127.0.0.1", port)