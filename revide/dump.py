"""Send the textual form of an IR module to a running viewer over HTTP."""

from __future__ import annotations

import base64
import http.client
from dataclasses import dataclass
from urllib.parse import quote

__all__ = ["DumpRequest", "build_dump_request", "dump"]

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 13337
_BASE_PATH = "/llvm?type=module&title="
_CONTENT_TYPE = "text/plain"


@dataclass(frozen=True)
class DumpRequest:
    """The pieces of the POST request that carries a module dump."""

    path: str
    body: bytes
    content_type: str = _CONTENT_TYPE


def build_dump_request(module_text: str, title: str = "") -> DumpRequest:
    """Build the request for *module_text*: URL-escaped title, Base64 body."""
    path = _BASE_PATH + quote(title, safe="")
    body = base64.b64encode(module_text.encode("utf-8"))
    return DumpRequest(path=path, body=body)


def dump(
    module_text: str,
    title: str = "",
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> int:
    """POST *module_text* to the viewer and return the HTTP status code.

    Connection failures are raised as :class:`OSError`.
    """
    request = build_dump_request(module_text, title)
    connection = http.client.HTTPConnection(host, port, timeout=10)
    try:
        connection.request(
            "POST",
            request.path,
            body=request.body,
            headers={"Content-Type": request.content_type},
        )
        response = connection.getresponse()
        response.read()
        return response.status
    finally:
        connection.close()