"""src/reqform/client/request.py

Canonical HTTP request object.
"""

from typing import Optional

from reqform.http.body import EntityBody
from reqform.http.headers import Headers
from reqform.http.query import QueryString
from reqform.http.url import URL

__all__ = ["Request"]


class Request:
    """
    HTTP request produced by RequestFactory.

    The request owns its headers and body; its URL is a private copy.
    """

    __slots__ = ("method", "url", "headers", "body", "protocol", "protocol_version")

    # pylint: disable=too-many-arguments,too-many-positional-arguments
    def __init__(
        self,
        method: str,
        url: URL,
        headers: Headers,
        body: EntityBody,
        protocol: str = "HTTP",
        protocol_version: str = "1.1",
    ):
        self.method = method
        self.url = url
        self.headers = headers
        self.body = body
        self.protocol = protocol
        self.protocol_version = protocol_version

    @property
    def query(self) -> QueryString:
        return self.url.query

    @property
    def host(self) -> Optional[str]:
        return self.url.host

    @property
    def start_line(self) -> str:
        return (
            f"{self.method} {self.url.request_target} "
            f"{self.protocol}/{self.protocol_version}"
        )

    def to_message(self) -> bytes:
        """
        Builds the raw HTTP request bytes.

        Headers are written in order exactly as held; none are added.
        """
        headers_str = ""
        for k, v in self.headers.items_flat():
            # Validate against HTTP header injection attacks
            if "\r" in k or "\n" in k or "\r" in v or "\n" in v:
                raise ValueError(f"Invalid character in header {k}: {v!r}")
            if "\x00" in k or "\x00" in v:
                raise ValueError(f"Null byte in header {k}: {v!r}")
            headers_str += f"{k}: {v}\r\n"

        head = f"{self.start_line}\r\n{headers_str}\r\n"
        return head.encode("utf-8") + self.body.to_bytes()

    def __repr__(self) -> str:
        return f"<Request [{self.method} {self.url}]>"
