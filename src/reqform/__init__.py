"""src/reqform/__init__.py

Reqform - HTTP request parsing and construction for Python.

Reqform turns raw HTTP request messages into structured, canonical request
objects, and builds the same request objects from a method, a URL (or its
parts), headers and a body. It is built entirely on Python's standard library
and performs no network I/O.

Key Features:
    - Tolerant start-line and header parsing (CRLF or LF, folded and
      duplicate headers)
    - Ordered, case-insensitive, multi-valued headers
    - Query string codec with repeated and ``key[]`` list keys
    - One body abstraction for strings, bytes, streams and form fields
    - Full type hints (PEP 561)

Example:
    From a raw message::

        from reqform import from_message

        request = from_message(
            "POST /items?page=2 HTTP/1.1\\r\\n"
            "Host: api.example.com\\r\\n"
            "\\r\\n"
            "name=widget"
        )
        request.method            # 'POST'
        request.url.query         # QueryString({'page': '2'})
        request.headers["host"]   # ['api.example.com']

    From a URL::

        from reqform import create

        request = create("post", "https://api.example.com/items", body={"name": "widget"})
        request.to_message()
"""

import logging

from reqform.client.factory import RequestFactory, create, from_message, from_parts
from reqform.client.request import Request
from reqform.config import ParserConfig, RequestOptions
from reqform.exceptions import (
    InvalidMethod,
    ParseFailure,
    ReqformError,
    UnsupportedBodyType,
)
from reqform.http.body import BodyKind, EntityBody, make_body
from reqform.http.headers import Headers
from reqform.http.message import MessageParser, ParseResult, parse_message
from reqform.http.query import QueryString, build_query_string, parse_query_string
from reqform.http.url import URL, split_url
from reqform.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Request",
    "RequestFactory",
    "RequestOptions",
    "ParserConfig",
    "create",
    "from_message",
    "from_parts",
    "parse_message",
    "MessageParser",
    "ParseResult",
    "Headers",
    "QueryString",
    "parse_query_string",
    "build_query_string",
    "URL",
    "split_url",
    "EntityBody",
    "BodyKind",
    "make_body",
    "ReqformError",
    "ParseFailure",
    "UnsupportedBodyType",
    "InvalidMethod",
]
