"""src/reqform/http/__init__.py

Wire-level building blocks: headers, query strings, URLs, bodies and the
request message parser.
"""

from .body import BodyKind, EntityBody, make_body
from .headers import Headers
from .message import MessageParser, ParseResult, parse_message
from .query import QueryString, build_query_string, parse_query_string
from .url import URL, split_url

__all__ = [
    "Headers",
    "QueryString",
    "parse_query_string",
    "build_query_string",
    "URL",
    "split_url",
    "EntityBody",
    "BodyKind",
    "make_body",
    "MessageParser",
    "ParseResult",
    "parse_message",
]
