"""src/reqform/client/factory.py

Request factory: builds Request objects from raw messages, URL parts or URLs.
"""

import logging
from typing import Any, Mapping, Optional, Union

from reqform.client.request import Request
from reqform.config import ParserConfig, RequestOptions
from reqform.exceptions import InvalidMethod
from reqform.http.body import BodySource, make_body
from reqform.http.headers import Headers, HeadersInput
from reqform.http.message import TOKEN_RE, MessageParser, ParseResult
from reqform.http.url import URL

__all__ = [
    "RequestFactory",
    "create",
    "from_message",
    "from_parts",
    "normalize_method",
]

logger = logging.getLogger(__name__)


def normalize_method(method: Any) -> str:
    """
    Strip and upper-case an HTTP method.

    Raises:
        InvalidMethod: If the method is empty, not a string or not a token.
    """
    if not isinstance(method, str) or not method.strip():
        raise InvalidMethod(method)
    method = method.strip()
    if not TOKEN_RE.match(method):
        raise InvalidMethod(method)
    return method.upper()


def _resolve_options(
    options: Optional[RequestOptions],
    headers: HeadersInput,
    body: BodySource,
    protocol: str,
    protocol_version: str,
) -> RequestOptions:
    explicit = RequestOptions(headers, body, protocol, protocol_version)
    if options is None:
        return explicit
    if explicit != RequestOptions():
        raise TypeError(
            "Pass optional request arguments either directly or via options, not both"
        )
    return options


class RequestFactory:
    """
    Creates HTTP requests.

    Every entry point converges on build_request(). The factory keeps no
    state besides its parser configuration, so one instance can be shared.
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.parser = MessageParser(config)

    @property
    def config(self) -> ParserConfig:
        return self.parser.config

    def parse_message(self, message: Union[str, bytes, bytearray]) -> ParseResult:
        """
        Parse an HTTP message into its structured parts.

        Raises:
            ParseFailure: If the message is malformed.
        """
        return self.parser.parse(message)

    # pylint: disable=too-many-arguments,too-many-positional-arguments
    def build_request(
        self,
        method: str,
        url: URL,
        headers: HeadersInput = None,
        body: BodySource = None,
        protocol: str = "HTTP",
        protocol_version: str = "1.1",
    ) -> Request:
        """
        Build a Request from already decomposed parts.

        Headers given by the caller are used as-is. The only header ever
        added is Content-Type for form-field bodies, and only when the
        caller did not set one.

        Raises:
            InvalidMethod: If the method is empty or not a token.
            UnsupportedBodyType: If the body source is not supported.
        """
        normalized = normalize_method(method)
        request_headers = Headers(headers)
        entity = make_body(body)
        if entity.content_type and "Content-Type" not in request_headers:
            request_headers["Content-Type"] = entity.content_type

        request = Request(
            normalized,
            url.copy(),
            request_headers,
            entity,
            protocol=protocol,
            protocol_version=protocol_version,
        )
        logger.debug("Built request %s %s", normalized, request.url)
        return request

    def from_message(self, message: Union[str, bytes, bytearray]) -> Request:
        """
        Create a new request based on an HTTP message.

        Raises:
            ParseFailure: If the message is malformed.
        """
        parsed = self.parse_message(message)
        body: BodySource = parsed.body
        if isinstance(message, (bytes, bytearray)):
            # Back to the original bytes of the message body.
            body = parsed.body.encode("iso-8859-1")
        return self.build_request(
            parsed.method,
            parsed.url,
            parsed.headers,
            body,
            parsed.protocol,
            parsed.protocol_version,
        )

    # pylint: disable=too-many-arguments,too-many-positional-arguments
    def from_parts(
        self,
        method: str,
        parts: Mapping[str, Any],
        headers: HeadersInput = None,
        body: BodySource = None,
        protocol: str = "HTTP",
        protocol_version: str = "1.1",
        *,
        options: Optional[RequestOptions] = None,
    ) -> Request:
        """
        Create a request from URL parts.

        Args:
            method: HTTP method (GET, POST, PUT, HEAD, DELETE, etc).
            parts: URL parts with the keys scheme, host, port, user, pass,
                path, query and fragment. Missing path defaults to ``/``.
            headers: HTTP headers, empty if None.
            body: Body source, empty if None.
            protocol: Protocol name (HTTP).
            protocol_version: Protocol version (1.0, 1.1).
            options: The optional arguments above as one RequestOptions.
        """
        opts = _resolve_options(options, headers, body, protocol, protocol_version)
        return self.build_request(
            method,
            URL.from_parts(parts),
            opts.headers,
            opts.body,
            opts.protocol,
            opts.protocol_version,
        )

    def create(
        self,
        method: str,
        url: Union[str, URL],
        headers: HeadersInput = None,
        body: BodySource = None,
        *,
        options: Optional[RequestOptions] = None,
    ) -> Request:
        """
        Create a new request for a URL.

        Args:
            method: HTTP method (GET, POST, PUT, HEAD, DELETE, etc).
            url: URL object or URL string. Query string parameters in a
                string URL are parsed as well.
            headers: HTTP headers, empty if None.
            body: Body source, empty if None.
            options: Optional arguments as one RequestOptions.
        """
        if isinstance(url, URL):
            target = url
        elif isinstance(url, str):
            target = URL.from_string(url)
        else:
            raise TypeError(f"url must be a str or URL, not {type(url).__name__}")

        opts = _resolve_options(options, headers, body, "HTTP", "1.1")
        return self.build_request(
            method,
            target,
            opts.headers,
            opts.body,
            opts.protocol,
            opts.protocol_version,
        )


_default_factory = RequestFactory()


def from_message(message: Union[str, bytes, bytearray]) -> Request:
    """Create a request from a raw HTTP message with the default factory."""
    return _default_factory.from_message(message)


# pylint: disable=too-many-arguments,too-many-positional-arguments
def from_parts(
    method: str,
    parts: Mapping[str, Any],
    headers: HeadersInput = None,
    body: BodySource = None,
    protocol: str = "HTTP",
    protocol_version: str = "1.1",
    *,
    options: Optional[RequestOptions] = None,
) -> Request:
    """Create a request from URL parts with the default factory."""
    return _default_factory.from_parts(
        method, parts, headers, body, protocol, protocol_version, options=options
    )


def create(
    method: str,
    url: Union[str, URL],
    headers: HeadersInput = None,
    body: BodySource = None,
    *,
    options: Optional[RequestOptions] = None,
) -> Request:
    """Create a request for a URL with the default factory."""
    return _default_factory.create(method, url, headers, body, options=options)
