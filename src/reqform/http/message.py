"""src/reqform/http/message.py

HTTP request message parser.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

from reqform.config import ParserConfig
from reqform.exceptions import ParseFailure
from reqform.http.headers import Headers
from reqform.http.url import URL

__all__ = ["MessageParser", "ParseResult", "parse_message"]

logger = logging.getLogger(__name__)

# RFC 7230 tchar
TOKEN_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")
PROTOCOL_RE = re.compile(r"^([A-Za-z][A-Za-z0-9]*)/(\d+(?:\.\d+)?)$")

_HEAD_END_RE = re.compile(r"\r?\n\r?\n")
_LINE_RE = re.compile(r"\r?\n")

DEFAULT_PROTOCOL = "HTTP"
DEFAULT_PROTOCOL_VERSION = "1.1"


@dataclass(frozen=True)
class ParseResult:
    """Structured view of a raw request message."""

    method: str
    protocol: str
    protocol_version: str
    url: URL
    headers: Headers
    body: str

    @property
    def parts(self) -> Dict[str, Any]:
        """URL of the request target as generic URL-decomposition keys."""
        return self.url.to_parts()


class MessageParser:
    """
    HTTP/1.x request message parser.

    Handles:
    - Start-line parsing with protocol defaults.
    - Header parsing with duplicate accumulation and line folding.
    - CRLF and bare LF line endings.
    - Defensive sizing.
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig()
        self.config.validate()

    def parse(self, raw: Union[str, bytes, bytearray]) -> ParseResult:
        """
        Parse a full raw HTTP request message.

        Returns:
            ParseResult with the method, protocol, URL, headers and verbatim
            body of the message.

        Raises:
            ParseFailure: If the start-line is missing or malformed, a header
                line is malformed, or a size limit is exceeded.
            TypeError: If raw is neither str nor bytes.
        """
        if isinstance(raw, (bytes, bytearray)):
            # Latin-1 maps every byte, so the body survives unchanged.
            text = bytes(raw).decode("iso-8859-1")
        elif isinstance(raw, str):
            text = raw
        else:
            raise TypeError(f"Message must be str or bytes, not {type(raw).__name__}")

        # Empty lines before the start-line are ignored (RFC 7230 3.5).
        text = text.lstrip("\r\n")
        if not text:
            raise ParseFailure("Empty message: start-line not found")

        match = _HEAD_END_RE.search(text)
        if match:
            head, body = text[: match.start()], text[match.end() :]
        else:
            head, body = text, ""

        if len(head) > self.config.max_header_size:
            raise ParseFailure(
                f"Headers exceed maximum size of {self.config.max_header_size} bytes"
            )
        if self.config.max_body_size is not None and len(body) > self.config.max_body_size:
            raise ParseFailure(
                f"Body exceeds maximum size of {self.config.max_body_size} bytes"
            )

        lines = _LINE_RE.split(head)
        method, target, protocol, version = self._parse_start_line(lines[0])
        headers = Headers.from_lines(lines[1:], allow_folding=self.config.allow_folding)
        url = URL.from_target(target)

        logger.debug(
            "Parsed %s %s %s/%s (%d headers, %d body chars)",
            method,
            target,
            protocol,
            version,
            len(headers),
            len(body),
        )
        return ParseResult(
            method=method,
            protocol=protocol,
            protocol_version=version,
            url=url,
            headers=headers,
            body=body,
        )

    @staticmethod
    def _parse_start_line(line: str) -> Tuple[str, str, str, str]:
        """Split ``METHOD target [PROTOCOL/VERSION]``."""
        parts = line.split()
        if len(parts) not in (2, 3):
            raise ParseFailure(f"Invalid start-line: {line!r}", line=line)

        method, target = parts[0], parts[1]
        if not TOKEN_RE.match(method):
            raise ParseFailure(f"Invalid method in start-line: {line!r}", line=line)

        if len(parts) == 2:
            return method.upper(), target, DEFAULT_PROTOCOL, DEFAULT_PROTOCOL_VERSION

        protocol_match = PROTOCOL_RE.match(parts[2])
        if not protocol_match:
            raise ParseFailure(f"Invalid protocol in start-line: {line!r}", line=line)
        protocol, version = protocol_match.groups()
        return method.upper(), target, protocol.upper(), version


def parse_message(
    raw: Union[str, bytes, bytearray], config: Optional[ParserConfig] = None
) -> ParseResult:
    """Parse a raw HTTP request message with a one-off parser."""
    return MessageParser(config).parse(raw)
