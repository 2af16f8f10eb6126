"""src/reqform/exceptions.py

Reqform Exceptions hierarchy.
"""

from typing import Any, Optional


class ReqformError(Exception):
    """Base exception for all Reqform errors."""


class RequestError(ReqformError):
    """General exception for request construction errors."""


class ProtocolError(RequestError):
    """
    Errors related to the HTTP message format (parsing, violations).
    """


class ParseFailure(ProtocolError):
    """
    Raw message or URL violates the grammar.

    Raised for a missing or garbled start-line, a header line without a
    colon, an oversized header block, or a URL with an invalid port.
    """

    def __init__(self, message: str, line: Optional[str] = None):
        super().__init__(message)
        self.line = line


class UnsupportedBodyType(RequestError, TypeError):
    """Body source is not a string, bytes, stream, form fields or EntityBody."""

    def __init__(self, source: Any):
        self.source_type = type(source)
        super().__init__(
            f"Unsupported body type: {self.source_type.__name__}"
        )


class InvalidMethod(RequestError, ValueError):
    """HTTP method is empty or is not a valid token."""

    def __init__(self, method: Any):
        self.method = method
        super().__init__(f"Invalid HTTP method: {method!r}")
