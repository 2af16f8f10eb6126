"""src/reqform/config.py

Parser limits and request construction options.
"""

import os
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["ParserConfig", "RequestOptions"]

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class ParserConfig:
    """
    Limits and tolerances applied by the message parser.

    Attributes:
        max_header_size: Maximum size in characters of the start-line plus
            the header block.
        max_body_size: Maximum body size in characters, unlimited if None.
        allow_folding: Accept obsolete header line folding (continuation
            lines starting with a space or tab).
    """

    max_header_size: int = 8192
    max_body_size: Optional[int] = None
    allow_folding: bool = True

    @classmethod
    def from_env(cls) -> "ParserConfig":
        """
        Create a configuration from environment variables.

        REQFORM_MAX_HEADER_SIZE  Header block limit (default: 8192)
        REQFORM_MAX_BODY_SIZE    Body limit (default: unlimited)
        REQFORM_ALLOW_FOLDING    Accept folded headers (default: true)
        """
        max_body = os.getenv("REQFORM_MAX_BODY_SIZE")
        config = cls(
            max_header_size=int(os.getenv("REQFORM_MAX_HEADER_SIZE", "8192")),
            max_body_size=int(max_body) if max_body else None,
            allow_folding=os.getenv("REQFORM_ALLOW_FOLDING", "true").lower()
            in _TRUE_VALUES,
        )
        config.validate()
        return config

    def validate(self) -> None:
        """Raise ValueError for out-of-range limits."""
        if self.max_header_size <= 0:
            raise ValueError(
                f"max_header_size must be > 0, got {self.max_header_size}"
            )
        if self.max_body_size is not None and self.max_body_size < 0:
            raise ValueError(f"max_body_size must be >= 0, got {self.max_body_size}")


@dataclass
class RequestOptions:
    """
    Optional arguments of request construction.

    Attributes:
        headers: Headers as a mapping, Headers instance or list of pairs.
            Empty when None.
        body: Body source (str, bytes, stream, form fields or EntityBody).
            Empty when None.
        protocol: Protocol name of the start-line.
        protocol_version: Protocol version of the start-line.
    """

    headers: Any = None
    body: Any = None
    protocol: str = "HTTP"
    protocol_version: str = "1.1"
