"""src/reqform/http/url.py

URL builder and parser for Reqform.
"""

import urllib.parse
from typing import Any, Dict, Mapping, Optional, Union

from reqform.exceptions import ParseFailure
from reqform.http.query import QueryString, build_query_string, parse_query_string

__all__ = ["URL", "URL_PART_KEYS", "split_url"]

URL_PART_KEYS = ("scheme", "user", "pass", "host", "port", "path", "query", "fragment")


def split_url(url: str) -> Dict[str, Any]:
    """
    Split a URL into its generic components.

    Returns:
        Dict with the keys scheme, user, pass, host, port, path, query and
        fragment. Missing components are None; query is the raw string.

    Raises:
        ParseFailure: If the port is not a number in range.
    """
    try:
        parsed = urllib.parse.urlsplit(url)
        port = parsed.port
    except ValueError as exc:
        raise ParseFailure(f"Invalid URL {url!r}: {exc}") from exc

    return {
        "scheme": parsed.scheme or None,
        "user": _unquote(parsed.username),
        "pass": _unquote(parsed.password),
        "host": parsed.hostname,
        "port": port,
        "path": parsed.path or None,
        "query": parsed.query or None,
        "fragment": parsed.fragment or None,
    }


def _unquote(text: Optional[str]) -> Optional[str]:
    # netloc re-encodes userinfo, so it is held decoded.
    return urllib.parse.unquote(text) if text is not None else None


def _check_port(port: Any) -> Optional[int]:
    if port is None or port == "":
        return None
    try:
        value = int(port)
    except (TypeError, ValueError) as exc:
        raise ParseFailure(f"Invalid port: {port!r}") from exc
    if not 0 <= value <= 65535:
        raise ParseFailure(f"Port out of range: {value}")
    return value


class URL:
    """Decomposed URL: scheme, user, password, host, port, path, query, fragment."""

    __slots__ = ("scheme", "user", "password", "host", "port", "path", "query", "fragment")

    # pylint: disable=too-many-arguments
    def __init__(
        self,
        scheme: Optional[str] = None,
        host: Optional[str] = None,
        port: Union[int, str, None] = None,
        path: Optional[str] = "/",
        query: Union[str, Mapping[str, Any], None] = None,
        fragment: Optional[str] = None,
        user: Optional[str] = None,
        password: Optional[str] = None,
    ):
        self.scheme = scheme or None
        self.host = host or None
        self.port = _check_port(port)
        self.path = path or "/"
        self.fragment = fragment or None
        self.user = user
        self.password = password

        if isinstance(query, QueryString):
            self.query = query.copy()
        elif isinstance(query, Mapping):
            self.query = QueryString(query)
        else:
            self.query = parse_query_string(query)

    @classmethod
    def from_string(cls, url: str) -> "URL":
        """Parse a full or path-relative URL string, including its query."""
        return cls.from_parts(split_url(url))

    @classmethod
    def from_parts(cls, parts: Mapping[str, Any]) -> "URL":
        """
        Build a URL from generic URL-decomposition keys.

        A query embedded in ``path`` is split out unless ``query`` is also
        given, in which case the explicit ``query`` wins.
        """
        path = parts.get("path") or "/"
        query = parts.get("query")
        if "?" in path:
            path, _, embedded = path.partition("?")
            if query is None:
                query = embedded

        return cls(
            scheme=parts.get("scheme"),
            host=parts.get("host"),
            port=parts.get("port"),
            path=path,
            query=query,
            fragment=parts.get("fragment"),
            user=parts.get("user"),
            password=parts.get("pass", parts.get("password")),
        )

    @classmethod
    def from_target(cls, target: str) -> "URL":
        """
        Build a URL from a start-line request target.

        Absolute URLs are parsed fully; anything else becomes a path-only
        URL with no host.
        """
        if "://" in target:
            return cls.from_string(target)

        rest, _, fragment = target.partition("#")
        path, _, query = rest.partition("?")
        return cls(path=path, query=query, fragment=fragment)

    @property
    def netloc(self) -> str:
        """Authority component: ``user:pass@host:port``."""
        if not self.host:
            return ""
        host = f"[{self.host}]" if ":" in self.host else self.host
        if self.port is not None:
            host = f"{host}:{self.port}"
        if self.user is not None:
            userinfo = urllib.parse.quote(self.user, safe="")
            if self.password is not None:
                userinfo += ":" + urllib.parse.quote(self.password, safe="")
            host = f"{userinfo}@{host}"
        return host

    @property
    def request_target(self) -> str:
        """Origin-form target: path plus ``?query`` when present."""
        if self.query:
            return f"{self.path}?{build_query_string(self.query)}"
        return self.path

    def to_parts(self) -> Dict[str, Any]:
        """Return the generic URL-decomposition dict."""
        return {
            "scheme": self.scheme,
            "user": self.user,
            "pass": self.password,
            "host": self.host,
            "port": self.port,
            "path": self.path,
            "query": build_query_string(self.query) if self.query else None,
            "fragment": self.fragment,
        }

    def copy(self) -> "URL":
        return URL(
            scheme=self.scheme,
            host=self.host,
            port=self.port,
            path=self.path,
            query=self.query,
            fragment=self.fragment,
            user=self.user,
            password=self.password,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, URL):
            return NotImplemented
        return self.to_parts() == other.to_parts()

    def __str__(self) -> str:
        url = ""
        if self.scheme:
            url += f"{self.scheme}:"
        if self.host:
            url += f"//{self.netloc}"
        url += self.request_target
        if self.fragment:
            url += f"#{self.fragment}"
        return url

    def __repr__(self) -> str:
        return f"URL({str(self)!r})"
