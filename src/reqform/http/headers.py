"""src/reqform/http/headers.py

Ordered, case-insensitive, multi-valued HTTP header collection.
"""

from typing import (
    Any,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    MutableMapping,
    Optional,
    Tuple,
    Union,
)

from reqform.exceptions import ParseFailure

__all__ = ["Headers", "HeadersInput"]

HeaderValue = Union[str, List[str]]
HeadersInput = Union[
    "Headers", Mapping[str, HeaderValue], Iterable[Tuple[str, str]], None
]


def _as_values(value: Any) -> List[str]:
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value]
    return [str(value)]


class Headers(MutableMapping[str, List[str]]):
    """
    Case-insensitive dictionary for HTTP headers with support for multiple values.

    Each name maps to the list of its values in insertion order. Names keep
    the casing of their first occurrence for iteration and serialization,
    while lookups accept any casing. Use get_line() for the comma-joined
    field value.
    """

    __slots__ = ("_headers", "_names")

    def __init__(self, headers: HeadersInput = None):
        self._headers: Dict[str, List[str]] = {}
        self._names: Dict[str, str] = {}
        if headers is None:
            return

        if isinstance(headers, Headers):
            for name, values in headers.items():
                self._headers[name.lower()] = list(values)
                self._names[name.lower()] = name
        elif isinstance(headers, Mapping):
            for k, v in headers.items():
                # Support both single values and lists
                for value in _as_values(v):
                    self.add(k, value)
        else:
            for k, v in headers:
                self.add(k, v)

    @classmethod
    def from_lines(cls, lines: Iterable[str], allow_folding: bool = True) -> "Headers":
        """
        Parse raw ``Name: Value`` header lines.

        Values are trimmed, repeated names accumulate in order, and lines
        starting with a space or tab continue the previous value.

        Raises:
            ParseFailure: If a line has no colon or an empty name, or if a
                continuation line appears where it is not allowed.
        """
        pairs: List[List[str]] = []
        for line in lines:
            if not line:
                continue

            if line[0] in " \t":
                if not allow_folding:
                    raise ParseFailure("Folded header line not allowed", line=line)
                if not pairs:
                    raise ParseFailure(
                        "Continuation line without a preceding header", line=line
                    )
                pairs[-1][1] = f"{pairs[-1][1]} {line.strip()}".strip()
                continue

            if ":" not in line:
                raise ParseFailure(f"Malformed header line: {line!r}", line=line)

            name, value = line.split(":", 1)
            name = name.strip()
            if not name or " " in name or "\t" in name:
                raise ParseFailure(f"Invalid header name: {name!r}", line=line)
            pairs.append([name, value.strip()])

        return cls([(name, value) for name, value in pairs])

    def __getitem__(self, key: str) -> List[str]:
        """Get all values of a header (case-insensitive)."""
        return list(self._headers[key.lower()])

    def __setitem__(self, key: str, value: HeaderValue) -> None:
        """Replace all values of a header."""
        lowered = key.lower()
        if lowered not in self._names:
            self._names[lowered] = key
        self._headers[lowered] = _as_values(value)

    def __delitem__(self, key: str) -> None:
        lowered = key.lower()
        del self._headers[lowered]
        del self._names[lowered]

    def __iter__(self) -> Iterator[str]:
        return (self._names[k] for k in self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._headers

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Headers):
            return self._headers == other._headers
        if isinstance(other, Mapping):
            try:
                return self._headers == Headers(other)._headers
            except (AttributeError, TypeError):
                return False
        return NotImplemented

    def __repr__(self) -> str:
        return f"Headers({list(self.items_flat())!r})"

    def add(self, key: str, value: str) -> None:
        """Append a value to a header, keeping existing values."""
        lowered = key.lower()
        if lowered in self._headers:
            self._headers[lowered].append(str(value))
        else:
            self._names[lowered] = key
            self._headers[lowered] = [str(value)]

    def get_all(self, key: str) -> List[str]:
        """
        Get all values of a header.

        Args:
            key: Header name (case-insensitive).

        Returns:
            List of all values for the header, empty list if not found.
        """
        return list(self._headers.get(key.lower(), []))

    def get_line(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get the combined header field value.

        Args:
            key: Header name (case-insensitive).
            default: Default value if header not found.

        Returns:
            Comma-joined string for multiple values (except Set-Cookie
            which returns first), or default if not found.
        """
        values = self._headers.get(key.lower())
        if not values:
            return default

        if key.lower() == "set-cookie":
            return values[0]

        return ", ".join(values)

    def items_flat(self) -> Iterator[Tuple[str, str]]:
        """Yield one (name, value) pair per value, in order."""
        for lowered, values in self._headers.items():
            for value in values:
                yield self._names[lowered], value

    def copy(self) -> "Headers":
        return Headers(self)

    def to_string(self) -> str:
        """Render as ``Name: value`` lines, each terminated by CRLF."""
        return "".join(f"{name}: {value}\r\n" for name, value in self.items_flat())
