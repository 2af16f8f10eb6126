"""src/reqform/http/query.py

Query string codec for Reqform.

Parses ``a=1&b=2&b=3&c[]=4`` into an ordered mapping where repeated keys
and bracket-suffixed keys become lists, and builds it back.
"""

import urllib.parse
from typing import (
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    MutableMapping,
    Optional,
    Sequence,
    Set,
    Tuple,
    Union,
)

__all__ = [
    "FORM",
    "RFC3986",
    "QueryString",
    "QueryValue",
    "build_query_string",
    "parse_query_string",
]

# Percent-encoding styles
RFC3986 = "rfc3986"
FORM = "form"

QueryValue = Union[str, List[str], None]

_LIST_SUFFIX = "[]"


class QueryString(MutableMapping[str, QueryValue]):
    """Ordered mapping of query keys to a value or a list of values."""

    __slots__ = ("_params", "_bracketed")

    def __init__(
        self,
        params: Union[Mapping[str, QueryValue], Iterable[Tuple[str, QueryValue]], None] = None,
    ):
        self._params: Dict[str, QueryValue] = {}
        self._bracketed: Set[str] = set()
        if params is None:
            return
        items = params.items() if isinstance(params, Mapping) else params
        for key, value in items:
            self[key] = value

    def __getitem__(self, key: str) -> QueryValue:
        return self._params[key]

    def __setitem__(self, key: str, value: QueryValue) -> None:
        if isinstance(value, (list, tuple)):
            self._params[key] = [str(v) for v in value]
        elif value is None:
            self._params[key] = None
        else:
            self._params[key] = str(value)

    def __delitem__(self, key: str) -> None:
        del self._params[key]
        self._bracketed.discard(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QueryString):
            return self._params == other._params
        if isinstance(other, Mapping):
            return self._params == QueryString(other)._params
        return NotImplemented

    def __repr__(self) -> str:
        return f"QueryString({self._params!r})"

    def __str__(self) -> str:
        return build_query_string(self)

    def add(self, key: str, value: str, as_list: bool = False) -> None:
        """
        Add a value for key.

        A second value for the same key turns the entry into a list.
        With as_list=True the entry is a list even for a single value and
        is written back with ``key[]`` notation.
        """
        if as_list:
            self._bracketed.add(key)
        current = self._params.get(key)
        if key not in self._params:
            self._params[key] = [value] if as_list else value
        elif isinstance(current, list):
            current.append(value)
        elif current is None:
            self._params[key] = ["", value]
        else:
            self._params[key] = [current, value]

    def is_bracketed(self, key: str) -> bool:
        """Whether key was given in ``key[]`` notation."""
        return key in self._bracketed

    def copy(self) -> "QueryString":
        copied = QueryString(
            (k, list(v) if isinstance(v, list) else v) for k, v in self._params.items()
        )
        copied._bracketed = set(self._bracketed)
        return copied


def parse_query_string(query: Optional[str]) -> QueryString:
    """
    Decode a query string into an ordered QueryString.

    Args:
        query: Raw query, with or without a leading ``?``.

    Returns:
        QueryString with percent-decoded keys and values. Repeated keys and
        keys written as ``key[]`` map to lists.
    """
    result = QueryString()
    if not query:
        return result

    if query.startswith("?"):
        query = query[1:]

    for segment in query.split("&"):
        if not segment:
            continue
        raw_key, _, raw_value = segment.partition("=")
        key = urllib.parse.unquote_plus(raw_key)
        value = urllib.parse.unquote_plus(raw_value)

        as_list = key.endswith(_LIST_SUFFIX)
        if as_list:
            key = key[: -len(_LIST_SUFFIX)]
        result.add(key, value, as_list=as_list)

    return result


def _quote(text: str, encoding: str) -> str:
    if encoding == FORM:
        return urllib.parse.quote_plus(text, safe="")
    return urllib.parse.quote(text, safe="")


def _use_brackets(params: object, key: str, value: Sequence[str]) -> bool:
    if not isinstance(params, QueryString):
        return True
    return params.is_bracketed(key) or len(value) < 2


def build_query_string(
    params: Union[Mapping[str, QueryValue], Iterable[Tuple[str, QueryValue]]],
    encoding: str = RFC3986,
) -> str:
    """
    Encode a mapping (or list of pairs) into a query string.

    Args:
        params: Keys mapped to a string, a list of strings, or None.
        encoding: RFC3986 (spaces as %20) or FORM (spaces as ``+``).

    Returns:
        Query string without a leading ``?``. None emits a bare key. Lists
        from a QueryString repeat the plain key (``key=a&key=b``) unless the
        key was parsed in ``key[]`` notation or holds a single value; lists
        from any other mapping always use ``key[]=v``. Either way list-valued
        keys stay lists when parsed again.
    """
    if encoding not in (RFC3986, FORM):
        raise ValueError(f"Unknown query encoding: {encoding!r}")

    items = params.items() if isinstance(params, Mapping) else params
    segments: List[str] = []
    for key, value in items:
        name = _quote(str(key), encoding)
        if value is None:
            segments.append(name)
        elif isinstance(value, (list, tuple)):
            suffix = _LIST_SUFFIX if _use_brackets(params, key, value) else ""
            for item in value:
                segments.append(f"{name}{suffix}={_quote(str(item), encoding)}")
        else:
            segments.append(f"{name}={_quote(str(value), encoding)}")
    return "&".join(segments)
