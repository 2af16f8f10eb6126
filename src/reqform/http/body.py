"""src/reqform/http/body.py

HTTP entity body (literal, stream, form fields) for Reqform.
"""

import enum
import io
import os
import stat
from typing import IO, Any, Iterator, List, Mapping, Optional, Tuple, Union

from reqform.exceptions import UnsupportedBodyType
from reqform.http.query import FORM, build_query_string

__all__ = [
    "FORM_CONTENT_TYPE",
    "BodyKind",
    "BodySource",
    "EntityBody",
    "make_body",
]

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

BodySource = Union[
    None,
    str,
    bytes,
    bytearray,
    IO[Any],
    Mapping[str, Any],
    List[Tuple[str, Any]],
    "EntityBody",
]


class BodyKind(enum.Enum):
    """Representation chosen for a body when it is created."""

    LITERAL = "literal"
    STREAM = "stream"
    FORM_FIELDS = "form_fields"


def _probe_length(stream: Any) -> Optional[int]:
    """Return the number of bytes left in a stream, or None if unknown."""
    # Text streams count characters, not the UTF-8 bytes read() returns.
    if isinstance(stream, io.TextIOBase):
        return None
    try:
        if stream.seekable():
            position = stream.tell()
            end = stream.seek(0, io.SEEK_END)
            stream.seek(position)
            return end - position
    except (AttributeError, OSError, ValueError):
        pass

    try:
        info = os.fstat(stream.fileno())
    except (AttributeError, OSError, ValueError):
        return None
    # Pipes and sockets report a meaningless size.
    if stat.S_ISREG(info.st_mode):
        return info.st_size
    return None


def _is_field_pairs(source: Any) -> bool:
    return isinstance(source, (list, tuple)) and all(
        isinstance(pair, (list, tuple)) and len(pair) == 2 for pair in source
    )


class EntityBody:
    """
    Body of a request, whatever its original source.

    Literal and form bodies hold their bytes. Stream bodies hold a borrowed
    reference to a readable object which is read but never closed.
    """

    __slots__ = ("kind", "length", "content_type", "_data", "_stream")

    def __init__(
        self,
        kind: BodyKind,
        data: bytes = b"",
        stream: Optional[IO[Any]] = None,
        length: Optional[int] = None,
        content_type: Optional[str] = None,
    ):
        self.kind = kind
        self.content_type = content_type
        self._data = data
        self._stream = stream
        if kind is BodyKind.STREAM:
            self.length = length
        else:
            self.length = len(data)
        # Literal bodies are read through an in-memory cursor.
        if stream is None:
            self._stream = io.BytesIO(data)

    @classmethod
    def empty(cls) -> "EntityBody":
        return cls(BodyKind.LITERAL)

    @property
    def stream(self) -> Optional[IO[Any]]:
        """Underlying caller-owned stream, None for in-memory bodies."""
        return self._stream if self.kind is BodyKind.STREAM else None

    def read(self, size: int = -1) -> bytes:
        """Read up to size bytes (all remaining if negative)."""
        chunk = self._stream.read(size)  # type: ignore[union-attr]
        if isinstance(chunk, str):
            return chunk.encode("utf-8")
        return chunk or b""

    def iter_chunks(self, chunk_size: int = 8192) -> Iterator[bytes]:
        """
        Iterate over the remaining content.

        Args:
            chunk_size: Number of bytes per chunk.

        Yields:
            Chunks of bytes read from the body.
        """
        while True:
            chunk = self.read(chunk_size)
            if not chunk:
                break
            yield chunk

    def seekable(self) -> bool:
        try:
            return bool(self._stream.seekable())  # type: ignore[union-attr]
        except (AttributeError, ValueError):
            return False

    def rewind(self) -> None:
        """Seek back to the start of the content."""
        if not self.seekable():
            raise io.UnsupportedOperation("Body stream is not seekable")
        self._stream.seek(0)  # type: ignore[union-attr]

    def to_bytes(self) -> bytes:
        """
        Return the full content.

        Seekable streams are read from the start and left at their previous
        position; other streams are consumed from where they are.
        """
        if self.kind is not BodyKind.STREAM:
            return self._data

        if not self.seekable():
            return b"".join(self.iter_chunks())

        position = self._stream.tell()  # type: ignore[union-attr]
        try:
            self._stream.seek(0)  # type: ignore[union-attr]
            return b"".join(self.iter_chunks())
        finally:
            self._stream.seek(position)  # type: ignore[union-attr]

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __str__(self) -> str:
        return self.to_bytes().decode("utf-8", errors="replace")

    def __bool__(self) -> bool:
        return self.length != 0

    def __repr__(self) -> str:
        return f"EntityBody(kind={self.kind.value}, length={self.length})"


def make_body(source: BodySource = None) -> EntityBody:
    """
    Create an EntityBody from any supported source.

    Args:
        source: None (empty body), str (UTF-8 encoded), bytes or bytearray,
            a readable stream, form fields as a mapping or list of pairs,
            or an existing EntityBody (returned unchanged).

    Raises:
        UnsupportedBodyType: For any other source.
    """
    if isinstance(source, EntityBody):
        return source
    if source is None:
        return EntityBody.empty()
    if isinstance(source, str):
        return EntityBody(BodyKind.LITERAL, data=source.encode("utf-8"))
    if isinstance(source, (bytes, bytearray)):
        return EntityBody(BodyKind.LITERAL, data=bytes(source))
    if hasattr(source, "read"):
        return EntityBody(
            BodyKind.STREAM, stream=source, length=_probe_length(source)
        )
    if isinstance(source, Mapping) or _is_field_pairs(source):
        encoded = build_query_string(source, encoding=FORM)  # type: ignore[arg-type]
        return EntityBody(
            BodyKind.FORM_FIELDS,
            data=encoded.encode("ascii"),
            content_type=FORM_CONTENT_TYPE,
        )
    raise UnsupportedBodyType(source)
