"""# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial"""
from __future__ import annotations

"""Sequential byte sources consumed (and implemented) by BoundedReader.

Key pieces:
  - EOF: sentinel returned by both read operations once a source is exhausted.
  - ByteSource: the minimal capability (single-byte read + bulk read into a region).
  - MemorySource: bytes plus a read cursor.
  - StreamSource: adapter over Python binary file objects.
  - open_source: path/URI opener returning a StreamSource.
"""

import os
import urllib.parse
import urllib.request
from typing import Any, BinaryIO, Dict, Optional, Protocol, runtime_checkable

EOF = -1


@runtime_checkable
class ByteSource(Protocol):
    """Anything that can hand out bytes one at a time or into a buffer."""

    def read_byte(self) -> int:
        ...

    def read_into(self, buffer: bytearray, offset: int = 0, length: int | None = None) -> int:
        ...


def check_region(buffer: bytearray, offset: int, length: int | None) -> int:
    """Validate a buffer region and return the effective length."""
    size = len(buffer)
    if offset < 0 or offset > size:
        raise ValueError(f"offset {offset} out of range for buffer of {size} bytes")
    if length is None:
        return size - offset
    if length < 0 or offset + length > size:
        raise ValueError(f"length {length} at offset {offset} exceeds buffer of {size} bytes")
    return length


class MemorySource:
    """Minimal in-memory source carrying bytes plus metadata."""

    def __init__(self, data: bytes, meta: Optional[Dict[str, Any]] = None):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"expected bytes-like data, got {type(data).__name__}")
        self._data = bytes(data)
        self._pos = 0
        self.meta = meta or {}

    def read_byte(self) -> int:
        if self._pos >= len(self._data):
            return EOF
        value = self._data[self._pos]
        self._pos += 1
        return value

    def read_into(self, buffer: bytearray, offset: int = 0, length: int | None = None) -> int:
        """Copy up to `length` bytes into `buffer[offset:]` and advance the cursor."""
        length = check_region(buffer, offset, length)
        if length == 0:
            return 0
        if self._pos >= len(self._data):
            return EOF
        end = min(self._pos + length, len(self._data))
        count = end - self._pos
        buffer[offset : offset + count] = self._data[self._pos : end]
        self._pos = end
        return count

    def available(self) -> int:
        return self.remaining

    @property
    def remaining(self) -> int:
        """Bytes left unread."""
        return len(self._data) - self._pos

    def rewind(self) -> None:
        """Reset cursor to the start."""
        self._pos = 0

    def __repr__(self) -> str:
        return f"MemorySource(size={len(self._data)}, pos={self._pos})"


class StreamSource:
    """Expose a binary file object through the ByteSource capability.

    Python streams signal the end with an empty read; this adapter turns that
    into EOF so wrapped streams look like every other source.
    """

    def __init__(self, stream: BinaryIO):
        self.stream = stream

    def read_byte(self) -> int:
        """Return the next byte or EOF.

        A single byte cannot signal "nothing ready", so a non-blocking stream
        with no data raises BlockingIOError instead of faking EOF.
        """
        data = self.stream.read(1)
        if data is None:
            raise BlockingIOError("stream has no data ready")
        if not data:
            return EOF
        return data[0]

    def read_into(self, buffer: bytearray, offset: int = 0, length: int | None = None) -> int:
        length = check_region(buffer, offset, length)
        if length == 0:
            return 0
        count = self.stream.readinto(memoryview(buffer)[offset : offset + length])
        if count is None:
            # Non-blocking stream with nothing ready yet.
            return 0
        if count == 0:
            return EOF
        return count

    def available(self) -> int:
        return 0

    def close(self) -> None:
        self.stream.close()

    def __repr__(self) -> str:
        name = getattr(self.stream, "name", None)
        return f"StreamSource({name!r})" if name is not None else f"StreamSource({self.stream!r})"


def uri_to_path(uri: str) -> str:
    if uri.startswith("file://"):
        parsed = urllib.parse.urlparse(uri)
        return urllib.request.url2pathname(parsed.path)
    return uri


def open_source(uri: str) -> StreamSource:
    """Open a local path or file:// URI for sequential reading."""
    path = uri_to_path(uri)
    if not os.path.isfile(path):
        raise FileNotFoundError(f"resource does not exist: {uri}")
    return StreamSource(open(path, "rb"))
