# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Byte source decorator that stops after a fixed number of bytes.

BoundedReader wraps any ByteSource and implements the same capability, so
readers can be nested and handed to anything expecting a plain source.

Intent:
  - Never deliver more than `max_bytes` bytes, whatever the source still holds.
  - Stay a transparent pass-through when no limit (or a negative one) is given.
  - Add no error kinds: source failures propagate untouched.
"""

from __future__ import annotations

import logging

from .source import EOF, ByteSource, check_region

logger: logging.Logger = logging.getLogger(__name__)

_CHUNK_SIZE = 8192


class BoundedReader:
    """Read from `source` until `max_bytes` bytes have been delivered.

    `position` counts delivered bytes even when unlimited, so callers can
    always ask how far they got.
    """

    def __init__(
        self,
        source: ByteSource,
        max_bytes: int | None = None,
        propagate_close: bool = False,
    ):
        if not isinstance(source, ByteSource):
            raise TypeError(f"expected a byte source, got {type(source).__name__}")
        self.source = source
        self.max_bytes = -1 if max_bytes is None or max_bytes < 0 else max_bytes
        self.propagate_close = propagate_close
        self.position = 0

    @property
    def limited(self) -> bool:
        return self.max_bytes >= 0

    @property
    def remaining(self) -> int | None:
        """Bytes left in the allowance, or None when unlimited."""
        if not self.limited:
            return None
        return self.max_bytes - self.position

    def _exhausted(self) -> bool:
        return self.limited and self.position >= self.max_bytes

    def _advance(self, count: int) -> None:
        self.position += count
        if self.limited and self.position == self.max_bytes:
            logger.debug("limit of %d bytes reached on %r", self.max_bytes, self.source)

    def read_byte(self) -> int:
        """Return the next byte, or EOF once the limit or the source runs out."""
        if self._exhausted():
            return EOF
        value = self.source.read_byte()
        if value == EOF:
            return EOF
        self._advance(1)
        return value

    def read_into(self, buffer: bytearray, offset: int = 0, length: int | None = None) -> int:
        """Fill `buffer[offset:offset+length]` with at most the remaining allowance.

        Returns the number of bytes actually delivered, which may be smaller
        than `length` when the limit cuts the request short, or EOF.
        """
        length = check_region(buffer, offset, length)
        if self._exhausted():
            return EOF
        if length == 0:
            return 0
        allowed = length
        if self.limited:
            allowed = min(length, self.max_bytes - self.position)
            if allowed < length:
                logger.debug("clipping read of %d bytes to %d", length, allowed)
        count = self.source.read_into(buffer, offset, allowed)
        if count == EOF:
            return EOF
        self._advance(count)
        return count

    def read(self, size: int | None = -1) -> bytes:
        """Return up to `size` bytes (everything left if negative/None), b"" at the end."""
        if size is None or size < 0:
            chunks = bytearray()
            chunk = bytearray(_CHUNK_SIZE)
            while True:
                count = self.read_into(chunk)
                if count <= 0:
                    return bytes(chunks)
                chunks += chunk[:count]
        if self.limited:
            size = min(size, self.max_bytes - self.position)
        buffer = bytearray(size)
        count = self.read_into(buffer)
        if count == EOF:
            return b""
        return bytes(buffer[:count])

    def skip(self, count: int) -> int:
        """Discard up to `count` bytes within the allowance; return how many went."""
        skipped = 0
        if count <= 0:
            return skipped
        scratch = bytearray(min(count, _CHUNK_SIZE))
        while skipped < count:
            read = self.read_into(scratch, 0, min(count - skipped, len(scratch)))
            if read <= 0:
                break
            skipped += read
        return skipped

    def available(self) -> int:
        """Bytes the source reports as ready, clipped to the remaining allowance."""
        if self._exhausted():
            return 0
        available = getattr(self.source, "available", None)
        upstream = available() if available is not None else 0
        if self.limited:
            return min(upstream, self.max_bytes - self.position)
        return upstream

    def close(self) -> None:
        """Close the source only when the reader was told it owns it."""
        if self.propagate_close:
            close = getattr(self.source, "close", None)
            if close is not None:
                close()

    def __enter__(self) -> BoundedReader:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __repr__(self) -> str:
        limit = self.max_bytes if self.limited else "unlimited"
        return f"BoundedReader({self.source!r}, max_bytes={limit}, position={self.position})"
