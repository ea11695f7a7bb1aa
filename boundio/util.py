# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Helpers that drain a ByteSource into bytes or a writable stream."""

from __future__ import annotations

from typing import BinaryIO

from .source import ByteSource

DEFAULT_CHUNK_SIZE = 4096


def _chunks(source: ByteSource, chunk_size: int):
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    buffer = bytearray(chunk_size)
    while True:
        count = source.read_into(buffer, 0, chunk_size)
        if count <= 0:
            return
        yield bytes(buffer[:count])


def to_bytes(source: ByteSource, chunk_size: int = DEFAULT_CHUNK_SIZE) -> bytes:
    """Read `source` until EOF and return everything it produced."""
    return b"".join(_chunks(source, chunk_size))


def copy(source: ByteSource, sink: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Write everything from `source` into `sink`; return the byte count."""
    total = 0
    for chunk in _chunks(source, chunk_size):
        sink.write(chunk)
        total += len(chunk)
    return total
