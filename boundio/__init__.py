# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial

"""Byte sources and a reader that caps how much of them can be read."""

from .bounded import BoundedReader
from .source import EOF, ByteSource, MemorySource, StreamSource, open_source
from .util import copy, to_bytes

__all__ = [
    "EOF",
    "BoundedReader",
    "ByteSource",
    "MemorySource",
    "StreamSource",
    "copy",
    "open_source",
    "to_bytes",
]
