"""
Byte sources and sinks for AASX packages.

Packages are read from and flushed to these adapters; the package model
itself never touches files or streams directly.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Protocol, Union, runtime_checkable

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


@runtime_checkable
class ReadSeeker(Protocol):
    """A source that can hand out all of its bytes."""

    def read_all(self) -> bytes:
        ...


@runtime_checkable
class ReadWriteSeeker(ReadSeeker, Protocol):
    """A source that can also be overwritten with new bytes."""

    def write_all(self, data: bytes) -> None:
        ...


class MemoryStream:
    """In-memory ``ReadWriteSeeker``."""

    def __init__(self, data: bytes = b""):
        self._data = bytes(data)

    def read_all(self) -> bytes:
        return self._data

    def write_all(self, data: bytes) -> None:
        self._data = bytes(data)

    def getvalue(self) -> bytes:
        return self._data


class PackageSink(Protocol):
    def write(self, data: bytes) -> None:
        ...


class FileSink:
    """Writes flushed packages to a file path."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def write(self, data: bytes) -> None:
        self.path.write_bytes(data)
        logger.info(f"Wrote package to {self.path} ({len(data)} bytes)")


class StreamSink:
    """Writes flushed packages to a ``ReadWriteSeeker`` or a binary file object."""

    def __init__(self, stream: Any):
        self.stream = stream

    def write(self, data: bytes) -> None:
        if isinstance(self.stream, ReadWriteSeeker):
            self.stream.write_all(data)
            return

        # Plain file objects are rewritten from the start
        self.stream.seek(0)
        self.stream.truncate()
        self.stream.write(data)
        if hasattr(self.stream, "flush"):
            self.stream.flush()


def read_source(stream: Any) -> bytes:
    """
    Read every byte of a source.

    Args:
        stream: A ``ReadSeeker`` or a binary file-like object

    Returns:
        The source's bytes
    """
    if isinstance(stream, ReadSeeker):
        return bytes(stream.read_all())

    # Non-seekable streams are read from their current position
    if hasattr(stream, "seekable") and stream.seekable():
        stream.seek(0)
    return drain(stream)


def drain(stream: Any) -> bytes:
    """Read a binary stream until it is exhausted."""
    chunks = []
    while True:
        chunk = stream.read(CHUNK_SIZE)
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks)
