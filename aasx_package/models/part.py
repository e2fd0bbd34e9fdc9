"""Part model for AASX packages."""

from __future__ import annotations

import io
from typing import Union

from .part_uri import PartURI


class Part:
    """
    A named, typed byte payload stored in the package.

    Parts are owned by the package's ``PartRegistry``; content handed out by
    ``read_bytes`` and ``open`` never aliases the stored payload.
    """

    def __init__(self, uri: Union[str, PartURI], content_type: str, content: bytes = b""):
        """
        Initialize part.

        Args:
            uri: Part address
            content_type: MIME content type of the payload
            content: Payload bytes
        """
        self.uri = PartURI(uri)
        self.content_type = content_type
        self._content = bytes(content)

    @property
    def path(self) -> str:
        """Display path of the part, original case."""
        return self.uri.path

    @property
    def key(self) -> str:
        """Canonical lookup key of the part."""
        return self.uri.key

    @property
    def size(self) -> int:
        return len(self._content)

    def read_bytes(self) -> bytes:
        """Get the payload."""
        return self._content

    def read_text(self, encoding: str = "utf-8") -> str:
        """Get the payload decoded as text."""
        return self._content.decode(encoding)

    def open(self) -> io.BytesIO:
        """Get a fresh binary stream over the payload."""
        return io.BytesIO(self._content)

    def set_content(self, content: bytes) -> None:
        """Replace the payload."""
        self._content = bytes(content)

    def __repr__(self) -> str:
        return f"Part(path={self.path!r}, content_type={self.content_type!r}, size={self.size})"
