"""
Part URI value type.

A ``PartURI`` keeps the display path of a part (original case) next to its
canonical lookup key. Equality and hashing use the key only, so two URIs
that differ only by case name the same part.
"""

from __future__ import annotations

from typing import Union
from urllib.parse import urlsplit

from ..exceptions import InvalidPartURIError
from ..utils.paths import ensure_leading_slash, normalize_path


class PartURI:
    """
    Address of a part inside a package.

    Accepts a bare path (``/aasx/spec.xml``, ``aasx/spec.xml``) or a full
    URI (``https://package.local/aasx/spec.xml``), of which only the path
    component is used. Percent-escapes are kept as written, matching the
    entry names and relationship targets stored in the archive.
    """

    __slots__ = ("_path", "_key")

    def __init__(self, uri: Union[str, "PartURI"]):
        if isinstance(uri, PartURI):
            self._path = uri._path
            self._key = uri._key
            return

        if not isinstance(uri, str):
            raise InvalidPartURIError("Part URI must be a string", repr(uri))

        path = self._extract_path(uri)
        self._path = normalize_path(ensure_leading_slash(path))
        if self._path == "/":
            raise InvalidPartURIError("Part URI has no path", uri)
        self._key = self._path.lower()

    @staticmethod
    def _extract_path(uri: str) -> str:
        if not uri:
            raise InvalidPartURIError("Part URI is empty")

        split = urlsplit(uri)
        if split.scheme and len(split.scheme) > 1:
            # Opaque URIs (urn:, mailto:) carry no hierarchical path
            if not split.netloc and not split.path.startswith("/"):
                raise InvalidPartURIError("Part URI has no path", uri)
            path = split.path
        else:
            # Plain path; a one-letter "scheme" is a Windows drive, not a URI
            path = uri.replace("\\", "/")

        if not path:
            raise InvalidPartURIError("Part URI has no path", uri)
        return path

    @property
    def path(self) -> str:
        """Display path, original case."""
        return self._path

    @property
    def key(self) -> str:
        """Canonical lookup key, lower-cased."""
        return self._key

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PartURI):
            return self._key == other._key
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key)

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"PartURI({self._path!r})"
