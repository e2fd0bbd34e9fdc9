"""
Part registry for AASX packages.

Owns all parts of a package, keyed by canonical path.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Union

from .part import Part
from .part_uri import PartURI

logger = logging.getLogger(__name__)


class PartRegistry:
    """Parts of one package, in registration order."""

    def __init__(self):
        self._parts: Dict[str, Part] = {}

    def put(self, uri: Union[str, PartURI], content_type: str, content: bytes) -> Part:
        """
        Insert a part or update an existing one in place.

        An updated part keeps its key and its display path.

        Args:
            uri: Part address
            content_type: MIME content type
            content: Payload bytes

        Returns:
            The stored part
        """
        uri = PartURI(uri)
        part = self._parts.get(uri.key)
        if part is not None:
            part.content_type = content_type
            part.set_content(content)
            logger.debug(f"Updated part {part.path} ({content_type}, {part.size} bytes)")
        else:
            part = Part(uri, content_type, content)
            self._parts[uri.key] = part
            logger.debug(f"Added part {part.path} ({content_type}, {part.size} bytes)")
        return part

    def add(self, part: Part) -> None:
        """Register an already built part, replacing any part with the same key."""
        self._parts[part.key] = part

    def delete(self, uri: Union[str, PartURI]) -> Optional[Part]:
        """
        Remove a part.

        Returns:
            The removed part, or None if there was none
        """
        part = self._parts.pop(PartURI(uri).key, None)
        if part is not None:
            logger.debug(f"Deleted part {part.path}")
        return part

    def find(self, uri: Union[str, PartURI]) -> Optional[Part]:
        """Get a part by URI, or None if there is none."""
        return self._parts.get(PartURI(uri).key)

    def get(self, key: str) -> Optional[Part]:
        """Get a part by canonical key."""
        return self._parts.get(key)

    def keys(self) -> List[str]:
        return list(self._parts.keys())

    def __contains__(self, uri: object) -> bool:
        if isinstance(uri, Part):
            return uri.key in self._parts
        if isinstance(uri, (str, PartURI)):
            return PartURI(uri).key in self._parts
        return False

    def __iter__(self) -> Iterator[Part]:
        return iter(list(self._parts.values()))

    def __len__(self) -> int:
        return len(self._parts)
